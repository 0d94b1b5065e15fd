from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from pixmatrix.channels import Channel
from pixmatrix.composer import compose
from pixmatrix.config import ConversionConfig, load_conversion_config
from pixmatrix.extract import extract_channel
from pixmatrix.grayscale import to_grayscale
from pixmatrix.io import load_matrix, read_image, save_matrix, write_image


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pixmatrix")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for pixmatrix messages. Default: WARNING",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def _add_config(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--config",
            default=None,
            help="Optional JSON/YAML file with conversion options (rounding, default_alpha, matrix_dtype)",
        )

    p_extract = sub.add_parser("extract", help="Write one channel of an image as a matrix")
    p_extract.add_argument("image", help="Input image path")
    p_extract.add_argument(
        "--channel",
        required=True,
        help=f"Channel to extract: {', '.join(c.value for c in Channel)} (or r/g/b/a)",
    )
    p_extract.add_argument("--out", required=True, help="Output matrix path (.npy or .csv)")
    _add_config(p_extract)

    p_compose = sub.add_parser(
        "compose",
        help="Build an image from 1 (gray), 3 (R G B) or 4 (A R G B) matrices",
    )
    p_compose.add_argument("matrices", nargs="+", help="Matrix paths (.npy or .csv)")
    p_compose.add_argument("--out", required=True, help="Output image path")
    _add_config(p_compose)

    p_gray = sub.add_parser("grayscale", help="Write a grayscale copy of an image")
    p_gray.add_argument("image", help="Input image path")
    p_gray.add_argument("--out", required=True, help="Output image path")
    p_gray.add_argument(
        "--rounding",
        default=None,
        choices=["nearest", "truncate"],
        help="Override the rounding rule from --config. Default: nearest",
    )
    _add_config(p_gray)

    return parser


def _resolve_config(args: argparse.Namespace) -> ConversionConfig:
    cfg = load_conversion_config(args.config)
    rounding = getattr(args, "rounding", None)
    if rounding is not None:
        cfg = ConversionConfig(
            rounding=rounding,
            default_alpha=cfg.default_alpha,
            matrix_dtype=cfg.matrix_dtype,
        )
    return cfg


def _run(args: argparse.Namespace) -> dict[str, Any]:
    cfg = _resolve_config(args)

    if args.command == "extract":
        matrix = extract_channel(read_image(args.image), args.channel, config=cfg)
        out = save_matrix(args.out, matrix)
        return {"command": "extract", "out": str(out), "shape": list(matrix.shape)}

    if args.command == "compose":
        matrices = [load_matrix(p) for p in args.matrices]
        image = compose(*matrices, config=cfg)
        out = write_image(args.out, image)
        return {"command": "compose", "out": str(out), "size": list(image.size)}

    if args.command == "grayscale":
        image = to_grayscale(read_image(args.image), config=cfg)
        out = write_image(args.out, image)
        return {"command": "grayscale", "out": str(out), "size": list(image.size)}

    raise ValueError(f"Unknown command: {args.command!r}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        summary = _run(args)
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(summary, sort_keys=True))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

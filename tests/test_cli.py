from __future__ import annotations

import json
from pathlib import Path

import numpy as np
from PIL import Image

from pixmatrix.cli import main
from pixmatrix.io import read_image


def _write_source(path: Path) -> None:
    img = Image.new("RGBA", (3, 2), (100, 150, 200, 255))
    img.putpixel((0, 0), (30, 20, 10, 255))
    img.save(path)


def test_cli_extract_compose_round_trip(tmp_path: Path, capsys) -> None:
    src = tmp_path / "src.png"
    _write_source(src)

    for channel in ("red", "green", "blue"):
        code = main(["extract", str(src), "--channel", channel, "--out", str(tmp_path / f"{channel}.npy")])
        assert code == 0

    summary = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert summary["command"] == "extract"
    assert summary["shape"] == [3, 2]

    out = tmp_path / "out.png"
    code = main(
        [
            "compose",
            str(tmp_path / "red.npy"),
            str(tmp_path / "green.npy"),
            str(tmp_path / "blue.npy"),
            "--out",
            str(out),
        ]
    )
    assert code == 0
    assert np.array_equal(np.asarray(read_image(out)), np.asarray(read_image(src)))


def test_cli_grayscale_with_rounding(tmp_path: Path) -> None:
    src = tmp_path / "src.png"
    Image.new("RGBA", (2, 2), (100, 150, 200, 90)).save(src)

    nearest = tmp_path / "nearest.png"
    truncate = tmp_path / "truncate.png"
    assert main(["grayscale", str(src), "--out", str(nearest)]) == 0
    assert main(["grayscale", str(src), "--out", str(truncate), "--rounding", "truncate"]) == 0

    assert read_image(nearest).getpixel((0, 0)) == (141, 141, 141, 90)
    assert read_image(truncate).getpixel((0, 0)) == (140, 140, 140, 90)


def test_cli_compose_reads_config(tmp_path: Path) -> None:
    m = tmp_path / "gray.csv"
    m.write_text("10,20\n30,40\n", encoding="utf-8")
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"default_alpha": 60}), encoding="utf-8")

    out = tmp_path / "gray.png"
    assert main(["compose", str(m), "--out", str(out), "--config", str(cfg)]) == 0
    img = read_image(out)
    assert img.size == (2, 2)
    assert img.getpixel((0, 0))[3] == 60


def test_cli_reports_errors(tmp_path: Path, capsys) -> None:
    code = main(["grayscale", str(tmp_path / "missing.png"), "--out", str(tmp_path / "x.png")])
    assert code == 2
    assert "error:" in capsys.readouterr().err

    a = tmp_path / "a.npy"
    b = tmp_path / "b.npy"
    np.save(a, np.zeros((2, 2)))
    np.save(b, np.zeros((3, 3)))
    code = main(["compose", str(a), str(b), str(b), "--out", str(tmp_path / "y.png")])
    assert code == 2
    assert "shape" in capsys.readouterr().err

from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).parent
README = (ROOT / "README.md").read_text(encoding="utf-8") if (ROOT / "README.md").exists() else ""

setup(
    name="pixmatrix",
    version="0.1.0",
    description="Packed BGRA images as 2D integer channel matrices, with grayscale conversion",
    long_description=README,
    long_description_content_type="text/markdown",
    author="pixmatrix Contributors",
    packages=find_packages(exclude=("tests", "tests.*", "examples", "examples.*")),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.19",
        "Pillow>=8.0.0",
        "opencv-python>=4.5.0",
    ],
    extras_require={
        "yaml": [
            "PyYAML>=5.4",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
        "all": [
            "pixmatrix[yaml,dev]",
        ],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Image Processing",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords=[
        "image-processing",
        "bitmap",
        "channels",
        "grayscale",
        "numpy",
    ],
    entry_points={
        "console_scripts": [
            "pixmatrix=pixmatrix.cli:main",
        ],
    },
)

[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "planelab"
version = "0.1.0"
description = "Plane geometry helpers: float-backed rationals, equation text, least-squares fits, a point-picking board model and a settings panel model"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "rational", "least-squares", "curve-fitting", "equations"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["planelab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

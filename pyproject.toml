[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyarith"
version = "0.1.0"
description = "Polynomial arithmetic over integer or real coefficients: sum, product, composition, scaling and evaluation"
requires-python = ">=3.10"
dependencies = []
keywords = ["polynomial", "algebra", "composition", "arithmetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
polyarith = "polyarith.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polyarith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tensormap"
version = "0.1.0"
description = "Dense multilinear maps (tensors) of floats stored in one flat field"
requires-python = ">=3.10"
dependencies = []
keywords = ["tensor", "multilinear", "array", "indexing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tensormap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

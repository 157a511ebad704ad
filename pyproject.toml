[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "esrrf"
version = "0.1.0"
description = "Super-resolution reconstruction of fluorescence microscopy TIFF stacks by radial gradient convergence"
requires-python = ">=3.10"
keywords = ["microscopy", "super-resolution", "eSRRF", "radial gradient convergence", "tiff"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
esrrf = "esrrf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["esrrf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "picsim"
version = "0.1.0"
description = "Building blocks for particle-in-cell plasma simulations on a Yee grid"
requires-python = ">=3.10"
keywords = [
    "plasma",
    "particle-in-cell",
    "pic",
    "yee",
    "finite-difference",
    "b-spline",
    "simulation",
    "physics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["picsim"]

[tool.hatch.build.targets.sdist]
include = [
    "picsim",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codedemos"
version = "0.1.0"
description = "Small teaching demonstrations: a stopwatch, array traversal order, profiling targets, substitutable class hierarchies and additive Roman numerals."
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "education",
    "teaching",
    "profiling",
    "benchmark",
    "liskov",
    "polymorphism",
    "roman-numerals",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
codedemos-traversal = "codedemos.traversal:main"
codedemos-series = "codedemos.series:main"
codedemos-maps = "codedemos.maps:main"
codedemos-animals = "codedemos.animals:main"

[tool.hatch.build.targets.wheel]
packages = ["codedemos"]

[tool.hatch.build.targets.sdist]
include = ["codedemos", "tests", "pyproject.toml", "README.md"]

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
strict = true

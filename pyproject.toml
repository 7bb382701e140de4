[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easyproblems"
version = "0.1.0"
description = "Solutions to a collection of short introductory programming-contest problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "puzzles", "algorithms", "exercises"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
easyproblems = "easyproblems.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["easyproblems"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arraykata"
version = "0.1.0"
description = "Classic array and number exercises: statistics, arrangements, sorting algorithms and digit puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["arrays", "algorithms", "sorting", "exercises", "kata", "primes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
arraykata = "arraykata.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arraykata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true

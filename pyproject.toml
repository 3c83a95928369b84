[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pestle"
version = "0.1.0"
description = "Parsing building blocks: input positions and spans, a backtracking stack, tokens, and Pratt and precedence-climbing expression parsers"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "pratt", "precedence-climbing", "span", "position", "peg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["pestle"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

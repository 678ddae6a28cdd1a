[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iterkit"
version = "0.1.0"
description = "Iterator adaptors: fixed-size tuples and windows, uniqueness filters, positional tagging and strict or padded zipping."
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "itertools", "zip", "windows", "unique", "generators"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["iterkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgvalues"
version = "0.2.1"
description = "Descriptions of PostgreSQL types and the catalog of built-in types"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "postgres",
    "postgresql",
    "database",
    "types",
    "oid",
    "catalog",
]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["pgvalues"]

[tool.hatch.build.targets.sdist]
include = [
    "pgvalues",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

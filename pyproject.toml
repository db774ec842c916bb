[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doclientkit"
version = "0.1.0"
description = "Strict URI parsing, building and resolution, a minimal incremental HTTP message parser, and version-string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["uri", "url", "rfc3986", "percent-encoding", "http", "parser", "uri-builder"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["doclientkit"]

[tool.hatch.build.targets.sdist]
include = ["doclientkit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

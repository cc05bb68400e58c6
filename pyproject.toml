[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protolinter"
version = "0.1.0"
description = "Lint rules for Protocol Buffers definitions: naming, comments, enums, imports, packages and RPCs."
requires-python = ">=3.10"
dependencies = []
keywords = ["protobuf", "proto", "lint", "linter", "grpc", "style"]
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
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["protolinter"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"

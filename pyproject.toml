[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kplc"
version = "0.1.0"
description = "Front end for the KPL teaching language: scanner, symbol table and semantic checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "scanner", "lexer", "symbol table", "semantic analysis", "kpl"]
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kplc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

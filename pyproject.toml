[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinycomp"
version = "0.1.0"
description = "A tiny integer-expression compiler: tokens, precedence parsers, an AST interpreter and an assembly code generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "parser", "precedence", "ast", "interpreter", "code generation", "assembly"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinycomp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toylang"
version = "0.1.0"
description = "Lexer and recursive-descent parser for a small expression language with function definitions"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "parser", "tokenizer", "ast", "compiler", "language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toylang = "toylang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["toylang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

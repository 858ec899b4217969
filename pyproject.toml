[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinylang"
version = "0.1.0"
description = "Scanner and recursive-descent parser for the TINY teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["tiny", "compiler", "lexer", "scanner", "parser", "syntax-tree", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinylex = "tinylang.cli:lex_main"
tinyparse = "tinylang.cli:parse_main"

[tool.hatch.build.targets.wheel]
packages = ["tinylang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

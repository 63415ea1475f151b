[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "minic"
version = "1.0.1"
description = "Building blocks of a small C-subset compiler: syntax tree, AST graph output and ARM32 assembly emission"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "c", "arm32", "assembly", "ast", "graphviz", "register-allocation"]
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

[tool.setuptools.packages.find]
include = ["minic*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inetlisp"
version = "0.1.0"
description = "An interaction-net language with Lisp syntax: parse, compile and reduce nets of nodes and wires"
requires-python = ">=3.10"
dependencies = []
keywords = ["interaction-nets", "lisp", "interpreter", "graph-rewriting", "language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
inet-lisp-st = "inetlisp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["inetlisp"]

[tool.hatch.build.targets.sdist]
include = ["inetlisp", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

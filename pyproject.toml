[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "brewcalc"
version = "0.4.1"
description = "Brewing recipe helpers: unit-aware quantities, miscellaneous ingredient tables, hydrometer correction, settings and session book-keeping"
requires-python = ">=3.10"
dependencies = []
keywords = ["brewing", "beer", "homebrew", "recipe", "hydrometer", "units"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
brewcalc = "brewcalc.cli:main"

[tool.setuptools.packages.find]
include = ["brewcalc*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldstore"
version = "0.1.0"
description = "Fixed-size fields in a single file, with checksums, write flags and recovery from a backup slot"
requires-python = ">=3.10"
dependencies = []
keywords = ["storage", "records", "checksum", "backup", "recovery", "fixed-width"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fieldstore = "fieldstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fieldstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

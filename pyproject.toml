[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdbsym"
version = "0.1.0"
description = "Decode PDB string tables, CodeView symbol records and inline-site annotations"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdb", "debugging", "symbols", "codeview", "string table"]
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
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pdbsym"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strandkit"
version = "0.1.0"
description = "Suffix trees, compact tries and greedy shortest-superstring assembly for sequence strings"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "suffix tree",
    "suffix trie",
    "mccreight",
    "compact trie",
    "superstring",
    "fasta",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["strandkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

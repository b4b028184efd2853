[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbtseq"
version = "2.3.4"
description = "Nucleotide and colour-space sequence helpers: complements, base codes and IUPAC ambiguity bitmasks"
requires-python = ">=3.10"
dependencies = []
keywords = ["bioinformatics", "dna", "nucleotide", "colour-space", "iupac", "complement"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bbtseq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glycoseq"
version = "1.0.0"
description = "Building blocks for glycopeptide identification from LC-MS/MS data: glycan model, protein digestion, dynamic modifications, mass calculation, tolerance search and MGF/FASTA reading."
requires-python = ">=3.10"
dependencies = []
keywords = ["glycoproteomics", "mass spectrometry", "glycopeptide", "mgf", "fasta", "proteomics"]
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
packages = ["glycoseq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

"""Glycan model, digestion, modifications, masses, tolerance search and MGF/FASTA reading."""

__version__ = "1.0.0"
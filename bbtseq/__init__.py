"""Nucleotide and colour-space sequence helpers, in the ``sequence`` module."""

__version__ = "2.3.4"
__all__ = ["sequence"]
"""Substitution-permutation byte transforms and a Magma-style block cipher."""

__version__ = "0.1.0"
__all__ = ["__version__"]
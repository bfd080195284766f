"""KWIC - keyword-in-context concordance builder."""

__version__ = "0.1.0"

"""Decode PDB string tables, data symbol records and inline-site binary annotations."""

__version__ = "0.1.0"
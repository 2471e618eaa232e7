"""Assay command-line interface."""

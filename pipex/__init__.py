"""Run commands as a pipeline between an input file and an output file, with helpers."""

__version__ = "0.1.0"
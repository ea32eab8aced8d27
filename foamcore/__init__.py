"""Vectors, fields on executors, boundary and domain fields, dictionaries,
token lists, runtime selection and error helpers for finite-volume work."""

__version__ = "0.1.0"
"""Ordered containers, record files, page replacers and ticket-system record types."""

__version__ = "0.1.0"
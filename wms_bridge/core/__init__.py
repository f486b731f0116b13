"""
Core helpers package for the WMS bridge.

This package holds the pieces every call site depends on: settings,
the error taxonomy, the company store collaborator and the file input
variants used by the order template upload.
"""

__all__ = []

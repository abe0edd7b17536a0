"""
Utilities that are not part of the core lifecanvas API.
"""

from . import asyncs  # noqa: F401

"""
Public API surface for talking to the hosting service.
Import from here to keep command modules clean.
"""

from .file import upload, classify

__all__ = ['upload', 'classify']

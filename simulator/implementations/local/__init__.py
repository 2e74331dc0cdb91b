"""Engines running in-process, without a remote server"""

from .up_and_down import UpAndDownEngine

__all__ = [
    'UpAndDownEngine',
]

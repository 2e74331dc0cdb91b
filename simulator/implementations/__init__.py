"""Implementation variants of simulator components"""

# Import submodules for easy access
from . import local
from . import remote

__all__ = [
    'local',
    'remote',
]

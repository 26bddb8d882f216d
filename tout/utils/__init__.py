"""
TOut Utilities Package.
Internal utilities - not part of public API.
"""

from . import formatters, validators, visualization

__all__ = [
    "formatters",
    "validators",
    "visualization",
]

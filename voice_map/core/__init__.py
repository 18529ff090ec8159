"""
Core components for Voice-Map.
"""

from .series import Point, Series, SeriesPair
from .reshaper import reshape
from .extender import ExtensionOutcome, RemoteExtender, append_extension, apply_outcome

__all__ = [
    "Point",
    "Series",
    "SeriesPair",
    "reshape",
    "ExtensionOutcome",
    "RemoteExtender",
    "append_extension",
    "apply_outcome",
]

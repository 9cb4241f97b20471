"""Alignment module for matching expected words to recognized words."""

from .base import DEFAULT_ACOUSTIC_THRESHOLD, WordAligner
from .edit_distance import EditDistanceAligner, edit_distance_path
from .lookahead import LookaheadAligner

__all__ = [
    "DEFAULT_ACOUSTIC_THRESHOLD",
    "EditDistanceAligner",
    "LookaheadAligner",
    "WordAligner",
    "edit_distance_path",
]

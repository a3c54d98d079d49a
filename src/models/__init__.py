"""
Models package for hugodown

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .markers import ConversionState, ANNOUNCEMENT, MARKERS, REFERENCE_STATES
from .references import ImageReference, AnimationReference, ConversionResult

__all__ = [
    "ProgramState",
    "pipeline",
    "ConversionState",
    "ANNOUNCEMENT",
    "MARKERS",
    "REFERENCE_STATES",
    "ImageReference",
    "AnimationReference",
    "ConversionResult",
]

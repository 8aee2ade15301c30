"""
Animal Age

Convert a pet's age to human years and compare its life stage against a
human's with colored terminal progress bars.
"""

__version__ = "3.0.0"

from .species import SpeciesRecord, human_equivalent, lookup
from .resolver import resolve
from .ui import UI
from .__main__ import main

__all__ = ["SpeciesRecord", "UI", "human_equivalent", "lookup", "main", "resolve", "__version__"]

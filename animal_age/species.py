"""
Animal Age - Species Table

This module contains the age-conversion formulas and the fixed table of
supported species.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .utils import round_tenths


@dataclass(frozen=True)
class Linear:
    """Single linear formula: human = offset + age * rate."""

    rate: float
    offset: float = 0.0

    def human_years(self, age: float) -> float:
        return self.offset + age * self.rate


@dataclass(frozen=True)
class Piecewise:
    """
    Two-phase linear formula.

    Up to the breakpoint every year counts ``young_rate`` human years; after
    it, ``base`` plus ``adult_rate`` per additional year.
    """

    young_rate: float
    base: float
    adult_rate: float
    breakpoint: float = 2.0

    def human_years(self, age: float) -> float:
        if age <= self.breakpoint:
            return age * self.young_rate
        return self.base + (age - self.breakpoint) * self.adult_rate


Formula = Union[Linear, Piecewise]


@dataclass(frozen=True)
class SpeciesRecord:
    """One supported animal kind."""

    key: str
    description: str
    max_lifespan_years: float
    conversion: Formula

    def human_equivalent(self, age: float) -> float:
        """Human-equivalent age for a chronological age, rounded to tenths."""
        return round_tenths(self.conversion.human_years(age))


# Declaration order is the --list order.
SPECIES = (
    SpeciesRecord("small_dog", "Small dog (e.g., terrier)", 16.0, Piecewise(12.5, 25.0, 4.5)),
    SpeciesRecord("medium_dog", "Medium dog (e.g., spaniel)", 14.0, Piecewise(10.5, 21.0, 5.0)),
    SpeciesRecord("big_dog", "Large dog (e.g., retriever)", 10.0, Piecewise(9.0, 18.0, 7.0)),
    SpeciesRecord("cat", "Domestic cat", 18.0, Piecewise(12.5, 25.0, 4.0)),
    SpeciesRecord("horse", "Horse", 30.0, Linear(4.0, offset=6.5)),
    SpeciesRecord("pig", "Pig", 20.0, Linear(5.0)),
    SpeciesRecord("parakeet", "Parakeet / budgie", 10.0, Linear(5.0)),
    SpeciesRecord("snake", "Common pet snake", 20.0, Linear(5.3)),
    SpeciesRecord("goldfish", "Goldfish", 15.0, Linear(5.0)),
    SpeciesRecord("rabbit", "Rabbit", 12.0, Piecewise(12.0, 24.0, 4.0)),
    SpeciesRecord("hamster", "Hamster", 3.0, Linear(25.0)),
)

_BY_KEY = {record.key: record for record in SPECIES}


def all_species() -> tuple[SpeciesRecord, ...]:
    """Every species, in declaration order."""
    return SPECIES


def species_keys() -> list[str]:
    return [record.key for record in SPECIES]


def lookup(name: str) -> Optional[SpeciesRecord]:
    """Case-insensitive lookup; None when the name is not a known key."""
    return _BY_KEY.get(name.lower())


def human_equivalent(species: SpeciesRecord, age: float) -> float:
    """Convert a chronological age to human-equivalent years for a species."""
    return species.human_equivalent(age)

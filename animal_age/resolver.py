"""
Animal Age - Input Resolver

This module validates the requested species and age and turns species names
into table records.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator, Optional, Sequence

from .species import SpeciesRecord, lookup, species_keys
from .utils import LIFESPAN_WARN_FACTOR, SUGGESTION_MAX_DISTANCE, fmt_years

logger = logging.getLogger(__name__)


class ResolutionError(Exception):
    """Base class for input that cannot be turned into a report."""


class MissingArguments(ResolutionError):
    def __init__(self) -> None:
        super().__init__("Missing required arguments: --type and --age")


class InvalidAge(ResolutionError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid age: {reason}")
        self.reason = reason


class UnknownSpecies(ResolutionError):
    """Raised for a species name with no table entry; may carry a suggestion."""

    def __init__(self, name: str, suggestion: Optional[str] = None) -> None:
        super().__init__(f"Unknown animal type: {name}")
        self.name = name
        self.suggestion = suggestion

    def hint(self) -> str:
        """Multi-line message for the diagnostic stream."""
        if self.suggestion:
            first = f"Unknown animal type: {self.name}. Did you mean '{self.suggestion}'?"
        else:
            first = f"Unknown animal type: {self.name}"
        return f"{first}\nUse --list to view valid options."


def levenshtein(a: str, b: str) -> int:
    """
    Levenshtein edit distance between two strings.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character insertions, deletions and
        substitutions turning a into b
    """
    if a == b:
        return 0
    if len(a) > len(b):
        a, b = b, a
    if not a:
        return len(b)

    prev = list(range(len(a) + 1))
    for j, cb in enumerate(b, start=1):
        curr = [j] + [0] * len(a)
        for i, ca in enumerate(a, start=1):
            cost = 0 if ca == cb else 1
            curr[i] = min(prev[i] + 1, curr[i - 1] + 1, prev[i - 1] + cost)
        prev = curr
    return prev[-1]


def suggest(name: str) -> Optional[str]:
    """Closest species key to an unknown name, if it is close enough."""
    needle = name.lower()
    best = min(species_keys(), key=lambda key: levenshtein(needle, key))
    distance = levenshtein(needle, best)
    logger.debug("closest key to %r is %r (distance %d)", name, best, distance)
    return best if distance < SUGGESTION_MAX_DISTANCE else None


def check_inputs(species_names: Optional[Sequence[str]], age: Optional[float]) -> None:
    """Validate argument presence and age before any species is looked up."""
    if not species_names or age is None:
        raise MissingArguments()
    if age < 0:
        raise InvalidAge("Age cannot be negative")
    if not math.isfinite(age):
        raise InvalidAge("Age must be a finite number")


def resolve_one(name: str, age: float) -> SpeciesRecord:
    """
    Look up a single species name.

    Warns (without failing) when the age is far beyond the species' lifespan.
    """
    record = lookup(name)
    if record is None:
        raise UnknownSpecies(name, suggest(name))
    if age > record.max_lifespan_years * LIFESPAN_WARN_FACTOR:
        logger.warning(
            "Age %s exceeds typical %s lifespan of %s years.",
            fmt_years(age),
            name,
            fmt_years(record.max_lifespan_years),
        )
    return record


def iter_resolve(
    species_names: Optional[Sequence[str]], age: Optional[float]
) -> Iterator[tuple[str, SpeciesRecord]]:
    """
    Resolve species lazily, in input order, stopping at the first failure.

    Yields (input label, record) pairs so callers can emit each species'
    output before the next name is examined.
    """
    check_inputs(species_names, age)
    for name in species_names:
        yield name, resolve_one(name, age)


def resolve(species_names: Optional[Sequence[str]], age: Optional[float]) -> list[SpeciesRecord]:
    """Resolve every requested species or raise the first ResolutionError."""
    return [record for _, record in iter_resolve(species_names, age)]

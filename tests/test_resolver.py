"""Tests for input validation, suggestions and fail-fast resolution."""

import logging

import pytest

from animal_age.resolver import (
    InvalidAge,
    MissingArguments,
    ResolutionError,
    UnknownSpecies,
    iter_resolve,
    levenshtein,
    resolve,
    suggest,
)
from animal_age.species import lookup


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("", "cat", 3),
        ("cat", "", 3),
        ("kat", "cat", 1),
        ("kitten", "sitting", 3),
        ("smal_dog", "small_dog", 1),
        ("flaw", "lawn", 2),
    ],
)
def test_levenshtein(a, b, expected):
    assert levenshtein(a, b) == expected
    assert levenshtein(b, a) == expected


def test_resolve_case_insensitive():
    assert resolve(["CAT"], 1.0) == resolve(["cat"], 1.0) == [lookup("cat")]


def test_resolve_keeps_input_order():
    assert [r.key for r in resolve(["horse", "Cat", "pig"], 2.0)] == ["horse", "cat", "pig"]


@pytest.mark.parametrize("names,age", [(None, 1.0), ([], 1.0), (["cat"], None), (None, None)])
def test_missing_arguments(names, age):
    with pytest.raises(MissingArguments) as exc_info:
        resolve(names, age)
    assert str(exc_info.value) == "Missing required arguments: --type and --age"


@pytest.mark.parametrize("names", [["cat"], ["hamster"], ["not_an_animal"]])
def test_negative_age_fails_regardless_of_species(names):
    with pytest.raises(InvalidAge) as exc_info:
        resolve(names, -0.5)
    assert str(exc_info.value) == "Invalid age: Age cannot be negative"


@pytest.mark.parametrize("age", [float("inf"), float("nan")])
def test_non_finite_age_rejected(age):
    with pytest.raises(InvalidAge) as exc_info:
        resolve(["cat"], age)
    assert str(exc_info.value) == "Invalid age: Age must be a finite number"


def test_unknown_species_with_suggestion():
    with pytest.raises(UnknownSpecies) as exc_info:
        resolve(["kat"], 1.0)
    err = exc_info.value
    assert err.name == "kat"
    assert err.suggestion == "cat"
    assert isinstance(err, ResolutionError)
    assert "Did you mean 'cat'?" in err.hint()
    assert err.hint().endswith("Use --list to view valid options.")


def test_unknown_species_without_suggestion():
    with pytest.raises(UnknownSpecies) as exc_info:
        resolve(["xyz123"], 1.0)
    assert exc_info.value.suggestion is None
    assert exc_info.value.hint() == "Unknown animal type: xyz123\nUse --list to view valid options."


def test_suggest():
    assert suggest("kat") == "cat"
    assert suggest("HORS") == "horse"
    assert suggest("xyz123") is None


def test_fail_fast_stops_at_first_unknown():
    resolved = []
    with pytest.raises(UnknownSpecies) as exc_info:
        for label, record in iter_resolve(["cat", "dgo", "nope"], 1.0):
            resolved.append(label)
    assert resolved == ["cat"]
    assert exc_info.value.name == "dgo"


def test_lifespan_warning_is_not_fatal(caplog):
    with caplog.at_level(logging.WARNING, logger="animal_age"):
        records = resolve(["hamster"], 5.0)
    assert records == [lookup("hamster")]
    assert "Age 5 exceeds typical hamster lifespan of 3 years." in caplog.text


def test_no_warning_within_soft_bound(caplog):
    with caplog.at_level(logging.WARNING, logger="animal_age"):
        resolve(["hamster"], 4.5)
    assert caplog.records == []

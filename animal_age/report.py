"""
Animal Age - Report Builder

This module ties resolution, conversion and rendering together into a single
report, either as JSON records or as a text summary with lifespan bars.
"""

import json
import sys
from dataclasses import asdict, dataclass
from typing import Optional, Sequence, TextIO

from .resolver import iter_resolve
from .species import SpeciesRecord, all_species
from .ui import UI
from .utils import HUMAN_MAX_LIFESPAN, LIST_KEY_WIDTH, MIN_LABEL_WIDTH, fmt_years


@dataclass
class ReportRow:
    """One requested species, ready to print."""

    label: str
    key: str
    human_age: float
    max_lifespan: float


@dataclass
class SpeciesResult:
    """Structured per-species record for --json output."""

    species_input_label: str
    age: float
    human_equivalent_age: float
    species_max_lifespan: float
    human_max_lifespan: float
    species_progress: float
    human_progress: float


def make_row(label: str, record: SpeciesRecord, age: float) -> ReportRow:
    return ReportRow(label, record.key, record.human_equivalent(age), record.max_lifespan_years)


def to_result(row: ReportRow, age: float) -> SpeciesResult:
    return SpeciesResult(
        species_input_label=row.label,
        age=float(age),
        human_equivalent_age=row.human_age,
        species_max_lifespan=row.max_lifespan,
        human_max_lifespan=HUMAN_MAX_LIFESPAN,
        species_progress=age / row.max_lifespan,
        human_progress=row.human_age / HUMAN_MAX_LIFESPAN,
    )


def human_label(row: ReportRow, single: bool) -> str:
    return "Human" if single else f"human({row.key})"


def label_width(rows: Sequence[ReportRow]) -> int:
    """Widest label among every bar that will be drawn, at least MIN_LABEL_WIDTH."""
    single = len(rows) == 1
    widest = 0
    for row in rows:
        widest = max(widest, len(human_label(row, single)), len(row.key))
    return max(widest, MIN_LABEL_WIDTH)


def print_species_list(stream: Optional[TextIO] = None) -> None:
    """Print every supported species with its description."""
    out = stream if stream is not None else sys.stdout
    print("Available animals:\n", file=out)
    for record in all_species():
        print(f"  {record.key:<{LIST_KEY_WIDTH}} - {record.description}", file=out)


def print_text_report(
    rows: Sequence[ReportRow],
    age: float,
    color: bool,
    stream: TextIO,
    columns: Optional[int] = None,
) -> None:
    """
    Print summary lines followed by the Life Progress bars.

    Args:
        rows: Resolved species, in input order
        age: Chronological age in years
        color: Enable ANSI colors on bars
        stream: Output stream
        columns: Terminal width override (detected when None)
    """
    for row in rows:
        print(f"{fmt_years(age)} years old {row.label} ≈ {row.human_age:.1f} human years", file=stream)
    if not rows:
        return

    single = len(rows) == 1
    ui = UI(label_width(rows), color=color, columns=columns, stream=stream)
    print("\nLife Progress:\n", file=stream)
    for idx, row in enumerate(rows):
        ui.render(human_label(row, single), min(row.human_age, HUMAN_MAX_LIFESPAN), HUMAN_MAX_LIFESPAN)
        ui.render(row.key, min(age, row.max_lifespan), row.max_lifespan)
        if idx + 1 < len(rows):
            print(file=stream)
    print(file=stream)


def build(
    species_names: Optional[Sequence[str]],
    age: Optional[float],
    json_mode: bool = False,
    color: bool = True,
    stream: Optional[TextIO] = None,
    columns: Optional[int] = None,
) -> None:
    """
    Build and print the report for one invocation.

    In JSON mode each species' record is printed as soon as it resolves, so a
    later unknown species leaves earlier records on the stream. Raises
    ResolutionError on the first invalid input.

    Args:
        species_names: Species identifiers as typed by the user
        age: Chronological age in years
        json_mode: Emit one pretty-printed JSON object per species
        color: Enable ANSI colors on bars
        stream: Output stream (stdout when None)
        columns: Terminal width override (detected when None)
    """
    out = stream if stream is not None else sys.stdout
    rows = []
    for label, record in iter_resolve(species_names, age):
        row = make_row(label, record, age)
        if json_mode:
            print(json.dumps(asdict(to_result(row, age)), ensure_ascii=False, indent=2), file=out)
            out.flush()
        else:
            rows.append(row)

    if not json_mode:
        print_text_report(rows, age, color, out, columns)

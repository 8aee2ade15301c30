"""
Animal Age - User Interface

This module handles progress-bar rendering for the terminal.
"""

import sys
from typing import Optional, TextIO

from .utils import CYAN, MAX_BAR_WIDTH, RED, RESET, YELLOW, clamp, terminal_columns


class UI:
    """Draws aligned lifespan bars to an output stream."""

    def __init__(
        self,
        label_width: int,
        color: bool = True,
        columns: Optional[int] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize the UI.

        Args:
            label_width: Column width shared by every label in the report
            color: If False, never emit ANSI escape sequences
            columns: Terminal width override (detected when None)
            stream: Output stream (stdout when None)
        """
        self.label_width = label_width
        self.color = color
        self.columns = terminal_columns() if columns is None else columns
        self.stream = stream if stream is not None else sys.stdout

    def bar_width(self) -> int:
        """Bar width left after the label column and the '|...| 100%' gutter."""
        return min(MAX_BAR_WIDTH, max(0, self.columns - (self.label_width + 8)))

    def color_for_pct(self, pct: float) -> str:
        """Get the ANSI color for a fraction in [0, 1]."""
        if not self.color:
            return ""
        if pct >= 0.8:
            return RED
        if pct >= 0.6:
            return YELLOW
        return CYAN

    def bar(self, label: str, value: float, maximum: float) -> str:
        """
        Create a text progress bar.

        Args:
            label: Label for the bar
            value: Current value, clamped to [0, maximum]
            maximum: Value that fills the bar

        Returns:
            Formatted bar line
        """
        pct = clamp(value, 0, maximum) / maximum if maximum > 0 else 0.0
        width = self.bar_width()
        filled = int(pct * width)
        empty = width - filled
        color = self.color_for_pct(pct)
        reset = RESET if color else ""
        body = f"{color}{'=' * filled} {' ' * empty}{reset}"
        percent = int(pct * 100 + 0.5)
        return f"{label:<{self.label_width}} |{body}| {percent:>3d}%"

    def render(self, label: str, value: float, maximum: float) -> None:
        """Print one bar line."""
        print(self.bar(label, value, maximum), file=self.stream)

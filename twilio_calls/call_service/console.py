import sys
from typing import Sequence, Iterable, List, Optional, TextIO


class Console:
    """Writes user-facing lines and tables to the terminal"""

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        """
        Initialize the console

        Args:
            stdout (TextIO, optional): Stream for informational output. Defaults to sys.stdout.
            stderr (TextIO, optional): Stream for errors. Defaults to sys.stderr.
        """
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def line(self, message: str = "") -> None:
        print(message, file=self.stdout)

    def info(self, message: str) -> None:
        """Write an informational line"""
        self.line(message)

    def error(self, message: str) -> None:
        """Write an error line to the error stream"""
        print(message, file=self.stderr)

    def table(self, headers: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
        """
        Render rows as a boxed table

        +---------+--------+
        | Call ID | Status |
        +---------+--------+
        | CA123   | Busy   |
        +---------+--------+

        Args:
            headers (Sequence[str]): Column titles
            rows (Iterable[Sequence[str]]): Table body, one sequence of cells per row
        """
        for text in render_table(headers, rows):
            self.line(text)


def render_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> List[str]:
    """
    Lay out a boxed table

    Args:
        headers (Sequence[str]): Column titles
        rows (Iterable[Sequence[str]]): Table body

    Returns:
        List[str]: Lines of the table, borders included
    """
    body = [[str(cell) for cell in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in body:
        if len(row) != len(headers):
            raise ValueError(f"Row has {len(row)} cells, expected {len(headers)}")
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    def format_row(cells):
        return "|" + "|".join(f" {cell:<{width}} " for cell, width in zip(cells, widths)) + "|"

    lines = [border, format_row(headers), border]
    if body:
        lines.extend(format_row(row) for row in body)
        lines.append(border)
    return lines

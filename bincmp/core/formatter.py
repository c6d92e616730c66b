# =============================================================================
# BINCMP -- BINARY FILE COMPARISON
# File:   bincmp/core/formatter.py
# =============================================================================
#
# SCOPE
# -----
# Renders Difference records as table rows and writes them as a
# right-aligned table.
#
#   header_cells(fmt)         -- column names for the chosen OutputFormat
#   row_cells(fmt, diff)      -- one row of rendered cells
#   length_note(...)          -- stderr note for unequal input lengths
#   TableWriter               -- collects rows, aligns, writes once on flush()
#
# TABLE LAYOUT
# ------------
# Column width = max(TABLE_MINWIDTH, longest cell in column) + TABLE_PADDING.
# Each cell is right-aligned within its column. Widths can only be known
# once every row is collected, so nothing reaches the output before flush().
# =============================================================================

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, TextIO, Tuple

from .domain import Difference, LengthRelation, OutputFormat
from .exceptions import BincmpWriteError


TABLE_PADDING:  int = 5
TABLE_MINWIDTH: int = 2

_SINGLE_HEADER:   Tuple[str, ...] = ("OFFSET", "FILE1", "FILE2")
_COMBINED_HEADER: Tuple[str, ...] = ("OFFSET", "Hex", "FILE1", "Hex", "FILE2", "Hex")


# =============================================================================
# SECTION 1 -- ROW RENDERING
# =============================================================================

def _hex_row(d: Difference) -> Tuple[str, ...]:
    return (f"{d.offset:x}", f"{d.value1:x}", f"{d.value2:x}")


def _decimal_row(d: Difference) -> Tuple[str, ...]:
    return (f"{d.offset}", f"{d.value1}", f"{d.value2}")


def _binary_row(d: Difference) -> Tuple[str, ...]:
    return (f"{d.offset:x}", f"{d.value1:08b}", f"{d.value2:08b}")


def _combined_row(d: Difference) -> Tuple[str, ...]:
    return (
        f"{d.offset}", f"{d.offset:x}",
        f"{d.value1}", f"{d.value1:x}",
        f"{d.value2}", f"{d.value2:x}",
    )


_ROW_RENDERERS: Dict[OutputFormat, Callable[[Difference], Tuple[str, ...]]] = {
    OutputFormat.HEX:      _hex_row,
    OutputFormat.DECIMAL:  _decimal_row,
    OutputFormat.BINARY:   _binary_row,
    OutputFormat.COMBINED: _combined_row,
}


def header_cells(fmt: OutputFormat) -> Tuple[str, ...]:
    if OutputFormat(fmt) is OutputFormat.COMBINED:
        return _COMBINED_HEADER
    return _SINGLE_HEADER


def row_cells(fmt: OutputFormat, diff: Difference) -> Tuple[str, ...]:
    return _ROW_RENDERERS[OutputFormat(fmt)](diff)


def length_note(relation: LengthRelation, file1: str, file2: str) -> Optional[str]:
    """
    Informational note for unequal input lengths, or None when both
    inputs ended together. Never part of the difference table.
    """
    if relation is LengthRelation.SECOND_LARGER:
        return (
            f"NOTE: The second file ({file2}) is larger than "
            f"the first file ({file1})."
        )
    if relation is LengthRelation.FIRST_LARGER:
        return (
            f"NOTE: The first file ({file1}) is larger than "
            f"the second file ({file2})."
        )
    return None


# =============================================================================
# SECTION 2 -- TABLE WRITER
# =============================================================================

class TableWriter:
    """
    Buffers rows and writes them as a right-aligned table.

    Methods:
      write_row(cells)  -- append one row; nothing is written yet.
      flush()           -- compute column widths, write all buffered rows,
                           then empty the buffer. A second flush() with no
                           new rows writes nothing.

    Raises BincmpWriteError if the underlying stream rejects a write.
    """

    def __init__(
        self,
        out:      TextIO,
        padding:  int = TABLE_PADDING,
        minwidth: int = TABLE_MINWIDTH,
    ) -> None:
        self._out      = out
        self._padding  = padding
        self._minwidth = minwidth
        self._rows: List[Tuple[str, ...]] = []

    def __len__(self) -> int:
        return len(self._rows)

    def write_row(self, cells: Sequence[str]) -> None:
        self._rows.append(tuple(cells))

    def _column_widths(self) -> List[int]:
        widths: List[int] = []
        for row in self._rows:
            for i, cell in enumerate(row):
                if i == len(widths):
                    widths.append(self._minwidth)
                widths[i] = max(widths[i], len(cell))
        return [w + self._padding for w in widths]

    def render(self) -> str:
        """Aligned text of the buffered rows without consuming them."""
        widths = self._column_widths()
        lines = []
        for row in self._rows:
            lines.append("".join(cell.rjust(widths[i]) for i, cell in enumerate(row)))
        return "".join(line + "\n" for line in lines)

    def flush(self) -> None:
        if not self._rows:
            return
        text = self.render()
        self._rows = []
        try:
            self._out.write(text)
            self._out.flush()
        except OSError as exc:
            raise BincmpWriteError(reason=str(exc) or type(exc).__name__) from exc


__all__ = [
    "TABLE_PADDING",
    "TABLE_MINWIDTH",
    "TableWriter",
    "header_cells",
    "length_note",
    "row_cells",
]

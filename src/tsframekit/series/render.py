"""Plain-text rendering of series and frames.

Rendering never touches the data model; these helpers only turn lists
of values into aligned text columns.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

MISSING_MARK = "-"
ELLIPSIS = "..."


def columnize(
    values: Sequence[Any],
    name: str | None = None,
    max_width: int | None = None,
    pad_left: bool = True,
) -> tuple[str | None, list[str]]:
    """Pad (or cut) every cell of a column to a common width.

    Args:
        values: Column cells; None renders as ``-``
        name: Optional header, padded along with the cells
        max_width: Width limit; longer cells are cut and end in ``...``
        pad_left: Right-align cells when True, left-align otherwise

    Returns:
        Tuple of (padded header or None, padded cells)
    """
    cells = [MISSING_MARK if v is None else str(v) for v in values]
    if name is not None:
        cells.insert(0, name)

    widest = max((len(c) for c in cells), default=0)
    width = widest if max_width is None else min(max_width, widest)

    padded: list[str] = []
    for cell in cells:
        if len(cell) <= width:
            padded.append(cell.rjust(width) if pad_left else cell.ljust(width))
        else:
            padded.append(cell[: max(width - len(ELLIPSIS), 0)] + ELLIPSIS)

    header = padded.pop(0) if name is not None else None
    return header, padded


def render_series(
    index_labels: Sequence[Any],
    data: Sequence[Any],
    name: str | None = None,
    max_width: int | None = None,
) -> str:
    """Two-column text view: index labels and values."""
    blank, index_cells = columnize(index_labels, name="", max_width=max_width, pad_left=False)
    header, data_cells = columnize(data, name=name or "", max_width=max_width, pad_left=True)

    rows = [f"{blank}   {header}"]
    rows.extend(f"{i}:  {d}" for i, d in zip(index_cells, data_cells))
    return "\n".join(rows)


def render_frame(
    index_labels: Sequence[Any],
    columns: Sequence[tuple[str, Sequence[Any], int | None]],
) -> str:
    """Text grid with one index column and one column per series.

    Args:
        index_labels: Row labels
        columns: ``(name, values, max_width)`` per column
    """
    if not columns:
        return "Empty DataFrame"

    blank, index_cells = columnize(index_labels, name="", pad_left=False)
    names: list[str] = []
    cells: list[list[str]] = []
    for name, values, width in columns:
        header, padded = columnize(values, name=name, max_width=width, pad_left=True)
        names.append(header or "")
        cells.append(padded)

    rows = [f"{blank}    " + "   ".join(names)]
    for r, label in enumerate(index_cells):
        rows.append("   ".join([f"{label}:"] + [column[r] for column in cells]))
    return "\n".join(rows)

"""Pipe-table layout: cell normalisation, padding and the alignment row."""

from __future__ import annotations

from collections.abc import Sequence

from totale_markdown.models.elements import Alignment

MIN_COLUMN_WIDTH = 3

UNPADDED_MARKERS = {
    Alignment.NONE: "---",
    Alignment.LEFT: ":---",
    Alignment.CENTER: ":---:",
    Alignment.RIGHT: "---:",
}


def format_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    alignment: Sequence[Alignment | str | None],
    pad: bool,
) -> str:
    """Lay out a GitHub-flavoured pipe table without a trailing newline.

    Rows are fitted to the header width: short rows gain empty cells, long rows
    are cut. Columns without an alignment entry are left unaligned. With
    ``pad`` every column is widened to its longest cell.
    """
    width = len(headers)
    if width == 0:
        return ""

    header_cells = _fit_row(headers, width)
    body = [_fit_row(row, width) for row in rows]
    alignments = [
        _normalise_alignment(alignment[index] if index < len(alignment) else None)
        for index in range(width)
    ]

    if pad:
        widths = [
            max([MIN_COLUMN_WIDTH, len(header_cells[index]), *(len(row[index]) for row in body)])
            for index in range(width)
        ]
        header_line = _format_row(
            [_justify(cell, widths[index], alignments[index]) for index, cell in enumerate(header_cells)]
        )
        align_line = _format_row(
            [_alignment_marker(alignments[index], widths[index]) for index in range(width)]
        )
        body_lines = [
            _format_row([_justify(cell, widths[index], alignments[index]) for index, cell in enumerate(row)])
            for row in body
        ]
    else:
        header_line = _format_row(header_cells)
        align_line = _format_row([UNPADDED_MARKERS[value] for value in alignments])
        body_lines = [_format_row(row) for row in body]

    return "\n".join([header_line, align_line, *body_lines])


def _fit_row(values: Sequence[str], width: int) -> list[str]:
    cells = ["" if value is None else str(value) for value in values]
    if len(cells) < width:
        cells.extend([""] * (width - len(cells)))
    elif len(cells) > width:
        cells = cells[:width]
    return cells


def _format_row(cells: Sequence[str]) -> str:
    return f"| {' | '.join(cells)} |"


def _normalise_alignment(value: Alignment | str | None) -> Alignment:
    if value is None:
        return Alignment.NONE
    if isinstance(value, Alignment):
        return value
    try:
        return Alignment(str(value).lower())
    except ValueError:
        return Alignment.NONE


def _alignment_marker(alignment: Alignment, width: int) -> str:
    if alignment is Alignment.LEFT:
        return ":" + "-" * (width - 1)
    if alignment is Alignment.CENTER:
        return ":" + "-" * (width - 2) + ":"
    if alignment is Alignment.RIGHT:
        return "-" * (width - 1) + ":"
    return "-" * width


def _justify(cell: str, width: int, alignment: Alignment) -> str:
    if alignment is Alignment.RIGHT:
        return cell.rjust(width)
    if alignment is Alignment.CENTER:
        return cell.center(width)
    return cell.ljust(width)


__all__ = ["MIN_COLUMN_WIDTH", "format_table"]

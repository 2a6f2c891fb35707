from __future__ import annotations

from totale_markdown.models.elements import Alignment
from totale_markdown.renderers.markdown.table_layout import format_table


def test_format_table_unpadded_markers() -> None:
    output = format_table(
        ["a", "b", "c", "d"],
        [["1", "2", "3", "4"]],
        [Alignment.NONE, Alignment.LEFT, Alignment.CENTER, Alignment.RIGHT],
        pad=False,
    )

    assert output.splitlines() == [
        "| a | b | c | d |",
        "| --- | :--- | :---: | ---: |",
        "| 1 | 2 | 3 | 4 |",
    ]


def test_format_table_pads_to_widest_cell() -> None:
    output = format_table(["A"], [["long value"]], [], pad=True)

    assert output == "| A          |\n| ---------- |\n| long value |"


def test_format_table_centers_cells() -> None:
    output = format_table(["Status"], [["ok"]], ["center"], pad=True)

    assert output == "| Status |\n| :----: |\n|   ok   |"


def test_format_table_keeps_minimum_marker_width() -> None:
    output = format_table(["x", "y"], [], ["left", "right"], pad=True)

    assert output == "| x   |   y |\n| :-- | --: |"


def test_format_table_fits_rows_to_header_width() -> None:
    output = format_table(["a", "b"], [["1"], ["1", "2", "3"]], [], pad=False)

    assert output == "| a | b |\n| --- | --- |\n| 1 |  |\n| 1 | 2 |"


def test_format_table_treats_unknown_alignment_as_none() -> None:
    output = format_table(["a"], [], ["justify"], pad=False)

    assert output == "| a |\n| --- |"


def test_format_table_without_headers_is_empty() -> None:
    assert format_table([], [["orphan"]], [], pad=True) == ""

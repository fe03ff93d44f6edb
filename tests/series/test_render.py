"""Tests for series/render.py."""

from __future__ import annotations

from tsframekit.series.render import columnize, render_frame, render_series


class TestColumnize:
    def test_pads_to_widest(self) -> None:
        header, cells = columnize([1, None, 123], name="v")
        assert header == "  v"
        assert cells == ["  1", "  -", "123"]

    def test_left_pad(self) -> None:
        _, cells = columnize(["a", "bcd"], pad_left=False)
        assert cells == ["a  ", "bcd"]

    def test_truncates(self) -> None:
        _, cells = columnize(["Bdhdhgwregsgsdfg", "ab"], max_width=10)
        assert cells[0] == "Bdhdhgw..."
        assert cells[1] == "        ab"

    def test_empty(self) -> None:
        header, cells = columnize([])
        assert header is None
        assert cells == []


class TestRender:
    def test_series(self) -> None:
        lines = render_series([0.0, 1.0], [5.0, None], name="x").splitlines()
        assert len(lines) == 3
        assert lines[1].startswith("0.0:")
        assert lines[2].endswith("-")

    def test_frame(self) -> None:
        text = render_frame([0.0, 1.0], [("a", [1.0, None], None), ("b", ["x", "y"], None)])
        lines = text.splitlines()
        assert lines[0].split() == ["a", "b"]
        assert lines[2].split() == ["1.0:", "-", "y"]

    def test_empty_frame(self) -> None:
        assert render_frame([], []) == "Empty DataFrame"

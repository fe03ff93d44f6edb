"""Tests for series/data_frame.py."""

from __future__ import annotations

import logging

import pandas as pd
import pytest

from tsframekit.core.errors import EContractViolation
from tsframekit.core.types import ColumnKind, IndexOrder
from tsframekit.series.data_frame import DataFrame
from tsframekit.series.data_series import DataSeries
from tsframekit.series.time_series import TimeSeries

A7 = [12.3, None, 45.3, None, None, None, 123.1]


@pytest.fixture
def mixed_frame() -> DataFrame:
    """Seven columns of four kinds with partly overlapping indexes."""
    df = DataFrame()
    df.assign(DataSeries([2, 3, None], name="s1"))
    df.assign(
        DataSeries([2.35, 0.23, 4.24], name="s2"),
        DataSeries([22.35, 10.23, 44.24]),
        DataSeries([132.35, 670.23, 54.2564, 687.243, 73.123], name="s4"),
    )
    df.assign(
        DataSeries(
            [True, None, None, None, None, None, None, None, False],
            index=[3, 6, 9, 13, 14, 15, 18, 23, 30],
        )
    )
    df.assign(DataSeries(["Asdfsdfwefsdf", "Bdhdhgwregsgsdfg"], name="s6", max_column_width=15))
    df.assign(DataSeries(A7, name="s7"))
    return df


class TestAssign:
    """Tests for assign and column naming."""

    def test_columns_and_union(self, mixed_frame: DataFrame) -> None:
        assert mixed_frame.count == 7
        assert mixed_frame.columns == ["s1", "s2", "column_3", "s4", "column_5", "s6", "s7"]
        assert mixed_frame.index == [
            0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 9.0, 13.0, 14.0, 15.0, 18.0, 23.0, 30.0
        ]
        for name in mixed_frame.columns:
            column = mixed_frame.get(name)
            assert column is not None
            assert column.count == 14

    def test_present_counts_unchanged(self, mixed_frame: DataFrame) -> None:
        s1 = mixed_frame.get("s1", int)
        s5 = mixed_frame.get("column_5", bool)
        s7 = mixed_frame.get("s7", float)
        assert s1 is not None and len(s1.present().index) == 2
        assert s5 is not None and len(s5.present().index) == 2
        assert s7 is not None and len(s7.present().index) == 3

    def test_duplicate_names_suffixed(self) -> None:
        df = DataFrame(DataSeries([1.0], name="x"), DataSeries([2.0], name="x"))
        df.assign(DataSeries([3.0], name="x"))
        assert df.columns == ["x", "x_1", "x_2"]

    def test_symmetric_union(self) -> None:
        df = DataFrame(DataSeries([1.0, 3.0], index=[1.0, 3.0], name="a"))
        df.assign(DataSeries([2.0, 4.0], index=[2.0, 4.0], name="b"))
        a = df.get("a")
        b = df.get("b")
        assert a is not None and b is not None
        assert a.index == b.index == [1.0, 2.0, 3.0, 4.0]
        assert a.data == [1.0, None, 3.0, None]
        assert b.data == [None, 2.0, None, 4.0]

    def test_mixed_order_rejected(self) -> None:
        df = DataFrame(DataSeries([1.0, 2.0], name="up"))
        down = DataSeries([1.0, 2.0], index=[1.0, 0.0], order="decreasing", name="down")
        with pytest.raises(EContractViolation, match="one index order"):
            df.assign(down)
        assert df.columns == ["up"]

    def test_mixed_order_batch_adds_nothing(self) -> None:
        """A mismatched series in one assign call leaves the frame unchanged."""
        df = DataFrame(DataSeries([1.0], index=[0.0], name="up"))
        ok = DataSeries([2.0], index=[5.0], name="ok")
        down = DataSeries([1.0, 2.0], index=[1.0, 0.0], order="decreasing", name="down")
        with pytest.raises(EContractViolation):
            df.assign(ok, down)
        assert df.columns == ["up"]
        up = df.get("up")
        assert up is not None and up.index == [0.0]

    def test_mixed_order_in_empty_frame(self) -> None:
        down = DataSeries([1.0, 2.0], index=[1.0, 0.0], order="decreasing")
        with pytest.raises(EContractViolation):
            DataFrame(DataSeries([1.0]), down)

    def test_non_unique_alignment_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        a = DataSeries([1.0, 2.0], index=[1.0, 1.0], order="non_decreasing", name="a")
        b = DataSeries([3.0], index=[2.0], order="non_decreasing", name="b")
        with caplog.at_level(logging.WARNING, logger="tsframekit.series.data_frame"):
            df = DataFrame(a, b)
        assert "rows may not line up" in caplog.text
        assert not df.fill_index()

    def test_untyped_column_reports_float(self) -> None:
        df = DataFrame(DataSeries([None, None], name="blank"))
        assert df.get("blank", int) is None
        assert df.insert("blank", 3, 5.0)
        assert df.get("blank", int) is not None

    def test_assign_copies(self) -> None:
        source = DataSeries([1.0], name="a")
        df = DataFrame(source)
        source.append(2.0, 1.0)
        column = df.get("a")
        assert column is not None and column.count == 1

    def test_time_series_column(self) -> None:
        ts = TimeSeries.from_start([1.0, 2.0], start="2024-01-01", step=60, name="t")
        df = DataFrame(ts)
        column = df.get("t")
        assert column is not None
        assert column.index == ts.series.index


class TestGet:
    """Tests for get and membership."""

    def test_unknown_column(self, mixed_frame: DataFrame) -> None:
        assert mixed_frame.get("nope") is None
        assert "nope" not in mixed_frame
        assert "s7" in mixed_frame

    def test_kind_mismatch(
        self, mixed_frame: DataFrame, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="tsframekit.series.data_frame"):
            assert mixed_frame.get("s1", float) is None
        assert "s1" in caplog.text

    @pytest.mark.parametrize("kind", [ColumnKind.STR, "str", str])
    def test_kind_forms(self, mixed_frame: DataFrame, kind: object) -> None:
        assert mixed_frame.get("s6", kind) is not None

    def test_get_returns_copy(self, mixed_frame: DataFrame) -> None:
        column = mixed_frame.get("s2")
        assert column is not None
        column.fill()
        original = mixed_frame.get("s2")
        assert original is not None and not original.is_complete


class TestFill:
    """Tests for fill and index realignment."""

    def test_fill_reference_values(self, mixed_frame: DataFrame) -> None:
        assert not mixed_frame.is_complete
        mixed_frame.fill(method="nearlin")
        assert mixed_frame.is_complete
        s7 = mixed_frame.get("s7", float)
        assert s7 is not None
        expected = [12.3, 28.8, 45.3, 64.75, 84.2, 103.65] + [123.1] * 8
        assert s7.data == pytest.approx(expected)

    def test_fill_keeps_kinds(self, mixed_frame: DataFrame) -> None:
        mixed_frame.fill()
        s1 = mixed_frame.get("s1", int)
        s2 = mixed_frame.get("s2", float)
        s5 = mixed_frame.get("column_5", bool)
        assert s1 is not None and s1.data[0] == 2 and s1.data[-1] == 3
        assert s2 is not None and s2.data[0] == 2.35 and s2.data[-1] == 4.24
        assert s5 is not None and s5.data[0] is True and s5.data[-1] is False

    def test_insert_then_fill_index(self) -> None:
        df = DataFrame(DataSeries([1.0, 2.0], name="a"), DataSeries([3.0, 4.0], name="b"))
        assert df.insert("a", 9.0, 5.0)
        b = df.get("b")
        assert b is not None and b.count == 2
        assert df.fill_index()
        b = df.get("b")
        assert b is not None and b.index == [0.0, 1.0, 5.0]
        assert b.data == [3.0, 4.0, None]

    def test_insert_unknown_column(self) -> None:
        assert not DataFrame().insert("a", 1.0, 0.0)

    def test_fill_index_refused(self, caplog: pytest.LogCaptureFixture) -> None:
        df = DataFrame(DataSeries([1.0, 2.0], name="a"))
        assert df.insert("a", 5.0, 1.0, verify=False)
        b = df.get("a")
        assert b is not None and b.order == IndexOrder.NON_DECREASING
        with caplog.at_level(logging.WARNING):
            assert not df.fill_index()
        assert "fill_index" in caplog.text

    def test_copy_with_filled_index(self) -> None:
        df = DataFrame(DataSeries([1.0], name="a"), DataSeries([2.0], name="b"))
        df.insert("b", 3.0, 1.0)
        aligned = df.copy_with_filled_index()
        a_orig = df.get("a")
        a_new = aligned.get("a")
        assert a_orig is not None and a_orig.count == 1
        assert a_new is not None and a_new.index == [0.0, 1.0]


class TestConversion:
    def test_to_pandas(self) -> None:
        df = DataFrame(
            DataSeries([1.0, 3.0], index=[1.0, 3.0], name="a"),
            DataSeries([2.0], index=[2.0], name="b"),
        )
        pdf = df.to_pandas()
        assert list(pdf.columns) == ["a", "b"]
        assert pdf.index.tolist() == [1.0, 2.0, 3.0]

    def test_from_pandas(self) -> None:
        pdf = pd.DataFrame({"a": [1.0, None], "b": [1, 2]}, index=[0.0, 1.0])
        df = DataFrame.from_pandas(pdf)
        assert df.columns == ["a", "b"]
        a = df.get("a", float)
        b = df.get("b", int)
        assert a is not None and a.data == [1.0, None]
        assert b is not None and b.data == [1, 2]

    def test_empty(self) -> None:
        df = DataFrame()
        assert df.is_empty
        assert df.index == []
        assert df.order is None
        assert str(df) == "Empty DataFrame"
        assert df.to_pandas().empty

    def test_render(self, mixed_frame: DataFrame) -> None:
        text = str(mixed_frame)
        assert text.splitlines()[0].split() == mixed_frame.columns
        assert len(text.splitlines()) == 15

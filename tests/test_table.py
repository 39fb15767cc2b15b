import pytest

from rboard.analyze import Analysis, parse_analyses
from rboard.table import Column, ColumnKind, default_columns, table_rows

SAMPLE = (
    "info move K9 visits 1 utility 0.963494 winrate 0.981747 "
    "scoreMean 1.56209 scoreStdev 13.7542 scoreLead 1.56209 "
    "scoreSelfplay 1.56209 prior 0.0407438 lcb -0.0182531 "
    "utilityLcb -2.8 order 0 pv K9 K8 pvVisits 1"
)


def test_default_headers_in_order():
    assert [c.header() for c in default_columns()] == [
        "order",
        "move",
        "visits",
        "winrate",
        "pv",
        "pv visits",
    ]


def test_default_widths():
    widths = {c.kind: c.width for c in default_columns()}
    assert widths[ColumnKind.PV] == 400.0
    assert all(w == 80.0 for k, w in widths.items() if k is not ColumnKind.PV)
    assert all(c.resize_offset is None for c in default_columns())


def test_rows_from_engine_line():
    rows = table_rows(parse_analyses(SAMPLE))
    assert rows == [["0", "K9", "1", "0.981747", "K9 K8", "1"]]


def test_order_column_uses_row_position():
    analyses = [Analysis(move="A1", order=7), Analysis(move="B2", order=3)]
    column = Column.of(ColumnKind.ORDER)
    assert [column.cell(i, a) for i, a in enumerate(analyses)] == ["0", "1"]


@pytest.mark.parametrize(
    "winrate, expected",
    [(0.5, "0.5"), (1.0, "1"), (0.0, "0"), (1e-07, "0.0000001")],
)
def test_winrate_cell_has_no_exponent_or_trailing_zero(winrate, expected):
    column = Column.of(ColumnKind.WINRATE)
    assert column.cell(0, Analysis(winrate=winrate)) == expected


def test_winrate_cell_round_trips():
    column = Column.of(ColumnKind.WINRATE)
    for value in (0.981747, 0.0407438, 13.7542, 123456.75):
        assert float(column.cell(0, Analysis(winrate=value))) == value


def test_empty_analysis_cells():
    rows = table_rows([Analysis()])
    assert rows == [["0", "", "0", "0", "", "0"]]
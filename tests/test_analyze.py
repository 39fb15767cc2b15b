import pytest

from rboard.analyze import Analysis, parse_analyses

SAMPLE = (
    "info move K9 visits 1 utility 0.963494 winrate 0.981747 "
    "scoreMean 1.56209 scoreStdev 13.7542 scoreLead 1.56209 "
    "scoreSelfplay 1.56209 prior 0.0407438 lcb -0.0182531 "
    "utilityLcb -2.8 order 0 pv K9 K8 pvVisits 1"
)


def test_parse_sample_line():
    (analysis,) = parse_analyses(SAMPLE)
    assert analysis.move == "K9"
    assert analysis.visits == 1
    assert analysis.utility == pytest.approx(0.963494)
    assert analysis.winrate == pytest.approx(0.981747)
    assert analysis.score_mean == pytest.approx(1.56209)
    assert analysis.score_stdev == pytest.approx(13.7542)
    assert analysis.score_lead == pytest.approx(1.56209)
    assert analysis.score_selfplay == pytest.approx(1.56209)
    assert analysis.prior == pytest.approx(0.0407438)
    assert analysis.lcb == pytest.approx(-0.0182531)
    assert analysis.utility_lcb == pytest.approx(-2.8)
    assert analysis.order == 0
    assert analysis.pv == ["K9", "K8"]
    assert analysis.pv_visits == 1


def test_multiple_infos_keep_order():
    text = "info move A1 visits 5 order 0 pv A1 info move B2 visits 3 order 1 pv B2 C3"
    analyses = parse_analyses(text)
    assert [a.move for a in analyses] == ["A1", "B2"]
    assert [a.visits for a in analyses] == [5, 3]
    assert [a.order for a in analyses] == [0, 1]
    assert analyses[1].pv == ["B2", "C3"]


@pytest.mark.parametrize("text", ["", "   ", "info", "info info"])
def test_empty_input_gives_no_analyses(text):
    assert parse_analyses(text) == []


def test_leading_tokens_without_info_are_parsed():
    analyses = parse_analyses("move D4 visits 2")
    assert len(analyses) == 1
    assert analyses[0].move == "D4"
    assert analyses[0].visits == 2


@pytest.mark.parametrize("raw", ["abc", "-3", "1.5", "1_0"])
def test_bad_integers_become_zero(raw):
    assert Analysis.from_tokens(["visits", raw]).visits == 0


@pytest.mark.parametrize("raw", ["abc", "1_0", ""])
def test_bad_floats_become_zero(raw):
    assert Analysis.from_tokens(["winrate", raw]).winrate == 0.0


def test_unknown_tokens_are_skipped():
    analysis = Analysis.from_tokens(["foo", "move", "E5", "bar", "visits", "7"])
    assert analysis.move == "E5"
    assert analysis.visits == 7


def test_pv_without_pv_visits_runs_to_end():
    analysis = Analysis.from_tokens(["pv", "A1", "B2", "C3"])
    assert analysis.pv == ["A1", "B2", "C3"]
    assert analysis.pv_visits == 0


def test_tokens_after_pv_visits_are_ignored():
    analysis = Analysis.from_tokens(["pv", "A1", "pvVisits", "3", "visits", "9"])
    assert analysis.pv == ["A1"]
    assert analysis.pv_visits == 3
    assert analysis.visits == 0


def test_missing_value_at_end_keeps_default():
    analysis = Analysis.from_tokens(["visits", "4", "move"])
    assert analysis.move == ""
    assert analysis.visits == 4


def test_pv_visits_outside_pv_is_ignored():
    analysis = Analysis.from_tokens(["pvVisits", "8", "move", "F6"])
    assert analysis.pv_visits == 0
    assert analysis.move == "F6"


def test_default_analysis_is_empty():
    analysis = Analysis.from_tokens([])
    assert analysis == Analysis()
    assert analysis.pv == []
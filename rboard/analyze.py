"""Parsing of ``kata-analyze`` output lines."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

_UINT = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 2**64

_FLOAT_FIELDS = {
    "utility": "utility",
    "winrate": "winrate",
    "scoreMean": "score_mean",
    "scoreStdev": "score_stdev",
    "scoreLead": "score_lead",
    "scoreSelfplay": "score_selfplay",
    "prior": "prior",
    "lcb": "lcb",
    "utilityLcb": "utility_lcb",
}
_INT_FIELDS = {"visits": "visits", "order": "order"}
_KEYS = {"move", "pv", "pvVisits", *_FLOAT_FIELDS, *_INT_FIELDS}


def _parse_uint(text: str) -> int:
    if not _UINT.fullmatch(text):
        return 0
    value = int(text)
    return value if value < _U64_LIMIT else 0


def _parse_float(text: str) -> float:
    if "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


@dataclass
class Analysis:
    """One candidate move reported by the engine."""

    move: str = ""
    visits: int = 0
    utility: float = 0.0
    winrate: float = 0.0
    score_mean: float = 0.0
    score_stdev: float = 0.0
    score_lead: float = 0.0
    score_selfplay: float = 0.0
    prior: float = 0.0
    lcb: float = 0.0
    utility_lcb: float = 0.0
    order: int = 0
    pv: list[str] = field(default_factory=list)
    pv_visits: int = 0

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Analysis":
        """Build an analysis from the key/value tokens following ``info``.

        Unparsable numbers become zero; parsing stops after ``pvVisits``.
        """
        analysis = cls()
        stream = iter(tokens)
        for key in stream:
            if key not in _KEYS:
                continue
            if key == "pv":
                for value in stream:
                    if value == "pvVisits":
                        analysis.pv_visits = _parse_uint(next(stream, ""))
                        return analysis
                    analysis.pv.append(value)
                return analysis
            value = next(stream, None)
            if value is None:
                break
            if key == "move":
                analysis.move = value
            elif key in _INT_FIELDS:
                setattr(analysis, _INT_FIELDS[key], _parse_uint(value))
            elif key in _FLOAT_FIELDS:
                setattr(analysis, _FLOAT_FIELDS[key], _parse_float(value))
        return analysis


def parse_analyses(text: str) -> list[Analysis]:
    """Split an engine line on ``info`` markers and parse each candidate."""
    analyses: list[Analysis] = []
    pending: list[str] = []
    for token in text.split():
        if token == "info":
            if pending:
                analyses.append(Analysis.from_tokens(pending))
                pending = []
        else:
            pending.append(token)
    if pending:
        analyses.append(Analysis.from_tokens(pending))
    return analyses
"""
Tests for DataFrame views of an analysis.
"""

import pandas as pd

from src.config import COURSE_PROFILES, NO_WINNER
from src.skins.engine import run_skins_analysis
from src.skins.reporting import (
    HOLE_COLUMNS,
    NET_SCORE_COLUMNS,
    hole_results_frame,
    net_scores_frame,
    summary_frame,
)

ST_PETERS = COURSE_PROFILES["st_peters"]


def analysis(score_policy="fail"):
    rows = [
        ["PAR", "", "Pars", 4, 3, 5, 4, 3, 4, 4, 5, 4, 36, ""],
        ["A", "", "", 4, 4, 4, 4, 4, 4, 4, 4, "X" if score_policy == "exclude" else 4, "", 9],
        ["B", "", "", 4, 5, 5, 5, 5, 5, 5, 5, 5, "", 0],
        ["C", "", "", 5, 5, 5, 5, 5, 5, 5, 5, 5, "", 0],
    ]
    return run_skins_analysis(rows, ST_PETERS, score_policy=score_policy)


class TestHoleResultsFrame:
    """Tests for hole_results_frame function."""

    def test_one_row_per_hole(self):
        df = hole_results_frame(analysis())

        assert list(df.columns) == HOLE_COLUMNS
        assert df['hole'].tolist() == list(range(1, 10))
        assert df['hole_difficulty'].tolist() == list(ST_PETERS)
        assert df['par'].tolist() == [4, 3, 5, 4, 3, 4, 4, 5, 4]

    def test_winners(self):
        df = hole_results_frame(analysis())
        # A (half 4.5) strokes holes ranked 1-5: holes 1 and 4
        assert df.loc[df['hole'] == 1, 'winner'].item() == "A"
        assert df.loc[df['hole'] == 2, 'winner'].item() == "A"
        assert df['skin_value'].sum() == 9


class TestNetScoresFrame:
    """Tests for net_scores_frame function."""

    def test_long_format(self):
        df = net_scores_frame(analysis())

        assert list(df.columns) == NET_SCORE_COLUMNS
        assert len(df) == 27
        assert df.loc[df['hole'] == 1, 'player'].tolist() == ["A", "B", "C"]

    def test_strokes_and_flags(self):
        df = net_scores_frame(analysis())
        hole1 = df[df['hole'] == 1].set_index('player')

        assert hole1.loc["A", 'strokes'] == 1
        assert hole1.loc["A", 'net'] == 3
        assert hole1.loc["A", 'half_handicap'] == 4.5
        assert bool(hole1.loc["A", 'is_lowest'])
        assert bool(hole1.loc["A", 'won_skin'])
        assert not bool(hole1.loc["B", 'won_skin'])

    def test_invalid_scores_are_missing(self):
        result = analysis(score_policy="exclude")
        df = net_scores_frame(result)
        a9 = df[(df['hole'] == 9) & (df['player'] == "A")].iloc[0]

        assert pd.isna(a9['gross'])
        assert pd.isna(a9['net'])
        assert not a9['is_lowest']
        # B and C tie on 5 once A is out
        assert result.hole_results[8].winner_name == NO_WINNER


class TestSummaryFrame:
    """Tests for summary_frame function."""

    def test_winners_only(self):
        df = summary_frame(analysis())
        assert df.to_dict('records') == [{'player': "A", 'skins': 9}]

    def test_include_zero(self):
        df = summary_frame(analysis(), include_zero=True)
        assert df['player'].tolist() == ["A", "B", "C"]
        assert df['skins'].tolist() == [9, 0, 0]

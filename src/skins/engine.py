"""
Skins Scoring Engine

This module computes a 9-hole skins game from a raw scorecard table. Each
player receives handicap strokes on the hardest holes up to half their
handicap; on every hole the single lowest net score wins one skin and ties
carry nothing.

The engine is a pure function of its inputs: it keeps no state between calls
and never mutates the table or the difficulty ranking it is given.

Usage:
    python -m src.skins.engine [path/to/scorecard.csv]
    OR
    from src.skins import run_skins_analysis
"""

import sys
from pathlib import Path

# Enable both `python src/skins/engine.py` and `python -m src.skins.engine` execution.
# Required for src.config/src.utils imports to resolve correctly.
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import math
import numbers

from src.config import (
    DEFAULT_COURSE,
    HOLES_IN_ROUND,
    INVALID_SCORE_POLICY,
    MAX_HOLE_DIFFICULTY,
    MIN_HOLE_DIFFICULTY,
    NO_WINNER,
)
from src.ingestion.scorecard import (
    InputFormatError,
    extract_pars,
    extract_players,
    load_scorecard_csv,
)
from src.skins.models import (
    AnalysisResult,
    HoleResult,
    InvalidScore,
    NetScore,
    SkinsSummary,
)
from src.utils import setup_logging, get_course_profile

# --- Module Logger ---
logger = setup_logging(__name__)


def strokes_received(half_handicap, hole_difficulty):
    """
    Strokes a player gets on a hole: 1 if the hole ranks within their
    half handicap, else 0.

    A fractional half handicap (x.5) is rounded up, so 4.5 strokes the
    five hardest holes while 4.0 strokes only four.
    """
    if half_handicap % 1 != 0:
        return 1 if hole_difficulty <= math.ceil(half_handicap) else 0
    return 1 if hole_difficulty <= half_handicap else 0


def validate_hole_difficulty(hole_difficulty) -> tuple[int, ...]:
    """
    Check a course difficulty ranking and return it as a tuple.

    Raises:
        InputFormatError: If it is not 9 unique whole numbers in 1-18
    """
    ranks = tuple(hole_difficulty)
    if len(ranks) != HOLES_IN_ROUND:
        raise InputFormatError(
            f"Hole difficulty table needs {HOLES_IN_ROUND} entries, got {len(ranks)}"
        )
    for rank in ranks:
        if isinstance(rank, bool) or not isinstance(rank, numbers.Integral):
            raise InputFormatError(f"Hole difficulty {rank!r} is not a whole number")
        if not MIN_HOLE_DIFFICULTY <= rank <= MAX_HOLE_DIFFICULTY:
            raise InputFormatError(
                f"Hole difficulty {rank} outside {MIN_HOLE_DIFFICULTY}-{MAX_HOLE_DIFFICULTY}"
            )
    if len(set(ranks)) != len(ranks):
        raise InputFormatError(f"Hole difficulty ranks repeat: {list(ranks)}")
    return tuple(int(rank) for rank in ranks)


def compute_net_score(player, hole_index, hole_difficulty):
    """Net score for one player on one hole (gross/net None if the score is invalid)."""
    strokes = strokes_received(player.half_handicap, hole_difficulty)
    gross = player.scores[hole_index]
    if isinstance(gross, InvalidScore):
        return NetScore(name=player.name, gross=None, strokes=strokes, net=None)
    return NetScore(name=player.name, gross=gross, strokes=strokes, net=gross - strokes)


def compute_hole_result(hole_index, hole_difficulty, players, par=None):
    """
    Score one hole.

    The lowest net score wins a skin only if no other player matches it.
    Invalid scores take no part in the comparison; a hole with no valid
    score has no winner.

    Raises:
        InputFormatError: If players is empty
    """
    if not players:
        raise InputFormatError(f"No players to score on hole {hole_index + 1}")

    net_scores = tuple(compute_net_score(p, hole_index, hole_difficulty) for p in players)
    valid = [s for s in net_scores if s.is_valid]

    lowest_net = min(s.net for s in valid) if valid else None
    winners = [s for s in valid if s.net == lowest_net]

    if len(winners) == 1:
        winner_name, skin_value = winners[0].name, 1
    else:
        winner_name, skin_value = NO_WINNER, 0

    return HoleResult(
        hole_number=hole_index + 1,
        hole_difficulty=hole_difficulty,
        winner_name=winner_name,
        skin_value=skin_value,
        net_scores=net_scores,
        lowest_net=lowest_net,
        par=par,
    )


def summarize_skins(players, hole_results):
    """Total skins per player in input order, plus the winner of each won hole."""
    totals = {p.name: 0 for p in players}
    skins_by_hole = []

    for result in sorted(hole_results, key=lambda r: r.hole_number):
        if result.skin_value and result.winner_name in totals:
            totals[result.winner_name] += result.skin_value
            skins_by_hole.append((result.hole_number, result.winner_name))

    return SkinsSummary(totals=tuple(totals.items()), skins_by_hole=tuple(skins_by_hole))


def run_skins_analysis(rows, hole_difficulty, score_policy=INVALID_SCORE_POLICY):
    """
    Run a full skins analysis on a raw scorecard table.

    Args:
        rows: DataFrame or sequence of rows of raw cell values
        hole_difficulty: Difficulty rank (1-18) for each of the 9 holes in play order
        score_policy: How invalid gross scores are treated ("fail" or "exclude")

    Returns:
        AnalysisResult with players, 9 hole results ordered by hole number,
        and the skins summary

    Raises:
        InputFormatError: If the table holds no players or has the wrong shape,
            or the difficulty table is malformed
        ParseError: If a gross score is invalid under the "fail" policy
    """
    ranks = validate_hole_difficulty(hole_difficulty)
    players = tuple(extract_players(rows, score_policy=score_policy))
    if not players:
        raise InputFormatError("No player rows found in scorecard")

    pars = extract_pars(rows)

    hole_results = tuple(
        compute_hole_result(
            hole_index,
            ranks[hole_index],
            players,
            par=pars[hole_index] if pars else None,
        )
        for hole_index in range(HOLES_IN_ROUND)
    )
    summary = summarize_skins(players, hole_results)

    logger.info(
        f"Scored {len(players)} players over {HOLES_IN_ROUND} holes: "
        f"{summary.total_skins} skins won, "
        f"{HOLES_IN_ROUND - summary.total_skins} holes without a winner"
    )

    return AnalysisResult(
        players=players,
        hole_results=hole_results,
        summary=summary,
        hole_difficulty=ranks,
        pars=pars,
    )


def main(csv_path=None, course=DEFAULT_COURSE):
    df = load_scorecard_csv(csv_path)
    result = run_skins_analysis(df, get_course_profile(course))

    logger.info(f"Skins results ({course}):")
    for hole in result.hole_results:
        logger.info(f"  Hole {hole.hole_number} (HCP {hole.hole_difficulty}): {hole.winner_name}")

    logger.info("Total skins by player:")
    for name, total in result.summary.winners():
        logger.info(f"  {name}: {total} {'skin' if total == 1 else 'skins'}")

    return result


if __name__ == "__main__":
    result = main(sys.argv[1] if len(sys.argv) > 1 else None)

"""
DataFrame views of a skins analysis.

These are tidy tables for display or export; no formatting happens here.
"""

import pandas as pd

HOLE_COLUMNS = ['hole', 'hole_difficulty', 'par', 'winner', 'skin_value', 'lowest_net']
NET_SCORE_COLUMNS = [
    'hole', 'player', 'half_handicap', 'gross', 'strokes', 'net', 'is_lowest', 'won_skin'
]
SUMMARY_COLUMNS = ['player', 'skins']


def hole_results_frame(result) -> pd.DataFrame:
    """One row per hole, ordered by hole number."""
    rows = [
        {
            'hole': hole.hole_number,
            'hole_difficulty': hole.hole_difficulty,
            'par': hole.par,
            'winner': hole.winner_name,
            'skin_value': hole.skin_value,
            'lowest_net': hole.lowest_net,
        }
        for hole in result.hole_results
    ]
    df = pd.DataFrame(rows, columns=HOLE_COLUMNS)
    df[['par', 'lowest_net']] = df[['par', 'lowest_net']].astype('Int64')
    return df


def net_scores_frame(result) -> pd.DataFrame:
    """
    Long-format net scores: one row per (hole, player).

    Invalid gross scores show as <NA> in gross and net. is_lowest marks every
    player on the hole's lowest net, tied or not; won_skin only the outright
    winner.
    """
    half_handicaps = {p.name: p.half_handicap for p in result.players}
    rows = []
    for hole in result.hole_results:
        for score in hole.net_scores:
            is_lowest = score.is_valid and score.net == hole.lowest_net
            rows.append({
                'hole': hole.hole_number,
                'player': score.name,
                'half_handicap': half_handicaps[score.name],
                'gross': score.gross,
                'strokes': score.strokes,
                'net': score.net,
                'is_lowest': is_lowest,
                'won_skin': hole.skin_value == 1 and score.name == hole.winner_name,
            })

    df = pd.DataFrame(rows, columns=NET_SCORE_COLUMNS)
    df[['gross', 'net']] = df[['gross', 'net']].astype('Int64')
    return df


def summary_frame(result, include_zero=False) -> pd.DataFrame:
    """Skins per player in input order; players without a skin are dropped unless include_zero."""
    totals = result.summary.totals if include_zero else result.summary.winners()
    return pd.DataFrame(list(totals), columns=SUMMARY_COLUMNS)

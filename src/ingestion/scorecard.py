"""
Scorecard Ingestion

This module turns a raw scorecard table (as produced by a CSV reader) into
Player records for skins scoring. It also loads scorecard CSV files, either
an uploaded file or the default scorecard shipped under data/raw.

Usage:
    python -m src.ingestion.scorecard [path/to/scorecard.csv]
    OR
    python src/ingestion/scorecard.py [path/to/scorecard.csv]

    Programmatic usage:
        from src.ingestion.scorecard import load_scorecard_csv, extract_players
        players = extract_players(load_scorecard_csv(), score_policy="exclude")
"""

import sys
from pathlib import Path

# Add project root to path for direct script execution
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import io

import numpy as np
import pandas as pd

from src.config import (
    DEFAULT_SCORECARD,
    FIRST_SCORE_COLUMN,
    HANDICAP_COLUMN,
    INVALID_SCORE_POLICY,
    LAST_SCORE_COLUMN,
    MARKER_COLUMN,
    MAX_INPUT_SIZE,
    NO_WINNER,
    PARS_MARKER,
    PLAYER_NAME_COLUMN,
    RESERVED_ROW_LABELS,
)
from src.skins.models import InvalidScore, Player
from src.utils import (
    setup_logging,
    clean_cell,
    validate_input_size,
    validate_score_policy,
)

# --- Module Logger ---
logger = setup_logging(__name__)


class ScorecardError(Exception):
    """Base exception for scorecard input problems"""
    pass


class InputFormatError(ScorecardError):
    """The table cannot be read as a 9-hole scorecard"""
    pass


class ParseError(ScorecardError):
    """A gross score cell is not a whole number"""

    def __init__(self, player: str, hole_number: int, raw: str):
        self.player = player
        self.hole_number = hole_number
        self.raw = raw
        super().__init__(
            f"Invalid score for {player} on hole {hole_number}: {raw!r}"
        )


def _to_number(value) -> float:
    """Coerce a cell to float, NaN when it is blank or not numeric."""
    text = clean_cell(value)
    if not text:
        return np.nan
    return float(pd.to_numeric(text, errors="coerce"))


def parse_handicap(value) -> float:
    """
    Parse a handicap cell leniently.

    Blank, non-numeric and non-finite values become 0. Negative values are
    clamped to 0.
    """
    number = _to_number(value)
    if not np.isfinite(number):
        return 0.0
    return max(number, 0.0)


def parse_score(value):
    """
    Parse a gross score cell.

    Returns:
        int for a positive whole number (4, "4" and 4.0 all qualify),
        otherwise an InvalidScore holding the raw cell text
    """
    number = _to_number(value)
    if not np.isfinite(number) or not number.is_integer() or number < 1:
        return InvalidScore(clean_cell(value))
    return int(number)


def table_rows(table) -> list[list]:
    """Normalize a DataFrame or a sequence of row sequences into lists of cells."""
    if isinstance(table, pd.DataFrame):
        return table.astype(object).values.tolist()
    return [list(row) if row is not None else [] for row in table]


def is_player_row(row) -> bool:
    """
    A row names a player when its first cell is filled, is not a header
    label, and its marker cell does not flag the course pars row.
    """
    first = clean_cell(row[PLAYER_NAME_COLUMN]) if row else ""
    if not first or first in RESERVED_ROW_LABELS:
        return False
    marker = clean_cell(row[MARKER_COLUMN]) if len(row) > MARKER_COLUMN else ""
    return PARS_MARKER not in marker


def extract_players(table, score_policy: str = INVALID_SCORE_POLICY) -> list[Player]:
    """
    Extract Player records from a raw scorecard table.

    Args:
        table: DataFrame or sequence of rows of raw cell values
        score_policy: "fail" raises on the first invalid gross score,
            "exclude" keeps it as an InvalidScore

    Returns:
        Players in table order (empty if no row qualifies)

    Raises:
        InputFormatError: If a player row lacks score columns or a name repeats
        ParseError: If a score is invalid and score_policy is "fail"
        ValueError: If score_policy is unknown
    """
    validate_score_policy(score_policy)

    players = []
    seen = set()

    for row in table_rows(table):
        if not is_player_row(row):
            continue

        name = clean_cell(row[PLAYER_NAME_COLUMN])
        if len(row) < LAST_SCORE_COLUMN:
            raise InputFormatError(
                f"Row for {name} has {len(row)} columns; "
                f"expected hole scores in columns {FIRST_SCORE_COLUMN + 1}-{LAST_SCORE_COLUMN}"
            )
        if name in seen:
            raise InputFormatError(f"Duplicate player name: {name}")
        if name == NO_WINNER:
            raise InputFormatError(f"Player name {name!r} is reserved")
        seen.add(name)

        raw_handicap = row[HANDICAP_COLUMN] if len(row) > HANDICAP_COLUMN else None
        full_handicap = parse_handicap(raw_handicap)
        if full_handicap == 0 and clean_cell(raw_handicap) not in ("", "0"):
            logger.debug(f"Handicap {clean_cell(raw_handicap)!r} for {name} defaulted to 0")

        scores = []
        for offset, cell in enumerate(row[FIRST_SCORE_COLUMN:LAST_SCORE_COLUMN]):
            score = parse_score(cell)
            if isinstance(score, InvalidScore):
                if score_policy == "fail":
                    raise ParseError(name, offset + 1, score.raw)
                logger.warning(
                    f"Invalid score {score.raw!r} for {name} on hole {offset + 1}; "
                    f"excluded from that hole"
                )
            scores.append(score)

        players.append(Player(name=name, full_handicap=full_handicap, scores=tuple(scores)))

    logger.info(f"Extracted {len(players)} players from scorecard")
    return players


def extract_pars(table) -> tuple | None:
    """
    Read per-hole pars from the course metadata row, if the table has one.

    Unreadable par cells come back as None.
    """
    for row in table_rows(table):
        if len(row) <= MARKER_COLUMN or clean_cell(row[MARKER_COLUMN]) != PARS_MARKER:
            continue
        if len(row) < LAST_SCORE_COLUMN:
            return None
        pars = [parse_score(cell) for cell in row[FIRST_SCORE_COLUMN:LAST_SCORE_COLUMN]]
        return tuple(None if isinstance(p, InvalidScore) else p for p in pars)
    return None


def load_scorecard_csv(source=None) -> pd.DataFrame:
    """
    Load a headerless scorecard CSV into a DataFrame of raw cells.

    Args:
        source: Path, path string, or file-like object (e.g. an uploaded file).
            Defaults to DEFAULT_SCORECARD.

    Returns:
        DataFrame with integer column labels and object cells; blank lines
        are skipped and trailing empty columns dropped

    Raises:
        InputFormatError: If the file is missing, too large, or not CSV text
    """
    if source is None:
        source = DEFAULT_SCORECARD

    try:
        if hasattr(source, "read"):
            raw = source.read()
            text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw
        else:
            text = Path(source).read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise InputFormatError(f"Scorecard not found: {source}") from e
    except UnicodeDecodeError as e:
        raise InputFormatError(f"Scorecard is not UTF-8 text: {e}") from e

    try:
        validate_input_size(text, MAX_INPUT_SIZE)
    except ValueError as e:
        raise InputFormatError(str(e)) from e

    # Every field on a line is preceded by a comma except the first, so this
    # bounds the widest row; surplus columns are trimmed below
    width = max((line.count(",") for line in text.splitlines()), default=0) + 1

    try:
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            names=range(width),
            dtype=object,
            skip_blank_lines=True,
            keep_default_na=False,
            na_values=[""],
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise InputFormatError(f"Could not parse scorecard CSV: {e}") from e

    occupied = [col for col in df.columns if df[col].notna().any()]
    if not occupied:
        raise InputFormatError("Scorecard CSV is empty")
    df = df.loc[:, :occupied[-1]]

    logger.debug(f"Loaded scorecard with {len(df)} rows and {len(df.columns)} columns")
    return df


def main(csv_path: str | None = None):
    df = load_scorecard_csv(csv_path)
    players = extract_players(df, score_policy="exclude")
    for player in players:
        scores = " ".join(str(s) for s in player.scores)
        logger.info(f"  {player.name:<20} HDCP {player.full_handicap:>5g}  {scores}")
    return players


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)

"""
Central configuration for the Golf Skins Analyzer.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DATA_FOLDER = PROJECT_ROOT / "data"
ASSETS_FOLDER = DATA_FOLDER / "raw"

# Scorecard loaded when no file is uploaded
DEFAULT_SCORECARD = ASSETS_FOLDER / "round_scores.csv"

# --- Scorecard Layout ---
# Column indices are zero-based positions in the raw scorecard table
HOLES_IN_ROUND = 9
PLAYER_NAME_COLUMN = 0
MARKER_COLUMN = 2  # Holds "Pars" on the course metadata row
FIRST_SCORE_COLUMN = 3
LAST_SCORE_COLUMN = FIRST_SCORE_COLUMN + HOLES_IN_ROUND  # Exclusive
HANDICAP_COLUMN = 13

# First-cell labels that never name a player
RESERVED_ROW_LABELS = frozenset({"Player", "HDCP", "PAR"})
PARS_MARKER = "Pars"

# --- Course Profiles ---
# Hole difficulty rank per hole in play order (1 = hardest, 18 = easiest)
COURSE_PROFILES = {
    "st_peters": (4, 14, 16, 2, 18, 8, 6, 12, 10),
}
DEFAULT_COURSE = "st_peters"
MIN_HOLE_DIFFICULTY = 1
MAX_HOLE_DIFFICULTY = 18

# --- Skins Scoring ---
NO_WINNER = "No Winner"

# What to do with a gross score that is not a whole number:
# - "fail": reject the whole analysis before scoring starts
# - "exclude": leave that player out of the hole's comparison
INVALID_SCORE_POLICY = "fail"
ALLOWED_SCORE_POLICIES = frozenset({"fail", "exclude"})

# --- Input Validation ---
MAX_INPUT_SIZE = 1_000_000  # Maximum scorecard text size in bytes (~1MB)

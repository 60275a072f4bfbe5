"""
Data Ingestion

Modules:
- scorecard: Row extraction and CSV loading for 9-hole scorecards
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "extract_players":
        from src.ingestion.scorecard import extract_players
        return extract_players
    if name == "load_scorecard_csv":
        from src.ingestion.scorecard import load_scorecard_csv
        return load_scorecard_csv
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

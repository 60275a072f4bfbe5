"""
Skins Scoring

Modules:
- models: Player, hole and summary records
- engine: Stroke allocation, hole winners and skins totals
- reporting: DataFrame views of an analysis
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "run_skins_analysis":
        from src.skins.engine import run_skins_analysis
        return run_skins_analysis
    if name == "strokes_received":
        from src.skins.engine import strokes_received
        return strokes_received
    if name == "run_skins":
        from src.skins.engine import main
        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

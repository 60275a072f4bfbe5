"""
Data models for skins scoring.

All records are frozen so a round can be shared between callers without
defensive copies.
"""

from dataclasses import dataclass, field

from src.config import NO_WINNER


@dataclass(frozen=True)
class InvalidScore:
    """A gross score cell that could not be read as a whole number."""
    raw: str

    def __str__(self):
        return self.raw or "-"


@dataclass(frozen=True)
class Player:
    """One scorecard row: name, handicap and 9 gross scores in play order."""
    name: str
    full_handicap: float
    scores: tuple = ()  # int or InvalidScore per hole

    @property
    def half_handicap(self) -> float:
        return self.full_handicap / 2

    @property
    def has_invalid_scores(self) -> bool:
        return any(isinstance(s, InvalidScore) for s in self.scores)


@dataclass(frozen=True)
class NetScore:
    """A player's result on one hole. gross and net are None for an invalid score."""
    name: str
    gross: int | None
    strokes: int
    net: int | None

    @property
    def is_valid(self) -> bool:
        return self.net is not None


@dataclass(frozen=True)
class HoleResult:
    hole_number: int
    hole_difficulty: int
    winner_name: str
    skin_value: int
    net_scores: tuple = ()
    lowest_net: int | None = None
    par: int | None = None

    @property
    def has_winner(self) -> bool:
        return self.winner_name != NO_WINNER


@dataclass(frozen=True)
class SkinsSummary:
    """
    Skins won per player.

    totals keeps every player in input order, including those with zero
    skins; skins_by_hole lists (hole_number, winner) for each won hole.
    """
    totals: tuple = ()
    skins_by_hole: tuple = ()

    def as_dict(self) -> dict[str, int]:
        return dict(self.totals)

    def skins_for(self, name: str) -> int:
        return self.as_dict().get(name, 0)

    def winners(self) -> list[tuple[str, int]]:
        """Players with at least one skin, in input order."""
        return [(name, total) for name, total in self.totals if total > 0]

    @property
    def total_skins(self) -> int:
        return sum(total for _, total in self.totals)


@dataclass(frozen=True)
class AnalysisResult:
    players: tuple
    hole_results: tuple
    summary: SkinsSummary
    hole_difficulty: tuple = ()
    pars: tuple | None = field(default=None)

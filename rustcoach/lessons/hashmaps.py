"""Hash map lessons: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")
_DEFAULT_NEW_FRUIT = 5


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five fruits in all."""
    return {"banana": 2, "apple": 3, "mango": 4}


class Fruit(Enum):
    """Kinds of fruit for the cake basket."""

    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add five of every fruit kind missing from the basket, in place."""
    for fruit in Fruit:
        basket.setdefault(fruit, _DEFAULT_NEW_FRUIT)


@dataclass
class Team:
    """A team's name and its goal tallies."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add the goals of one match, keeping both tallies within a byte."""
        scored_total = self.goals_scored + scored
        conceded_total = self.goals_conceded + conceded
        if scored_total > _U8_MAX or conceded_total > _U8_MAX:
            raise OverflowError("attempt to add with overflow")
        self.goals_scored = scored_total
        self.goals_conceded = conceded_total


def _parse_goals(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    goals = int(text)
    if goals > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return goals


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.record(team_1_score, team_2_score)

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.record(team_2_score, team_1_score)
    return scores
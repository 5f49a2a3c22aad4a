"""
Disambiguation Policies

When a player query matches several distinct players ("James"), one of
the per-player summaries has to be returned. Each policy is a ranking
over candidate summaries; the first-ranked candidate wins. Results are
never blended across players.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

from core.settings import settings

if TYPE_CHECKING:
    from services.aggregation import PlayerSummary


class DisambiguationPolicy(ABC):
    """Ranks candidate player summaries; lower keys rank first."""

    name: ClassVar[str]

    @abstractmethod
    def rank_key(self, summary: "PlayerSummary") -> tuple:
        pass

    def pick(self, candidates: Sequence["PlayerSummary"]) -> "PlayerSummary":
        if not candidates:
            raise ValueError("pick() needs at least one candidate")
        return min(candidates, key=self.rank_key)


class MostGamesPlayed(DisambiguationPolicy):
    """The candidate with the most games; ties go to the lexicographically first name."""

    name = "most_games"

    def rank_key(self, summary: "PlayerSummary") -> tuple:
        return (-summary.games_played, summary.name)


class MostRecentActivity(DisambiguationPolicy):
    """The candidate who played most recently, then most games, then by name."""

    name = "most_recent"

    def rank_key(self, summary: "PlayerSummary") -> tuple:
        last = summary.last_game or date.min
        return (-last.toordinal(), -summary.games_played, summary.name)


POLICIES: dict[str, DisambiguationPolicy] = {
    policy.name: policy for policy in (MostGamesPlayed(), MostRecentActivity())
}


def get_policy(policy: Optional[str | DisambiguationPolicy] = None) -> DisambiguationPolicy:
    """
    Look up a policy by name, defaulting to the configured one.

    Raises:
        ValueError: unknown policy name
    """
    if isinstance(policy, DisambiguationPolicy):
        return policy
    key = policy or settings.player_disambiguation
    try:
        return POLICIES[key]
    except KeyError:
        raise ValueError(f"Unknown disambiguation policy: {key!r}") from None

"""Data model for who has already played whom."""

# Pairing Rounds
# Copyright (C) 2025  Pairing Rounds developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Set

from pairingrounds.constants import BYE
from pairingrounds.models.match import Match
from pairingrounds.type_hints import Participant, Slot


@dataclass
class PlayHistory:
    """
    Tracks previous opponents to prevent repeat matches.

    The relation is symmetric and only grows: recording a pairing adds each
    side to the other's opponent set, and nothing is ever removed. Byes are
    never recorded.

    Attributes
    ----------
    opponents : dict of Participant to set of Participant
        Adjacency sets keyed by participant.
    """

    opponents: Dict[Participant, Set[Participant]] = field(default_factory=dict)

    @classmethod
    def for_participants(cls, participants: Iterable[Participant]) -> "PlayHistory":
        """Create an empty history with an entry for every participant."""
        history = cls()
        for participant in participants:
            history.register(participant)
        return history

    def register(self, participant: Participant) -> None:
        """Make sure ``participant`` has an opponent set, possibly empty."""
        self.opponents.setdefault(participant, set())

    def add_pairing(self, player1: Slot, player2: Slot) -> None:
        """Record that two participants have played. Byes are ignored."""
        if player1 is BYE or player2 is BYE:
            return
        self.opponents.setdefault(player1, set()).add(player2)
        self.opponents.setdefault(player2, set()).add(player1)

    def record_matches(self, matches: Iterable[Match]) -> None:
        """Record every non-bye match of a completed round."""
        for match in matches:
            if not match.bye:
                self.add_pairing(match.player1, match.player2)

    def have_played(self, player1: Slot, player2: Slot) -> bool:
        """Check if two participants have previously played each other.

        Always False when either side is the bye: byes may repeat freely.
        """
        if player1 is BYE or player2 is BYE:
            return False
        return player2 in self.opponents.get(player1, ())

    def opponents_of(self, participant: Participant) -> FrozenSet[Participant]:
        return frozenset(self.opponents.get(participant, ()))

    @property
    def participants(self) -> List[Participant]:
        return list(self.opponents)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize play history to dictionary."""
        return {
            "opponents": {
                participant: sorted(opps, key=repr)
                for participant, opps in self.opponents.items()
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayHistory":
        """Deserialize play history from dictionary.

        Pairings are replayed through :meth:`add_pairing`, so a one-sided
        entry in ``data`` comes back symmetric.
        """
        history = cls()
        for participant, opps in data.get("opponents", {}).items():
            history.register(participant)
            for opponent in opps:
                history.add_pairing(participant, opponent)
        return history

"""Data model for a scheduled round."""

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
from typing import Any, Dict, List, Optional

from pairingrounds.models.match import Match
from pairingrounds.type_hints import Participant, Participants


@dataclass
class RoundData:
    """Container for all matches of a single round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    matches : list of Match
        Matches in the order the matcher produced them.
    """

    round_number: int
    matches: List[Match] = field(default_factory=list)

    @property
    def bye_match(self) -> Optional[Match]:
        """The match holding the bye, or None if every participant has an opponent."""
        for match in self.matches:
            if match.bye:
                return match
        return None

    @property
    def bye_participant(self) -> Optional[Participant]:
        bye_match = self.bye_match
        if bye_match is None:
            return None
        return bye_match.participants[0]

    @property
    def participants(self) -> Participants:
        """Every participant of the round, in match order."""
        return [p for match in self.matches for p in match.participants]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round": self.round_number,
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=data["round"],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
        )

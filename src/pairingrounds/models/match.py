"""Match data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from pairingrounds.constants import BYE
from pairingrounds.exceptions import InvalidMatchException
from pairingrounds.type_hints import Participant, Slot


@dataclass(frozen=True)
class Match:
    """A pairing of two entries for one round.

    Either slot may hold the bye marker, never both.

    Attributes
    ----------
    player1 : Participant or None
        First entry, in pool order.
    player2 : Participant or None
        Second entry, in pool order.
    """

    player1: Slot
    player2: Slot

    def __post_init__(self):
        if self.player1 is BYE and self.player2 is BYE:
            raise InvalidMatchException("a match cannot pair the bye with itself")
        if self.player1 == self.player2:
            raise InvalidMatchException(
                f"participant {self.player1!r} cannot be paired with itself"
            )

    @property
    def bye(self) -> bool:
        """True when one side of the match is the bye marker."""
        return self.player1 is BYE or self.player2 is BYE

    @property
    def participants(self) -> Tuple[Participant, ...]:
        """The real participants in the match, bye excluded."""
        return tuple(p for p in (self.player1, self.player2) if p is not BYE)

    def opponent_of(self, participant: Participant) -> Slot:
        """Return the other slot of the match.

        Raises
        ------
        ValueError
            If ``participant`` is not part of this match.
        """
        if participant == self.player1:
            return self.player2
        if participant == self.player2:
            return self.player1
        raise ValueError(f"{participant!r} is not in match {self!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "player1": self.player1,
            "player2": self.player2,
            "bye": self.bye,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary. The bye flag is derived, not read."""
        return cls(player1=data.get("player1"), player2=data.get("player2"))


#  LocalWords:  bye

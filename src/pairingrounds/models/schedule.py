"""Schedule data class."""

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
from typing import Any, Dict, Iterator, List

from pairingrounds.models.round_data import RoundData


@dataclass
class Schedule:
    """Ordered rounds produced by one schedule generation."""

    rounds: List[RoundData] = field(default_factory=list)

    def __iter__(self) -> Iterator[RoundData]:
        return iter(self.rounds)

    def __len__(self) -> int:
        return len(self.rounds)

    def __getitem__(self, index: int) -> RoundData:
        return self.rounds[index]

    def to_list(self) -> List[Dict[str, Any]]:
        """Serialize the schedule as a list of round dictionaries."""
        return [r.to_dict() for r in self.rounds]

    @classmethod
    def from_list(cls, data: List[Dict[str, Any]]) -> "Schedule":
        """Deserialize a schedule from a list of round dictionaries."""
        return cls(rounds=[RoundData.from_dict(r) for r in data])

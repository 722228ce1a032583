"""ScheduleConfig data class."""

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

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pairingrounds.constants import DEFAULT_PARTICIPANTS, DEFAULT_ROUNDS
from pairingrounds.exceptions import InvalidConfigurationException
from pairingrounds.type_hints import Participants


@dataclass
class ScheduleConfig:
    """Schedule generation settings.

    Attributes
    ----------
    participants : list
        Participant identifiers, in the order they were entered.
    num_rounds : int
        Number of rounds to generate.
    seed : int or None
        Seed for the shuffle, None for a fresh random order every run.
    group : str or None
        Group label used in the plain text heading.
    """

    participants: Participants = field(
        default_factory=lambda: list(DEFAULT_PARTICIPANTS)
    )
    num_rounds: int = DEFAULT_ROUNDS
    seed: Optional[int] = None
    group: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "participants": list(self.participants),
            "num_rounds": self.num_rounds,
            "seed": self.seed,
            "group": self.group,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleConfig":
        """Deserialize configuration from dictionary.

        Participant and round values are checked by the generator; the seed
        and group are only used here, so their types are checked now.

        Raises
        ------
        InvalidConfigurationException
            When ``data`` is not a mapping, ``participants`` is not a list,
            ``seed`` is not an integer or ``group`` is not a string.
        """
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"configuration must be a JSON object, got {type(data).__name__}"
            )
        participants = data.get("participants", list(DEFAULT_PARTICIPANTS))
        if not isinstance(participants, list):
            raise InvalidConfigurationException("'participants' must be a list")
        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise InvalidConfigurationException(
                f"'seed' must be an integer, got {seed!r}"
            )
        group = data.get("group")
        if group is not None and not isinstance(group, str):
            raise InvalidConfigurationException(
                f"'group' must be a string, got {group!r}"
            )
        return cls(
            participants=participants,
            num_rounds=data.get("num_rounds", DEFAULT_ROUNDS),
            seed=seed,
            group=group,
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ScheduleConfig":
        """Load configuration from a JSON file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise InvalidConfigurationException(
                f"cannot read configuration file {path}: {e}"
            ) from e
        except json.JSONDecodeError as e:
            raise InvalidConfigurationException(
                f"configuration file {path} is not valid JSON: {e}"
            ) from e
        return cls.from_dict(data)

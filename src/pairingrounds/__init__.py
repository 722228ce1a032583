"""Pairing Rounds: randomized multi-round pairings without repeat opponents.

Example:
    >>> from pairingrounds import generate_schedule
    >>> schedule = generate_schedule(["Alice", "Bob", "Carol"], 2, seed=7)
    >>> len(schedule)
    2
"""

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


from pairingrounds.constants import BYE
from pairingrounds.exceptions import (
    InvalidArgumentException,
    InvalidParticipantsException,
    InvalidPoolException,
    InvalidRoundCountException,
    PairingRoundsException,
)
from pairingrounds.models import Match, PlayHistory, RoundData, Schedule
from pairingrounds.pairing import ScheduleGenerator, generate_schedule, match_round

__version__ = "0.1.0"

__all__ = [
    "BYE",
    "Match",
    "PlayHistory",
    "RoundData",
    "Schedule",
    "ScheduleGenerator",
    "generate_schedule",
    "match_round",
    "PairingRoundsException",
    "InvalidArgumentException",
    "InvalidParticipantsException",
    "InvalidRoundCountException",
    "InvalidPoolException",
]

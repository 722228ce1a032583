"""Data models for schedules, rounds, matches and play history."""

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

from pairingrounds.models.match import Match
from pairingrounds.models.play_history import PlayHistory
from pairingrounds.models.round_data import RoundData
from pairingrounds.models.schedule import Schedule
from pairingrounds.models.schedule_config import ScheduleConfig

__all__ = [
    "Match",
    "PlayHistory",
    "RoundData",
    "Schedule",
    "ScheduleConfig",
]

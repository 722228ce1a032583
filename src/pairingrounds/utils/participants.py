"""Parsing of participant lists typed by a user."""

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

from typing import List

from pairingrounds.constants import PARTICIPANT_DELIMITER


def parse_participants(raw: str, delimiter: str = PARTICIPANT_DELIMITER) -> List[str]:
    """Split a delimited text field into participant names.

    Names are stripped and empty entries dropped, so ``"Ann, ,Bob,"`` gives
    ``["Ann", "Bob"]``. Duplicates are kept; the generator rejects them.
    """
    return [name.strip() for name in raw.split(delimiter) if name.strip()]

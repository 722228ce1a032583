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

# --- Constants ---

# Bye marker: occupies the empty slot of a match when a round has an odd
# number of participants. Never a valid participant.
BYE = None

# Defaults used by the command line runner
DEFAULT_ROUNDS = 3
DEFAULT_PARTICIPANTS = ("Alice", "Bob", "Carol", "Dave", "Eve")
PARTICIPANT_DELIMITER = ","

# Plain text export
BYE_LABEL = "BYE"
NAME_PREFIX = "@"
ROUND_SEPARATOR = "-----"
GROUP_HEADING = "{group} Group Pairings {date}"

# Output formats
FORMAT_JSON = "json"
FORMAT_TEXT = "text"
OUTPUT_FORMATS = (FORMAT_JSON, FORMAT_TEXT)

# Logging
LOG_DIR_ENV = "PAIRINGROUNDS_LOG_DIR"
LOG_LEVEL_ENV = "PAIRINGROUNDS_LOG_LEVEL"
LOG_FILE_NAME = "pairing-rounds.log"

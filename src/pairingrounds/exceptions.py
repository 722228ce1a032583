"""Exceptions for use in Pairing Rounds"""

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


# ========== Base Application Exception ==========


class PairingRoundsException(Exception):
    """Base exception for all Pairing Rounds errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every package-specific error with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(PairingRoundsException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPoolException(PairingException):
    """Raised when a round pool breaks the matcher's preconditions.

    An odd-length pool, a repeated entry or more than one bye all mean the
    caller forgot to prepare the pool; this is a bug, not a runtime condition.
    """

    pass


class InvalidMatchException(PairingException):
    """Raised when a match pairs two byes or a participant with itself."""

    pass


# ========== Schedule Exceptions ==========


class ScheduleException(PairingRoundsException):
    """Base exception for schedule generation errors."""

    pass


class InvalidArgumentException(ScheduleException):
    """Raised when schedule generation is called with invalid arguments."""

    pass


class InvalidParticipantsException(InvalidArgumentException):
    """Raised when participants is not a usable collection of identifiers."""

    pass


class InvalidRoundCountException(InvalidArgumentException):
    """Raised when the number of rounds is not a positive integer."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(PairingRoundsException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass

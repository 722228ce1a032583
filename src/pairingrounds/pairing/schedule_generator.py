"""Multi-round schedule generation.

This module drives the round matcher across a number of rounds: it shuffles
the participants before every round, pads odd rounds with the bye, and keeps
the play history up to date between rounds.
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

import random
from collections.abc import Collection, Mapping
from typing import Iterable, List, Optional

from pairingrounds.constants import BYE
from pairingrounds.exceptions import (
    InvalidParticipantsException,
    InvalidRoundCountException,
)
from pairingrounds.models import PlayHistory, RoundData, Schedule
from pairingrounds.pairing.round_matcher import match_round
from pairingrounds.type_hints import Participant, Participants, Slot
from pairingrounds.utils import setup_logger

logger = setup_logger(__name__)


def _check_participants(participants) -> Participants:
    """Validate participants and return them as a list in their given order.

    Raises:
        InvalidParticipantsException: If participants is not a collection, is
            empty, or holds the bye marker, an unhashable entry or a duplicate.
    """
    if isinstance(participants, (str, bytes, Mapping)) or not isinstance(
        participants, Collection
    ):
        raise InvalidParticipantsException(
            f"participants must be a collection of identifiers, got {type(participants).__name__}"
        )
    entries = list(participants)
    if not entries:
        raise InvalidParticipantsException("participants must not be empty")

    seen = set()
    for entry in entries:
        if entry is BYE:
            raise InvalidParticipantsException(
                "None is reserved for the bye and cannot be a participant"
            )
        try:
            hash(entry)
        except TypeError as e:
            raise InvalidParticipantsException(
                f"participant {entry!r} is not hashable"
            ) from e
        if entry in seen:
            raise InvalidParticipantsException(f"duplicate participant {entry!r}")
        seen.add(entry)
    return entries


def _check_rounds(rounds) -> int:
    """Validate the round count. bool is rejected even though it is an int."""
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise InvalidRoundCountException(
            f"rounds must be a positive integer, got {type(rounds).__name__} {rounds!r}"
        )
    if rounds < 1:
        raise InvalidRoundCountException(
            f"rounds must be a positive integer, got {rounds}"
        )
    return rounds


class ScheduleGenerator:
    """Generates randomized pairing schedules that avoid repeat opponents.

    This class is responsible for:
    - Validating participants and round count before any work is done
    - Shuffling the participants before every round
    - Padding odd rounds with the bye
    - Recording each round's pairings in a fresh play history per call

    Parameters
    ----------
    rng : random.Random, optional
        Source of randomness for the shuffles. A new unseeded generator is
        used when omitted.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        # History of the most recent generate() call
        self.last_history: Optional[PlayHistory] = None

    def shuffled_pool(self, participants: Iterable[Participant]) -> List[Slot]:
        """Return a uniformly shuffled copy of ``participants``, bye appended if odd."""
        pool: List[Slot] = list(participants)
        self.rng.shuffle(pool)
        if len(pool) % 2 == 1:
            pool.append(BYE)
        return pool

    def generate(self, participants, rounds) -> Schedule:
        """Generate ``rounds`` rounds of pairings for ``participants``.

        Parameters
        ----------
        participants : collection
            Distinct hashable participant identifiers.
        rounds : int
            Number of rounds, at least 1.

        Returns
        -------
        Schedule
            One RoundData per round, numbered from 1.

        Raises
        ------
        InvalidParticipantsException
            If participants is not a non-empty collection of distinct,
            hashable identifiers.
        InvalidRoundCountException
            If rounds is not a positive integer.
        """
        entries = _check_participants(participants)
        num_rounds = _check_rounds(rounds)

        logger.info(
            "Generating %s rounds for %s participants", num_rounds, len(entries)
        )

        history = PlayHistory.for_participants(entries)
        self.last_history = history
        schedule = Schedule()

        for round_number in range(1, num_rounds + 1):
            pool = self.shuffled_pool(entries)
            matches = match_round(pool, history)
            history.record_matches(matches)
            schedule.rounds.append(
                RoundData(round_number=round_number, matches=matches)
            )
            logger.debug("Round %s: %s matches", round_number, len(matches))

        return schedule


def generate_schedule(
    participants,
    rounds,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Schedule:
    """Generate a schedule with a throwaway :class:`ScheduleGenerator`.

    Args:
        participants: Distinct hashable participant identifiers
        rounds: Number of rounds to generate
        seed: Seed for a new random generator, for reproducible schedules
        rng: Random generator to use; takes precedence over ``seed``

    Returns:
        The generated schedule
    """
    if rng is None:
        rng = random.Random(seed) if seed is not None else random.Random()
    return ScheduleGenerator(rng).generate(participants, rounds)


#  LocalWords:  bye

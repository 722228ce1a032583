"""
Single Round Matcher

Pairs one round of entries so that nobody meets an opponent they have already
played. The search is exhaustive: if a repeat-free pairing of the whole pool
exists it is found. Only when none exists does the matcher fall back to a
greedy pass that accepts the fewest repeats it can find locally.

Both phases break ties by pool order (lowest index first), so the result is
fully determined by the pool order and the history. Any randomness has to come
from the caller shuffling the pool.

Example:
    >>> from pairingrounds.models import PlayHistory
    >>> history = PlayHistory()
    >>> history.add_pairing("A", "B")
    >>> [m.to_dict() for m in match_round(["A", "B", "C", "D"], history)]
    [{'player1': 'A', 'player2': 'C', 'bye': False}, {'player1': 'B', 'player2': 'D', 'bye': False}]
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

from typing import Iterable, List, Optional, Tuple

from pairingrounds.constants import BYE
from pairingrounds.exceptions import InvalidPoolException
from pairingrounds.models.match import Match
from pairingrounds.models.play_history import PlayHistory
from pairingrounds.type_hints import Pool, Positions
from pairingrounds.utils import setup_logger

logger = setup_logger(__name__)


def _check_pool(pool: Pool) -> None:
    """Raise InvalidPoolException unless the pool can be split into pairs."""
    if len(pool) % 2 != 0:
        raise InvalidPoolException(
            f"pool must have an even number of entries, got {len(pool)}; "
            "append the bye marker to odd pools before matching"
        )
    byes = sum(1 for entry in pool if entry is BYE)
    if byes > 1:
        raise InvalidPoolException(f"pool holds {byes} bye markers, at most 1 allowed")
    real = [entry for entry in pool if entry is not BYE]
    if len(set(real)) != len(real):
        raise InvalidPoolException("pool contains the same participant more than once")


def _search(
    pool: Pool, history: PlayHistory, remaining: Positions
) -> Optional[Tuple[Match, ...]]:
    """Depth-first search for a repeat-free pairing of ``remaining``.

    The first remaining position is paired with each later position in turn.
    Each attempt recurses on a fresh tuple of the positions still unpaired,
    so a failed branch leaves nothing behind to undo.

    Returns the matches for ``remaining`` in pairing order, or None if those
    positions cannot be paired without a repeat.
    """
    if not remaining:
        return ()

    first, rest = remaining[0], remaining[1:]
    player1 = pool[first]
    for candidate in rest:
        player2 = pool[candidate]
        if history.have_played(player1, player2):
            continue
        tail = _search(pool, history, tuple(p for p in rest if p != candidate))
        if tail is not None:
            return (Match(player1, player2),) + tail
    return None


def find_no_repeat_matching(pool: Pool, history: PlayHistory) -> Optional[List[Match]]:
    """Return a pairing of ``pool`` without repeat opponents, or None if none exists.

    Parameters
    ----------
    pool : sequence
        Even-length round entries; the bye marker may appear once.
    history : PlayHistory
        Opponents already met. Read only.

    Raises
    ------
    InvalidPoolException
        If the pool is odd-length or repeats an entry.
    """
    _check_pool(pool)
    matches = _search(pool, history, tuple(range(len(pool))))
    return list(matches) if matches is not None else None


def greedy_matching(pool: Pool, history: PlayHistory) -> List[Match]:
    """Pair ``pool`` in order, taking the first opponent not met before.

    Each entry, in pool order, takes the first remaining entry it has not
    played (the bye counts as never played); if it has played all of them it
    takes the first remaining entry and the repeat is accepted. A bye at the
    head of the queue takes the next entry directly.

    Raises
    ------
    InvalidPoolException
        If the pool is odd-length or repeats an entry.
    """
    _check_pool(pool)
    remaining = list(pool)
    matches = []

    while remaining:
        player1 = remaining.pop(0)
        if player1 is BYE:
            matches.append(Match(player1, remaining.pop(0)))
            continue

        # If everyone left has played player1 already, take the first one
        best_idx = 0
        for i, player2 in enumerate(remaining):
            if not history.have_played(player1, player2):
                best_idx = i
                break

        matches.append(Match(player1, remaining.pop(best_idx)))

    return matches


def count_repeats(matches: Iterable[Match], history: PlayHistory) -> int:
    """Count the matches that pair two participants who have met before."""
    return sum(
        1 for match in matches if history.have_played(match.player1, match.player2)
    )


def match_round(pool: Pool, history: PlayHistory) -> List[Match]:
    """Pair every entry of ``pool`` for one round.

    Tries the exhaustive repeat-free search first and falls back to
    :func:`greedy_matching` only when the search proves no such pairing
    exists. Total over every valid pool.

    Args:
        pool: Even-length round entries in their (already shuffled) order.
            Odd-sized rounds must have the bye marker appended by the caller.
        history: Opponents already met. Never modified.

    Returns:
        Matches covering every entry exactly once, in pairing order.

    Raises:
        InvalidPoolException: If the pool is odd-length, holds more than one
            bye or repeats a participant.
    """
    matches = find_no_repeat_matching(pool, history)
    if matches is not None:
        logger.debug("Paired %s entries without repeats", len(pool))
        return matches

    matches = greedy_matching(pool, history)
    logger.warning(
        "No repeat-free pairing exists for %s entries; greedy fallback accepted %s repeat(s)",
        len(pool),
        count_repeats(matches, history),
    )
    return matches


#  LocalWords:  bye

"""
Plain text printing utilities for generated schedules.
This module turns a schedule into the copy-and-paste listing shared with players.
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

from datetime import date as date_type
from typing import List, Optional

from pairingrounds.constants import (
    BYE_LABEL,
    GROUP_HEADING,
    NAME_PREFIX,
    ROUND_SEPARATOR,
)
from pairingrounds.models import Match, RoundData, Schedule


def ordinal_suffix(n: int) -> str:
    """Return the English ordinal suffix for ``n``.

    Examples:
        >>> [ordinal_suffix(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 101)]
        ['st', 'nd', 'rd', 'th', 'th', 'th', 'th', 'st', 'nd', 'st']
    """
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def format_date_heading(day: date_type) -> str:
    """Format a date as e.g. ``Monday 3rd January 2026``."""
    return (
        f"{day.strftime('%A')} {day.day}{ordinal_suffix(day.day)} "
        f"{day.strftime('%B')} {day.year}"
    )


def format_group_heading(group: str, day: Optional[date_type] = None) -> str:
    """Heading line for a group's pairings, dated today unless ``day`` is given."""
    if day is None:
        day = date_type.today()
    return GROUP_HEADING.format(group=group, date=format_date_heading(day))


def format_match(match: Match) -> str:
    """One line per match: ``@A vs @B`` or ``@A: BYE``."""
    if match.bye:
        return f"{NAME_PREFIX}{match.participants[0]}: {BYE_LABEL}"
    return f"{NAME_PREFIX}{match.player1} vs {NAME_PREFIX}{match.player2}"


def format_round(round_data: RoundData) -> List[str]:
    lines = [f"Round {round_data.round_number}"]
    lines.extend(format_match(m) for m in round_data.matches)
    lines.append(ROUND_SEPARATOR)
    return lines


def schedule_to_text(
    schedule: Schedule,
    group: Optional[str] = None,
    day: Optional[date_type] = None,
) -> str:
    """
    Render a schedule as plain text.

    Args:
        schedule: The schedule to render
        group: Group label; adds a dated heading line when given
        day: Date for the heading, today when omitted

    Returns:
        The listing, one line per round title, match and separator
    """
    lines = []
    if group is not None:
        lines.append(format_group_heading(group, day))
    for round_data in schedule:
        lines.extend(format_round(round_data))
    return "\n".join(lines)

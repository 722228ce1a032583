"""Type hints used in Pairing Rounds."""

from typing import Hashable, List, Optional, Sequence, Tuple

# Any hashable identifier: a name, a number, an id object
Participant = Hashable
# A match slot: a participant or the bye marker
Slot = Optional[Participant]
# Ordered entries for one round, possibly ending with the bye marker
Pool = Sequence[Slot]
# Indices into a pool that are still waiting for an opponent
Positions = Tuple[int, ...]
Participants = List[Participant]

#  LocalWords:  Hashable

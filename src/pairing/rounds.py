"""
Weekly pairing rounds.

Seats every participant around a rotating table and folds it in half: the
first seat faces the last, the second faces the second to last, and so on.
Seat 0 (the anchor) never moves while the others shift one place per round,
which walks through the classic circle method for an even list.

Odd lists get one sentinel seat. Whoever faces the sentinel is left out of
the fold and is paired with the anchor instead, so the anchor plays twice
that week. With avoid_repeats the extra partner is instead whoever has
played twice least often, so the double week moves around the table.
"""

from collections import Counter
from typing import List, Optional, Sequence, Set, Tuple

from src.pairing.errors import InvalidInput
from src.utils.constants import MAX_ROUNDS

Pair = Tuple[str, str]
Round = List[Pair]
Schedule = List[Round]

# Seats hold positions into the participant list; this one holds nobody.
_SENTINEL = -1


def pair_key(a, b) -> tuple:
    """Order-independent key for a pair, so (a, b) and (b, a) compare equal."""
    return (a, b) if a <= b else (b, a)


def fold(seats: List[int]) -> List[Tuple[int, int]]:
    """Pair seat i with seat (len - 1 - i) for the first half of the table."""
    last = len(seats) - 1
    return [(seats[i], seats[last - i]) for i in range(len(seats) // 2)]


def rotate(seats: List[int]) -> List[int]:
    """Keep the anchor seat and move the last seat up to position 1."""
    return [seats[0], seats[-1]] + seats[1:-1]


def _left_out(folded: List[Tuple[int, int]]) -> Optional[int]:
    for a, b in folded:
        if a == _SENTINEL:
            return b
        if b == _SENTINEL:
            return a
    return None


def _anchor_partner(seats: List[int], left_out: int) -> int:
    # The anchor can draw the sentinel itself; its neighbour steps in then.
    return seats[1] if left_out == seats[0] else seats[0]


def _folded_round(
    folded: List[Tuple[int, int]],
    seats: List[int],
    left_out: Optional[int]
) -> List[Tuple[int, int]]:
    pairs = [p for p in folded if _SENTINEL not in p]
    if left_out is not None:
        pairs.append((left_out, _anchor_partner(seats, left_out)))
    return pairs


def _unseen_round(
    folded: List[Tuple[int, int]],
    seats: List[int],
    left_out: Optional[int],
    seen: Set[tuple],
    repeats: Counter
) -> List[Tuple[int, int]]:
    """
    Build a round that prefers pairs not used in earlier rounds.

    Walks the fold order and gives each free seat the first free partner it
    has not met yet, or the first free partner when everyone left is a
    repeat. Fold pairs that are all new come out unchanged.

    The left-out seat partners with a seat it has not met yet if it can, and
    among those the one that has played twice least often.
    """
    order = [s for pair in folded for s in pair if s not in (_SENTINEL, left_out)]
    used: Set[int] = set()
    pairs = []

    for i, a in enumerate(order):
        if a in used:
            continue
        free = [b for b in order[i + 1:] if b not in used]
        partner = next((b for b in free if pair_key(a, b) not in seen), free[0])
        used.update((a, partner))
        pairs.append((a, partner))

    if left_out is not None:
        candidates = [s for s in seats if s not in (_SENTINEL, left_out)]
        fresh = [c for c in candidates if pair_key(left_out, c) not in seen]
        # min keeps rotation order on ties
        partner = min(fresh or candidates, key=lambda c: repeats[c])
        repeats[partner] += 1
        pairs.append((left_out, partner))

    return pairs


def generate_rounds(
    participants: Sequence[str],
    round_count: int,
    avoid_repeats: bool = False
) -> Schedule:
    """
    Generate weekly pairing rounds for a list of participants.

    Args:
        participants: Participant names; duplicates count as separate people
        round_count: Number of rounds wanted (capped at MAX_ROUNDS)
        avoid_repeats: Prefer pairs not seen in earlier rounds over the
            plain fold (default: False)

    Returns:
        List of rounds, each a list of (participant, participant) tuples

    Raises:
        InvalidInput: If fewer than 2 participants or round_count < 1
    """
    people = list(participants)

    if len(people) < 2:
        raise InvalidInput("Need at least 2 participants to form pairs")
    if isinstance(round_count, bool) or not isinstance(round_count, int):
        raise InvalidInput(f"Round count must be an integer, got {round_count!r}")
    if round_count < 1:
        raise InvalidInput(f"Round count must be at least 1, got {round_count}")

    seats = list(range(len(people)))
    if len(seats) % 2 == 1:
        seats.append(_SENTINEL)

    seen: Set[tuple] = set()
    repeats: Counter = Counter()
    schedule = []

    for _ in range(min(round_count, MAX_ROUNDS)):
        folded = fold(seats)
        left_out = _left_out(folded)

        if avoid_repeats:
            pairs = _unseen_round(folded, seats, left_out, seen, repeats)
            seen.update(pair_key(a, b) for a, b in pairs)
        else:
            pairs = _folded_round(folded, seats, left_out)

        schedule.append([(people[a], people[b]) for a, b in pairs])
        seats = rotate(seats)

    return schedule


def pairs_per_round(num_participants: int) -> int:
    """Number of pairs in each round (odd lists get one extra pair)."""
    return (num_participants + 1) // 2


def count_repeats(schedule: Schedule) -> int:
    """Count pairs that already appeared earlier in the schedule."""
    seen = set()
    repeats = 0
    for round_pairs in schedule:
        for a, b in round_pairs:
            key = pair_key(a, b)
            if key in seen:
                repeats += 1
            seen.add(key)
    return repeats

import logging
import random

import pytest

from pairingrounds.constants import BYE
from pairingrounds.exceptions import InvalidPoolException
from pairingrounds.models import PlayHistory
from pairingrounds.pairing import (
    count_repeats,
    find_no_repeat_matching,
    greedy_matching,
    match_round,
)


def _history(*pairs):
    history = PlayHistory()
    for a, b in pairs:
        history.add_pairing(a, b)
    return history


def _pairs(matches):
    return [(m.player1, m.player2) for m in matches]


def _all_matchings(items):
    """Every perfect matching of ``items``, brute force."""
    if not items:
        yield []
        return
    first, rest = items[0], items[1:]
    for i, other in enumerate(rest):
        for tail in _all_matchings(rest[:i] + rest[i + 1 :]):
            yield [(first, other)] + tail


def _repeat_free_matching_exists(pool, history):
    return any(
        all(not history.have_played(a, b) for a, b in matching)
        for matching in _all_matchings(list(pool))
    )


def _random_history(participants, density, rng):
    history = PlayHistory.for_participants(participants)
    for i, a in enumerate(participants):
        for b in participants[i + 1 :]:
            if rng.random() < density:
                history.add_pairing(a, b)
    return history


def _assert_covers(pool, matches):
    seen = [slot for m in matches for slot in (m.player1, m.player2)]
    assert sorted(seen, key=repr) == sorted(pool, key=repr)


def test_empty_history_pairs_in_pool_order():
    matches = match_round(["A", "B", "C", "D"], PlayHistory())

    assert _pairs(matches) == [("A", "B"), ("C", "D")]
    assert not any(m.bye for m in matches)


def test_avoids_previous_opponents():
    history = _history(("A", "B"), ("C", "D"))

    matches = match_round(["A", "B", "C", "D"], history)

    assert _pairs(matches) == [("A", "C"), ("B", "D")]
    assert count_repeats(matches, history) == 0


def test_backtracks_out_of_dead_end():
    # A-B looks fine but leaves C-D, who already met
    history = _history(("C", "D"))

    matches = match_round(["A", "B", "C", "D"], history)

    assert _pairs(matches) == [("A", "C"), ("B", "D")]


def test_bye_pairs_with_anyone():
    history = _history(("A", "B"))

    matches = match_round(["A", "B", "C", BYE], history)

    assert _pairs(matches) == [("A", "C"), ("B", BYE)]
    assert [m.bye for m in matches] == [False, True]


def test_single_participant_gets_the_bye():
    matches = match_round(["A", BYE], PlayHistory())

    assert _pairs(matches) == [("A", BYE)]
    assert matches[0].bye


def test_empty_pool_gives_no_matches():
    assert match_round([], PlayHistory()) == []


def test_fallback_when_one_participant_met_everyone():
    history = _history(("A", "B"), ("A", "C"), ("A", "D"))

    assert find_no_repeat_matching(["A", "B", "C", "D"], history) is None
    matches = match_round(["A", "B", "C", "D"], history)

    assert _pairs(matches) == [("A", "B"), ("C", "D")]
    assert count_repeats(matches, history) == 1


def test_fallback_when_everyone_met_everyone():
    pool = ["A", "B", "C", "D"]
    history = _history(*[(a, b) for i, a in enumerate(pool) for b in pool[i + 1 :]])

    matches = match_round(pool, history)

    assert _pairs(matches) == [("A", "B"), ("C", "D")]
    assert count_repeats(matches, history) == 2


def test_fallback_logs_warning(caplog):
    history = _history(("A", "B"), ("A", "C"), ("A", "D"))

    with caplog.at_level(logging.WARNING):
        match_round(["A", "B", "C", "D"], history)

    assert any("greedy fallback" in r.getMessage() for r in caplog.records)


def test_greedy_takes_first_unplayed_candidate():
    history = _history(("A", "B"))

    matches = greedy_matching(["A", "B", "C", "D", "E", "F"], history)

    assert _pairs(matches) == [("A", "C"), ("B", "D"), ("E", "F")]


def test_greedy_treats_bye_as_unplayed():
    history = _history(("A", "B"))

    matches = greedy_matching(["A", "B", BYE, "C"], history)

    assert _pairs(matches) == [("A", BYE), ("B", "C")]
    assert matches[0].bye


def test_greedy_bye_at_head_takes_next_entry():
    matches = greedy_matching([BYE, "A"], _history())

    assert _pairs(matches) == [(BYE, "A")]
    assert matches[0].bye


def test_greedy_accepts_repeat_when_forced():
    history = _history(("A", "B"), ("A", "C"), ("B", "C"), ("C", "D"))

    matches = greedy_matching(["A", "B", "C", "D"], history)

    # A has played B and C, so takes D; B and C are left and repeat
    assert _pairs(matches) == [("A", "D"), ("B", "C")]
    assert count_repeats(matches, history) == 1


@pytest.mark.parametrize(
    "pool",
    [
        ["A", "B", "C"],
        ["A", "B", "A", "C"],
        ["A", BYE, BYE, "B"],
    ],
)
def test_invalid_pool_is_rejected(pool):
    with pytest.raises(InvalidPoolException):
        match_round(pool, PlayHistory())


def test_matching_is_deterministic():
    rng = random.Random(5)
    pool = list(range(8))
    history = _random_history(pool, 0.5, rng)

    first = _pairs(match_round(pool, history))
    for _ in range(5):
        assert _pairs(match_round(pool, history)) == first


def test_history_is_not_modified():
    history = _history(("A", "B"), ("A", "C"), ("A", "D"))
    before = history.to_dict()

    match_round(["A", "B", "C", "D"], history)
    match_round(["D", "C", "B", "A"], history)

    assert history.to_dict() == before


@pytest.mark.parametrize("size", [4, 5, 6, 7, 8])
@pytest.mark.parametrize("density", [0.2, 0.4, 0.6, 0.8])
def test_finds_repeat_free_matching_whenever_one_exists(size, density):
    rng = random.Random(size * 100 + int(density * 10))
    participants = [f"P{i}" for i in range(size)]

    for _ in range(25):
        history = _random_history(participants, density, rng)
        pool = list(participants)
        rng.shuffle(pool)
        if len(pool) % 2:
            pool.append(BYE)

        matches = match_round(pool, history)

        _assert_covers(pool, matches)
        exists = _repeat_free_matching_exists(pool, history)
        assert (count_repeats(matches, history) == 0) == exists
        if not exists:
            assert _pairs(matches) == _pairs(greedy_matching(pool, history))

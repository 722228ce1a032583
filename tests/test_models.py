import json

import pytest

from pairingrounds.constants import BYE, DEFAULT_PARTICIPANTS, DEFAULT_ROUNDS
from pairingrounds.exceptions import (
    InvalidConfigurationException,
    InvalidMatchException,
)
from pairingrounds.models import (
    Match,
    PlayHistory,
    RoundData,
    Schedule,
    ScheduleConfig,
)


def _round(number, *pairs):
    return RoundData(round_number=number, matches=[Match(a, b) for a, b in pairs])


def test_match_bye_flag_is_derived():
    assert not Match("A", "B").bye
    assert Match("A", BYE).bye
    assert Match(BYE, "A").bye


def test_match_rejects_double_bye():
    with pytest.raises(InvalidMatchException):
        Match(BYE, BYE)


def test_match_rejects_self_pairing():
    with pytest.raises(InvalidMatchException):
        Match("A", "A")


def test_match_participants_and_opponents():
    match = Match("A", BYE)

    assert match.participants == ("A",)
    assert match.opponent_of("A") is BYE
    assert Match("A", "B").opponent_of("B") == "A"
    with pytest.raises(ValueError):
        match.opponent_of("Z")


def test_match_dict_shape():
    assert Match("A", BYE).to_dict() == {"player1": "A", "player2": None, "bye": True}
    # the stored flag is ignored, it is always derived from the slots
    assert Match.from_dict({"player1": "A", "player2": "B", "bye": True}) == Match(
        "A", "B"
    )


def test_round_data_bye_helpers():
    round_data = _round(2, ("A", "B"), ("C", BYE))

    assert round_data.bye_match == Match("C", BYE)
    assert round_data.bye_participant == "C"
    assert round_data.participants == ["A", "B", "C"]
    assert _round(1, ("A", "B")).bye_participant is None


def test_schedule_list_round_trip():
    schedule = Schedule(
        rounds=[
            _round(1, ("A", "B"), ("C", BYE)),
            _round(2, ("A", "C"), (BYE, "B")),
        ]
    )

    data = schedule.to_list()

    assert data[0] == {
        "round": 1,
        "matches": [
            {"player1": "A", "player2": "B", "bye": False},
            {"player1": "C", "player2": None, "bye": True},
        ],
    }
    assert Schedule.from_list(json.loads(json.dumps(data))) == schedule
    assert len(schedule) == 2
    assert [r.round_number for r in schedule] == [1, 2]


def test_history_records_both_directions():
    history = PlayHistory.for_participants(["A", "B", "C"])
    history.add_pairing("A", "B")

    assert history.have_played("A", "B")
    assert history.have_played("B", "A")
    assert not history.have_played("A", "C")
    assert history.opponents_of("C") == frozenset()
    assert history.participants == ["A", "B", "C"]


def test_history_ignores_byes():
    history = PlayHistory.for_participants(["A", "B", "C"])
    history.record_matches([Match("A", "B"), Match("C", BYE)])

    assert history.opponents_of("C") == frozenset()
    assert not history.have_played("C", BYE)
    assert not history.have_played(BYE, "C")
    assert BYE not in history.opponents


def test_history_unknown_participant_has_played_nobody():
    assert not PlayHistory().have_played("X", "Y")


def test_history_from_dict_is_symmetric():
    history = PlayHistory.from_dict({"opponents": {"A": ["B"], "C": []}})

    assert history.have_played("B", "A")
    assert history.opponents_of("C") == frozenset()
    assert PlayHistory.from_dict(history.to_dict()).opponents == history.opponents


def test_config_defaults():
    config = ScheduleConfig.from_dict({})

    assert config.participants == list(DEFAULT_PARTICIPANTS)
    assert config.num_rounds == DEFAULT_ROUNDS
    assert config.seed is None
    assert config.group is None


def test_config_load(tmp_path):
    path = tmp_path / "group.json"
    config = ScheduleConfig(participants=["A", "B"], num_rounds=4, seed=9, group="Seed")
    path.write_text(json.dumps(config.to_dict()), encoding="utf-8")

    assert ScheduleConfig.load(path) == config


@pytest.mark.parametrize(
    "data",
    [
        [],
        "participants",
        {"participants": "A,B"},
    ],
)
def test_config_rejects_bad_shape(data):
    with pytest.raises(InvalidConfigurationException):
        ScheduleConfig.from_dict(data)


def test_config_load_errors(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidConfigurationException):
        ScheduleConfig.load(broken)
    with pytest.raises(InvalidConfigurationException):
        ScheduleConfig.load(tmp_path / "missing.json")


@pytest.mark.parametrize("seed", [[1], {"a": 1}, "7", 1.5, True])
def test_config_rejects_non_integer_seed(seed):
    with pytest.raises(InvalidConfigurationException):
        ScheduleConfig.from_dict({"participants": ["A", "B"], "seed": seed})


def test_config_rejects_non_string_group():
    with pytest.raises(InvalidConfigurationException):
        ScheduleConfig.from_dict({"group": ["Seed"]})


def test_config_accepts_integer_seed():
    assert ScheduleConfig.from_dict({"seed": 0}).seed == 0

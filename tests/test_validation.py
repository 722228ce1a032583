from pairingrounds.constants import BYE
from pairingrounds.models import Match, RoundData, Schedule
from pairingrounds.pairing import generate_schedule
from pairingrounds.validation import CriterionStatus, create_schedule_validator


def _schedule(*rounds):
    return Schedule(
        rounds=[
            RoundData(round_number=i, matches=[Match(a, b) for a, b in pairs])
            for i, pairs in enumerate(rounds, start=1)
        ]
    )


def _violated(report):
    return {v.criterion for v in report.violations}


def test_generated_schedule_is_valid():
    participants = ["A", "B", "C", "D", "E"]
    schedule = generate_schedule(participants, 4, seed=17)

    report = create_schedule_validator(participants).validate_schedule(
        schedule, expected_rounds=4
    )

    assert report.is_valid
    assert report.compliance_percentage == 100.0


def test_missing_and_unknown_participants():
    schedule = _schedule([("A", "B"), ("C", "Z")])

    report = create_schedule_validator(["A", "B", "C", "D"]).validate_schedule(schedule)

    assert _violated(report) == {"coverage"}
    details = report.violations[0].details
    assert details["missing"] == ["D"]
    assert details["unknown"] == ["Z"]


def test_participant_in_two_matches():
    schedule = _schedule([("A", "B"), ("A", "C"), ("D", BYE)])

    report = create_schedule_validator(["A", "B", "C", "D"]).validate_schedule(schedule)

    assert "coverage" in _violated(report)
    assert report.violations[0].details["duplicated"] == ["A"]


def test_bye_only_in_odd_rounds():
    even = create_schedule_validator(["A", "B", "C", "D"])
    odd = create_schedule_validator(["A", "B", "C"])

    with_bye = even.validate_schedule(_schedule([("A", BYE), ("B", BYE), ("C", "D")]))
    without_bye = odd.validate_schedule(_schedule([("A", "B")]))

    assert "bye" in _violated(with_bye)
    assert "bye" in _violated(without_bye)


def test_round_numbering_and_count():
    schedule = Schedule(
        rounds=[
            RoundData(round_number=1, matches=[Match("A", "B")]),
            RoundData(round_number=3, matches=[Match("A", "B")]),
        ]
    )

    report = create_schedule_validator(["A", "B"]).validate_schedule(
        schedule, expected_rounds=3
    )

    assert _violated(report) == {"numbering", "round_count"}


def test_repeats_are_warnings_not_violations():
    schedule = _schedule([("A", "B")], [("B", "A")])

    report = create_schedule_validator(["A", "B"]).validate_schedule(schedule)

    assert report.is_valid
    assert [w.round_number for w in report.warnings] == [2]
    assert report.warnings[0].status == CriterionStatus.WARNING
    assert "1 warning(s)" in report.summary

from fitplan.training.enums import IssueType, MuscleGroup, RedistributionStrategy
from fitplan.training.models import GeneratedExercise, ValidationIssue, WorkoutDay
from fitplan.training.repair.redistribute import redistribute_until_valid, redistribute_workouts, repair_week
from fitplan.training.validate import check_muscle_overlap


def _day(name, layout, focus_area="Full Body"):
    exercises = [
        GeneratedExercise(
            id=f"{name}_{i}",
            catalog_id=muscle.value,
            name=muscle.value,
            target_muscle=muscle,
            sets=sets,
            reps="8-12",
            rest_time=60,
            compound=True,
        )
        for i, (muscle, sets) in enumerate(layout)
    ]
    return WorkoutDay(id=name, name=name, exercises=exercises, estimated_time=0, focus_area=focus_area)


def _sets(week):
    return [[ex.sets for ex in day.exercises] for day in week]


def _recovery(muscle, days):
    return ValidationIssue(type=IssueType.RECOVERY, message="too close", muscle=muscle, days=days)


def test_flagged_muscle_loses_a_set_on_flagged_days():
    week = [
        _day("a", [(MuscleGroup.LEGS, 4), (MuscleGroup.CHEST, 4)]),
        _day("b", [(MuscleGroup.LEGS, 4), (MuscleGroup.CHEST, 4)]),
        _day("c", [(MuscleGroup.LEGS, 4), (MuscleGroup.CHEST, 4)]),
    ]

    repaired = redistribute_workouts(week, [_recovery("legs", [1, 3])], [1, 3, 5])

    assert _sets(repaired) == [[3, 4], [3, 4], [4, 4]]
    assert repaired[2] is week[2]


def test_issues_match_by_weekday_not_position():
    week = [_day("a", [(MuscleGroup.LEGS, 4)]), _day("b", [(MuscleGroup.LEGS, 4)])]

    # Issue names weekday 1, which is position 0 here
    repaired = redistribute_workouts(week, [_recovery("legs", [1])], [1, 4])

    assert _sets(repaired) == [[3], [4]]


def test_sets_never_drop_below_minimum():
    week = [_day("a", [(MuscleGroup.LEGS, 2)])]
    repaired = redistribute_workouts(week, [_recovery("legs", [1])], [1])
    assert _sets(repaired) == [[2]]


def test_one_reduction_per_day_even_with_repeated_issues():
    week = [_day("a", [(MuscleGroup.LEGS, 5)]), _day("b", [(MuscleGroup.LEGS, 5)]), _day("c", [(MuscleGroup.LEGS, 5)])]
    issues = [_recovery("legs", [1, 3]), _recovery("legs", [3, 5])]

    repaired = redistribute_workouts(week, issues, [1, 3, 5])

    assert _sets(repaired) == [[4], [4], [4]]


def test_volume_issue_names_focus_area_and_changes_nothing():
    week = [_day("a", [(MuscleGroup.CHEST, 6)] * 6, focus_area="Push")]
    issue = ValidationIssue(type=IssueType.VOLUME, message="too much", muscle="Push", days=[1])

    repaired = redistribute_workouts(week, [issue], [1])

    assert _sets(repaired) == _sets(week)


def test_repair_week_returns_valid_week_untouched():
    week = [_day("a", [(MuscleGroup.CHEST, 3)])]
    validation = check_muscle_overlap(week, [1])

    assert repair_week(week, validation, [1]) is week


def test_single_pass_does_not_revalidate():
    week = [_day("a", [(MuscleGroup.LEGS, 4)]), _day("b", [(MuscleGroup.LEGS, 4)])]
    validation = check_muscle_overlap(week, [1, 2])

    repaired = repair_week(week, validation, [1, 2], RedistributionStrategy.SINGLE_PASS)

    assert _sets(repaired) == [[3], [3]]
    assert not check_muscle_overlap(repaired, [1, 2]).is_valid


def test_iterative_stops_at_fixed_point():
    week = [_day("a", [(MuscleGroup.LEGS, 4)]), _day("b", [(MuscleGroup.LEGS, 4)])]
    validation = check_muscle_overlap(week, [1, 2])

    repaired, final = redistribute_until_valid(week, validation, [1, 2], max_iterations=10)

    assert _sets(repaired) == [[2], [2]]
    assert not final.is_valid


def test_iterative_respects_iteration_cap():
    week = [_day("a", [(MuscleGroup.LEGS, 6)]), _day("b", [(MuscleGroup.LEGS, 6)])]
    validation = check_muscle_overlap(week, [1, 2])

    repaired = repair_week(week, validation, [1, 2], RedistributionStrategy.ITERATIVE, max_iterations=2)

    assert _sets(repaired) == [[4], [4]]



def test_repair_week_uses_configured_strategy(monkeypatch):
    monkeypatch.setattr("fitplan.training.repair.redistribute.settings.redistribution_strategy", RedistributionStrategy.ITERATIVE)
    week = [_day("a", [(MuscleGroup.LEGS, 5)]), _day("b", [(MuscleGroup.LEGS, 5)])]
    validation = check_muscle_overlap(week, [1, 2])

    repaired = repair_week(week, validation, [1, 2], max_iterations=10)

    assert _sets(repaired) == [[2], [2]]

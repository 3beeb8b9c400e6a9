from fitplan.training.enums import ExperienceLevel, MuscleGroup, TrainingGoal
from fitplan.training.goal_adjustment import adjust_for_goal, shift_rep_range
from fitplan.training.models import GeneratedExercise, WorkoutDay


def _day():
    return WorkoutDay(
        id="d",
        name="Full Body 1",
        exercises=[
            GeneratedExercise(
                id="squat_0_0",
                catalog_id="squat",
                name="Squat",
                target_muscle=MuscleGroup.LEGS,
                sets=4,
                reps="8-12",
                rest_time=100,
                compound=True,
            ),
            GeneratedExercise(
                id="leg_curl_0_1",
                catalog_id="leg_curl",
                name="Leg Curl",
                target_muscle=MuscleGroup.LEGS,
                sets=5,
                reps="8-12",
                rest_time=40,
                compound=False,
            ),
        ],
        estimated_time=0,
        focus_area="Full Body",
    )


def _summary(day):
    return [(ex.sets, ex.reps, ex.rest_time) for ex in day.exercises]


def test_shift_rep_range():
    assert shift_rep_range("8-12", 4) == "12-16"
    assert shift_rep_range("10", 1) == "11"


def test_strength_emphasizes_compound_work():
    adjusted = adjust_for_goal(_day(), TrainingGoal.STRENGTH, ExperienceLevel.INTERMEDIATE)
    assert _summary(adjusted) == [(5, "8-12", 120), (5, "8-12", 40)]


def test_strength_set_ceiling_for_untrained():
    # Session ceiling 120 -> at most 12 sets, so +1 is not capped here
    adjusted = adjust_for_goal(_day(), TrainingGoal.STRENGTH, ExperienceLevel.NONE)
    assert adjusted.exercises[0].sets == 5


def test_hypertrophy_balances_volume():
    adjusted = adjust_for_goal(_day(), TrainingGoal.HYPERTROPHY, ExperienceLevel.ADVANCED)
    assert _summary(adjusted) == [(4, "8-12", 60), (4, "8-12", 60)]


def test_endurance_increases_density():
    adjusted = adjust_for_goal(_day(), TrainingGoal.ENDURANCE, ExperienceLevel.BEGINNER)
    assert _summary(adjusted) == [(3, "12-16", 70), (4, "12-16", 30)]


def test_weight_loss_flat_prescription():
    adjusted = adjust_for_goal(_day(), TrainingGoal.WEIGHT_LOSS, ExperienceLevel.BEGINNER)
    assert _summary(adjusted) == [(3, "12-15", 80), (3, "12-15", 32)]


def test_general_fitness_is_unchanged():
    day = _day()
    assert adjust_for_goal(day, TrainingGoal.GENERAL_FITNESS, ExperienceLevel.BEGINNER) is day


def test_adjustment_does_not_mutate_input():
    day = _day()
    adjust_for_goal(day, TrainingGoal.WEIGHT_LOSS, ExperienceLevel.BEGINNER)
    assert _summary(day) == [(4, "8-12", 100), (5, "8-12", 40)]

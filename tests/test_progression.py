import os
import sys
import math
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from workout_app.defaults import DAY_TYPES, GOALS
from workout_app.progression import (
    clamp,
    compute_target_weight_lb,
    estimate_1rm_from_5rm,
    find_last_lift_performance,
    progression_bump,
    round_to_2_5,
    training_max,
)


def make_profile(goal="Hypertrophy", **five_rm):
    lifts = {"bench": 225, "squat": 275, "deadlift": 315, "ohp": 135, "row": 185}
    lifts.update(five_rm)
    return {
        "name": "Test",
        "gender": "Male",
        "height_in": 70,
        "weight_lb": 180,
        "goal": goal,
        "five_rm": lifts,
    }


def make_session(day_type="Push", difficulty=3, energy=3, workout=None, logs=None):
    return {
        "id": f"sess_{day_type}",
        "date": "2026-10-01T10:00:00",
        "day_type": day_type,
        "muscle_groups": [],
        "energy": energy,
        "difficulty": difficulty,
        "workout": workout or [],
        "logs": logs or [],
    }


def bench(target, ex_id="ex_bench"):
    return {"id": ex_id, "name": "Barbell Bench Press", "primary": "bench",
            "muscle_groups": ["Chest"], "sets": 4, "reps": "6-10", "target_weight_lb": target}


class OneRepMaxTestCase(unittest.TestCase):
    def test_estimate_1rm(self) -> None:
        self.assertAlmostEqual(estimate_1rm_from_5rm(225), 262.5)
        self.assertEqual(estimate_1rm_from_5rm(0), 0)
        for w in range(0, 600, 15):
            self.assertAlmostEqual(estimate_1rm_from_5rm(w), w * 7 / 6)

    def test_estimate_1rm_monotonic(self) -> None:
        values = [estimate_1rm_from_5rm(w / 2) for w in range(0, 1000)]
        self.assertEqual(values, sorted(values))

    def test_training_max(self) -> None:
        self.assertAlmostEqual(training_max(262.5), 236.25)
        self.assertAlmostEqual(training_max(100), 90)
        self.assertEqual(training_max(0), 0)


class HelperTestCase(unittest.TestCase):
    def test_round_to_2_5(self) -> None:
        self.assertEqual(round_to_2_5(165.375), 165)
        self.assertEqual(round_to_2_5(166.25), 167.5)
        self.assertEqual(round_to_2_5(1.25), 2.5)
        self.assertEqual(round_to_2_5(1.2), 0)
        self.assertEqual(round_to_2_5(0), 0)

    def test_clamp(self) -> None:
        self.assertEqual(clamp(5, 1, 10), 5)
        self.assertEqual(clamp(-3, 1, 10), 1)
        self.assertEqual(clamp(12, 1, 10), 10)
        self.assertTrue(math.isnan(clamp(float("nan"), 1, 5)))

    def test_progression_bump_rules(self) -> None:
        self.assertEqual(progression_bump(2, 4), 5)
        self.assertEqual(progression_bump(1, 5), 5)
        self.assertEqual(progression_bump(3, 1), 2.5)
        self.assertEqual(progression_bump(4, 5), -5)
        self.assertEqual(progression_bump(5, 3), -5)
        self.assertEqual(progression_bump(1, 2), -5)

    def test_progression_bump_unmatched_ratings(self) -> None:
        self.assertEqual(progression_bump(2, 3), 0)
        self.assertEqual(progression_bump(1, 3), 0)
        self.assertEqual(progression_bump(float("nan"), float("nan")), 0)


class LastPerformanceTestCase(unittest.TestCase):
    def test_no_history(self) -> None:
        self.assertIsNone(find_last_lift_performance([], "bench"))

    def test_most_recent_first(self) -> None:
        newer = make_session(workout=[bench(180, "ex_new")])
        older = make_session(workout=[bench(170, "ex_old")])
        last = find_last_lift_performance([newer, older], "bench")
        self.assertIs(last["session"], newer)
        self.assertEqual(last["exercise"]["target_weight_lb"], 180)
        self.assertIsNone(last["log"])

    def test_skips_exercises_without_target(self) -> None:
        untargeted = make_session(workout=[bench(None, "ex_a"), bench(0, "ex_b")])
        targeted = make_session(workout=[bench(150, "ex_c")],
                                logs=[{"exercise_id": "ex_c", "actual_weight_lb": 150, "rpe": 8}])
        last = find_last_lift_performance([untargeted, targeted], "bench")
        self.assertIs(last["session"], targeted)
        self.assertEqual(last["log"]["rpe"], 8)

    def test_other_lifts_ignored(self) -> None:
        sess = make_session(workout=[bench(150)])
        self.assertIsNone(find_last_lift_performance([sess], "squat"))


class TargetWeightTestCase(unittest.TestCase):
    def test_hypertrophy_push_empty_history(self) -> None:
        self.assertEqual(compute_target_weight_lb(make_profile(), [], "bench", "Push"), 165)

    def test_goal_intensity(self) -> None:
        self.assertEqual(compute_target_weight_lb(make_profile("Strength"), [], "bench", "Push"), 190)
        self.assertEqual(compute_target_weight_lb(make_profile("Health"), [], "bench", "Push"), 152.5)

    def test_unknown_goal_uses_hypertrophy(self) -> None:
        self.assertEqual(compute_target_weight_lb(make_profile("Yoga"), [], "bench", "Push"), 165)

    def test_full_day_reduces_intensity(self) -> None:
        self.assertEqual(compute_target_weight_lb(make_profile(), [], "bench", "Full"), 152.5)

    def test_progression_easy_session(self) -> None:
        history = [make_session(difficulty=2, energy=4, workout=[bench(175)])]
        self.assertEqual(compute_target_weight_lb(make_profile(), history, "bench", "Push"), 180)

    def test_progression_moderate_session(self) -> None:
        history = [make_session(difficulty=3, energy=4, workout=[bench(175)])]
        self.assertEqual(compute_target_weight_lb(make_profile(), history, "bench", "Push"), 177.5)

    def test_progression_hard_session(self) -> None:
        history = [make_session(difficulty=4, energy=4, workout=[bench(175)])]
        self.assertEqual(compute_target_weight_lb(make_profile(), history, "bench", "Push"), 170)

    def test_progression_unmatched_ratings_keep_weight(self) -> None:
        history = [make_session(difficulty=2, energy=3, workout=[bench(175)])]
        self.assertEqual(compute_target_weight_lb(make_profile(), history, "bench", "Push"), 175)

    def test_progression_missing_ratings_keep_weight(self) -> None:
        sess = make_session(workout=[bench(175)])
        del sess["difficulty"]
        del sess["energy"]
        self.assertEqual(compute_target_weight_lb(make_profile(), [sess], "bench", "Push"), 175)

    def test_clamped_to_training_max_band(self) -> None:
        # training max 236.25: band is [129.9375, 212.625]
        heavy = [make_session(difficulty=1, energy=5, workout=[bench(250)])]
        self.assertEqual(compute_target_weight_lb(make_profile(), heavy, "bench", "Push"), 212.5)
        light = [make_session(difficulty=5, energy=1, workout=[bench(100)])]
        self.assertEqual(compute_target_weight_lb(make_profile(), light, "bench", "Push"), 130)

    def test_zero_missing_or_nan_five_rm(self) -> None:
        self.assertEqual(compute_target_weight_lb(make_profile(bench=0), [], "bench", "Push"), 0)
        self.assertEqual(compute_target_weight_lb(make_profile(bench=float("nan")), [], "bench", "Push"), 0)
        profile = make_profile()
        del profile["five_rm"]["bench"]
        self.assertEqual(compute_target_weight_lb(profile, [], "bench", "Push"), 0)
        history = [make_session(difficulty=1, energy=5, workout=[bench(175)])]
        self.assertEqual(compute_target_weight_lb(make_profile(bench=0), history, "bench", "Push"), 0)

    def test_negative_five_rm_counts_as_zero(self) -> None:
        profile = {"goal": "Hypertrophy", "five_rm": {"bench": -100}}
        self.assertEqual(compute_target_weight_lb(profile, [], "bench", "Push"), 0)
        history = [make_session(difficulty=1, energy=5, workout=[bench(175)])]
        self.assertEqual(compute_target_weight_lb(profile, history, "bench", "Push"), 0)

    def test_rounding_never_exceeds_cap(self) -> None:
        # training max 105, cap 94.5: nearest increment would be 95
        history = [make_session(difficulty=3, workout=[bench(100)])]
        target = compute_target_weight_lb(make_profile(bench=100), history, "bench", "Push")
        self.assertEqual(target, 92.5)

    def test_target_is_multiple_of_2_5_and_bounded(self) -> None:
        for goal in GOALS:
            for day_type in DAY_TYPES:
                for five_rm in range(0, 505, 7):
                    profile = make_profile(goal, bench=five_rm)
                    t_max = training_max(estimate_1rm_from_5rm(five_rm))
                    for last in (None, 45, 135, 400):
                        history = [make_session(workout=[bench(last)])] if last else []
                        target = compute_target_weight_lb(profile, history, "bench", day_type)
                        self.assertTrue((target / 2.5).is_integer(), target)
                        self.assertGreaterEqual(target, 0)
                        self.assertLessEqual(target, t_max * 0.9)


if __name__ == "__main__":
    unittest.main()

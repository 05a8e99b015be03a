import math

from .defaults import (
    GOAL_INTENSITY,
    FULL_DAY_ADJUST,
    TARGET_MIN_PCT,
    TARGET_MAX_PCT,
)


def estimate_1rm_from_5rm(five_rm: float) -> float:
    # Epley with reps=5: w * (1 + 5/30)
    return five_rm * (1 + 5 / 30)


def training_max(one_rm: float) -> float:
    return one_rm * 0.9


def round_to_2_5(x: float) -> float:
    """Round to the nearest 2.5 lb, halves going up."""
    return math.floor(x / 2.5 + 0.5) * 2.5


def clamp(n, low, high):
    if isinstance(n, float) and math.isnan(n):
        return n
    return max(low, min(high, n))


def _five_rm_for(profile: dict, lift: str) -> float:
    value = (profile.get("five_rm") or {}).get(lift)
    if not value or (isinstance(value, float) and math.isnan(value)) or value < 0:
        return 0
    return value


def _rating(value):
    # unset ratings match no progression rule
    return float("nan") if value is None else value


def find_last_lift_performance(history: list, lift: str):
    """
    Return the most recent prescription of `lift` that carries a target weight.

    History is most recent first. The result is a dict with the matching
    `session`, `exercise` and its `log` (None when nothing was logged), or
    None if the lift has never been prescribed with a target.
    """
    for sess in history:
        for ex in sess.get("workout") or []:
            if ex.get("primary") == lift and ex.get("target_weight_lb"):
                log = next(
                    (l for l in sess.get("logs") or [] if l.get("exercise_id") == ex.get("id")),
                    None,
                )
                return {"session": sess, "exercise": ex, "log": log}
    return None


def progression_bump(difficulty, energy) -> float:
    """
    Weight change after a session rated `difficulty`/`energy`.

    Ratings that match none of the rules (e.g. difficulty 2 with energy 3)
    leave the weight unchanged.
    """
    if difficulty <= 2 and energy >= 4:
        return 5
    if difficulty == 3:
        return 2.5
    if difficulty >= 4 or energy <= 2:
        return -5
    return 0


def compute_target_weight_lb(profile: dict, history: list, lift: str, day_type: str) -> float:
    """
    Suggested working weight for `lift` on a `day_type` session.

    The result is a multiple of 2.5 inside [0, 0.9 * training max]. When
    rounding to the nearest 2.5 would land above the cap, it steps down
    one increment instead.
    """
    t_max = training_max(estimate_1rm_from_5rm(_five_rm_for(profile, lift)))

    base_pct = GOAL_INTENSITY.get(profile.get("goal"), GOAL_INTENSITY["Hypertrophy"])
    day_adjust = FULL_DAY_ADJUST if day_type == "Full" else 0
    target = t_max * (base_pct + day_adjust)

    last = find_last_lift_performance(history, lift)
    if last is not None:
        sess = last["session"]
        bump = progression_bump(_rating(sess.get("difficulty")), _rating(sess.get("energy")))
        target = last["exercise"]["target_weight_lb"] + bump

    cap = t_max * TARGET_MAX_PCT
    target = round_to_2_5(clamp(target, t_max * TARGET_MIN_PCT, cap))
    if target > cap:
        target -= 2.5
    return target

LIFTS = ["bench", "squat", "deadlift", "ohp", "row"]

LIFT_LABELS = {
    "bench": "Bench",
    "squat": "Squat",
    "deadlift": "Deadlift",
    "ohp": "Overhead Press",
    "row": "Row",
}

DAY_TYPES = ["Push", "Pull", "Legs", "Full"]

GOALS = ["Hypertrophy", "Strength", "Health"]

STORAGE_KEY = "workout_mvp_v1"

HISTORY_LIMIT = 10

# Day types looked at when picking the next one
RECENT_WINDOW = 4

# Fraction of training max prescribed per goal
GOAL_INTENSITY = {
    "Strength": 0.80,
    "Health": 0.65,
    "Hypertrophy": 0.70,
}

FULL_DAY_ADJUST = -0.05

TARGET_MIN_PCT = 0.55
TARGET_MAX_PCT = 0.90


# ~5 exercises per day: big lift + secondary + accessories
WORKOUT_TEMPLATES = {
    "Push": [
        {"name": "Barbell Bench Press", "primary": "bench", "muscle_groups": ["Chest", "Triceps", "Shoulders"], "sets": 4, "reps": "6-10"},
        {"name": "Overhead Press", "primary": "ohp", "muscle_groups": ["Shoulders", "Triceps"], "sets": 3, "reps": "6-10"},
        {"name": "Incline Dumbbell Press", "primary": "accessory", "muscle_groups": ["Chest"], "sets": 3, "reps": "8-12"},
        {"name": "Lateral Raises", "primary": "accessory", "muscle_groups": ["Shoulders"], "sets": 3, "reps": "12-15"},
        {"name": "Triceps Rope Pushdown", "primary": "accessory", "muscle_groups": ["Triceps"], "sets": 3, "reps": "10-15"},
    ],
    "Pull": [
        {"name": "Barbell Row", "primary": "row", "muscle_groups": ["Back", "Biceps"], "sets": 4, "reps": "6-10"},
        {"name": "Pull-Ups / Lat Pulldown", "primary": "accessory", "muscle_groups": ["Back"], "sets": 3, "reps": "6-12"},
        {"name": "Seated Cable Row", "primary": "accessory", "muscle_groups": ["Back"], "sets": 3, "reps": "8-12"},
        {"name": "Face Pulls", "primary": "accessory", "muscle_groups": ["Rear Delts"], "sets": 3, "reps": "12-15"},
        {"name": "Dumbbell Curls", "primary": "accessory", "muscle_groups": ["Biceps"], "sets": 3, "reps": "10-15"},
    ],
    "Legs": [
        {"name": "Back Squat", "primary": "squat", "muscle_groups": ["Quads", "Glutes"], "sets": 4, "reps": "5-8"},
        {"name": "Romanian Deadlift", "primary": "accessory", "muscle_groups": ["Hamstrings", "Glutes"], "sets": 3, "reps": "6-10"},
        {"name": "Leg Press", "primary": "accessory", "muscle_groups": ["Quads"], "sets": 3, "reps": "10-15"},
        {"name": "Hamstring Curl", "primary": "accessory", "muscle_groups": ["Hamstrings"], "sets": 3, "reps": "10-15"},
        {"name": "Calf Raises", "primary": "accessory", "muscle_groups": ["Calves"], "sets": 3, "reps": "12-20"},
    ],
    "Full": [
        {"name": "Deadlift (Technique / Moderate)", "primary": "deadlift", "muscle_groups": ["Posterior Chain"], "sets": 3, "reps": "3-5"},
        {"name": "Bench Press (Moderate)", "primary": "bench", "muscle_groups": ["Chest", "Triceps"], "sets": 3, "reps": "6-10"},
        {"name": "Barbell Row (Moderate)", "primary": "row", "muscle_groups": ["Back"], "sets": 3, "reps": "6-10"},
        {"name": "Goblet Squat / Front Squat", "primary": "accessory", "muscle_groups": ["Quads", "Core"], "sets": 3, "reps": "8-12"},
        {"name": "Plank / Hanging Knee Raises", "primary": "accessory", "muscle_groups": ["Core"], "sets": 3, "reps": "30-60s"},
    ],
}


# Pre-filled setup form before anything has been saved
DEFAULT_PROFILE = {
    "name": "Paul",
    "gender": "Male",
    "height_in": 70,
    "weight_lb": 180,
    "goal": "Hypertrophy",
    "five_rm": {"bench": 225, "squat": 275, "deadlift": 315, "ohp": 135, "row": 185},
}

DEMO_PROFILE = {
    "name": "Demo Athlete",
    "gender": "Male",
    "height_in": 70,
    "weight_lb": 180,
    "goal": "Hypertrophy",
    "five_rm": {"bench": 225, "squat": 275, "deadlift": 315, "ohp": 135, "row": 185},
}

# Two synthetic past sessions; `days_ago` is resolved when the demo is loaded.
DEMO_SESSIONS = [
    {
        "days_ago": 1,
        "day_type": "Pull",
        "muscle_groups": ["Back", "Biceps"],
        "energy": 3,
        "difficulty": 4,
        "sleep_hours": 6,
        "workout": [
            {"name": "Barbell Row", "primary": "row", "muscle_groups": ["Back"], "sets": 4, "reps": "6-10", "target_weight_lb": 145},
            {"name": "Pull-Ups / Lat Pulldown", "primary": "accessory", "muscle_groups": ["Back"], "sets": 3, "reps": "6-12"},
            {"name": "Seated Cable Row", "primary": "accessory", "muscle_groups": ["Back"], "sets": 3, "reps": "8-12"},
            {"name": "Face Pulls", "primary": "accessory", "muscle_groups": ["Rear Delts"], "sets": 3, "reps": "12-15"},
            {"name": "Dumbbell Curls", "primary": "accessory", "muscle_groups": ["Biceps"], "sets": 3, "reps": "10-15"},
        ],
    },
    {
        "days_ago": 2,
        "day_type": "Push",
        "muscle_groups": ["Chest", "Shoulders", "Triceps"],
        "energy": 4,
        "difficulty": 3,
        "sleep_hours": 7,
        "workout": [
            {"name": "Barbell Bench Press", "primary": "bench", "muscle_groups": ["Chest", "Triceps"], "sets": 4, "reps": "6-10", "target_weight_lb": 175},
            {"name": "Overhead Press", "primary": "ohp", "muscle_groups": ["Shoulders"], "sets": 3, "reps": "6-10", "target_weight_lb": 105},
            {"name": "Incline Dumbbell Press", "primary": "accessory", "muscle_groups": ["Chest"], "sets": 3, "reps": "8-12"},
            {"name": "Lateral Raises", "primary": "accessory", "muscle_groups": ["Shoulders"], "sets": 3, "reps": "12-15"},
            {"name": "Triceps Rope Pushdown", "primary": "accessory", "muscle_groups": ["Triceps"], "sets": 3, "reps": "10-15"},
        ],
    },
]

"""Static lookup tables and confidence constants for the grammar parser."""

from __future__ import annotations

SPOKEN_NUMBERS = {
    "zero": 0.0,
    "one": 1.0,
    "two": 2.0,
    "three": 3.0,
    "four": 4.0,
    "five": 5.0,
    "six": 6.0,
    "seven": 7.0,
    "eight": 8.0,
    "nine": 9.0,
    "ten": 10.0,
    "eleven": 11.0,
    "twelve": 12.0,
    "thirteen": 13.0,
    "fourteen": 14.0,
    "fifteen": 15.0,
    "sixteen": 16.0,
    "seventeen": 17.0,
    "eighteen": 18.0,
    "nineteen": 19.0,
    "twenty": 20.0,
}

# Characters dropped outright; commas are turned into whitespace instead.
STRIPPED_CHARACTERS = ("!", "?", "'")

UNIT_VARIANTS = {
    "kg": "kg",
    "kgs": "kg",
    "kilo": "kg",
    "kilos": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "lb": "lbs",
    "lbs": "lbs",
    "pound": "lbs",
    "pounds": "lbs",
    "plate": "plates",
    "plates": "plates",
}

BODY_PART_VARIANTS = {
    "shoulders": "shoulder",
    "backs": "back",
    "lowerback": "back",
    "knees": "knee",
    "elbows": "elbow",
    "wrists": "wrist",
    "hips": "hip",
    "necks": "neck",
}

KNOWN_EXERCISES = frozenset(
    {
        # chest
        "bench",
        "bench press",
        "incline",
        "incline bench",
        "decline",
        "decline bench",
        "dumbbell press",
        "chest press",
        "flies",
        "flyes",
        "pec deck",
        "pushups",
        "push ups",
        "cable flies",
        "cable crossover",
        # back
        "deadlift",
        "deadlifts",
        "row",
        "rows",
        "barbell row",
        "dumbbell row",
        "lat pulldown",
        "pulldown",
        "pull ups",
        "pullups",
        "chin ups",
        "chinups",
        "cable row",
        "seated row",
        "t-bar row",
        "bent over row",
        # shoulders
        "overhead press",
        "ohp",
        "military press",
        "shoulder press",
        "lateral raise",
        "lateral raises",
        "front raise",
        "rear delt",
        "face pulls",
        "shrugs",
        # legs
        "squat",
        "squats",
        "back squat",
        "front squat",
        "leg press",
        "lunges",
        "lunge",
        "leg extension",
        "leg curl",
        "hamstring curl",
        "calf raise",
        "calf raises",
        "romanian deadlift",
        "rdl",
        "hip thrust",
        "goblet squat",
        # arms
        "curl",
        "curls",
        "bicep curl",
        "bicep curls",
        "hammer curl",
        "tricep",
        "triceps",
        "tricep pushdown",
        "tricep extension",
        "skull crusher",
        "skull crushers",
        "preacher curl",
        "cable curl",
        "concentration curl",
        # core
        "plank",
        "crunches",
        "sit ups",
        "situps",
        "leg raises",
        "ab wheel",
        "cable crunch",
        "hanging leg raise",
    }
)

DEFAULT_ALIASES = {
    "bench": "Bench Press",
    "bench press": "Bench Press",
    "flat bench": "Bench Press",
    "incline": "Incline Bench Press",
    "incline bench": "Incline Bench Press",
    "decline": "Decline Bench Press",
    "dumbbell bench": "Dumbbell Bench Press",
    "db bench": "Dumbbell Bench Press",
    "squat": "Squat",
    "squats": "Squat",
    "back squat": "Back Squat",
    "front squat": "Front Squat",
    "goblet": "Goblet Squat",
    "goblet squat": "Goblet Squat",
    "deadlift": "Deadlift",
    "dead": "Deadlift",
    "deads": "Deadlift",
    "sumo": "Sumo Deadlift",
    "conventional": "Conventional Deadlift",
    "rdl": "Romanian Deadlift",
    "romanian": "Romanian Deadlift",
    "stiff leg": "Stiff Leg Deadlift",
    "ohp": "Overhead Press",
    "overhead": "Overhead Press",
    "overhead press": "Overhead Press",
    "shoulder press": "Overhead Press",
    "military": "Military Press",
    "military press": "Military Press",
    "row": "Barbell Row",
    "rows": "Barbell Row",
    "barbell row": "Barbell Row",
    "bent over row": "Barbell Row",
    "dumbbell row": "Dumbbell Row",
    "db row": "Dumbbell Row",
    "cable row": "Cable Row",
    "seated row": "Seated Cable Row",
    "pull up": "Pull Up",
    "pullup": "Pull Up",
    "pull ups": "Pull Up",
    "chin up": "Chin Up",
    "chinup": "Chin Up",
    "chin ups": "Chin Up",
    "lat pulldown": "Lat Pulldown",
    "pulldown": "Lat Pulldown",
    "curl": "Barbell Curl",
    "curls": "Barbell Curl",
    "bicep curl": "Barbell Curl",
    "dumbbell curl": "Dumbbell Curl",
    "hammer curl": "Hammer Curl",
    "tricep": "Tricep Extension",
    "triceps": "Tricep Extension",
    "pushdown": "Tricep Pushdown",
    "skull crusher": "Skull Crusher",
    "leg press": "Leg Press",
    "leg extension": "Leg Extension",
    "leg curl": "Leg Curl",
    "hamstring curl": "Leg Curl",
    "calf raise": "Calf Raise",
    "calves": "Calf Raise",
    "lunge": "Lunges",
    "lunges": "Lunges",
    "dip": "Dips",
    "dips": "Dips",
    "shrug": "Shrugs",
    "shrugs": "Shrugs",
    "face pull": "Face Pull",
    "lateral raise": "Lateral Raise",
    "laterals": "Lateral Raise",
}

# Rule confidences
SAME_AGAIN_EXACT = 1.0
SAME_AGAIN_BARE = 0.95
SAME_AGAIN_TRAILING = 0.8
DELTA_WITH_UNIT = 1.0
DELTA_WITHOUT_UNIT = 0.95
MODIFIER_FULL = 1.0
MODIFIER_PARTIAL = 0.8
REP_CHANGE = 0.9
EXERCISE_KNOWN = 0.85
EXERCISE_UNKNOWN = 0.5
EXERCISE_MIN = 0.6

SET_LOG_PENALTY = 0.1
SET_LOG_KNOWN_BOOST = 0.1
SET_LOG_FLOOR = 0.5

DEFAULT_CONFIRM_BELOW = 0.75

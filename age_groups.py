# Fixed difficulty tiers.
# "extended" is the full four-tier table, "minimal" the single
# addition/multiplication preset.

EXTENDED = [
    {
        "id": "baby",
        "name": "Baby Brain (Ages 3–5)",
        "description": "Basic shapes, colors, number recognition",
        "max_number": 5,
        "operations": ["addition"],
        "addition_max": 3,  # counting on fingers
        "factor_max": 10,
    },
    {
        "id": "little",
        "name": "Little Learner (Ages 5–7)",
        "description": "Addition/subtraction within 10",
        "max_number": 10,
        "operations": ["addition", "subtraction"],
        "factor_max": 10,
    },
    {
        "id": "explorer",
        "name": "Learner (Ages 7–9)",
        "description": "Multiplication, division within 10, Addition/subtraction within 100",
        "max_number": 100,
        "operations": ["addition", "subtraction", "multiplication", "division"],
        "factor_max": 10,
    },
    {
        "id": "apprentice",
        "name": "Student (Ages 9–11)",
        "description": "Multiplication/division within 100, Addition/subtraction within 1000",
        "max_number": 1000,
        "operations": ["addition", "subtraction", "multiplication", "division"],
        "factor_max": 100,
    },
]

MINIMAL = [
    {
        "id": "classic",
        "name": "Classic",
        "description": "Addition and times tables within 10",
        "max_number": 10,
        "operations": ["addition", "multiplication"],
        "factor_max": 10,
    },
]

VARIANTS = {
    "extended": (EXTENDED, "explorer"),
    "minimal": (MINIMAL, "classic"),
}

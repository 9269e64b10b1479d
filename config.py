from __future__ import annotations

import os

QUIZ_VARIANT = os.getenv("QUIZ_VARIANT", "extended").strip().lower()

# Empty means "use the variant's own default tier"
QUIZ_DEFAULT_AGE_GROUP = os.getenv("QUIZ_DEFAULT_AGE_GROUP", "").strip()

# Feedback window before the next problem appears
SUCCESS_DELAY_MS = int(os.getenv("QUIZ_SUCCESS_DELAY_MS", "1000"))
FAILURE_DELAY_MS = int(os.getenv("QUIZ_FAILURE_DELAY_MS", "2500"))

SESSION_TIMEOUT_MINUTES = int(os.getenv("SESSION_TIMEOUT_MINUTES", "120"))

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv(
        "CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
    ).split(",")
    if o.strip()
]

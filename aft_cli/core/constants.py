"""Static constants for the workout logger."""

from __future__ import annotations

WORKOUTS_KEY = "aft_workouts_v1"
AUTH_KEY = "aft_auth_v1"

WEIGHT_UNIT = "lb"

# Original form defaults for a new entry.
DEFAULT_SETS = 3
DEFAULT_REPS = 8
DEFAULT_WEIGHT = 135

# Heuristic thresholds. These are fixed, not configuration.
HIGH_REP_THRESHOLD = 12
LOW_REP_THRESHOLD = 5
LOW_VOLUME_THRESHOLD = 2000
WEIGHT_STEP = 5
SMALL_WEIGHT_STEP = "2.5–5"

EMPTY_HISTORY_PROMPT = "Add a workout to receive a training suggestion."
EMPTY_LOG_MESSAGE = "No workouts yet — log your first set."

MISSING_EXERCISE_MESSAGE = "Please enter an exercise name."
INVALID_NUMERIC_MESSAGE = "Please enter valid numbers for sets, reps, and weight."

"""Heuristic training suggestions from the logged workout history."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from aft_cli.core.constants import (
    EMPTY_HISTORY_PROMPT,
    HIGH_REP_THRESHOLD,
    LOW_REP_THRESHOLD,
    LOW_VOLUME_THRESHOLD,
    SMALL_WEIGHT_STEP,
    WEIGHT_STEP,
    WEIGHT_UNIT,
)
from aft_cli.core.models import WorkoutRecord
from aft_cli.utils.formatting import format_number

TipRule = Tuple[Callable[[WorkoutRecord], bool], str]

# Evaluated top to bottom; every rule that fires replaces the tip, so the
# last matching rule wins. The volume rule therefore overrides the rep rules.
TIP_RULES: List[TipRule] = [
    (
        lambda w: True,
        'For "{exercise}", consider adding +1 rep per set next time, '
        f"or +{WEIGHT_STEP} {WEIGHT_UNIT} if your form stays solid.",
    ),
    (
        lambda w: w.reps >= HIGH_REP_THRESHOLD,
        'You hit {reps} reps on "{exercise}". '
        f"Consider increasing weight (+{WEIGHT_STEP} {WEIGHT_UNIT}) and aiming for 8–10 reps next session.",
    ),
    (
        lambda w: w.reps <= LOW_REP_THRESHOLD,
        'Low-rep work is great for strength. For "{exercise}", '
        "keep reps 3–6 and focus on clean, controlled sets.",
    ),
    (
        lambda w: w.volume < LOW_VOLUME_THRESHOLD,
        'Your volume for "{exercise}" was {volume}. To build more muscle, '
        "add 1 set or +2 reps next time (if recovery feels good).",
    ),
]


def find_previous_same_exercise(
    exercise: str,
    history: Sequence[WorkoutRecord],
) -> Optional[WorkoutRecord]:
    """Return the entry before the latest one for the same exercise, if any.

    Matching is case-insensitive. The latest entry is expected to already be
    part of the history, so the previous one is the second-to-last match.
    """
    wanted = exercise.lower()
    same = [workout for workout in history if workout.exercise.lower() == wanted]
    if len(same) < 2:
        return None
    return same[-2]


def build_tip(workout: WorkoutRecord, rules: Sequence[TipRule] = TIP_RULES) -> str:
    """Apply tip rules in order and render the surviving template."""
    template = ""
    for predicate, candidate in rules:
        if predicate(workout):
            template = candidate
    return template.format(
        exercise=workout.exercise,
        reps=workout.reps,
        volume=format_number(workout.volume),
    )


def recommend(latest: WorkoutRecord, history: Sequence[WorkoutRecord]) -> str:
    """Produce the suggestion text for the latest entry."""
    exercise = latest.exercise
    volume = format_number(latest.volume)
    previous = find_previous_same_exercise(exercise, history)
    tip = build_tip(latest)

    if previous is not None:
        previous_volume = format_number(previous.volume)
        if latest.volume > previous.volume:
            return (
                f'Nice progress on "{exercise}" — your volume increased from '
                f"{previous_volume} → {volume}. Keep the momentum: {tip}"
            )
        if latest.volume < previous.volume:
            return (
                f'Your "{exercise}" volume dropped from {previous_volume} → {volume}. '
                "That’s okay — consider lighter day/recovery, then ramp back up next session."
            )
        return (
            f'You matched your last "{exercise}" volume ({volume}). To progress, '
            f"try a small bump: +1 rep per set or +{SMALL_WEIGHT_STEP} {WEIGHT_UNIT}."
        )

    return f'Based on your last "{exercise}" workout (Vol: {volume}): {tip}'


def recommend_for_history(history: Sequence[WorkoutRecord]) -> str:
    """Suggestion for the most recent entry, or a prompt when nothing is logged."""
    if not history:
        return EMPTY_HISTORY_PROMPT
    return recommend(history[-1], history)

"""Difficulty presets for maze levels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class LevelSettings:
    name: str
    width: int
    height: int
    question_count: int
    obstacle_count: int
    # Applied by the caller when scoring; nothing in this package reads it.
    score_multiplier: float = 1.0


LEVELS: Dict[str, LevelSettings] = {
    "easy": LevelSettings("easy", 13, 13, question_count=5, obstacle_count=3, score_multiplier=1.0),
    # Even sizes are normalized to 17x17 by the generator.
    "medium": LevelSettings("medium", 16, 16, question_count=8, obstacle_count=5, score_multiplier=1.5),
    "hard": LevelSettings("hard", 19, 19, question_count=12, obstacle_count=7, score_multiplier=2.0),
}


def get_level(name: str) -> LevelSettings:
    try:
        return LEVELS[name]
    except KeyError as exc:
        known = ", ".join(sorted(LEVELS))
        raise KeyError(f"Unknown level '{name}' (expected one of: {known})") from exc


__all__ = ["LEVELS", "LevelSettings", "get_level"]

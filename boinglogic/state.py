"""Shared game state that block and ball handling report into."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from boinglogic.blocktypes import ArenaConfig

_MULTIPLIERS = frozenset({1, 2, 4})


@dataclass
class GameState:
    """Frame counter, score, bullets, special flags and emitted events."""

    config: ArenaConfig = field(default_factory=ArenaConfig)
    rng: random.Random = field(default_factory=random.Random)
    frame: int = 0
    score: int = 0
    bullets: int = 0
    unlimited_bullets: bool = False
    no_sound: bool = False
    bonus_block: bool = False
    bonus_count: int = 0
    bonus_multiplier: int = 1
    killer: bool = False
    no_walls: bool = False
    sticky_bat: bool = False
    fast_gun: bool = False
    reverse: bool = False
    extra_lives: int = 0
    speed_level: int = 5
    paddle_pos: int = 0
    paddle_size: int = 50
    paddle_dx: int = 0
    paddle_moving: bool = False
    time_bonus: int = 0
    shake_until: int = 0
    current_message: Optional[str] = None
    sounds: list[tuple[str, int]] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)

    def play_sound(self, name: str, volume: int) -> None:
        """Record a sound effect unless sound is switched off."""
        if self.no_sound:
            return
        self.sounds.append((name, volume))

    def show_message(self, text: str) -> None:
        """Make ``text`` the current message shown to the player."""
        self.current_message = text
        self.messages.append(text)

    def add_score(self, points: int) -> None:
        """Add ``points`` to the score."""
        if points < 0:
            raise ValueError("score points cannot be negative")
        self.score += points

    def add_bullets(self, count: int) -> None:
        """Give the player ``count`` more bullets."""
        if count < 0:
            raise ValueError("bullet count cannot be negative")
        self.bullets += count

    def set_bonus_multiplier(self, factor: int) -> None:
        """Switch the bonus multiplier to 1 (off), 2 or 4."""
        if factor not in _MULTIPLIERS:
            raise ValueError(f"unsupported bonus multiplier: {factor}")
        self.bonus_multiplier = factor

    def advance_frame(self) -> int:
        """Move on one frame and return the new frame number."""
        self.frame += 1
        return self.frame
"""Block kinds, arena dimensions and the fixed per-type block data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

BLOCK_WIDTH = 40
BLOCK_HEIGHT = 20


class BlockType(Enum):
    """Every kind of block that can sit in the arena grid."""

    NONE = auto()
    RED = auto()
    BLUE = auto()
    GREEN = auto()
    TAN = auto()
    YELLOW = auto()
    PURPLE = auto()
    BULLET = auto()
    BLACK = auto()
    COUNTER = auto()
    BOMB = auto()
    DEATH = auto()
    REVERSE = auto()
    HYPERSPACE = auto()
    EXTRABALL = auto()
    MGUN = auto()
    WALLOFF = auto()
    MULTIBALL = auto()
    STICKY = auto()
    PAD_SHRINK = auto()
    PAD_EXPAND = auto()
    DROP = auto()
    MAXAMMO = auto()
    ROAMER = auto()
    TIMER = auto()
    RANDOM = auto()
    DYNAMITE = auto()
    BONUSX2 = auto()
    BONUSX4 = auto()
    BONUS = auto()
    BLACKHIT = auto()
    KILL = auto()


@dataclass(frozen=True)
class ArenaConfig:
    """Dimensions, timings and limits of the playing arena."""

    max_row: int = 18
    max_col: int = 9
    play_width: int = 495
    play_height: int = 580
    max_balls: int = 5
    ball_width: int = 20
    ball_height: int = 19
    ball_half_width: int = 10
    ball_half_height: int = 9
    dist_base: int = 30
    dist_ball_of_paddle: int = 45
    max_x_vel: int = 14
    max_y_vel: int = 14
    min_dx_ball: int = 2
    min_dy_ball: int = 2
    paddle_ball_frame_tilt: int = 5000
    ball_frame_rate: int = 5
    ball_anim_rate: int = 50
    birth_frame_rate: int = 5
    ball_slides: int = 5
    birth_slides: int = 8
    ball_auto_active_delay: int = 3000
    min_ball_mass: float = 1.0
    max_ball_mass: float = 3.0
    paddle_hit_score: int = 10
    explode_delay: int = 10
    bonus_delay: int = 150
    bonus_length: int = 1500
    death_delay1: int = 100
    death_delay2: int = 700
    extraball_delay: int = 300
    random_delay: int = 500
    drop_delay: int = 1000
    infinite_delay: int = 9999999
    roam_eyes_delay: int = 300
    roam_delay: int = 1000
    extra_time: int = 20
    bullets_new_level: int = 4
    max_bullets: int = 20
    max_bonus: int = 8

    @property
    def col_width(self) -> int:
        return self.play_width // self.max_col

    @property
    def row_height(self) -> int:
        return self.play_height // self.max_row


_SIZES: dict[BlockType, tuple[int, int]] = {
    BlockType.COUNTER: (BLOCK_WIDTH, BLOCK_HEIGHT),
    BlockType.TIMER: (21, 21),
    BlockType.ROAMER: (25, 27),
    BlockType.MGUN: (35, 15),
    BlockType.WALLOFF: (27, 23),
    BlockType.REVERSE: (33, 16),
    BlockType.EXTRABALL: (30, 19),
    BlockType.HYPERSPACE: (31, 31),
    BlockType.BOMB: (30, 30),
    BlockType.DEATH: (30, 30),
    BlockType.STICKY: (32, 27),
    BlockType.BLACK: (50, 30),
    BlockType.PAD_SHRINK: (40, 15),
    BlockType.PAD_EXPAND: (40, 15),
    BlockType.BONUS: (27, 27),
    BlockType.BONUSX2: (27, 27),
    BlockType.BONUSX4: (27, 27),
}

_FIXED_POINTS: dict[BlockType, int] = {
    BlockType.BULLET: 50,
    BlockType.MAXAMMO: 50,
    BlockType.RED: 100,
    BlockType.GREEN: 120,
    BlockType.BLUE: 110,
    BlockType.TAN: 130,
    BlockType.YELLOW: 140,
    BlockType.PURPLE: 150,
    BlockType.BOMB: 50,
    BlockType.ROAMER: 400,
    BlockType.COUNTER: 200,
    BlockType.EXTRABALL: 100,
    BlockType.TIMER: 100,
    BlockType.HYPERSPACE: 100,
    BlockType.MGUN: 100,
    BlockType.WALLOFF: 100,
    BlockType.REVERSE: 100,
    BlockType.MULTIBALL: 100,
    BlockType.STICKY: 100,
    BlockType.PAD_SHRINK: 100,
    BlockType.PAD_EXPAND: 100,
    BlockType.DEATH: 0,
}

_SOUNDS: dict[BlockType, tuple[str, int]] = {
    BlockType.BOMB: ("bomb", 50),
    BlockType.BULLET: ("ammo", 30),
    BlockType.MAXAMMO: ("ammo", 70),
    BlockType.RED: ("touch", 99),
    BlockType.GREEN: ("touch", 99),
    BlockType.BLUE: ("touch", 99),
    BlockType.TAN: ("touch", 99),
    BlockType.PURPLE: ("touch", 99),
    BlockType.YELLOW: ("touch", 99),
    BlockType.COUNTER: ("touch", 99),
    BlockType.RANDOM: ("touch", 99),
    BlockType.DROP: ("touch", 99),
    BlockType.ROAMER: ("ouch", 99),
    BlockType.EXTRABALL: ("ddloo", 99),
    BlockType.MGUN: ("mgun", 99),
    BlockType.WALLOFF: ("wallsoff", 99),
    BlockType.BONUSX2: ("gate", 99),
    BlockType.BONUSX4: ("gate", 99),
    BlockType.BONUS: ("gate", 99),
    BlockType.REVERSE: ("warp", 99),
    BlockType.PAD_SHRINK: ("wzzz2", 99),
    BlockType.PAD_EXPAND: ("wzzz", 99),
    BlockType.MULTIBALL: ("spring", 80),
    BlockType.TIMER: ("bonus", 50),
    BlockType.STICKY: ("sticky", 90),
    BlockType.DEATH: ("evillaugh", 99),
    BlockType.BLACK: ("metal", 99),
    BlockType.HYPERSPACE: ("hypspc", 99),
}

_NOT_NEEDED_FOR_LEVEL_END = frozenset({
    BlockType.BLACK, BlockType.BULLET, BlockType.ROAMER, BlockType.BOMB,
    BlockType.TIMER, BlockType.HYPERSPACE, BlockType.STICKY,
    BlockType.MULTIBALL, BlockType.MAXAMMO, BlockType.PAD_SHRINK,
    BlockType.PAD_EXPAND, BlockType.REVERSE, BlockType.MGUN,
    BlockType.WALLOFF, BlockType.EXTRABALL, BlockType.DEATH,
    BlockType.BONUSX2, BlockType.BONUSX4, BlockType.BONUS,
})

_SURVIVES_SKIP = frozenset({
    BlockType.BONUSX2, BlockType.TIMER, BlockType.BONUSX4, BlockType.BONUS,
    BlockType.BLACK, BlockType.BULLET, BlockType.MAXAMMO, BlockType.BOMB,
    BlockType.DEATH, BlockType.REVERSE, BlockType.HYPERSPACE,
    BlockType.EXTRABALL, BlockType.MGUN, BlockType.WALLOFF,
    BlockType.MULTIBALL, BlockType.STICKY, BlockType.PAD_SHRINK,
    BlockType.PAD_EXPAND,
})


def block_size(block_type: BlockType) -> tuple[int, int]:
    """Return the drawn (width, height) of a block of this type."""
    return _SIZES.get(block_type, (BLOCK_WIDTH, BLOCK_HEIGHT))


def hit_points_for(block_type: BlockType, row: int, max_row: int) -> int:
    """Points awarded when a block of this type, placed in ``row``, is destroyed."""
    if block_type is BlockType.DROP:
        return (max_row - row) * 100
    return _FIXED_POINTS.get(block_type, 0)


def sound_for_block(block_type: BlockType) -> tuple[str, int]:
    """Return the (sound name, volume) played when this block is hit."""
    if block_type is BlockType.KILL:
        raise ValueError("kill block type has no sound")
    try:
        return _SOUNDS[block_type]
    except KeyError:
        raise ValueError(f"unknown block type for sound: {block_type}") from None


def counts_for_level_end(block_type: BlockType) -> bool:
    """True when a block of this type must be destroyed to finish a level."""
    return block_type not in _NOT_NEEDED_FOR_LEVEL_END


def survives_level_skip(block_type: BlockType) -> bool:
    """True when skipping to the next level leaves this block standing."""
    return block_type in _SURVIVES_SKIP
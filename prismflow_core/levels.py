from __future__ import annotations

import os
import random
from typing import List, Optional, Sequence, Tuple

from .palette import CAPACITY, COLOR_NAMES, TOTAL_LEVELS, Color
from .tube import LevelDefinition


def level_shape(level_index: int, palette_size: int = len(COLOR_NAMES)) -> Tuple[int, int]:
    """Returns (color_count, extra_empty_tubes) for a level.

    Levels 1-5 use 3 colors; after that one more color every 5 levels,
    capped at the palette size. Two spare empty tubes below level 15, three from then on.
    """
    if level_index < 1:
        raise ValueError(f'Level index must be >= 1, got {level_index}')
    if level_index <= 5:
        color_count = 3
    else:
        color_count = 3 + (level_index - 5) // 5 + 1
    color_count = min(palette_size, color_count)
    extra_empty_tubes = 2 if level_index < 15 else 3
    return color_count, extra_empty_tubes


def generate_level(
    level_index: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    palette: Optional[Sequence[Color]] = None,
) -> LevelDefinition:
    """Creates a level: 4 units of each of the first N palette colors, shuffled and cut into full tubes.

    Pass either a seed or an explicit rng to make the deal reproducible. No
    solvability check is made, so a deal may be unsolvable or already sorted.
    """
    colors = list(palette) if palette is not None else COLOR_NAMES
    color_count, extra_empty_tubes = level_shape(level_index, len(colors))
    if rng is None:
        rng = random.Random(seed)

    units: List[Color] = []
    for color in colors[:color_count]:
        units.extend([color] * CAPACITY)
    # random.shuffle is Fisher-Yates: each index from the end swaps with one at or before it.
    rng.shuffle(units)

    tubes: List[Tuple[Color, ...]] = []
    for c in range(color_count):
        tubes.append(tuple(units[c * CAPACITY:(c + 1) * CAPACITY]))
    for _ in range(extra_empty_tubes):
        tubes.append(())

    if os.getenv('PRISMFLOW_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on'):
        print(f"[level] {level_index}: {color_count} colors, {extra_empty_tubes} empty tubes, seed={seed}")
    return LevelDefinition(id=level_index, tubes=tuple(tubes), capacity=CAPACITY)


def generate_levels(count: int = TOTAL_LEVELS, seed: Optional[int] = None) -> List[LevelDefinition]:
    """Generates levels 1..count from a single random stream."""
    rng = random.Random(seed)
    return [generate_level(i, rng=rng) for i in range(1, count + 1)]

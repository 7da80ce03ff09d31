from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .palette import Color, color_symbol


@dataclass(frozen=True)
class Tube:
    """A bounded stack of color units, bottom to top; the last layer is the pourable top."""
    id: int
    layers: Tuple[Color, ...] = ()

    def top(self) -> Optional[Color]:
        return self.layers[-1] if self.layers else None

    def is_empty(self) -> bool:
        return not self.layers

    def with_layers(self, layers: Iterable[Color]) -> 'Tube':
        return Tube(self.id, tuple(layers))


@dataclass(frozen=True)
class LevelDefinition:
    """Generator output: layer sequences per tube, before tube ids are assigned."""
    id: int
    tubes: Tuple[Tuple[Color, ...], ...]
    capacity: int


@dataclass(frozen=True)
class MoveResult:
    updated_from: Tube
    updated_to: Tube
    moved_count: int


@dataclass(frozen=True)
class Hint:
    from_index: int
    to_index: int


def tubes_from_level(level: LevelDefinition) -> Tuple[Tube, ...]:
    """Instantiates the starting tubes of a level; id is the position in the level."""
    return tuple(Tube(id=index, layers=tuple(layers)) for index, layers in enumerate(level.tubes))


def pretty_tubes(tubes: Sequence[Tube], capacity: int) -> str:
    """Generates a human-readable view of the board: top slot first, one column per tube."""
    lines: List[str] = []
    for slot in range(capacity - 1, -1, -1):
        row: List[str] = []
        for tube in tubes:
            if slot < len(tube.layers):
                row.append(color_symbol(tube.layers[slot]))
            else:
                row.append('.')
        lines.append(' '.join(row))
    lines.append(' '.join(str(i % 10) for i in range(len(tubes))))
    return '\n'.join(lines)

"""
Presets Module - Built-in scenarios and random configurations.
"""

import random
from dataclasses import dataclass
from typing import List, Optional

from knightquest.engine import BOARD_SIZE, KEY_SLOTS, Cell, Puzzle


@dataclass(frozen=True)
class Preset:
    """
    Named starting configuration.

    Attributes:
        id: Short identifier used on the command line
        name: Display name
        puzzle: Knight, key and door placement
    """
    id: str
    name: str
    puzzle: Puzzle


_PRESETS: List[Preset] = [
    Preset(
        id="near-key",
        name="Preset 1 · Knight near key",
        puzzle=Puzzle.create(Cell(0, 1), [Cell(1, 3), Cell(5, 4), Cell(6, 2)], Cell(7, 7)),
    ),
    Preset(
        id="near-door-key",
        name="Preset 2 · Key near door",
        # Key 3 sits next to the door
        puzzle=Puzzle.create(Cell(7, 0), [Cell(1, 2), Cell(6, 6), Cell(7, 5)], Cell(7, 7)),
    ),
    Preset(
        id="tricky-choice",
        name="Preset 3 · Tricky choice",
        # Key 1 is closest to the knight, key 2 is better overall
        puzzle=Puzzle.create(Cell(3, 3), [Cell(4, 5), Cell(6, 1), Cell(1, 6)], Cell(7, 0)),
    ),
    Preset(
        id="spread-out",
        name="Preset 4 · All spread out",
        puzzle=Puzzle.create(Cell(2, 2), [Cell(0, 7), Cell(7, 3), Cell(4, 0)], Cell(6, 6)),
    ),
]


def list_presets() -> List[Preset]:
    """All built-in presets in display order."""
    return list(_PRESETS)


def get_preset(preset_id: str) -> Preset:
    """
    Look up a preset by id.

    Raises:
        ValueError: If no preset has that id
    """
    for preset in _PRESETS:
        if preset.id == preset_id:
            return preset
    available = ", ".join(p.id for p in _PRESETS)
    raise ValueError(f"Unknown preset: {preset_id}. Available: {available}")


def random_puzzle(rng: Optional[random.Random] = None) -> Puzzle:
    """
    Place knight, keys and door on distinct random cells.

    Args:
        rng: Random source (a fresh unseeded Random if omitted)

    Returns:
        Complete Puzzle
    """
    rng = rng or random.Random()
    cells = rng.sample(range(BOARD_SIZE * BOARD_SIZE), KEY_SLOTS + 2)
    knight, *keys, door = [Cell(i // BOARD_SIZE, i % BOARD_SIZE) for i in cells]
    return Puzzle.create(knight, keys, door)

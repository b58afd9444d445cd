from __future__ import annotations

import os
from typing import Optional


def _env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: Optional[int], minimum: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    value = int(raw)
    if minimum is not None and value < minimum:
        raise ValueError(f'{name} must be >= {minimum}, got {value}')
    return value


DEBUG: bool = _env_flag('VENICE_DEBUG')

# Deck composition: 16 tiles, half straight and half curved.
DECK_STRAIGHTS: int = _env_int('VENICE_STRAIGHTS', 8, minimum=0)
DECK_CURVES: int = _env_int('VENICE_CURVES', 8, minimum=0)

# A turn places 1 to MAX_TILES_PER_TURN tiles in a straight line.
MAX_TILES_PER_TURN: int = _env_int('VENICE_MAX_TILES_PER_TURN', 3, minimum=1)

# Largest inventory the HTTP layer hands to the solver (a full deck by default).
MAX_SOLVE_TILES: int = _env_int('VENICE_MAX_SOLVE_TILES', DECK_STRAIGHTS + DECK_CURVES, minimum=0)

CPU_SEED: Optional[int] = _env_int('VENICE_CPU_SEED', None)

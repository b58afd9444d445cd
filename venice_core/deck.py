from __future__ import annotations

import random
from typing import Iterable, List, Optional, Tuple

from . import config
from .tile import CURVE, STRAIGHT, Kind


def build_deck(seed: Optional[int] = None, straights: Optional[int] = None, curves: Optional[int] = None) -> List[Kind]:
    """Creates the shuffled draw pile. Tiles are drawn from the end of the list."""
    rng = random.Random(seed)
    n_straight = config.DECK_STRAIGHTS if straights is None else straights
    n_curve = config.DECK_CURVES if curves is None else curves
    if n_straight < 0 or n_curve < 0:
        raise ValueError('Deck composition must be non-negative')
    deck: List[Kind] = [STRAIGHT] * n_straight + [CURVE] * n_curve
    rng.shuffle(deck)
    return deck


def count_kinds(kinds: Iterable[Kind]) -> Tuple[int, int]:
    """Returns (straights, curves) in a collection of tile kinds."""
    straights = curves = 0
    for k in kinds:
        if k == STRAIGHT:
            straights += 1
        elif k == CURVE:
            curves += 1
        else:
            raise ValueError(f'Unknown tile kind: {k!r}')
    return straights, curves

# services/color_engine/classifier.py
# Dominant/secondary color resolution and personality archetype classification.

import logging
from typing import List, Mapping, Tuple

from .definitions import SINGLE_COLOR_TYPES, personality_for_pair
from .models import COLOR_ORDER, ColorType, PersonalityType

logger = logging.getLogger(__name__)


def rank_colors(scores: Mapping[ColorType, float]) -> List[ColorType]:
    """
    Orders all four colors by score, highest first.

    Equal scores keep canonical order (red, yellow, green, blue), so the
    ranking is deterministic for any input. Missing colors count as 0.
    """
    return sorted(COLOR_ORDER, key=lambda color: (-scores.get(color, 0), COLOR_ORDER.index(color)))


def resolve_dominance(scores: Mapping[ColorType, float]) -> Tuple[ColorType, ColorType]:
    """Returns (dominant_color, secondary_color)."""
    ranked = rank_colors(scores)
    return ranked[0], ranked[1]


def classify_personality(dominant: ColorType, secondary: ColorType) -> PersonalityType:
    """
    Maps a dominant/secondary pair to one of the eight archetypes.

    Named pairs win regardless of order. Red+Green and Yellow+Blue have no
    named pair and fall through to the dominant color's single-color type.
    """
    dominant, secondary = ColorType(dominant), ColorType(secondary)
    pair_type = personality_for_pair(dominant, secondary)
    if pair_type is not None:
        return pair_type
    return SINGLE_COLOR_TYPES[dominant]


def classify_scores(scores: Mapping[ColorType, float]) -> Tuple[ColorType, ColorType, PersonalityType]:
    dominant, secondary = resolve_dominance(scores)
    personality_type = classify_personality(dominant, secondary)
    logger.debug(f"Classified {dict(scores)} as {personality_type.value} ({dominant.value}/{secondary.value})")
    return dominant, secondary, personality_type

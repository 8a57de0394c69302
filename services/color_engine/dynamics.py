# services/color_engine/dynamics.py
# Persona dynamics derived from a percentage score vector: conscious and
# less-conscious persona on the 0-6 point scale, and the preference flow.

import logging
import math
from typing import Callable, Dict, Mapping

from .classifier import rank_colors
from .models import (
    COLOR_ORDER,
    ColorType,
    PersonaDynamics,
    PersonaScale,
    PreferenceFlow,
    ScoreVector,
)
from .scorer import round_half_up

logger = logging.getLogger(__name__)

# --- Constants ---

POINT_SCALE_MAX = 6.0
LESS_CONSCIOUS_DAMPING = 0.7
FLOW_SCORE_LIMIT = 100


def round_to(value: float, places: int = 2) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def renormalize(scores: Mapping[ColorType, float]) -> ScoreVector:
    """Rescales scores so they sum to 100 before deriving dynamics. All-zero input stays zero."""
    values = {color: max(0.0, float(scores.get(color, 0))) for color in COLOR_ORDER}
    total = sum(values.values())
    if total == 0:
        return {color: 0 for color in COLOR_ORDER}
    return {color: round_half_up(value / total * 100) for color, value in values.items()}


def conscious_point_scale(scores: Mapping[ColorType, float]) -> Dict[ColorType, float]:
    """Plain percentage to 0-6 conversion, as shown next to the persona bars."""
    return {color: float(scores.get(color, 0)) / 100 * POINT_SCALE_MAX for color in COLOR_ORDER}


def _scale_percentage(value: float) -> int:
    return round_half_up(value / POINT_SCALE_MAX * 100)


def _build_scale(values: Dict[ColorType, float]) -> PersonaScale:
    return PersonaScale(
        values=values,
        percentages={color: _scale_percentage(value) for color, value in values.items()},
    )


# --- Directional flow rules ---
# Each rule gets (flow value, is top color, is bottom color) and returns a signed score.

def _blue_flow(flow: int, is_top: bool, is_bottom: bool) -> float:
    return -flow * 1.0 if is_bottom else flow * 1.0


def _yellow_flow(flow: int, is_top: bool, is_bottom: bool) -> float:
    return -flow * 0.8 if is_bottom else flow * 0.7


def _green_flow(flow: int, is_top: bool, is_bottom: bool) -> float:
    return flow * 0.8 if is_top else -flow * 0.8


def _red_flow(flow: int, is_top: bool, is_bottom: bool) -> float:
    if is_top:
        return flow * 1.0
    if is_bottom:
        return -flow * 1.0
    return flow * 0.3


FLOW_RULES: Dict[ColorType, Callable[[int, bool, bool], float]] = {
    ColorType.COOL_BLUE: _blue_flow,
    ColorType.SUNSHINE_YELLOW: _yellow_flow,
    ColorType.EARTH_GREEN: _green_flow,
    ColorType.FIERY_RED: _red_flow,
}


def calculate_flow_scores(flow_value: int, top_color: ColorType, bottom_color: ColorType) -> ScoreVector:
    """
    Signed per-color flow used by the flow arrows, in [-100, 100].

    Blue and Yellow trend up, Green trends down, Red leans slightly up when it
    is neither extreme. The top color is always positive and the bottom color
    always negative.
    """
    flow_scores: ScoreVector = {}
    for color in COLOR_ORDER:
        is_top = color == top_color
        is_bottom = color == bottom_color
        score = FLOW_RULES[color](flow_value, is_top, is_bottom)
        if is_top:
            score = abs(score)
        elif is_bottom:
            score = -abs(score)
        magnitude = min(FLOW_SCORE_LIMIT, round_half_up(abs(score)))
        flow_scores[color] = -magnitude if score < 0 else magnitude
    return flow_scores


def calculate_persona_dynamics(scores: Mapping[ColorType, float]) -> PersonaDynamics:
    """Derives conscious/less-conscious persona values and preference flow from percentages."""
    percentages = renormalize(scores)

    conscious_values = {
        color: round_to(pct / 100 * POINT_SCALE_MAX) for color, pct in percentages.items()
    }
    less_conscious_values = {
        color: round_to((POINT_SCALE_MAX - value) * LESS_CONSCIOUS_DAMPING)
        for color, value in conscious_values.items()
    }

    ranked = rank_colors(percentages)
    top_color, bottom_color = ranked[0], ranked[-1]
    spread = abs(conscious_values[top_color] - conscious_values[bottom_color])
    flow_value = min(100, round_half_up(spread / POINT_SCALE_MAX * 100))

    dynamics = PersonaDynamics(
        conscious=_build_scale(conscious_values),
        less_conscious=_build_scale(less_conscious_values),
        preference_flow=PreferenceFlow(value=flow_value, top_color=top_color, bottom_color=bottom_color),
        flow_scores=calculate_flow_scores(flow_value, top_color, bottom_color),
    )
    logger.debug(f"Persona dynamics for {percentages}: flow={flow_value} top={top_color.value} bottom={bottom_color.value}")
    return dynamics

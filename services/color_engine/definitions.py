# services/color_engine/definitions.py
# Static catalog of the four color energies and the eight personality archetypes.

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .models import COLOR_ORDER, ColorType, PersonalityType

# --- Color Energies ---
_COLOR_PROFILES: Dict[ColorType, Dict[str, str]] = {
    ColorType.FIERY_RED: {
        "name": "Fiery Red",
        "label": "RED",
        "description": "Competitive, demanding, determined, strong-willed, purposeful, and decisive.",
        "appears": "Business-like, functional",
        "wantsToBe": "In control",
        "primaryFocus": "Results",
        "likesYouToBe": "Brief",
        "fears": "Losing control",
        "canBeIrritatedBy": "Inefficiency, indecision",
        "underPressureMay": "Dictate",
        "decisionsAre": "Pragmatic",
        "differenceTheme": "assertiveness and directness",
        "bgColor": "#E23D28",
        "textColor": "white",
    },
    ColorType.SUNSHINE_YELLOW: {
        "name": "Sunshine Yellow",
        "label": "YELLOW",
        "description": "Sociable, dynamic, demonstrative, enthusiastic, persuasive, and expressive.",
        "appears": "Informal, outgoing",
        "wantsToBe": "Admired",
        "primaryFocus": "Interaction",
        "likesYouToBe": "Engaging",
        "fears": "Disapproval",
        "canBeIrritatedBy": "Rules, routine",
        "underPressureMay": "Dramatise or over-react",
        "decisionsAre": "Spontaneous",
        "differenceTheme": "sociability and enthusiasm",
        "bgColor": "#F2CF1D",
        "textColor": "black",
    },
    ColorType.EARTH_GREEN: {
        "name": "Earth Green",
        "label": "GREEN",
        "description": "Caring, encouraging, sharing, patient, relaxed, and amiable.",
        "appears": "Casual, conforming",
        "wantsToBe": "Liked",
        "primaryFocus": "Maintaining harmony",
        "likesYouToBe": "Pleasant",
        "fears": "Confrontation",
        "canBeIrritatedBy": "Insensitivity, impatience",
        "underPressureMay": "Feel over-burdened",
        "decisionsAre": "Considered",
        "differenceTheme": "supportiveness and patience",
        "bgColor": "#42A640",
        "textColor": "white",
    },
    ColorType.COOL_BLUE: {
        "name": "Cool Blue",
        "label": "BLUE",
        "description": "Cautious, precise, deliberate, questioning, formal, and analytical.",
        "appears": "Formal, conservative",
        "wantsToBe": "Correct",
        "primaryFocus": "Problem solving",
        "likesYouToBe": "Precise",
        "fears": "Embarassment",
        "canBeIrritatedBy": "Carelessness, vagueness",
        "underPressureMay": "Withdraw",
        "decisionsAre": "Logical and deliberate",
        "differenceTheme": "analytical thinking and precision",
        "bgColor": "#1C77C3",
        "textColor": "white",
    },
}

# --- Personality Archetypes ---
# "dominantColors" holds the pair for pair types and a single color otherwise.
_PERSONALITY_PROFILES: Dict[PersonalityType, Dict[str, Any]] = {
    PersonalityType.REFORMER: {
        "color": ColorType.FIERY_RED,
        "dominantColors": (ColorType.FIERY_RED, ColorType.COOL_BLUE),
        "description": "Your results show that you have a preference for Fiery Red and Cool Blue energies, making you a Reformer.",
        "onGoodDay": ("Self-disciplined", "Dedicated", "Pragmatic"),
        "onBadDay": ("Blunt", "Insensitive", "Critical"),
        "likes": ("Rigorous thinking", "Problem solving"),
        "goals": ("Excellence", "Perfection"),
        "fears": ("Criticism", "Lack of respect"),
        "strengths": "As a Reformer, you bring focus, discipline, and analytical thinking to your work. You excel at problem-solving and strive for excellence in everything you do.",
        "development": "Consider developing your Earth Green and Sunshine Yellow energies to balance your approach. Remember to acknowledge and appreciate others' contributions.",
    },
    PersonalityType.DIRECTOR: {
        "color": ColorType.FIERY_RED,
        "dominantColors": (ColorType.FIERY_RED,),
        "description": "Your results show that you have a strong preference for Fiery Red energy, making you a Director.",
        "onGoodDay": ("Decisive", "Self-reliant", "Courageous"),
        "onBadDay": ("Impatient", "Forcing", "Aggressive"),
        "likes": ("Competition", "Being In Control"),
        "goals": ("Success", "Progress"),
        "fears": ("Losing control", "Failure"),
        "strengths": "As a Director, you excel at taking charge and driving initiatives forward. Your decisive nature and focus on results make you an action-oriented leader.",
        "development": "Consider developing your Earth Green and Cool Blue energies to complement your action-oriented approach. Practice active listening and show appreciation for others' contributions.",
    },
    PersonalityType.MOTIVATOR: {
        "color": ColorType.SUNSHINE_YELLOW,
        "dominantColors": (ColorType.FIERY_RED, ColorType.SUNSHINE_YELLOW),
        "description": "Your results show that you have a preference for Fiery Red and Sunshine Yellow energies, making you a Motivator.",
        "onGoodDay": ("Assertive", "Dynamic", "Enthusiastic"),
        "onBadDay": ("Indiscreet", "Hasty", "Manipulative"),
        "likes": ("Adventure", "Unlimited opportunities"),
        "goals": ("Prestige", "Respect"),
        "fears": ("Being restrained", "Lack of recognition"),
        "strengths": "As a Motivator, you excel at energizing others and driving initiatives forward. You're quick to spot opportunities and mobilize resources to pursue them.",
        "development": "Consider developing your Earth Green and Cool Blue energies to balance your action-oriented approach. Not everyone will match your pace of work or thinking.",
    },
    PersonalityType.INSPIRER: {
        "color": ColorType.SUNSHINE_YELLOW,
        "dominantColors": (ColorType.SUNSHINE_YELLOW,),
        "description": "Your results show that you have a strong preference for Sunshine Yellow energy, making you an Inspirer.",
        "onGoodDay": ("Sociable", "Optimistic", "Expressive"),
        "onBadDay": ("Unreliable", "Unpredictable", "Too talkative"),
        "likes": ("Interaction", "Getting involved"),
        "goals": ("Popularity", "Approval"),
        "fears": ("Disapproval", "Loneliness"),
        "strengths": "As an Inspirer, your greatest strength is your ability to generate enthusiasm and build positive relationships. You see possibilities where others see problems.",
        "development": "Consider developing your Cool Blue and Fiery Red energies to complement your people-focused style. Try to follow through consistently on commitments.",
    },
    PersonalityType.HELPER: {
        "color": ColorType.SUNSHINE_YELLOW,
        "dominantColors": (ColorType.SUNSHINE_YELLOW, ColorType.EARTH_GREEN),
        "description": "Your results show that you have a preference for Sunshine Yellow and Earth Green energies, making you a Helper.",
        "onGoodDay": ("Engaging", "Encouraging", "Empathetic"),
        "onBadDay": ("Over-emotional", "Gullible", "Needy"),
        "likes": ("Intimacy", "Affection"),
        "goals": ("Making a difference", "Connection"),
        "fears": ("Isolation", "Rejection"),
        "strengths": "As a Helper, you excel at building relationships and bringing positive energy to teams. You're skilled at understanding people's needs and motivations.",
        "development": "Consider developing your Cool Blue and Fiery Red energies to balance your people-focused approach. Set firmer boundaries with others when needed.",
    },
    PersonalityType.SUPPORTER: {
        "color": ColorType.EARTH_GREEN,
        "dominantColors": (ColorType.EARTH_GREEN,),
        "description": "Your results show that you have a strong preference for Earth Green energy, making you a Supporter.",
        "onGoodDay": ("Caring", "Cooperative", "Patient"),
        "onBadDay": ("Compliant", "Passive", "Stubborn"),
        "likes": ("Being of service", "Accommodating others' needs"),
        "goals": ("Harmony",),
        "fears": ("Change", "Conflict"),
        "strengths": "As a Supporter, your greatest strength is your ability to create harmony and ensure everyone's well-being. Your patient, thoughtful approach helps others feel valued.",
        "development": "Consider developing your Fiery Red and Cool Blue energies to complement your collaborative style. Your perspective is valuable, even when it differs from others'.",
    },
    PersonalityType.COORDINATOR: {
        "color": ColorType.COOL_BLUE,
        "dominantColors": (ColorType.COOL_BLUE, ColorType.EARTH_GREEN),
        "description": "Your results show that you have a preference for Cool Blue and Earth Green energies, making you a Coordinator.",
        "onGoodDay": ("Thoughtful", "Diplomatic", "Dependable"),
        "onBadDay": ("Anxious", "Withdrawn", "Hesitant"),
        "likes": ("Order", "Security"),
        "goals": ("Correctness", "Duty"),
        "fears": ("Disorder", "Risk"),
        "strengths": "As a Coordinator, you excel at creating structure and ensuring processes run smoothly. Your careful planning helps prevent problems before they arise.",
        "development": "Consider developing your Fiery Red and Sunshine Yellow energies to complement your methodical approach. Share your ideas more openly before they're fully formed.",
    },
    PersonalityType.OBSERVER: {
        "color": ColorType.COOL_BLUE,
        "dominantColors": (ColorType.COOL_BLUE,),
        "description": "Your results show that you have a strong preference for Cool Blue energy, making you an Observer.",
        "onGoodDay": ("Consistent", "Precise", "Organised"),
        "onBadDay": ("Reserved", "Defensive", "Detached"),
        "likes": ("Logic", "Facts"),
        "goals": ("Understanding", "Objective truth"),
        "fears": ("Confusion", "Time pressure"),
        "strengths": "As an Observer, your greatest strength is your analytical mind and attention to detail. You remain objective and logical even in challenging situations.",
        "development": "Consider developing your Sunshine Yellow and Earth Green energies to complement your analytical style. Express your thoughts and feelings more openly with others.",
    },
}

COLOR_PROFILES: Mapping[ColorType, Mapping[str, str]] = MappingProxyType(
    {color: MappingProxyType(profile) for color, profile in _COLOR_PROFILES.items()}
)
PERSONALITY_PROFILES: Mapping[PersonalityType, Mapping[str, Any]] = MappingProxyType(
    {ptype: MappingProxyType(profile) for ptype, profile in _PERSONALITY_PROFILES.items()}
)

# Unordered color pairs that name a combined archetype.
PAIR_TYPES: Mapping[frozenset, PersonalityType] = MappingProxyType({
    frozenset((ColorType.FIERY_RED, ColorType.COOL_BLUE)): PersonalityType.REFORMER,
    frozenset((ColorType.FIERY_RED, ColorType.SUNSHINE_YELLOW)): PersonalityType.MOTIVATOR,
    frozenset((ColorType.SUNSHINE_YELLOW, ColorType.EARTH_GREEN)): PersonalityType.HELPER,
    frozenset((ColorType.COOL_BLUE, ColorType.EARTH_GREEN)): PersonalityType.COORDINATOR,
})

# Archetype used when the dominant color has no named pairing with the secondary.
SINGLE_COLOR_TYPES: Mapping[ColorType, PersonalityType] = MappingProxyType({
    ColorType.FIERY_RED: PersonalityType.DIRECTOR,
    ColorType.SUNSHINE_YELLOW: PersonalityType.INSPIRER,
    ColorType.EARTH_GREEN: PersonalityType.SUPPORTER,
    ColorType.COOL_BLUE: PersonalityType.OBSERVER,
})


# --- Lookup helpers ---

def get_color_profile(color: ColorType) -> Mapping[str, str]:
    """Returns display metadata for a color, raising KeyError for unknown colors."""
    return COLOR_PROFILES[ColorType(color)]


def get_personality_profile(personality_type: PersonalityType) -> Mapping[str, Any]:
    return PERSONALITY_PROFILES[PersonalityType(personality_type)]


def get_color_name(color: ColorType) -> str:
    return COLOR_PROFILES[ColorType(color)]["name"]


def list_color_profiles() -> List[Dict[str, str]]:
    """All color profiles in canonical order, each tagged with its id."""
    return [{"id": color.value, **COLOR_PROFILES[color]} for color in COLOR_ORDER]


def personality_for_pair(first: ColorType, second: ColorType) -> Optional[PersonalityType]:
    return PAIR_TYPES.get(frozenset((first, second)))


def pair_colors(personality_type: PersonalityType) -> Tuple[ColorType, ...]:
    return PERSONALITY_PROFILES[PersonalityType(personality_type)]["dominantColors"]

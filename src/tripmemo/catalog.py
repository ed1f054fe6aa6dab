"""
Static achievement catalog.

Every badge the engine can award is listed here once, with the display data
(icon, title, description, color) and its rarity tier. The mapping is
read-only and built at import time.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping

from .constants import (
    CATEGORY_DAY_OF_WEEK,
    CATEGORY_DAY_SPAN,
    CATEGORY_GEOGRAPHY,
    CATEGORY_ORDER,
    CATEGORY_PHOTO_COUNT,
    CATEGORY_SPECIAL,
    CATEGORY_SPEED,
    CATEGORY_TIME_OF_DAY,
    Rarity,
)
from .exceptions import UnknownAchievementTypeError


@dataclass(frozen=True)
class AchievementDefinition:
    type: str
    category: str
    icon: str
    title: str
    description: str
    color: str
    rarity: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "type": self.type,
            "category": self.category,
            "icon": self.icon,
            "title": self.title,
            "description": self.description,
            "color": self.color,
            "rarity": self.rarity,
        }


_C, _U, _R, _E, _L = Rarity.COMMON, Rarity.UNCOMMON, Rarity.RARE, Rarity.EPIC, Rarity.LEGENDARY

# (type, icon, title, description, color, rarity) grouped by category
_CATALOG_ROWS = {
    CATEGORY_SPEED: [
        ("teleporter", "🚄", "Teleporter", "Warped through space at incredible speed", "#8B5CF6", _U),
        ("jet_setter", "✈️", "Jet Setter", "Flew through the skies", "#0EA5E9", _R),
        ("slowpoke", "🐢", "Slowpoke", "Took your sweet time", "#84CC16", _R),
        ("cruise_control", "🚗", "Cruise Control", "Kept a steady highway pace", "#F59E0B", _U),
        ("half_marathon", "👟", "Half Marathon", "Covered half a marathon", "#FB7185", _C),
        ("marathon_runner", "🏃", "Marathon Runner", "Traveled marathon distance", "#EF4444", _E),
        ("century_rider", "🚲", "Century Rider", "Went the hundred kilometers", "#22C55E", _U),
        ("road_tripper", "🛣️", "Road Tripper", "Five hundred kilometers of road", "#F97316", _R),
        ("globetrotter", "🌐", "Globetrotter", "Crossed a good part of the globe", "#0EA5E9", _L),
    ],
    CATEGORY_TIME_OF_DAY: [
        ("early_bird", "🌅", "Early Bird", "Caught the morning light", "#F59E0B", _C),
        ("night_owl", "🦉", "Night Owl", "Explored the midnight hours", "#3B82F6", _U),
        ("golden_hour", "🌇", "Golden Hour", "Captured the magic light", "#F97316", _C),
        ("midnight_explorer", "🌙", "Midnight Explorer", "Active at the witching hour", "#1E3A8A", _R),
        ("lunch_break", "🍱", "Lunch Break", "Paused for a midday shot", "#FACC15", _C),
        ("morning_person", "☀️", "Morning Person", "Done before noon", "#FDE047", _U),
        ("night_shift", "🌃", "Night Shift", "Only came out after dark", "#312E81", _R),
        ("around_the_clock", "🕰️", "Around the Clock", "Shot in every part of the day", "#0891B2", _R),
        ("perfect_timing", "⏰", "Perfect Timing", "Captured at exactly :00", "#F97316", _R),
        ("on_the_hour", "🔔", "On the Hour", "Shot exactly on the hour", "#EA580C", _E),
    ],
    CATEGORY_DAY_SPAN: [
        ("long_weekend", "🏕️", "Long Weekend", "Extended the adventure", "#22C55E", _U),
        ("week_traveler", "🗺️", "Week Traveler", "A full week of exploration", "#06B6D4", _R),
        ("fortnight_explorer", "🧳", "Fortnight Explorer", "Two weeks on the road", "#0D9488", _E),
        ("month_adventurer", "🌍", "Month Adventurer", "A month-long odyssey", "#DC2626", _L),
        ("season_hopper", "🍂", "Season Hopper", "Traveled across a whole season", "#B45309", _L),
        ("overnight", "🛏️", "Overnight", "Slept somewhere new", "#6366F1", _C),
        ("quick_snap", "⚡", "Quick Snap", "In and out in minutes", "#EAB308", _C),
        ("hour_journey", "⌛", "Hour Journey", "A trip of a few hours", "#10B981", _C),
        ("half_day", "🌤️", "Half Day", "Half a day well spent", "#38BDF8", _C),
        ("full_day", "🌞", "Full Day", "From sunrise to sunset", "#F59E0B", _U),
        ("multi_day", "📆", "Multi Day", "More than a day away", "#8B5CF6", _U),
    ],
    CATEGORY_PHOTO_COUNT: [
        ("one_shot", "🎲", "One Shot", "One photo, one memory", "#9333EA", _L),
        ("duo", "✌️", "Duo", "A pair of memories", "#F472B6", _C),
        ("trio", "🥉", "Trio", "Three of a kind", "#A16207", _C),
        ("minimalist", "🎯", "Minimalist", "Quality over quantity", "#64748B", _U),
        ("dozen", "🥚", "Dozen", "Exactly a dozen shots", "#FCD34D", _U),
        ("score", "🎼", "Score", "Twenty frames, no more", "#7C3AED", _U),
        ("fifty", "🏅", "Fifty", "Half a hundred", "#CA8A04", _R),
        ("photographer", "📷", "Photographer", "Captured 100+ moments", "#EC4899", _R),
        ("paparazzi", "🎬", "Paparazzi", "Documented everything", "#F43F5E", _E),
        ("archivist", "🗄️", "Archivist", "A thousand frames archived", "#4B5563", _L),
        ("machine_gun", "📸", "Machine Gun", "Rapid-fire photography", "#EF4444", _U),
        ("triple_digit", "🔥", "Triple Digit", "Burst mode activated", "#DC2626", _U),
        ("time_lapse_master", "⏱️", "Time Lapse Master", "Perfectly timed intervals", "#14B8A6", _E),
        ("slow_shutter", "🐌", "Slow Shutter", "Took every shot with patience", "#65A30D", _U),
        ("twin_shot", "👯", "Twin Shot", "Two shots in the same instant", "#DB2777", _R),
        ("radio_silence", "📵", "Radio Silence", "Went quiet for a whole day", "#475569", _U),
        ("geotagger", "📍", "Geotagger", "Every photo knows where it was taken", "#16A34A", _C),
        ("off_the_grid", "🏝️", "Off the Grid", "No GPS, no problem", "#78716C", _U),
    ],
    CATEGORY_GEOGRAPHY: [
        ("mountain_hiker", "⛰️", "Mountain Hiker", "Conquered great heights", "#10B981", _U),
        ("downhill_racer", "🎿", "Downhill Racer", "Came down a long way", "#60A5FA", _U),
        ("sea_level", "🏖️", "Beach Lover", "Stayed close to the sea", "#38BDF8", _C),
        ("below_sea_level", "🤿", "Below Sea Level", "Went lower than the ocean", "#1D4ED8", _E),
        ("altitude_master", "🏔️", "Altitude Master", "Reached the heavens", "#7C3AED", _E),
        ("sky_high", "🦅", "Sky High", "Breathed the thinnest air", "#4C1D95", _L),
        ("cafe_dweller", "☕", "Cafe Dweller", "Found the perfect spot", "#6366F1", _U),
        ("nomad", "🏃‍♂️", "Nomad", "Never stopped moving", "#F59E0B", _R),
        ("homebody", "🏠", "Homebody", "Stayed close to where it started", "#A3A3A3", _C),
        ("border_crosser", "🛂", "Border Crosser", "Ventured to new territories", "#059669", _R),
        ("circle_back", "🔄", "Circle Back", "Returned to where it began", "#8B5CF6", _C),
        ("straight_line", "📏", "Straight Line", "Traveled with purpose", "#475569", _R),
        ("far_from_home", "🧭", "Far From Home", "Wandered far from the start", "#0F766E", _U),
        ("hemisphere_hopper", "🌏", "Hemisphere Hopper", "Crossed the equator", "#0284C7", _E),
        ("meridian_crosser", "🕛", "Meridian Crosser", "Crossed the prime meridian", "#9333EA", _R),
        ("date_line_dancer", "📅", "Date Line Dancer", "Crossed the date line", "#BE123C", _E),
        ("polar_explorer", "🐧", "Polar Explorer", "Beyond the polar circle", "#E0F2FE", _L),
        ("tropical_escape", "🌴", "Tropical Escape", "Stayed between the tropics", "#15803D", _U),
    ],
    CATEGORY_DAY_OF_WEEK: [
        ("weekend_warrior", "🎉", "Weekend Warrior", "Made the most of days off", "#A855F7", _C),
        ("weekday_wanderer", "💼", "Weekday Wanderer", "Escaped during the work week", "#64748B", _C),
        ("monday_blues", "😶‍🌫️", "Monday Blues", "Beat the Monday blues", "#2563EB", _U),
        ("tuesday_treat", "🧁", "Tuesday Treat", "Treated yourself on a Tuesday", "#F472B6", _U),
        ("midweek_escape", "🐪", "Midweek Escape", "Broke the week in half", "#D97706", _U),
        ("thursday_thrill", "⚡", "Thursday Thrill", "Couldn't wait for Friday", "#7C3AED", _U),
        ("friday_feeling", "🥳", "Friday Feeling", "Started the weekend early", "#E11D48", _U),
        ("saturday_spree", "🛍️", "Saturday Spree", "All in on Saturday", "#F97316", _U),
        ("sunday_stroll", "🌻", "Sunday Stroll", "A slow Sunday out", "#EAB308", _U),
        ("full_week", "🗓️", "Full Week", "A photo on every day of the week", "#0EA5E9", _E),
        ("friday_13th", "🐈‍⬛", "Friday the 13th", "Not superstitious", "#111827", _R),
    ],
    CATEGORY_SPECIAL: [
        ("first_timer", "🎊", "First Timer", "Welcome to your first trip", "#EC4899", _C),
        ("lucky_seven", "🎰", "Lucky Seven", "The magic number", "#22C55E", _U),
        ("round_number", "💯", "Round Number", "Perfectly balanced", "#3B82F6", _U),
        ("symmetric", "🪞", "Symmetric", "Mirror mirror...", "#A855F7", _R),
        ("fibonacci", "🐚", "Fibonacci", "Nature's sequence", "#84CC16", _E),
        ("prime_time", "🔢", "Prime Time", "Mathematically special", "#6366F1", _R),
        ("power_of_two", "💾", "Power of Two", "A number computers love", "#0F172A", _R),
        ("new_year", "🎆", "New Year", "Started the year on the road", "#FBBF24", _R),
        ("leap_day", "🐸", "Leap Day", "A day that rarely comes", "#22D3EE", _L),
        ("holiday_spirit", "🎄", "Holiday Spirit", "Traveled over the holidays", "#DC2626", _R),
        ("completionist", "🏆", "Completionist", "Achievement hunter", "#EAB308", _L),
    ],
}


def _build_catalog() -> Mapping[str, AchievementDefinition]:
    catalog: Dict[str, AchievementDefinition] = {}
    for category in CATEGORY_ORDER:
        for achievement_type, icon, title, description, color, rarity in _CATALOG_ROWS[category]:
            if achievement_type in catalog:
                raise ValueError(f"Duplicate achievement type in catalog: {achievement_type}")
            catalog[achievement_type] = AchievementDefinition(
                type=achievement_type,
                category=category,
                icon=icon,
                title=title,
                description=description,
                color=color,
                rarity=rarity,
            )
    return MappingProxyType(catalog)


ACHIEVEMENT_DEFINITIONS: Mapping[str, AchievementDefinition] = _build_catalog()


def get_definition(achievement_type: str) -> AchievementDefinition:
    """Look up a badge; unknown types are a contract violation."""
    try:
        return ACHIEVEMENT_DEFINITIONS[achievement_type]
    except KeyError:
        raise UnknownAchievementTypeError(achievement_type) from None


def types_by_category() -> Dict[str, List[str]]:
    grouped: Dict[str, List[str]] = {category: [] for category in CATEGORY_ORDER}
    for definition in ACHIEVEMENT_DEFINITIONS.values():
        grouped[definition.category].append(definition.type)
    return grouped

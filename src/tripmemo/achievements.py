"""
Achievement evaluation engine.

Each badge is a named rule ``check(photos, ctx)`` registered with the
``@rule`` decorator. A check returns None/False when the badge does not
apply, True when it does, or a dict of diagnostics that becomes the
achievement metadata. Rules never raise for missing coordinates or small
photo sets; they simply do not fire.

Rules are evaluated once per call, grouped by category in CATEGORY_ORDER and
in registration order within a category. ``completionist`` is decided last
because it depends on how many other badges fired.
"""

import logging
import math
import statistics
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, tzinfo
from functools import cached_property
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Sequence, Union

from .catalog import get_definition
from .constants import (
    ALTITUDE_MASTER_M,
    ARCHIVIST_COUNT,
    BORDER_JUMP_KM,
    CAFE_MIN_SECONDS,
    CAFE_RADIUS_KM,
    CATEGORY_ORDER,
    CENTURY_KM,
    CIRCLE_BACK_MIN_GPS_PHOTOS,
    CIRCLE_BACK_RADIUS_KM,
    COMPLETIONIST_MIN_ACHIEVEMENTS,
    CRUISE_MAX_AVG_SPEED_KMH,
    CRUISE_MIN_AVG_SPEED_KMH,
    CRUISE_MIN_GPS_PHOTOS,
    DAY_PATTERN_MIN_PHOTOS,
    DOWNHILL_LOSS_M,
    DURATION_BUCKETS,
    EARLY_BIRD_HOURS,
    EXACT_COUNT_BADGES,
    FAR_FROM_HOME_KM,
    FORTNIGHT_DAYS,
    GEOTAGGER_MIN_PHOTOS,
    GLOBETROTTER_KM,
    GOLDEN_HOUR_WINDOWS,
    HALF_MARATHON_KM,
    HOLIDAY_DATES,
    HOMEBODY_MIN_GPS_PHOTOS,
    HOMEBODY_RADIUS_KM,
    JET_SETTER_SPEED_KMH,
    LONG_WEEKEND_DAYS,
    LUCKY_NUMBER,
    LUNCH_BREAK_HOURS,
    MACHINE_GUN_PHOTOS,
    MACHINE_GUN_WINDOW_SECONDS,
    MARATHON_KM,
    MIDNIGHT_TOLERANCE_MINUTES,
    MINIMALIST_RANGE,
    MONTH_ADVENTURER_DAYS,
    MORNING_HOURS,
    MOUNTAIN_GAIN_M,
    NIGHT_OWL_HOURS,
    NIGHT_SHIFT_HOURS,
    NOMAD_MAX_STAY_SECONDS,
    NOMAD_MIN_GPS_PHOTOS,
    NOMAD_STAY_RADIUS_KM,
    PAPARAZZI_COUNT,
    PHOTOGRAPHER_COUNT,
    POLAR_CIRCLE_LAT,
    POWER_OF_TWO_MIN,
    RADIO_SILENCE_GAP_SECONDS,
    ROAD_TRIP_KM,
    ROUND_NUMBERS,
    SEA_LEVEL_MAX_M,
    SEA_LEVEL_MIN_PHOTOS,
    SEASON_HOPPER_DAYS,
    SKY_HIGH_M,
    SLOW_SHUTTER_MIN_GAP_SECONDS,
    SLOW_SHUTTER_MIN_PHOTOS,
    SLOWPOKE_MAX_SPEED_KMH,
    SLOWPOKE_MIN_GPS_PHOTOS,
    STRAIGHT_LINE_MAX_RATIO,
    STRAIGHT_LINE_MIN_CHORD_KM,
    STRAIGHT_LINE_MIN_GPS_PHOTOS,
    TELEPORTER_SPEED_KMH,
    TIME_LAPSE_MAX_VARIATION,
    TIME_LAPSE_MIN_PHOTOS,
    TRIPLE_DIGIT_PHOTOS,
    TRIPLE_DIGIT_WINDOW_SECONDS,
    TROPIC_LAT,
    WEEK_TRAVELER_DAYS,
    WEEKDAY_BADGES,
    WEEKEND_DAYS,
)
from .geo import photo_distance_km
from .models import Achievement, Photo, wall_clock
from .numeric import is_fibonacci, is_palindrome, is_power_of_two, is_prime
from .route import build_route, total_distance, trip_duration

logger = logging.getLogger(__name__)

RuleResult = Union[None, bool, Dict[str, Any]]


class Leg(NamedTuple):
    """Consecutive pair of geotagged photos."""
    start: Photo
    end: Photo
    distance_km: float
    seconds: float

    @property
    def speed_kmh(self) -> Optional[float]:
        if self.seconds <= 0:
            return None
        return self.distance_km / (self.seconds / 3600.0)


def _local_photo(photo: Photo, tz: Optional[tzinfo]) -> Photo:
    local = wall_clock(photo.timestamp, tz)
    return photo if local is photo.timestamp else replace(photo, timestamp=local)


class EvaluationContext:
    """Quantities derived once from a photo snapshot and shared by every rule.

    Attributes:
        photos: The photos in chronological order (stable for equal timestamps),
            with every timestamp as naive local time.
        is_first_trip: Whether this is the very first trip the user records.
        tz: Zone used to read hour/day of timezone-aware timestamps. When None,
            each timestamp's own wall clock is used.
    """

    def __init__(self, photos: Iterable[Photo], is_first_trip: bool = False, tz: Optional[tzinfo] = None):
        self.photos: List[Photo] = sorted((_local_photo(p, tz) for p in photos), key=lambda p: p.timestamp)
        self.is_first_trip = is_first_trip
        self.tz = tz

    @property
    def count(self) -> int:
        return len(self.photos)

    @cached_property
    def local_times(self) -> List[datetime]:
        return [p.timestamp for p in self.photos]

    @cached_property
    def gps_photos(self) -> List[Photo]:
        return [p for p in self.photos if p.has_coordinates]

    @cached_property
    def altitude_photos(self) -> List[Photo]:
        return [p for p in self.photos if p.has_altitude]

    @cached_property
    def legs(self) -> List[Leg]:
        return [
            Leg(prev, curr, photo_distance_km(prev, curr), (curr.timestamp - prev.timestamp).total_seconds())
            for prev, curr in zip(self.gps_photos, self.gps_photos[1:])
        ]

    @cached_property
    def leg_speeds(self) -> List[float]:
        """Speeds of the legs with a positive time delta, in route order."""
        return [leg.speed_kmh for leg in self.legs if leg.speed_kmh is not None]

    @cached_property
    def total_distance(self) -> float:
        return total_distance(build_route(self.photos))

    @cached_property
    def duration(self) -> int:
        return trip_duration(self.photos)

    @property
    def span_days(self) -> float:
        return self.duration / 86400.0

    @cached_property
    def gaps(self) -> List[float]:
        """Seconds between consecutive photos."""
        return [
            (curr.timestamp - prev.timestamp).total_seconds()
            for prev, curr in zip(self.photos, self.photos[1:])
        ]


RuleCheck = Callable[[Sequence[Photo], EvaluationContext], RuleResult]


@dataclass(frozen=True)
class AchievementRule:
    type: str
    category: str
    check: RuleCheck


_RULES: List[AchievementRule] = []


def rule(achievement_type: str) -> Callable[[RuleCheck], RuleCheck]:
    """Register ``check`` as the predicate awarding ``achievement_type``."""
    definition = get_definition(achievement_type)

    def decorator(check: RuleCheck) -> RuleCheck:
        if any(r.type == achievement_type for r in _RULES):
            raise ValueError(f"Rule already registered for {achievement_type}")
        _RULES.append(AchievementRule(achievement_type, definition.category, check))
        return check

    return decorator


def registered_rules() -> List[AchievementRule]:
    """Rules in evaluation order."""
    position = {category: i for i, category in enumerate(CATEGORY_ORDER)}
    return sorted(_RULES, key=lambda r: position[r.category])


def create_achievement(achievement_type: str, metadata: Optional[Dict[str, Any]] = None) -> Achievement:
    get_definition(achievement_type)
    return Achievement(
        id=str(uuid.uuid4()),
        type=achievement_type,
        unlocked_at=datetime.now(),
        metadata=metadata,
    )


def evaluate(photos: Iterable[Photo], is_first_trip: bool = False, tz: Optional[tzinfo] = None) -> List[Achievement]:
    """Award every badge the photo snapshot qualifies for.

    Args:
        photos: Photos of one trip, any order. Every photo must have a timestamp.
        is_first_trip: True when this is the user's very first trip.
        tz: Optional zone for reading local hours of aware timestamps.

    Returns:
        One Achievement per fired type, in evaluation order. Empty input
        gives an empty list.
    """
    ctx = EvaluationContext(photos, is_first_trip, tz)
    if ctx.count == 0:
        return []

    achievements: List[Achievement] = []
    for r in registered_rules():
        result = r.check(ctx.photos, ctx)
        if result is None or result is False:
            continue
        metadata = result if isinstance(result, dict) else None
        achievements.append(create_achievement(r.type, metadata))
        logger.debug(f"Achievement unlocked: {r.type} {metadata or ''}")

    # Counts itself.
    if len(achievements) + 1 >= COMPLETIONIST_MIN_ACHIEVEMENTS:
        achievements.append(create_achievement("completionist", {"count": len(achievements) + 1}))

    logger.debug(f"Evaluated {len(_RULES)} rules over {ctx.count} photos: {len(achievements)} unlocked")
    return achievements


def _time_meta(ts: datetime) -> Dict[str, Any]:
    return {"time": ts.isoformat()}


def _hour_in(ts: datetime, window) -> bool:
    start, end = window
    return start <= ts.hour < end


# ========== SPEED & MOVEMENT ==========

def _first_leg_faster_than(ctx: EvaluationContext, threshold: float) -> RuleResult:
    for speed in ctx.leg_speeds:
        if speed > threshold:
            return {"speed": round(speed)}
    return None


@rule("teleporter")
def check_teleporter(photos, ctx):
    return _first_leg_faster_than(ctx, TELEPORTER_SPEED_KMH)


@rule("jet_setter")
def check_jet_setter(photos, ctx):
    return _first_leg_faster_than(ctx, JET_SETTER_SPEED_KMH)


@rule("slowpoke")
def check_slowpoke(photos, ctx):
    # A trip that never moves does not count.
    if len(ctx.gps_photos) < SLOWPOKE_MIN_GPS_PHOTOS or not ctx.leg_speeds:
        return None
    top = max(ctx.leg_speeds)
    if 0 < top <= SLOWPOKE_MAX_SPEED_KMH:
        return {"maxSpeed": round(top, 1)}
    return None


@rule("cruise_control")
def check_cruise_control(photos, ctx):
    if len(ctx.gps_photos) < CRUISE_MIN_GPS_PHOTOS:
        return None
    hours = (ctx.gps_photos[-1].timestamp - ctx.gps_photos[0].timestamp).total_seconds() / 3600.0
    if hours <= 0:
        return None
    avg = sum(leg.distance_km for leg in ctx.legs) / hours
    if CRUISE_MIN_AVG_SPEED_KMH <= avg < CRUISE_MAX_AVG_SPEED_KMH:
        return {"avgSpeed": round(avg)}
    return None


def _distance_over(ctx: EvaluationContext, threshold: float) -> RuleResult:
    if ctx.total_distance > threshold:
        return {"distance": ctx.total_distance}
    return None


@rule("half_marathon")
def check_half_marathon(photos, ctx):
    return _distance_over(ctx, HALF_MARATHON_KM)


@rule("marathon_runner")
def check_marathon_runner(photos, ctx):
    return _distance_over(ctx, MARATHON_KM)


@rule("century_rider")
def check_century_rider(photos, ctx):
    return _distance_over(ctx, CENTURY_KM)


@rule("road_tripper")
def check_road_tripper(photos, ctx):
    return _distance_over(ctx, ROAD_TRIP_KM)


@rule("globetrotter")
def check_globetrotter(photos, ctx):
    return _distance_over(ctx, GLOBETROTTER_KM)


# ========== TIME OF DAY ==========

def _first_time_matching(ctx: EvaluationContext, predicate: Callable[[datetime], bool]) -> RuleResult:
    for ts in ctx.local_times:
        if predicate(ts):
            return _time_meta(ts)
    return None


@rule("early_bird")
def check_early_bird(photos, ctx):
    return _first_time_matching(ctx, lambda ts: _hour_in(ts, EARLY_BIRD_HOURS))


@rule("night_owl")
def check_night_owl(photos, ctx):
    return _first_time_matching(ctx, lambda ts: _hour_in(ts, NIGHT_OWL_HOURS))


@rule("golden_hour")
def check_golden_hour(photos, ctx):
    return _first_time_matching(ctx, lambda ts: any(_hour_in(ts, w) for w in GOLDEN_HOUR_WINDOWS))


@rule("midnight_explorer")
def check_midnight_explorer(photos, ctx):
    def near_midnight(ts: datetime) -> bool:
        return (ts.hour == 0 and ts.minute <= MIDNIGHT_TOLERANCE_MINUTES) or (
            ts.hour == 23 and ts.minute >= 60 - MIDNIGHT_TOLERANCE_MINUTES
        )

    return _first_time_matching(ctx, near_midnight)


@rule("lunch_break")
def check_lunch_break(photos, ctx):
    return _first_time_matching(ctx, lambda ts: _hour_in(ts, LUNCH_BREAK_HOURS))


@rule("morning_person")
def check_morning_person(photos, ctx):
    return ctx.count >= DAY_PATTERN_MIN_PHOTOS and all(_hour_in(ts, MORNING_HOURS) for ts in ctx.local_times)


@rule("night_shift")
def check_night_shift(photos, ctx):
    return ctx.count >= DAY_PATTERN_MIN_PHOTOS and all(
        any(_hour_in(ts, w) for w in NIGHT_SHIFT_HOURS) for ts in ctx.local_times
    )


@rule("around_the_clock")
def check_around_the_clock(photos, ctx):
    return {ts.hour // 6 for ts in ctx.local_times} == {0, 1, 2, 3}


@rule("perfect_timing")
def check_perfect_timing(photos, ctx):
    return _first_time_matching(ctx, lambda ts: ts.second == 0)


@rule("on_the_hour")
def check_on_the_hour(photos, ctx):
    return _first_time_matching(ctx, lambda ts: ts.minute == 0 and ts.second == 0)


# ========== DAY SPAN ==========

def _span_at_least(ctx: EvaluationContext, days: float) -> RuleResult:
    if ctx.count >= 2 and ctx.span_days >= days:
        return {"days": math.ceil(ctx.span_days)}
    return None


@rule("long_weekend")
def check_long_weekend(photos, ctx):
    return _span_at_least(ctx, LONG_WEEKEND_DAYS)


@rule("week_traveler")
def check_week_traveler(photos, ctx):
    return _span_at_least(ctx, WEEK_TRAVELER_DAYS)


@rule("fortnight_explorer")
def check_fortnight_explorer(photos, ctx):
    return _span_at_least(ctx, FORTNIGHT_DAYS)


@rule("month_adventurer")
def check_month_adventurer(photos, ctx):
    return _span_at_least(ctx, MONTH_ADVENTURER_DAYS)


@rule("season_hopper")
def check_season_hopper(photos, ctx):
    return _span_at_least(ctx, SEASON_HOPPER_DAYS)


@rule("overnight")
def check_overnight(photos, ctx):
    return ctx.count >= 2 and ctx.local_times[0].date() != ctx.local_times[-1].date()


def _duration_bucket(low: int, high: Optional[int]) -> RuleCheck:
    def check(photos, ctx):
        if ctx.count < 2:
            return None
        if ctx.duration >= low and (high is None or ctx.duration < high):
            return {"seconds": ctx.duration}
        return None

    return check


for _type, _low, _high in DURATION_BUCKETS:
    rule(_type)(_duration_bucket(_low, _high))


# ========== PHOTO COUNT & BEHAVIOR ==========

def _exact_count(expected: int) -> RuleCheck:
    def check(photos, ctx):
        return ctx.count == expected

    return check


for _type, _expected in EXACT_COUNT_BADGES:
    rule(_type)(_exact_count(_expected))


@rule("minimalist")
def check_minimalist(photos, ctx):
    low, high = MINIMALIST_RANGE
    if low <= ctx.count <= high:
        return {"count": ctx.count}
    return None


def _count_at_least(ctx: EvaluationContext, threshold: int) -> RuleResult:
    if ctx.count >= threshold:
        return {"count": ctx.count}
    return None


@rule("photographer")
def check_photographer(photos, ctx):
    return _count_at_least(ctx, PHOTOGRAPHER_COUNT)


@rule("paparazzi")
def check_paparazzi(photos, ctx):
    return _count_at_least(ctx, PAPARAZZI_COUNT)


@rule("archivist")
def check_archivist(photos, ctx):
    return _count_at_least(ctx, ARCHIVIST_COUNT)


def _burst(photos: Sequence[Photo], size: int, window_seconds: float) -> bool:
    """True if ``size`` consecutive photos fit within ``window_seconds``."""
    for i in range(len(photos) - size + 1):
        if (photos[i + size - 1].timestamp - photos[i].timestamp).total_seconds() <= window_seconds:
            return True
    return False


@rule("machine_gun")
def check_machine_gun(photos, ctx):
    if _burst(photos, MACHINE_GUN_PHOTOS, MACHINE_GUN_WINDOW_SECONDS):
        return {"count": MACHINE_GUN_PHOTOS}
    return None


@rule("triple_digit")
def check_triple_digit(photos, ctx):
    return _burst(photos, TRIPLE_DIGIT_PHOTOS, TRIPLE_DIGIT_WINDOW_SECONDS)


@rule("time_lapse_master")
def check_time_lapse_master(photos, ctx):
    if ctx.count < TIME_LAPSE_MIN_PHOTOS:
        return None
    avg = statistics.fmean(ctx.gaps)
    if avg <= 0:
        return None
    if statistics.pstdev(ctx.gaps) / avg < TIME_LAPSE_MAX_VARIATION:
        return {"avgInterval": round(avg)}
    return None


@rule("slow_shutter")
def check_slow_shutter(photos, ctx):
    return ctx.count >= SLOW_SHUTTER_MIN_PHOTOS and min(ctx.gaps) >= SLOW_SHUTTER_MIN_GAP_SECONDS


@rule("twin_shot")
def check_twin_shot(photos, ctx):
    return any(gap == 0 for gap in ctx.gaps)


@rule("radio_silence")
def check_radio_silence(photos, ctx):
    longest = max(ctx.gaps, default=0)
    if longest >= RADIO_SILENCE_GAP_SECONDS:
        return {"hours": round(longest / 3600.0, 1)}
    return None


@rule("geotagger")
def check_geotagger(photos, ctx):
    return ctx.count >= GEOTAGGER_MIN_PHOTOS and len(ctx.gps_photos) == ctx.count


@rule("off_the_grid")
def check_off_the_grid(photos, ctx):
    return not ctx.gps_photos


# ========== LOCATION & GEOGRAPHY ==========

def _altitude_changes(ctx: EvaluationContext) -> List[float]:
    alts = [p.altitude for p in ctx.altitude_photos]
    return [b - a for a, b in zip(alts, alts[1:])]


@rule("mountain_hiker")
def check_mountain_hiker(photos, ctx):
    gain = sum(d for d in _altitude_changes(ctx) if d > 0)
    if gain > MOUNTAIN_GAIN_M:
        return {"elevationGain": round(gain)}
    return None


@rule("downhill_racer")
def check_downhill_racer(photos, ctx):
    loss = -sum(d for d in _altitude_changes(ctx) if d < 0)
    if loss > DOWNHILL_LOSS_M:
        return {"elevationLoss": round(loss)}
    return None


@rule("sea_level")
def check_sea_level(photos, ctx):
    alts = ctx.altitude_photos
    return len(alts) >= SEA_LEVEL_MIN_PHOTOS and all(p.altitude <= SEA_LEVEL_MAX_M for p in alts)


def _first_altitude(ctx: EvaluationContext, predicate: Callable[[float], bool]) -> RuleResult:
    for p in ctx.altitude_photos:
        if predicate(p.altitude):
            return {"altitude": p.altitude}
    return None


@rule("below_sea_level")
def check_below_sea_level(photos, ctx):
    return _first_altitude(ctx, lambda alt: alt < 0)


@rule("altitude_master")
def check_altitude_master(photos, ctx):
    return _first_altitude(ctx, lambda alt: alt > ALTITUDE_MASTER_M)


@rule("sky_high")
def check_sky_high(photos, ctx):
    return _first_altitude(ctx, lambda alt: alt > SKY_HIGH_M)


@rule("cafe_dweller")
def check_cafe_dweller(photos, ctx):
    # Greedy clustering: a photo joins the first cluster whose anchor is close enough.
    clusters: List[List[Photo]] = []
    for photo in ctx.gps_photos:
        for cluster in clusters:
            if photo_distance_km(cluster[0], photo) <= CAFE_RADIUS_KM:
                cluster.append(photo)
                break
        else:
            clusters.append([photo])

    for cluster in clusters:
        if len(cluster) < 2:
            continue
        span = (cluster[-1].timestamp - cluster[0].timestamp).total_seconds()
        if span >= CAFE_MIN_SECONDS:
            return {"hours": round(span / 3600.0, 1)}
    return None


@rule("nomad")
def check_nomad(photos, ctx):
    if len(ctx.gps_photos) < NOMAD_MIN_GPS_PHOTOS:
        return None
    return not any(
        leg.seconds > NOMAD_MAX_STAY_SECONDS and leg.distance_km < NOMAD_STAY_RADIUS_KM for leg in ctx.legs
    )


@rule("homebody")
def check_homebody(photos, ctx):
    gps = ctx.gps_photos
    if len(gps) < HOMEBODY_MIN_GPS_PHOTOS:
        return None
    return all(photo_distance_km(gps[0], p) <= HOMEBODY_RADIUS_KM for p in gps[1:])


@rule("border_crosser")
def check_border_crosser(photos, ctx):
    for leg in ctx.legs:
        if leg.distance_km > BORDER_JUMP_KM:
            return {"distance": round(leg.distance_km)}
    return None


@rule("circle_back")
def check_circle_back(photos, ctx):
    gps = ctx.gps_photos
    if len(gps) < CIRCLE_BACK_MIN_GPS_PHOTOS:
        return None
    dist = photo_distance_km(gps[0], gps[-1])
    if dist <= CIRCLE_BACK_RADIUS_KM:
        return {"meters": round(dist * 1000)}
    return None


@rule("straight_line")
def check_straight_line(photos, ctx):
    gps = ctx.gps_photos
    if len(gps) < STRAIGHT_LINE_MIN_GPS_PHOTOS:
        return None
    chord = photo_distance_km(gps[0], gps[-1])
    if chord <= STRAIGHT_LINE_MIN_CHORD_KM:
        return None
    ratio = sum(leg.distance_km for leg in ctx.legs) / chord
    if ratio < STRAIGHT_LINE_MAX_RATIO:
        return {"ratio": round(ratio, 2)}
    return None


@rule("far_from_home")
def check_far_from_home(photos, ctx):
    gps = ctx.gps_photos
    farthest = max((photo_distance_km(gps[0], p) for p in gps[1:]), default=0.0)
    if farthest > FAR_FROM_HOME_KM:
        return {"distance": round(farthest)}
    return None


@rule("hemisphere_hopper")
def check_hemisphere_hopper(photos, ctx):
    lats = [p.latitude for p in ctx.gps_photos]
    return any(lat > 0 for lat in lats) and any(lat < 0 for lat in lats)


def _sign_flips(ctx: EvaluationContext):
    for leg in ctx.legs:
        if leg.start.longitude * leg.end.longitude < 0:
            yield abs(leg.end.longitude - leg.start.longitude)


@rule("meridian_crosser")
def check_meridian_crosser(photos, ctx):
    return any(delta < 180 for delta in _sign_flips(ctx))


@rule("date_line_dancer")
def check_date_line_dancer(photos, ctx):
    return any(delta > 180 for delta in _sign_flips(ctx))


@rule("polar_explorer")
def check_polar_explorer(photos, ctx):
    for p in ctx.gps_photos:
        if abs(p.latitude) >= POLAR_CIRCLE_LAT:
            return {"latitude": p.latitude}
    return None


@rule("tropical_escape")
def check_tropical_escape(photos, ctx):
    return bool(ctx.gps_photos) and all(abs(p.latitude) <= TROPIC_LAT for p in ctx.gps_photos)


# ========== DAY OF WEEK ==========

@rule("weekend_warrior")
def check_weekend_warrior(photos, ctx):
    return all(ts.weekday() in WEEKEND_DAYS for ts in ctx.local_times)


@rule("weekday_wanderer")
def check_weekday_wanderer(photos, ctx):
    return all(ts.weekday() not in WEEKEND_DAYS for ts in ctx.local_times)


def _only_on(weekday: int) -> RuleCheck:
    def check(photos, ctx):
        return all(ts.weekday() == weekday for ts in ctx.local_times)

    return check


for _type, _weekday in WEEKDAY_BADGES:
    rule(_type)(_only_on(_weekday))


@rule("full_week")
def check_full_week(photos, ctx):
    return len({ts.weekday() for ts in ctx.local_times}) == 7


@rule("friday_13th")
def check_friday_13th(photos, ctx):
    return _first_time_matching(ctx, lambda ts: ts.weekday() == 4 and ts.day == 13)


# ========== SPECIAL CONDITIONS ==========

@rule("first_timer")
def check_first_timer(photos, ctx):
    return ctx.is_first_trip


@rule("lucky_seven")
def check_lucky_seven(photos, ctx):
    return ctx.count == LUCKY_NUMBER


def _count_if(ctx: EvaluationContext, predicate: Callable[[int], bool]) -> RuleResult:
    if predicate(ctx.count):
        return {"count": ctx.count}
    return None


@rule("round_number")
def check_round_number(photos, ctx):
    return _count_if(ctx, lambda n: n in ROUND_NUMBERS)


@rule("symmetric")
def check_symmetric(photos, ctx):
    return _count_if(ctx, is_palindrome)


@rule("fibonacci")
def check_fibonacci(photos, ctx):
    return _count_if(ctx, is_fibonacci)


@rule("prime_time")
def check_prime_time(photos, ctx):
    return _count_if(ctx, is_prime)


@rule("power_of_two")
def check_power_of_two(photos, ctx):
    return _count_if(ctx, lambda n: n >= POWER_OF_TWO_MIN and is_power_of_two(n))


def _on_date(ctx: EvaluationContext, dates) -> RuleResult:
    return _first_time_matching(ctx, lambda ts: (ts.month, ts.day) in dates)


@rule("new_year")
def check_new_year(photos, ctx):
    return _on_date(ctx, {(1, 1)})


@rule("leap_day")
def check_leap_day(photos, ctx):
    return _on_date(ctx, {(2, 29)})


@rule("holiday_spirit")
def check_holiday_spirit(photos, ctx):
    return _on_date(ctx, HOLIDAY_DATES)

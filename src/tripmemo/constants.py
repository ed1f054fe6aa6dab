# --- Geo ---
EARTH_RADIUS_KM = 6371.0

# --- Achievement categories (evaluation order) ---
CATEGORY_SPEED = "speed"
CATEGORY_TIME_OF_DAY = "time_of_day"
CATEGORY_DAY_SPAN = "day_span"
CATEGORY_PHOTO_COUNT = "photo_count"
CATEGORY_GEOGRAPHY = "geography"
CATEGORY_DAY_OF_WEEK = "day_of_week"
CATEGORY_SPECIAL = "special"

CATEGORY_ORDER = (
    CATEGORY_SPEED,
    CATEGORY_TIME_OF_DAY,
    CATEGORY_DAY_SPAN,
    CATEGORY_PHOTO_COUNT,
    CATEGORY_GEOGRAPHY,
    CATEGORY_DAY_OF_WEEK,
    CATEGORY_SPECIAL,
)


class Rarity:
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


RARITY_ORDER = (Rarity.COMMON, Rarity.UNCOMMON, Rarity.RARE, Rarity.EPIC, Rarity.LEGENDARY)

# --- Speed & movement (km/h, km) ---
TELEPORTER_SPEED_KMH = 150
JET_SETTER_SPEED_KMH = 500
SLOWPOKE_MAX_SPEED_KMH = 5
SLOWPOKE_MIN_GPS_PHOTOS = 3
CRUISE_MIN_AVG_SPEED_KMH = 60
CRUISE_MAX_AVG_SPEED_KMH = 120
CRUISE_MIN_GPS_PHOTOS = 3
HALF_MARATHON_KM = 21.1
MARATHON_KM = 42
CENTURY_KM = 100
ROAD_TRIP_KM = 500
GLOBETROTTER_KM = 5000

# --- Time of day (local hours, [start, end)) ---
EARLY_BIRD_HOURS = (5, 7)
NIGHT_OWL_HOURS = (2, 4)
GOLDEN_HOUR_WINDOWS = ((6, 8), (17, 19))
LUNCH_BREAK_HOURS = (12, 13)
MORNING_HOURS = (5, 12)
NIGHT_SHIFT_HOURS = ((20, 24), (0, 5))
MIDNIGHT_TOLERANCE_MINUTES = 5
DAY_PATTERN_MIN_PHOTOS = 3

# --- Day span (days) ---
LONG_WEEKEND_DAYS = 3
WEEK_TRAVELER_DAYS = 7
FORTNIGHT_DAYS = 14
MONTH_ADVENTURER_DAYS = 30
SEASON_HOPPER_DAYS = 90

# Trip duration buckets in seconds, [low, high). high=None means unbounded.
# Ranges within the family are disjoint; 30 min to 1 h is deliberately uncovered.
DURATION_BUCKETS = (
    ("quick_snap", 0, 30 * 60),
    ("hour_journey", 60 * 60, 6 * 60 * 60),
    ("half_day", 6 * 60 * 60, 12 * 60 * 60),
    ("full_day", 12 * 60 * 60, 24 * 60 * 60),
    ("multi_day", 24 * 60 * 60, None),
)

# --- Photo count & behavior ---
EXACT_COUNT_BADGES = (
    ("one_shot", 1),
    ("duo", 2),
    ("trio", 3),
    ("dozen", 12),
    ("score", 20),
    ("fifty", 50),
)
MINIMALIST_RANGE = (5, 10)  # inclusive
PHOTOGRAPHER_COUNT = 100
PAPARAZZI_COUNT = 500
ARCHIVIST_COUNT = 1000
MACHINE_GUN_PHOTOS = 11  # more than 10 ...
MACHINE_GUN_WINDOW_SECONDS = 60  # ... within one minute
TRIPLE_DIGIT_PHOTOS = 3
TRIPLE_DIGIT_WINDOW_SECONDS = 60
TIME_LAPSE_MIN_PHOTOS = 10
TIME_LAPSE_MAX_VARIATION = 0.3
SLOW_SHUTTER_MIN_GAP_SECONDS = 30 * 60
SLOW_SHUTTER_MIN_PHOTOS = 3
RADIO_SILENCE_GAP_SECONDS = 24 * 60 * 60
GEOTAGGER_MIN_PHOTOS = 2

# --- Geography ---
MOUNTAIN_GAIN_M = 500
DOWNHILL_LOSS_M = 500
SEA_LEVEL_MAX_M = 10
SEA_LEVEL_MIN_PHOTOS = 3
ALTITUDE_MASTER_M = 2000
SKY_HIGH_M = 5000
CAFE_RADIUS_KM = 0.1
CAFE_MIN_SECONDS = 3 * 60 * 60
NOMAD_MIN_GPS_PHOTOS = 5
NOMAD_MAX_STAY_SECONDS = 30 * 60
NOMAD_STAY_RADIUS_KM = 0.1
HOMEBODY_RADIUS_KM = 1.0
HOMEBODY_MIN_GPS_PHOTOS = 3
BORDER_JUMP_KM = 100
CIRCLE_BACK_RADIUS_KM = 0.1
CIRCLE_BACK_MIN_GPS_PHOTOS = 3
STRAIGHT_LINE_MIN_GPS_PHOTOS = 5
STRAIGHT_LINE_MIN_CHORD_KM = 10
STRAIGHT_LINE_MAX_RATIO = 1.2
FAR_FROM_HOME_KM = 200
POLAR_CIRCLE_LAT = 66.5634
TROPIC_LAT = 23.4366

# --- Day of week (datetime.weekday(): Monday == 0) ---
WEEKEND_DAYS = frozenset({5, 6})
WEEKDAY_BADGES = (
    ("monday_blues", 0),
    ("tuesday_treat", 1),
    ("midweek_escape", 2),
    ("thursday_thrill", 3),
    ("friday_feeling", 4),
    ("saturday_spree", 5),
    ("sunday_stroll", 6),
)

# --- Special ---
ROUND_NUMBERS = frozenset({10, 50, 100})
LUCKY_NUMBER = 7
POWER_OF_TWO_MIN = 4
COMPLETIONIST_MIN_ACHIEVEMENTS = 10
FIBONACCI_NUMBERS = (1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610, 987)
HOLIDAY_DATES = frozenset({(12, 24), (12, 25)})

# --- CLI ---
APP_NAME = "tripmemo"


class CLIMessages:
    BUILDING = "Building trip from {path}..."
    SUCCESS = "Trip '{name}': {photos} photos, {distance} km, {achievements} achievements."
    WRITTEN = "Trip written to {path}"
    ERROR = "Error: {error}"

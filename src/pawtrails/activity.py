"""Activity-type detection, terrain classification and calorie estimates."""

# Speed thresholds (mph) for activity detection
PLAY_MAX_SPEED = 0.1  # almost stationary
WALK_MAX_SPEED = 2.5
HIKE_MAX_SPEED = 5.0

# Elevation gain thresholds (ft) for terrain classification
HILLY_MIN_GAIN = 200
MOUNTAINOUS_MIN_GAIN = 500

# Calories burned per pound of dog per mile
CALORIES_PER_POUND_PER_MILE = {
    "Run": 0.8,
    "Hike": 0.6,
    "Walk": 0.4,
    "Play": 0.5,
}
DEFAULT_CALORIES_PER_POUND_PER_MILE = 0.5

ENERGY_MULTIPLIERS = {
    "High": 1.2,
    "Medium": 1.0,
    "Low": 0.8,
}

# Spread of the calorie estimate around the base value
CALORIE_RANGE = 0.1


def detect_activity_type(speed_mph: float) -> str:
    """Guess the activity from a speed in mph."""
    if speed_mph < PLAY_MAX_SPEED:
        return "Play"
    if speed_mph < WALK_MAX_SPEED:
        return "Walk"
    if speed_mph < HIKE_MAX_SPEED:
        return "Hike"
    return "Run"


def classify_terrain(elevation_gain_ft: float | None) -> str:
    """Classify terrain from total elevation gain.

    The cutoffs are rough; they only drive display text and advice.
    """
    if not elevation_gain_ft or elevation_gain_ft <= 0:
        return "Unknown"
    if elevation_gain_ft > MOUNTAINOUS_MIN_GAIN:
        return "Mountainous"
    if elevation_gain_ft > HILLY_MIN_GAIN:
        return "Hilly"
    return "Flat"


def calculate_pet_calorie_burn(
    pet_weight: float, energy_level: str, distance: float, activity_type: str
) -> tuple[int, int]:
    """Estimate the (min, max) calories a dog burned over a distance in miles."""
    per_pound_mile = CALORIES_PER_POUND_PER_MILE.get(activity_type, DEFAULT_CALORIES_PER_POUND_PER_MILE)
    multiplier = ENERGY_MULTIPLIERS.get(energy_level, ENERGY_MULTIPLIERS["Low"])
    base_burn = pet_weight * per_pound_mile * distance * multiplier
    return round(base_burn * (1 - CALORIE_RANGE)), round(base_burn * (1 + CALORIE_RANGE))

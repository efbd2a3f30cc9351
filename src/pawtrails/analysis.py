"""Post-hike analysis text tailored to a pet's breed, energy and health."""

import math
from datetime import datetime, timezone

from pawtrails.activity import calculate_pet_calorie_burn
from pawtrails.models import HikeAnalysis, HikeRecord, Pet

# Rough daily energy needs of an active dog
DAILY_CALORIES_PER_POUND = 30

# Rest stop spacing (minutes) by energy level
REST_STOP_MINUTES = {"High": 30, "Medium": 25, "Low": 20}

PROGRESSION_FACTORS = {"High": 1.2, "Medium": 1.1, "Low": 1.05}

# Elevation gain (ft) above which energy use is called out
SIGNIFICANT_GAIN_FT = 500

_JOINT_KEYWORDS = ("hip", "joint", "arthritis")


def _has_joint_issues(pet: Pet) -> bool:
    return any(
        keyword in issue.lower()
        for issue in pet.health_issues
        for keyword in _JOINT_KEYWORDS
    )


def _is_warm(weather: str) -> bool:
    weather = weather.lower()
    return "hot" in weather or "sunny" in weather


def breed_insight(breed: str, activity: str, terrain: str) -> str:
    breed_lower = breed.lower()
    if "retriever" in breed_lower:
        return "As a retriever, your dog likely enjoyed the opportunity to explore and potentially access any water features."
    if any(b in breed_lower for b in ("shepherd", "collie", "malinois")):
        return (
            f"This {activity} provided good mental stimulation for your herding breed, which typically "
            "needs both physical activity and mental challenges."
        )
    if "terrier" in breed_lower:
        return f"Terriers typically enjoy exploring varied terrain, and this {terrain} area provided good stimulation."
    if any(b in breed_lower for b in ("bulldog", "pug", "shih tzu")):
        return (
            "As a brachycephalic breed, your dog's breathing should be monitored closely during activities, "
            "especially in warmer weather."
        )
    return f"The {terrain} terrain provided a good mixture of challenges and easy sections for your {breed}."


def overview_text(hike: HikeRecord, pet: Pet) -> str:
    activity = (hike.activity_type or "hike").lower()
    weather = (hike.weather_conditions or "ideal weather conditions").lower()
    terrain = (hike.terrain or "varied terrain").lower()
    trail = hike.custom_trail_name or "local"
    insight = breed_insight(pet.breed, activity, terrain)

    text = (
        f"{pet.name} had a {round(hike.duration)}-minute {activity} covering {hike.distance:.1f} miles "
        f"on the {trail} trail. The {weather} provided comfortable conditions for a {pet.breed}. {insight}"
    )
    if hike.distance > 0:
        pace = round(hike.duration / hike.distance)
        text += (
            f" The pace was about {pace} minutes per mile, which is appropriate for a trail with {terrain}."
        )
    return text


def paw_health_text(hike: HikeRecord, pet: Pet) -> str:
    if hike.terrain == "Mountainous":
        text = (
            f"The rugged mountainous terrain may have put extra stress on {pet.name}'s paw pads. "
            "Check for any cuts, abrasions, or signs of tenderness."
        )
    elif hike.terrain == "Hilly":
        text = (
            f"The hilly terrain of this trail provided a moderate challenge to {pet.name}'s paws. "
            "Look for any debris between the pads."
        )
    else:
        text = (
            f"The relatively flat terrain was gentle on {pet.name}'s paws, "
            "but it's still good to check them after any activity."
        )

    weather = (hike.weather_conditions or "").lower()
    if _is_warm(weather):
        text += " The warm weather may have heated up walking surfaces, so ensure paws didn't get burned on any asphalt or rocks."
    elif "rain" in weather or "wet" in weather:
        text += " The wet conditions may have softened paw pads, making them more susceptible to damage. Ensure they're thoroughly dried."

    if _has_joint_issues(pet):
        text += f" Given {pet.name}'s joint issues, monitor for any signs of lameness or discomfort in the hours following the activity."
    return text


def rest_stop_text(hike: HikeRecord, pet: Pet) -> str:
    activity = hike.activity_type or "Hike"
    weather = hike.weather_conditions or ""

    frequency = REST_STOP_MINUTES.get(pet.energy_level, REST_STOP_MINUTES["Low"])
    if activity == "Run":
        frequency -= 5
    elif activity == "Walk":
        frequency += 10
    if _is_warm(weather):
        frequency -= 5

    stops = math.ceil(hike.duration / frequency)
    text = f"For a {pet.breed} like {pet.name} on a {activity.lower()} of this length, {stops} rest stops would be ideal."

    if _is_warm(weather):
        text += f" In warm weather, ensure water breaks every {frequency} minutes to prevent dehydration."
    elif "rain" in weather.lower():
        text += f" During wet conditions, find sheltered areas for rest stops to keep {pet.name} from getting too chilled."

    breed = pet.breed.lower()
    if "retriever" in breed or "lab" in breed:
        text += f" {pet.name} would appreciate rest stops near water for a quick dip to cool off."
    elif "shepherd" in breed or "collie" in breed:
        text += f" Include some mental stimulation during rest stops, like simple training exercises, to keep {pet.name} engaged."
    return text


def future_suggestions_text(hike: HikeRecord, pet: Pet) -> str:
    activity = hike.activity_type or "Hike"
    terrain = hike.terrain or "varied"
    factor = PROGRESSION_FACTORS.get(pet.energy_level, PROGRESSION_FACTORS["Low"])
    next_distance = round(hike.distance * factor, 1)
    longer_distance = round(hike.distance * factor * factor, 1)

    text = (
        f"Based on {pet.name}'s performance on this {activity.lower()}, you could gradually increase distance "
        f"to {next_distance}-{longer_distance} miles on similar {terrain.lower()} terrain."
    )
    if activity == "Hike":
        text += f" Consider mixing in some shorter, more intense runs or longer, leisurely walks to provide variety in {pet.name}'s exercise routine."
    elif activity == "Run":
        text += f" Balance these high-intensity workouts with longer, more relaxed hikes to give {pet.name} a mix of cardio and exploratory activities."
    elif activity == "Walk":
        text += (
            f" For a {pet.breed} with {pet.energy_level.lower()} energy, consider challenging {pet.name} "
            "with occasional hikes on more varied terrain."
        )

    if _has_joint_issues(pet):
        text += (
            f" Considering {pet.name}'s joint issues, continue to favor natural surfaces rather than paved paths, "
            "and consider alternate exercises like swimming that are easier on the joints."
        )
    return text


def energy_expenditure_text(hike: HikeRecord, pet: Pet) -> str:
    activity = hike.activity_type or "Hike"
    min_cal, max_cal = calculate_pet_calorie_burn(pet.weight, pet.energy_level, hike.distance, activity)
    daily = pet.weight * DAILY_CALORIES_PER_POUND
    percent_of_daily = round((min_cal + max_cal) / 2 / daily * 100) if daily > 0 else 0

    text = (
        f"This {activity.lower()} likely burned approximately {min_cal}-{max_cal} calories for {pet.name}, "
        f"which is about {percent_of_daily}% of a {pet.weight:g}lb {pet.breed}'s daily energy needs."
    )
    gain = hike.elevation_gain or 0
    if hike.terrain == "Mountainous" or gain > SIGNIFICANT_GAIN_FT:
        text += (
            f" The significant elevation gain ({round(gain)}ft) increased the energy expenditure beyond "
            "what a flat-terrain activity would require."
        )

    if percent_of_daily > 30:
        text += f" Consider a slightly larger meal for {pet.name} today to replenish energy stores, especially focusing on protein to aid recovery."
    elif percent_of_daily > 15:
        text += " This represented a moderate energy expenditure, and regular feeding should be sufficient for recovery."
    else:
        text += f" This was a relatively light activity for {pet.name} and doesn't require any adjustment to regular feeding amounts."
    return text


def generate_analysis(hike: HikeRecord, pet: Pet, now: datetime | None = None) -> HikeAnalysis:
    """Build the full analysis for a recorded hike."""
    now = now or datetime.now(timezone.utc)
    return HikeAnalysis(
        id=f"analysis-{int(now.timestamp() * 1000)}",
        hike_id=hike.id,
        pet_id=pet.id,
        overview=overview_text(hike, pet),
        paw_health_insights=paw_health_text(hike, pet),
        rest_stop_recommendations=rest_stop_text(hike, pet),
        future_suggestions=future_suggestions_text(hike, pet),
        energy_expenditure_estimate=energy_expenditure_text(hike, pet),
        timestamp=now.isoformat(),
    )

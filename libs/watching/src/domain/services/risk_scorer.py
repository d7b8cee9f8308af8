"""Local Impact Score (LIS) Calculator

Fuses geomagnetic forecast, L1 solar wind, radio blackout and radiation storm
telemetry into one 0-100 index for the observer's location.
Pure functions: daylight and all time-dependent inputs are resolved by the caller.
"""

from libs.shared.src.constants.risk_thresholds import (
    GEO_KP_OFFSET,
    GEO_KP_SPAN,
    GEO_LAT_OFFSET,
    GEO_LAT_SPAN,
    GEO_MAX_SCORE,
    GEO_WEIGHT_MAX,
    GEO_WEIGHT_MIN,
    LIS_ELEVATED_MIN,
    LIS_HIGH_MIN,
    LIS_MAX,
    LIS_MIN,
    LIS_MODERATE_MIN,
    LIS_SEVERE_MIN,
    R_NIGHT_FACTOR,
    R_SCALE_SCORES,
    S_LOW_LATITUDE,
    S_LOW_LATITUDE_FACTOR,
    S_SCALE_SCORES,
    SHORT_FUSE_BASE,
    SHORT_FUSE_BONUS,
    SHORT_FUSE_BZ_EXTRA_MARGIN,
    SHORT_FUSE_MAX_SCORE,
    SHORT_FUSE_SPEED_EXTRA_MARGIN,
)
from libs.shared.src.dtos.space_weather.reading_dto import ReadingDTO
from libs.shared.src.dtos.space_weather.risk_assessment_dto import RiskAssessmentDTO
from libs.shared.src.enums.risk_category import RiskCategory


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def geo_weight(latitude: float) -> float:
    """Latitude weight of the geomagnetic term

    Floor 0.2 below ~30°, rises linearly, saturates at 1.0 by ~50°
    """
    return _clamp(
        (abs(latitude) - GEO_LAT_OFFSET) / GEO_LAT_SPAN, GEO_WEIGHT_MIN, GEO_WEIGHT_MAX
    )


def geo_base(kp_max_24h: float) -> float:
    """Kp 4 -> 0, Kp 9 -> 1"""
    return _clamp((kp_max_24h - GEO_KP_OFFSET) / GEO_KP_SPAN, 0.0, 1.0)


def short_fuse_score(
    bz: float | None,
    speed: float | None,
    short_bz_nt: float,
    short_spd_kms: float,
) -> tuple[float, bool]:
    """Short-fuse term from live L1 solar wind

    Only evaluated when both Bz and speed are available.

    Returns:
        tuple: (score 0-30, short-fuse flag)
    """
    if bz is None or speed is None:
        return 0.0, False

    score = 0.0
    flag = False
    if bz <= short_bz_nt and speed >= short_spd_kms:
        score += SHORT_FUSE_BASE
        flag = True
    if bz <= short_bz_nt - SHORT_FUSE_BZ_EXTRA_MARGIN:
        score += SHORT_FUSE_BONUS
    if speed >= short_spd_kms + SHORT_FUSE_SPEED_EXTRA_MARGIN:
        score += SHORT_FUSE_BONUS

    return _clamp(score, 0.0, SHORT_FUSE_MAX_SCORE), flag


def _scale_lookup(table: tuple[float, ...], level: int) -> float:
    if 0 <= level < len(table):
        return table[level]
    return table[-1]


def radio_blackout_score(r_level: int, is_daylight: bool) -> float:
    """R-scale term, stronger effect during daytime"""
    score = _scale_lookup(R_SCALE_SCORES, r_level)
    if not is_daylight:
        score *= R_NIGHT_FACTOR
    return score


def radiation_score(s_level: int, latitude: float) -> float:
    """S-scale term, smaller effect at low latitudes"""
    score = _scale_lookup(S_SCALE_SCORES, s_level)
    if abs(latitude) < S_LOW_LATITUDE:
        score *= S_LOW_LATITUDE_FACTOR
    return score


def categorize(index: float) -> RiskCategory:
    """Map LIS to a category (inclusive lower bounds 20/40/60/80)"""
    if index >= LIS_SEVERE_MIN:
        return RiskCategory.SEVERE
    if index >= LIS_HIGH_MIN:
        return RiskCategory.HIGH
    if index >= LIS_MODERATE_MIN:
        return RiskCategory.MODERATE
    if index >= LIS_ELEVATED_MIN:
        return RiskCategory.ELEVATED
    return RiskCategory.LOW


def score_local(
    reading: ReadingDTO,
    latitude: float,
    short_bz_nt: float,
    short_spd_kms: float,
) -> RiskAssessmentDTO:
    """
    Calculate the Local Impact Score

    LIS = 60·geo_w·geo_base + short-fuse (0-30) + R term + S term, clamped to [0, 100]

    Args:
        reading: Telemetry snapshot (bz / speed may be None)
        latitude: Observer latitude in degrees
        short_bz_nt: Short-fuse Bz threshold (nT, e.g. -10)
        short_spd_kms: Short-fuse speed threshold (km/s, e.g. 600)

    Returns:
        RiskAssessmentDTO: index, category, short-fuse flag and latitude weight
    """
    weight = geo_weight(latitude)
    geo_score = GEO_MAX_SCORE * weight * geo_base(reading["kp_max_24h"])

    short_score, short_fuse = short_fuse_score(
        reading["bz"], reading["speed"], short_bz_nt, short_spd_kms
    )
    r_score = radio_blackout_score(reading["r_level"], reading["is_daylight"])
    s_score = radiation_score(reading["s_level"], latitude)

    index = _clamp(geo_score + short_score + r_score + s_score, LIS_MIN, LIS_MAX)

    return {
        "index": index,
        "category": categorize(index).value,
        "short_fuse": short_fuse,
        "geo_weight": round(weight, 2),
    }


def round_index(index: float) -> int:
    """Round LIS half away from zero for display (LIS is never negative)"""
    return int(index + 0.5)

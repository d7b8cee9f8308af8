"""Space Weather Report Formatter

Renders a scored reading into human-readable text.
Output is plain text that is also valid Markdown, so the email channel can
attach an HTML rendering while SMS uses it verbatim.
"""

from datetime import date, datetime

from libs.shared.src.dtos.settings.watcher_settings_dto import WatcherSettingsDTO
from libs.shared.src.dtos.space_weather.alert_levels_dto import AlertLevelsDTO
from libs.shared.src.dtos.space_weather.reading_dto import ReadingDTO
from libs.shared.src.dtos.space_weather.risk_assessment_dto import RiskAssessmentDTO
from libs.watching.src.domain.services.risk_scorer import round_index

UNAVAILABLE = "unavailable"


def _format_optional(value: float | None, unit: str) -> str:
    if value is None:
        return UNAVAILABLE
    return f"{value:.1f} {unit}"


def format_report(
    settings: WatcherSettingsDTO,
    reading: ReadingDTO,
    assessment: RiskAssessmentDTO,
    now: datetime,
) -> str:
    """
    Format the full status report

    Sections: header (local time), LIS + category, raw inputs, guidance

    Args:
        settings: Watcher settings (time zone and thresholds)
        reading: Telemetry snapshot
        assessment: Risk scorer output
        now: Report instant (timezone-aware)

    Returns:
        str: Report text
    """
    local_now = now.astimezone(settings["local_tz"])
    lines = [
        f"Space Weather Status - {local_now.strftime('%Y-%m-%d %H:%M %Z')}",
        "",
        f"Local Impact Score: {round_index(assessment['index'])} "
        f"({assessment['category']})",
        "",
        "Inputs:",
        "",
        f"- Kp (max next 24h): {reading['kp_max_24h']:.1f}",
        f"- L1 Bz: {_format_optional(reading['bz'], 'nT')}",
        f"- L1 Speed: {_format_optional(reading['speed'], 'km/s')}",
        f"- Alerts: G{reading['g_level']} R{reading['r_level']} S{reading['s_level']}",
        f"- Daylight now: {'yes' if reading['is_daylight'] else 'no'}",
        "",
        "Guidance:",
        "",
        f"- LIS >= {settings['lis_threshold']} triggers warnings (configurable).",
        f"- Short-fuse trigger: Bz <= {settings['short_bz_nt']:g} nT and "
        f"Speed >= {settings['short_spd_kms']:g} km/s (about 15-60 min lead).",
    ]
    if assessment["short_fuse"]:
        lines.append("- SHORT-FUSE CONDITION ACTIVE: impact possible within the hour.")

    return "\n".join(lines) + "\n"


def build_risk_subject(assessment: RiskAssessmentDTO) -> str:
    """Subject for short-fuse / LIS-threshold warnings"""
    return (
        f"Space Weather: {assessment['category']} "
        f"(LIS {round_index(assessment['index'])})"
    )


def build_alert_subject(levels: AlertLevelsDTO) -> str:
    """Subject for alert-level changes"""
    return f"SWPC Alerts: G{levels['g']} R{levels['r']} S{levels['s']}"


def build_daily_subject(report_date: date) -> str:
    """Subject for the daily outlook"""
    return f"Daily Space Weather Outlook - {report_date.isoformat()}"


def build_baseline_subject(assessment: RiskAssessmentDTO) -> str:
    """Subject for the startup baseline report"""
    return (
        f"Space Weather Startup Baseline: {assessment['category']} "
        f"(LIS {round_index(assessment['index'])})"
    )

"""Status Report DTO"""

from typing import TypedDict

from libs.shared.src.dtos.space_weather.reading_dto import ReadingDTO
from libs.shared.src.dtos.space_weather.risk_assessment_dto import RiskAssessmentDTO


class StatusReportDTO(TypedDict):
    """Full status: reading, score and formatted body"""

    reading: ReadingDTO
    assessment: RiskAssessmentDTO
    body: str
    generated_at: str  # ISO 8601 (UTC)

"""Risk Assessment DTO"""

from typing import TypedDict


class RiskAssessmentDTO(TypedDict):
    """Risk scorer output"""

    index: float  # Local Impact Score, 0-100
    category: str  # Low | Elevated | Moderate | High | Severe
    short_fuse: bool
    geo_weight: float  # Latitude weight of the geomagnetic term (diagnostic)

"""Risk Category Enum

Label of the Local Impact Score (LIS), breakpoints 20/40/60/80
"""

from enum import Enum


class RiskCategory(Enum):
    """LIS Category (ordered from lowest to highest)"""

    LOW = "Low"  # LIS < 20
    ELEVATED = "Elevated"  # 20 <= LIS < 40
    MODERATE = "Moderate"  # 40 <= LIS < 60
    HIGH = "High"  # 60 <= LIS < 80
    SEVERE = "Severe"  # LIS >= 80

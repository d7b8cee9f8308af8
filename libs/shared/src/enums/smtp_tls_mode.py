"""SMTP TLS Mode Enum"""

from enum import Enum


class SmtpTlsMode(Enum):
    """SMTP submission mode"""

    STARTTLS = "starttls"  # usually port 587
    IMPLICIT = "implicit"  # usually port 465

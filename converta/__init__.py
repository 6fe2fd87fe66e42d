"""
Converta UK market-readiness engine.

Scores a business's readiness to enter the UK market, recommends a
compliant UK company setup and ranks partner firms that can help.
"""
from converta.engine import ReadinessReport, assess_business

__version__ = "0.1.0"

__all__ = [
    "ReadinessReport",
    "assess_business",
]

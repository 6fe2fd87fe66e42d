"""
Utility modules for the Converta readiness engine.
"""
from converta.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]

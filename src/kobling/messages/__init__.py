"""
Message utilities for kobling.

- Logger: Human-readable, colour-coded output that never carries secrets
"""
from kobling.messages.logger import KoblingLogger, get_logger

__all__ = ["KoblingLogger", "get_logger"]

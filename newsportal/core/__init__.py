"""
News Portal Core
================

Configuration, logging and the flat-file news store.
"""

from .config import Config
from .logging_service import LoggingService, logger
from .storage import NewsStore

__all__ = ['Config', 'LoggingService', 'logger', 'NewsStore']

"""
NewsDesk Core
=============

Configuration, errors, logging, models and file-backed storage shared by the
NewsDesk modules.
"""

from .config import Config
from .errors import (NewsDeskError, InvalidInput, NotFound, UnsupportedMediaType,
                     PayloadTooLarge, StorageError, StartupFatal)
from .logging_service import LoggingService, configure_logging
from .models import NewsItem, NewsForm
from .storage import NewsStore, UploadStore

__all__ = [
    'Config', 'LoggingService', 'configure_logging',
    'NewsItem', 'NewsForm', 'NewsStore', 'UploadStore',
    'NewsDeskError', 'InvalidInput', 'NotFound', 'UnsupportedMediaType',
    'PayloadTooLarge', 'StorageError', 'StartupFatal',
]

"""
Errors
======

Exceptions raised by the store and the news service. Each carries the HTTP
status the API answers with; route handlers turn them into JSON bodies.
"""


class NewsDeskError(Exception):
    status_code = 500

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(NewsDeskError):
    """A required form field is missing or blank"""
    status_code = 400


class NotFound(NewsDeskError):
    """No news item has the requested id"""
    status_code = 404


class UnsupportedMediaType(NewsDeskError):
    """The uploaded file is not an image"""
    status_code = 400


class PayloadTooLarge(NewsDeskError):
    """The uploaded file is over the size limit"""
    status_code = 400


class StorageError(NewsDeskError):
    """The news collection could not be written"""
    status_code = 500


class StartupFatal(NewsDeskError):
    """The server cannot start (unreadable TLS material)"""

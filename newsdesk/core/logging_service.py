"""
Centralized logging service for NewsDesk.
Routes structured entries through the standard logging module and tags them
with the request that produced them.
"""

import json
import logging
import sys
import traceback
from flask import request, has_request_context

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s'


def configure_logging(level='INFO'):
    """Install a console handler on the newsdesk logger (once)"""
    root = logging.getLogger('newsdesk')
    root.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(getattr(h, '_newsdesk', False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._newsdesk = True
        root.addHandler(handler)
    return root


class LoggingService:
    """Centralized logging service for application-wide logging"""

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None

        try:
            ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
            if ip_address and ',' in ip_address:
                ip_address = ip_address.split(',')[0].strip()

            return ip_address, request.path
        except Exception:
            return None, None

    @staticmethod
    def log(level, source, message, details=None):
        """
        Log a message

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (news, storage, server, ...)
            message (str): Main log message
            details (str/dict): Additional details (will be JSON-encoded if dict)
        """
        ip_address, request_path = LoggingService._get_request_context()

        if isinstance(details, dict):
            details = json.dumps(details, default=str)

        parts = [message]
        if request_path:
            parts.append(f"path={request_path}")
        if ip_address:
            parts.append(f"ip={ip_address}")
        if details:
            parts.append(f"details={details}")

        logging.getLogger(f'newsdesk.{source}').log(
            logging.getLevelName(level.upper()), ' | '.join(parts)
        )

    @staticmethod
    def debug(source, message, details=None):
        """Log debug message"""
        LoggingService.log('DEBUG', source, message, details)

    @staticmethod
    def info(source, message, details=None):
        """Log info message"""
        LoggingService.log('INFO', source, message, details)

    @staticmethod
    def warning(source, message, details=None):
        """Log warning message"""
        LoggingService.log('WARNING', source, message, details)

    @staticmethod
    def error(source, message, details=None):
        """Log error message"""
        LoggingService.log('ERROR', source, message, details)

    @staticmethod
    def critical(source, message, details=None):
        """Log critical message"""
        LoggingService.log('CRITICAL', source, message, details)

    @staticmethod
    def log_api_call(source, endpoint, method='GET', status_code=200, details=None):
        """Log API calls"""
        message = f"API {method} {endpoint} - Status: {status_code}"
        level = 'INFO' if 200 <= status_code < 400 else 'WARNING' if status_code < 500 else 'ERROR'
        LoggingService.log(level, source, message, details)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc()
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

    @staticmethod
    def log_security_event(message, details=None):
        """Log security-related events"""
        LoggingService.warning('security', message, details)


"""
NewsDesk Modules
================

Flask blueprints registered by the NewsDesk extension.
"""

__all__ = ['news', 'pages']

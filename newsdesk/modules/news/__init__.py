"""
News API Module
===============

JSON API over the file-backed news collection.

Provides:
- GET    /api/news       -- list, newest first
- GET    /api/news/<id>  -- single item
- POST   /api/news       -- create (multipart, optional image)
- DELETE /api/news/<id>  -- delete item and its image
"""

from flask import Blueprint

news_bp = Blueprint(
    'news',
    __name__,
    url_prefix='/api/news'
)

from . import routes

__all__ = ['news_bp']

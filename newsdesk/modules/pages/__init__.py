"""
Pages Module
============

Public website, admin page, uploaded images and the rest of the static tree,
served straight from disk.
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__)

from . import routes

__all__ = ['pages_bp']

"""
News Module
===========

JSON API over the flat-file news store.

Provides:
- GET /api/news  - public listing, refreshes share pages
- POST /api/news - admin-only full replacement of the collection
"""

from flask import Blueprint

news_bp = Blueprint('news', __name__, url_prefix='/api')

from . import routes

__all__ = ['news_bp']

"""
Front-end Module
================

Serves the public folder (share pages included) and the built
single-page application with an index.html fallback.
"""

from flask import Blueprint

frontend_bp = Blueprint('frontend', __name__)

from . import routes

__all__ = ['frontend_bp']

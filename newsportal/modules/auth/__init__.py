"""
News Portal Auth Module

Provides admin authentication for the news API:
- Google OAuth login (popup flow)
- Email allow-list check at callback time
- Signed cookie session with 24h lifetime
- admin_required decorator for write endpoints
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')

from . import routes
from .utils import admin_required, is_admin, OAuthError

__all__ = ['auth_bp', 'admin_required', 'is_admin', 'OAuthError']

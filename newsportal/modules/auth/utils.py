import os
from functools import wraps
from urllib.parse import urlencode

import requests
from flask import current_app, jsonify, session, url_for

GOOGLE_AUTH_URL = 'https://accounts.google.com/o/oauth2/v2/auth'
GOOGLE_TOKEN_URL = 'https://oauth2.googleapis.com/token'
GOOGLE_USERINFO_URL = 'https://www.googleapis.com/oauth2/v2/userinfo'

GOOGLE_SCOPES = [
    'https://www.googleapis.com/auth/userinfo.profile',
    'https://www.googleapis.com/auth/userinfo.email',
]


class OAuthError(Exception):
    """The identity provider returned something we cannot use"""


def _get_config_value(key, default=None):
    """Get configuration value: Flask app config first, then env var"""
    try:
        val = current_app.config.get(key)
        if val is not None:
            return val
    except RuntimeError:
        pass
    return os.getenv(key, default)


def get_redirect_uri():
    """OAuth callback URL registered with the provider"""
    app_url = _get_config_value('APP_URL', '')
    if app_url:
        return f"{app_url.rstrip('/')}/api/auth/callback"
    return url_for('auth.callback', _external=True)


def get_message_target_origin():
    """Origin the login popup may post its result to"""
    app_url = _get_config_value('APP_URL', '') or ''
    return app_url.rstrip('/') or '*'


def build_authorize_url():
    """Google consent screen URL. No state is kept locally."""
    params = {
        'redirect_uri': get_redirect_uri(),
        'client_id': _get_config_value('GOOGLE_CLIENT_ID', ''),
        'access_type': 'offline',
        'response_type': 'code',
        'prompt': 'consent',
        'scope': ' '.join(GOOGLE_SCOPES),
    }
    return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"


def exchange_code(code):
    """Swap an authorization code for an access token"""
    resp = requests.post(
        GOOGLE_TOKEN_URL,
        data={
            'code': code,
            'client_id': _get_config_value('GOOGLE_CLIENT_ID', ''),
            'client_secret': _get_config_value('GOOGLE_CLIENT_SECRET', ''),
            'redirect_uri': get_redirect_uri(),
            'grant_type': 'authorization_code',
        },
        timeout=_get_config_value('OAUTH_TIMEOUT'),
    )
    resp.raise_for_status()
    tokens = resp.json()

    access_token = tokens.get('access_token') if isinstance(tokens, dict) else None
    if not access_token:
        raise OAuthError('Token response did not include an access token')
    return access_token


def fetch_user_info(access_token):
    """Get the Google profile for an access token"""
    resp = requests.get(
        GOOGLE_USERINFO_URL,
        headers={'Authorization': f'Bearer {access_token}'},
        timeout=_get_config_value('OAUTH_TIMEOUT'),
    )
    resp.raise_for_status()
    user_info = resp.json()

    email = user_info.get('email') if isinstance(user_info, dict) else None
    if not email or not isinstance(email, str):
        raise OAuthError('User info response did not include an email')
    return user_info


def get_authorized_emails():
    """Allow-list from AUTHORIZED_EMAILS, lower-cased"""
    raw = _get_config_value('AUTHORIZED_EMAILS', '') or ''
    if isinstance(raw, str):
        raw = raw.split(',')
    return {email.strip().lower() for email in raw if email and email.strip()}


def is_email_authorized(email):
    if not email:
        return False
    return email.strip().lower() in get_authorized_emails()


def is_admin():
    """True when the session holds an authenticated admin"""
    return bool(session.get('user') and session.get('isAdmin'))


def admin_required(f):
    """Decorator to require an admin session on API routes"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_admin():
            return jsonify({'error': 'Unauthorized'}), 401
        return f(*args, **kwargs)
    return decorated_function

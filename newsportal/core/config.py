import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv(override=True)

class Config:
    """
    Base configuration for the news portal.
    Every value can be overridden on app.config before NewsPortal is initialised.
    """
    # Public base URL, used for the OAuth redirect URI and share page og:url
    APP_URL = os.getenv('APP_URL', '')

    # Flask settings
    SECRET_KEY = os.getenv('SESSION_SECRET') or os.getenv('FLASK_SECRET_KEY', 'dev-news-secret-change-in-production')
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024

    # Session cookie - cross-site attributes so the popup login flow can set it
    SESSION_COOKIE_NAME = 'session'
    SESSION_COOKIE_SECURE = os.getenv('SESSION_COOKIE_SECURE', 'true').lower() != 'false'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'None'
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)

    # OAuth settings
    GOOGLE_CLIENT_ID = os.getenv('GOOGLE_CLIENT_ID', '')
    GOOGLE_CLIENT_SECRET = os.getenv('GOOGLE_CLIENT_SECRET', '')
    AUTHORIZED_EMAILS = os.getenv('AUTHORIZED_EMAILS', '')
    OAUTH_TIMEOUT = float(os.getenv('OAUTH_TIMEOUT', '10'))

    # Storage paths
    DATA_DIR = os.getenv('DATA_DIR', os.path.join(os.getcwd(), 'data'))
    NEWS_DB = os.getenv('NEWS_DB', os.path.join(DATA_DIR, 'news.json'))
    PUBLIC_DIR = os.getenv('PUBLIC_DIR', os.path.join(os.getcwd(), 'public'))
    SHARE_DIR = os.getenv('SHARE_DIR', os.path.join(PUBLIC_DIR, 'share'))
    DIST_DIR = os.getenv('DIST_DIR', os.path.join(os.getcwd(), 'dist'))

    # Share pages
    SHARE_REDIRECT_BASE = os.getenv('SHARE_REDIRECT_BASE', '/')
    SHARE_PAGE_LANG = os.getenv('SHARE_PAGE_LANG', 'pt-br')
    SHARE_PRUNE_STALE = os.getenv('SHARE_PRUNE_STALE', 'false').lower() in ('1', 'true', 'yes')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Port for local server
    PORT = int(os.getenv('PORT', '3000'))

    @classmethod
    def as_dict(cls):
        """Upper-case settings as a plain dict, for seeding app.config"""
        return {key: getattr(cls, key) for key in dir(cls) if key.isupper()}

"""
News Portal - A small news publishing backend
=============================================

Flat-file news store with:
- Public JSON API for the news collection
- Admin writes gated by Google OAuth and an email allow-list
- Static share pages per news item for link previews

Usage:
    from flask import Flask
    from newsportal import NewsPortal

    app = Flask(__name__, static_folder=None)
    NewsPortal(app)

Or use the factory:
    from newsportal import create_app
    app = create_app()
"""

import os

from flask import Flask, jsonify

from .core.config import Config
from .core.logging_service import LoggingService, logger
from .core.storage import NewsStore
from .modules.share.generator import SharePageGenerator

__version__ = '0.1.0'

_MISSING = object()

DEFAULT_FEATURES = {
    'auth': True,
    'news': True,
    'share': True,
    'frontend': True,
}


class NewsPortal:
    """Flask extension wiring the store, share pages and blueprints"""

    def __init__(self, app=None, config=None):
        self._config = config or {}
        self._registered = []
        self.store = None
        self.generator = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self._load_config(app)
        LoggingService.configure(app.config['LOG_LEVEL'])
        self._setup_data_dirs(app)

        self.generator = SharePageGenerator(
            app.config['SHARE_DIR'],
            redirect_base=app.config['SHARE_REDIRECT_BASE'],
            lang=app.config['SHARE_PAGE_LANG'],
            app_url=app.config['APP_URL'],
            prune_stale=app.config['SHARE_PRUNE_STALE'],
        )
        self.store = NewsStore(app.config['NEWS_DB'], generator=self.generator)

        self._register_modules(app)
        self._setup_health_endpoint(app)

        app.extensions['newsportal'] = self
        logger.info('system', f"News portal ready: modules={self._registered}")

    def _load_config(self, app):
        """Seed app.config from Config.

        Values passed to NewsPortal win, then values the app already set
        (other than Flask's own defaults), then Config.
        """
        overrides = {key: value for key, value in self._config.items() if key.isupper()}
        explicit = set(overrides)

        for key, value in Config.as_dict().items():
            current = app.config.get(key, _MISSING)
            if current is _MISSING or current == Flask.default_config.get(key, _MISSING):
                app.config[key] = value
            else:
                explicit.add(key)
        app.config.update(overrides)

        # Paths derived from an overridden directory follow it
        if 'NEWS_DB' not in explicit and 'DATA_DIR' in explicit:
            app.config['NEWS_DB'] = os.path.join(app.config['DATA_DIR'], 'news.json')
        if 'SHARE_DIR' not in explicit and 'PUBLIC_DIR' in explicit:
            app.config['SHARE_DIR'] = os.path.join(app.config['PUBLIC_DIR'], 'share')

    def _setup_data_dirs(self, app):
        for key in ('DATA_DIR', 'PUBLIC_DIR'):
            os.makedirs(app.config[key], exist_ok=True)
        db_dir = os.path.dirname(app.config['NEWS_DB'])
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    def _register_modules(self, app):
        features = dict(DEFAULT_FEATURES)
        features.update(self._config.get('features', {}))

        if features['auth']:
            from .modules.auth import auth_bp
            app.register_blueprint(auth_bp)
            self._registered.append('auth')

        if features['news']:
            from .modules.news import news_bp
            app.register_blueprint(news_bp)
            self._registered.append('news')

        if features['share']:
            from .modules.share import share_bp
            app.register_blueprint(share_bp)
            self._registered.append('share')

        # Registered last so its catch-all never shadows API routes
        if features['frontend']:
            from .modules.frontend import frontend_bp
            app.register_blueprint(frontend_bp)
            self._registered.append('frontend')

    def _setup_health_endpoint(self, app):
        store = self.store
        generator = self.generator

        @app.route('/health')
        def health():
            checks = {
                'news_db': os.path.isfile(store.path),
                'share_dir': os.path.isdir(generator.share_dir),
            }
            return jsonify({'status': 'ok', 'checks': checks})

    def get_registered_modules(self):
        return list(self._registered)


def create_app(config=None):
    """Application factory"""
    app = Flask(__name__, static_folder=None)
    NewsPortal(app, config)
    return app


__all__ = ['NewsPortal', 'create_app', '__version__']

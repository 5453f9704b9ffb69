"""
News API Routes
===============

The collection is always read and written whole; there is no per-item API.
"""

from flask import current_app, request, session, jsonify
from . import news_bp
from ..auth.utils import admin_required
from ...core.logging_service import logger


def get_portal():
    """The NewsPortal extension bound to the current app"""
    return current_app.extensions['newsportal']


@news_bp.route('/news', methods=['GET'])
def get_news():
    """Get all news items"""
    portal = get_portal()
    news = portal.store.load()

    # Share pages are rebuilt on every read; a failure here is only logged
    try:
        portal.generator.regenerate_all(news)
    except OSError as e:
        logger.log_error_with_traceback('share', e, {'stage': 'regenerate_on_read'})

    return jsonify(news)


@news_bp.route('/news', methods=['POST'])
@admin_required
def save_news():
    """Replace the whole news collection"""
    news = request.get_json(silent=True)
    if not isinstance(news, list):
        return jsonify({'error': 'Expected a JSON array of news items'}), 400

    try:
        get_portal().store.replace(news)
    except OSError as e:
        logger.log_error_with_traceback('news', e)
        return jsonify({'error': 'Failed to save news'}), 500

    user = session.get('user') or {}
    logger.log_user_action('news', f"published {len(news)} items", user_id=user.get('email'))
    return jsonify({'success': True})

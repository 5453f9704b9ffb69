import json

from flask import request, redirect, session, jsonify, make_response
import requests

from . import auth_bp
from .utils import (
    OAuthError, build_authorize_url, exchange_code, fetch_user_info,
    get_message_target_origin, is_admin, is_email_authorized,
)
from ...core.logging_service import logger

SUCCESS_PAGE = """<html><body><script>
if (window.opener) {
  window.opener.postMessage({ type: 'AUTH_SUCCESS' }, %s);
  window.close();
} else {
  window.location.href = '/';
}
</script></body></html>"""


def _success_page():
    """Popup page that notifies the opener and closes itself"""
    return SUCCESS_PAGE % json.dumps(get_message_target_origin())


@auth_bp.route('/google')
def google_login():
    """Redirect to the Google consent screen"""
    return redirect(build_authorize_url())


@auth_bp.route('/callback')
def callback():
    """Handle the OAuth callback and open an admin session for allowed emails"""
    code = request.args.get('code')
    if not code:
        logger.debug('auth', 'OAuth callback without code, returning home')
        return redirect('/')

    try:
        access_token = exchange_code(code)
        user_info = fetch_user_info(access_token)
    except (requests.RequestException, OAuthError, ValueError) as e:
        logger.log_error_with_traceback('auth', e, {'stage': 'oauth_callback'})
        return 'Authentication error.', 500

    email = user_info['email']
    if not is_email_authorized(email):
        logger.log_security_event('Login attempt from unauthorized email', {'email': email})
        return 'Access denied. Email not authorized.', 403

    session.clear()
    session.permanent = True
    session['user'] = user_info
    session['isAdmin'] = True
    logger.log_user_action('auth', 'admin login', user_id=email)

    response = make_response(_success_page())
    response.headers['Content-Type'] = 'text/html; charset=utf-8'
    return response


@auth_bp.route('/me')
def me():
    """Current session identity"""
    return jsonify({'user': session.get('user'), 'isAdmin': is_admin()})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Destroy the session; safe to call when already logged out"""
    user = session.get('user') or {}
    session.clear()
    if user:
        logger.log_user_action('auth', 'logout', user_id=user.get('email'))
    return jsonify({'success': True})

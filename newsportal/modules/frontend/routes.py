import os
from flask import abort, current_app, send_from_directory
from . import frontend_bp


def _serve_spa_index():
    dist_dir = current_app.config['DIST_DIR']
    if os.path.isfile(os.path.join(dist_dir, 'index.html')):
        return send_from_directory(dist_dir, 'index.html')
    abort(404)


@frontend_bp.route('/')
def index():
    """Single-page application entry point"""
    return _serve_spa_index()


@frontend_bp.route('/<path:filename>')
def static_files(filename):
    """Public files first, then build assets, then the SPA fallback"""
    if filename == 'api' or filename.startswith('api/'):
        abort(404)

    for folder in (current_app.config['PUBLIC_DIR'], current_app.config['DIST_DIR']):
        if os.path.isfile(os.path.join(folder, filename)):
            return send_from_directory(folder, filename)

    return _serve_spa_index()

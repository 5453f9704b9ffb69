"""
News Portal
===========

Run with:
    python main.py

Or through the Flask CLI:
    flask --app main run
    flask --app main share regenerate

Visit:
    http://localhost:3000/api/news   - News JSON
    http://localhost:3000/share/     - Share pages
"""

from newsportal import create_app
from newsportal.core.config import Config

app = create_app()


if __name__ == '__main__':
    print(f"[NEWSPORTAL] Server running on http://localhost:{Config.PORT}")
    app.run(host='0.0.0.0', port=Config.PORT)

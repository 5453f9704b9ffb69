"""
Critical Integration Tests for the News Portal
===============================================

Focused tests covering the wiring most likely to break.
Run with: pytest tests/test_critical.py -v
"""

import os
from datetime import timedelta

from flask import Flask

from newsportal import NewsPortal, create_app
from conftest import make_config


# ---------------------------------------------------------------------------
# 1. Extension initialisation -- NewsPortal(app) does not raise
# ---------------------------------------------------------------------------

def test_extension_initialisation(tmp_dir):
    """NewsPortal(app) boots and stores itself on the app."""
    app = Flask(__name__, static_folder=None)
    portal = NewsPortal(app, make_config(tmp_dir))

    assert app.extensions["newsportal"] is portal
    assert portal.store.generator is portal.generator
    assert portal.get_registered_modules() == ["auth", "news", "share", "frontend"]


def test_init_app_later(tmp_dir):
    """The extension also supports the init_app pattern."""
    portal = NewsPortal(config=make_config(tmp_dir))
    app = Flask(__name__, static_folder=None)
    portal.init_app(app)

    assert app.extensions["newsportal"] is portal


def test_frontend_can_be_disabled(tmp_dir):
    config = make_config(tmp_dir)
    config["features"] = {"frontend": False}
    app = create_app(config)

    assert "frontend" not in app.extensions["newsportal"].get_registered_modules()
    assert app.test_client().get("/anything").status_code == 404


# ---------------------------------------------------------------------------
# 2. Config resolution
# ---------------------------------------------------------------------------

def test_paths_follow_overridden_directories(app, tmp_dir):
    assert app.config["NEWS_DB"] == os.path.join(tmp_dir, "data", "news.json")
    assert app.config["SHARE_DIR"] == os.path.join(tmp_dir, "public", "share")


def test_data_directories_created(app, tmp_dir):
    assert os.path.isdir(os.path.join(tmp_dir, "data"))
    assert os.path.isdir(os.path.join(tmp_dir, "public"))


def test_session_defaults_replace_flask_defaults(tmp_dir):
    """Cookie settings come from Config even though Flask ships its own defaults."""
    app = Flask(__name__, static_folder=None)
    app.config.update(
        DATA_DIR=os.path.join(tmp_dir, "data"),
        PUBLIC_DIR=os.path.join(tmp_dir, "public"),
    )
    NewsPortal(app)

    assert app.config["SESSION_COOKIE_SAMESITE"] == "None"
    assert app.config["SESSION_COOKIE_HTTPONLY"] is True
    assert app.config["PERMANENT_SESSION_LIFETIME"] == timedelta(hours=24)
    assert app.config["MAX_CONTENT_LENGTH"] == 50 * 1024 * 1024
    assert app.config["SECRET_KEY"]


def test_values_set_on_app_are_kept(tmp_dir):
    app = Flask(__name__, static_folder=None)
    app.config.update(
        DATA_DIR=os.path.join(tmp_dir, "data"),
        PUBLIC_DIR=os.path.join(tmp_dir, "public"),
        NEWS_DB=os.path.join(tmp_dir, "elsewhere", "store.json"),
        SHARE_PAGE_LANG="en",
    )
    portal = NewsPortal(app)

    assert portal.store.path == os.path.join(tmp_dir, "elsewhere", "store.json")
    assert portal.generator.lang == "en"


# ---------------------------------------------------------------------------
# 3. Health endpoint
# ---------------------------------------------------------------------------

def test_health_endpoint(client):
    client.get("/api/news")

    response = client.get("/health")

    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "ok"
    assert data["checks"] == {"news_db": True, "share_dir": True}


# ---------------------------------------------------------------------------
# 4. Front-end host
# ---------------------------------------------------------------------------

def test_share_page_served_from_public_dir(admin_client):
    admin_client.post("/api/news", json=[{"id": 42, "title": "T", "excerpt": "E", "image": "I"}])

    response = admin_client.get("/share/42.html")

    assert response.status_code == 200
    assert b"<title>T</title>" in response.data


def test_spa_fallback_serves_index(app, client):
    dist_dir = app.config["DIST_DIR"]
    os.makedirs(os.path.join(dist_dir, "assets"), exist_ok=True)
    with open(os.path.join(dist_dir, "index.html"), "w") as f:
        f.write("<div id=root></div>")
    with open(os.path.join(dist_dir, "assets", "app.js"), "w") as f:
        f.write("console.log(1)")

    assert client.get("/").data == b"<div id=root></div>"
    assert client.get("/noticias/42").data == b"<div id=root></div>"
    assert client.get("/assets/app.js").data == b"console.log(1)"


def test_unknown_api_path_is_404(app, client):
    os.makedirs(app.config["DIST_DIR"], exist_ok=True)
    with open(os.path.join(app.config["DIST_DIR"], "index.html"), "w") as f:
        f.write("spa")

    assert client.get("/api/unknown").status_code == 404


def test_missing_build_is_404(client):
    assert client.get("/").status_code == 404


# ---------------------------------------------------------------------------
# 5. CLI -- flask share regenerate
# ---------------------------------------------------------------------------

def test_share_regenerate_command(app, admin_client, share_dir):
    admin_client.post("/api/news", json=[{"id": 1, "title": "A"}, {"id": 2, "title": "B"}])
    admin_client.post("/api/news", json=[{"id": 1, "title": "A"}])
    os.unlink(os.path.join(share_dir, "1.html"))

    result = app.test_cli_runner().invoke(args=["share", "regenerate"])

    assert result.exit_code == 0
    assert "1 share pages generated" in result.output
    assert sorted(os.listdir(share_dir)) == ["1.html", "2.html"]


def test_share_regenerate_command_with_prune(app, admin_client, share_dir):
    admin_client.post("/api/news", json=[{"id": 1, "title": "A"}, {"id": 2, "title": "B"}])
    admin_client.post("/api/news", json=[{"id": 1, "title": "A"}])

    result = app.test_cli_runner().invoke(args=["share", "regenerate", "--prune"])

    assert result.exit_code == 0
    assert "1 stale share pages removed" in result.output
    assert os.listdir(share_dir) == ["1.html"]

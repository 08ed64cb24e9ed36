"""
Demo application factory.

A small Flask application with the views the harness page objects
cover (login, dashboard, profile, settings, signup, password recovery)
and a small JSON API for the API tests. The e2e and API suites run
against it when no external ``BASE_URL`` is given.

Users and profile edits live in the Flask session cookie, so every
browser context starts from the same state.
"""

from __future__ import annotations

import logging

from flask import Flask

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_USERS = {
    "testuser@example.com": {"password": "TestPassword123!", "first_name": "Test"},
    "admin@example.com": {"password": "AdminPassword123!", "first_name": "Admin"},
}


def create_app(users: dict[str, dict[str, str]] | None = None) -> Flask:
    """
    Create the demo application.

    Args:
        users: Accounts keyed by email, each with ``password`` and
            ``first_name``. Defaults to the harness's default credentials.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = "demo-app-secret"
    app.config["USERS"] = users or DEFAULT_USERS

    from tests.demo_app.api import api_bp
    from tests.demo_app.views import views_bp

    app.register_blueprint(views_bp)
    app.register_blueprint(api_bp)
    logger.info("Created demo app with %d users", len(app.config["USERS"]))
    return app

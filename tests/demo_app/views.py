"""
HTML views of the demo application.

Routes:
    GET  /login             - Login form
    POST /login             - Credential check
    POST /logout            - End the session
    GET  /dashboard         - Landing page after login
    GET  /profile           - Profile view with edit form
    POST /profile           - Save profile edits
    GET  /settings          - Settings page
    GET  /signup            - Signup page
    GET  /forgot-password   - Password recovery page
    GET  /change-password   - Password change page

The JSON endpoints live in :mod:`tests.demo_app.api`.
"""

from __future__ import annotations

import logging
import re
from functools import wraps

from flask import (
    Blueprint,
    current_app,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def login_required(view_func):
    """Redirect anonymous visitors to the login page."""

    @wraps(view_func)
    def wrapped(*args, **kwargs):
        if "email" not in session:
            return redirect(url_for("views.login"))
        return view_func(*args, **kwargs)

    return wrapped


def _profile() -> dict[str, str]:
    stored = session.get("profile")
    if stored is not None:
        return stored
    user = current_app.config["USERS"][session["email"]]
    return {"first_name": user["first_name"], "last_name": "", "phone": ""}


@views_bp.route("/")
def index():
    return redirect(url_for("views.dashboard"))


@views_bp.route("/login")
def login():
    return render_template("login.html", error=None)


@views_bp.route("/login", methods=["POST"])
def login_submit():
    """Check credentials; re-render the form with an error on rejection."""
    email = request.form.get("email", "").strip()
    password = request.form.get("password", "")

    if not EMAIL_PATTERN.match(email):
        logger.info("POST /login - malformed email")
        return render_template("login.html", error="Please enter a valid email address"), 400

    user = current_app.config["USERS"].get(email)
    if user is None or user["password"] != password:
        logger.info("POST /login - rejected %s", email)
        return render_template("login.html", error="Invalid credentials"), 401

    session.clear()
    session["email"] = email
    logger.info("POST /login - accepted %s", email)
    return redirect(url_for("views.dashboard"))


@views_bp.route("/logout", methods=["POST"])
def logout():
    session.clear()
    return redirect(url_for("views.login"))


@views_bp.route("/dashboard")
@login_required
def dashboard():
    return render_template("dashboard.html", profile=_profile(), email=session["email"])


@views_bp.route("/profile")
@login_required
def profile():
    return render_template(
        "profile.html", profile=_profile(), email=session["email"], message=None
    )


@views_bp.route("/profile", methods=["POST"])
@login_required
def profile_submit():
    """Store the edited fields in the session and confirm."""
    profile = {
        "first_name": request.form.get("firstName", "").strip(),
        "last_name": request.form.get("lastName", "").strip(),
        "phone": request.form.get("phone", "").strip(),
    }
    session["profile"] = profile
    return render_template(
        "profile.html",
        profile=profile,
        email=session["email"],
        message="Profile updated successfully",
    )


@views_bp.route("/settings")
@login_required
def settings():
    return render_template("simple.html", title="Settings")


@views_bp.route("/signup")
def signup():
    return render_template("simple.html", title="Sign up")


@views_bp.route("/forgot-password")
def forgot_password():
    return render_template("simple.html", title="Forgot password")


@views_bp.route("/change-password")
@login_required
def change_password():
    return render_template("simple.html", title="Change Password")

"""
Core routes: liveness banner and health check.
"""

from flask import jsonify

from playlift.routes import main


@main.route("/")
def index():
    """Plain-text banner so a browser hit shows the API is up."""
    return "Playlift API is running!", 200, {"Content-Type": "text/plain"}


@main.route("/health")
def health():
    """Health check endpoint for the hosting platform."""
    return jsonify({"status": "ok"}), 200

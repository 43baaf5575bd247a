import os
import logging
from typing import Optional
from urllib.parse import urlsplit
from flask import Flask
from flask_cors import CORS
from config import config, validate_required_env_vars

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(config_name=None, config_overrides: Optional[dict] = None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "production")

    # Ensure config_name is a string
    if not isinstance(config_name, str) or config_name not in config:
        config_name = "production"

    logger.info("Creating app with config: %s", config_name)

    # Validate required environment variables
    try:
        validate_required_env_vars()
        logger.info("Environment validation passed")
    except ValueError as e:
        logger.error("Environment validation failed: %s", str(e))
        if config_name == "production":
            raise  # Fail fast in production
        else:
            logger.warning(
                "Continuing in %s mode with missing environment variables",
                config_name,
            )

    app = Flask(__name__)

    # Load config
    app.config.from_object(config[config_name])
    if config_overrides:
        app.config.update(config_overrides)

    logger.info("SPOTIFY_REDIRECT_URI: %s", app.config.get("SPOTIFY_REDIRECT_URI"))
    logger.info("FRONTEND_URI: %s", app.config.get("FRONTEND_URI"))

    # Fold the config into one immutable settings object for the handlers
    from playlift.cookies import CookieJar
    from playlift.routes import SETTINGS_EXTENSION, COOKIE_JAR_EXTENSION
    from playlift.settings import PlayliftSettings

    try:
        settings = PlayliftSettings.from_flask_config(app.config)
        app.extensions[SETTINGS_EXTENSION] = settings
        app.extensions[COOKIE_JAR_EXTENSION] = CookieJar(
            settings.cookie_policy, settings.secret_key
        )
        logger.info("Cookie policy: %s", settings.cookie_policy)
    except ValueError as e:
        logger.error("Invalid Playlift settings: %s", e)
        if config_name == "production":
            raise
        logger.warning("Auth and API routes will fail until configured")

    # Let the frontend origin call us with cookies
    frontend = urlsplit(app.config.get("FRONTEND_URI") or "")
    CORS(
        app,
        origins=[f"{frontend.scheme}://{frontend.netloc}"],
        supports_credentials=True,
    )

    # Register blueprints
    from playlift.routes import main as main_blueprint

    app.register_blueprint(main_blueprint)

    # Register global error handlers
    from playlift.error_handlers import register_error_handlers

    register_error_handlers(app)

    return app

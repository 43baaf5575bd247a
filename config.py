import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def validate_required_env_vars():
    """
    Check that the Spotify credentials are present in the environment.

    SECRET_KEY is required too while cookie signing is on: every worker
    process must verify cookies signed by the others.

    Raises:
        ValueError: If any required variable is missing or empty.
    """
    required = [
        'SPOTIFY_CLIENT_ID',
        'SPOTIFY_CLIENT_SECRET',
        'SPOTIFY_REDIRECT_URI',
    ]
    if _env_flag('COOKIE_SIGNED', True):
        required.append('SECRET_KEY')
    missing = [name for name in required if not os.getenv(name)]
    if missing:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing)}"
        )


class Config:
    """Base configuration."""
    SECRET_KEY = os.getenv('SECRET_KEY', os.urandom(24))
    SPOTIFY_CLIENT_ID = os.getenv('SPOTIFY_CLIENT_ID')
    SPOTIFY_CLIENT_SECRET = os.getenv('SPOTIFY_CLIENT_SECRET')
    SPOTIFY_REDIRECT_URI = os.getenv('SPOTIFY_REDIRECT_URI')
    SPOTIFY_SHOW_DIALOG = _env_flag('SPOTIFY_SHOW_DIALOG', False)

    # Where the browser is sent back to after the OAuth dance
    FRONTEND_URI = os.getenv('FRONTEND_URI', 'http://localhost:3000')

    # Token cookie configuration
    COOKIE_SECURE = _env_flag('COOKIE_SECURE', True)
    COOKIE_SAMESITE = os.getenv('COOKIE_SAMESITE', 'None')
    COOKIE_SIGNED = _env_flag('COOKIE_SIGNED', True)
    STATE_COOKIE_MAX_AGE = 600  # 10 minutes
    REFRESH_COOKIE_MAX_AGE = 30 * 24 * 3600  # 30 days

    # Application settings
    DEBUG = False
    TESTING = False
    PORT = int(os.getenv('PORT', 5000))
    HOST = os.getenv('HOST', '0.0.0.0')


class ProductionConfig(Config):
    """Production configuration."""
    CONFIG_NAME = 'production'


class DevelopmentConfig(Config):
    """Development configuration."""
    CONFIG_NAME = 'development'
    DEBUG = True
    HOST = 'localhost'
    # Plain http on localhost cannot carry Secure / SameSite=None cookies
    COOKIE_SECURE = _env_flag('COOKIE_SECURE', False)
    COOKIE_SAMESITE = os.getenv('COOKIE_SAMESITE', 'Lax')


class TestingConfig(Config):
    """Testing configuration."""
    CONFIG_NAME = 'testing'
    TESTING = True
    DEBUG = True
    HOST = 'localhost'
    SECRET_KEY = 'test-secret-key'
    FRONTEND_URI = 'http://frontend.test'
    COOKIE_SECURE = True
    COOKIE_SAMESITE = 'Lax'
    COOKIE_SIGNED = True


# Dictionary for easy config selection
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

import os
from dotenv import load_dotenv

load_dotenv(override=True)


def _as_bool(value, default=False):
    if value is None:
        return default
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """
    Base configuration for Quillboard.
    Everything can be overridden through environment variables or the Flask app config.
    """
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')
    BRAND_NAME = os.getenv('BRAND_NAME', 'Quillboard')

    # Listing
    QUILLBOARD_ITEMS_PER_PAGE = int(os.getenv('QUILLBOARD_ITEMS_PER_PAGE', '10'))

    # Seconds before a simulated campaign send completes
    QUILLBOARD_SEND_DELAY = float(os.getenv('QUILLBOARD_SEND_DELAY', '2.0'))

    # Load mock data into the stores at startup
    QUILLBOARD_SEED_MOCK_DATA = _as_bool(os.getenv('QUILLBOARD_SEED_MOCK_DATA'), default=True)

    # Identity stamped on new posts and campaigns
    QUILLBOARD_CURRENT_USER_ID = os.getenv('QUILLBOARD_CURRENT_USER_ID', 'current-user-id')
    QUILLBOARD_CURRENT_USER_NAME = os.getenv('QUILLBOARD_CURRENT_USER_NAME', 'Current User')

    # Defaults for admin replies to comments
    QUILLBOARD_ADMIN_NAME = os.getenv('QUILLBOARD_ADMIN_NAME', 'Admin')
    QUILLBOARD_ADMIN_EMAIL = os.getenv('QUILLBOARD_ADMIN_EMAIL', 'admin@example.com')

    # Notifications kept in memory for the dashboard
    QUILLBOARD_NOTIFICATION_HISTORY = int(os.getenv('QUILLBOARD_NOTIFICATION_HISTORY', '100'))

    # Comma separated origins allowed to call /admin/api (front end hosted elsewhere)
    QUILLBOARD_CORS_ORIGINS = [
        o.strip() for o in os.getenv('QUILLBOARD_CORS_ORIGINS', '*').split(',') if o.strip()
    ]


def get_config_value(key, default=None):
    """Get configuration value: Flask app config first, then Config, then env var"""
    try:
        from flask import current_app
        val = current_app.config.get(key)
        if val is not None:
            return val
    except RuntimeError:
        pass
    val = getattr(Config, key, None)
    if val is not None:
        return val
    return os.getenv(key, default)

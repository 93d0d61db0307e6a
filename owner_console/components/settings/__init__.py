"""
Settings Component
Active sessions, password change and console preferences
"""
from .routes import settings_bp
from .service import SettingsService


def init_settings(app):
    """Initialize Settings component with Flask app"""
    app.register_blueprint(settings_bp)
    return settings_bp


__all__ = ['settings_bp', 'SettingsService', 'init_settings']

"""
Auth Component
Console login, logout and the account flows that run without a session
"""
from .routes import auth_bp
from .service import AuthService


def init_auth(app):
    """Initialize Auth component with Flask app"""
    app.register_blueprint(auth_bp)
    return auth_bp


__all__ = ['auth_bp', 'AuthService', 'init_auth']

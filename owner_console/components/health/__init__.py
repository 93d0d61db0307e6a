"""
Health Component
Backend service health with a Redis-only fallback
"""
from .routes import health_bp
from .service import HealthService


def init_health(app):
    """Initialize Health component with Flask app"""
    app.register_blueprint(health_bp)
    return health_bp


__all__ = ['health_bp', 'HealthService', 'init_health']

"""
Metrics Component
System metrics snapshot for the admin dashboard
"""
from .routes import metrics_bp
from .service import MetricsService


def init_metrics(app):
    """Initialize Metrics component with Flask app"""
    app.register_blueprint(metrics_bp)
    return metrics_bp


__all__ = ['metrics_bp', 'MetricsService', 'init_metrics']

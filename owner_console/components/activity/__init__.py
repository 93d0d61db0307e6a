"""
Activity Component
Recent console notifications (failed actions, backend status changes)
"""
from .routes import activity_bp
from .service import ActivityService


def init_activity(app):
    """Initialize Activity component with Flask app"""
    app.register_blueprint(activity_bp)
    return activity_bp


__all__ = ['activity_bp', 'ActivityService', 'init_activity']

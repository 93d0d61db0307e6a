"""
Queues Component
Background queue monitoring, job maintenance and real-time stats via SSE
"""
from .routes import queues_bp
from .service import QueuesService
from .sse_handler import QueueSSEHandler


def init_queues(app):
    """Initialize Queues component with Flask app"""
    app.register_blueprint(queues_bp)
    return queues_bp


__all__ = ['queues_bp', 'QueuesService', 'QueueSSEHandler', 'init_queues']

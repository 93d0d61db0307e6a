"""
Health API Routes
"""
from flask import Blueprint, current_app

from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import owner_required
from owner_console.core.responses import api_error_response, success
from .service import HealthService

health_bp = Blueprint('health', __name__, url_prefix='/api/admin/health')

service = HealthService()


@health_bp.route('')
@owner_required
def api_system_health():
    """Backend service health plus the console's own view of the backend"""
    try:
        health = service.get_system_health()
    except ApiClientError as e:
        return api_error_response(e, 'health.system')

    monitor = current_app.extensions.get('upstream_monitor')
    return success({
        'services': health,
        'monitor': monitor.get_status() if monitor else None,
        'pollingInterval': current_app.config['POLLING_INTERVALS']['health'],
    })


@health_bp.route('/redis')
@owner_required
def api_redis_health():
    try:
        redis = service.get_redis_health()
    except ApiClientError as e:
        return api_error_response(e, 'health.redis')
    return success(redis)

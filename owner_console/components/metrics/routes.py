"""
Metrics API Routes
"""
from flask import Blueprint, current_app

from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import owner_required
from owner_console.core.responses import api_error_response, success
from .service import MetricsService, summarize_metrics

metrics_bp = Blueprint('metrics', __name__, url_prefix='/api/admin/metrics')

service = MetricsService()


@metrics_bp.route('')
@owner_required
def api_metrics():
    """Full metrics snapshot plus the derived summary"""
    try:
        metrics = service.get_metrics()
    except ApiClientError as e:
        return api_error_response(e, 'metrics.get')
    return success({
        'metrics': metrics,
        'summary': summarize_metrics(metrics),
        'pollingInterval': current_app.config['POLLING_INTERVALS']['metrics'],
    })


@metrics_bp.route('/summary')
@owner_required
def api_metrics_summary():
    try:
        summary = service.get_summary()
    except ApiClientError as e:
        return api_error_response(e, 'metrics.summary')
    return success(summary)

"""
Queues API Routes
"""
from flask import Blueprint, current_app, request

from owner_console.core.api_client import ApiClientError, SessionExpiredError
from owner_console.core.auth import owner_required
from owner_console.core.responses import api_error_response, error, success
from owner_console.core.tokens import SessionTokenStore
from .service import DEFAULT_GRACE_MS, QueuesService
from .sse_handler import QueueSSEHandler

queues_bp = Blueprint('queues', __name__, url_prefix='/api/admin/queues')

service = QueuesService()


def _int_arg(name, default):
    value = request.args.get(name, default, type=int)
    if value is None or value < 0:
        raise ValueError(f'{name} must be a non-negative integer')
    return value


@queues_bp.route('/stats')
@owner_required
def api_queue_stats():
    """Per-queue counters with health badges and totals"""
    try:
        overview = service.get_overview()
    except ApiClientError as e:
        return api_error_response(e, 'queues.stats')
    overview['pollingInterval'] = current_app.config['POLLING_INTERVALS']['queues']
    return success(overview)


@queues_bp.route('/stream')
@owner_required
def api_queue_stream():
    """SSE endpoint for real-time queue stats"""
    handler = QueueSSEHandler(
        service,
        interval=current_app.config['POLLING_INTERVALS']['queues'] / 1000,
        heartbeat=current_app.config.get('SSE_HEARTBEAT_SECONDS', 30),
        token_store=SessionTokenStore(),
    )
    # First snapshot inside the request so a token refresh reaches the cookie
    try:
        handler.initial_state = handler.poll()
    except SessionExpiredError as e:
        return api_error_response(e, 'queues.stream')
    return handler.stream()


@queues_bp.route('/<queue_name>/jobs/<job_id>/retry', methods=['POST'])
@owner_required
def api_retry_job(queue_name, job_id):
    try:
        result = service.retry_job(queue_name, job_id)
    except ApiClientError as e:
        return api_error_response(e, 'queues.retry')
    return success(result, 'Job queued for retry')


@queues_bp.route('/<queue_name>/jobs/clean', methods=['DELETE'])
@owner_required
def api_clean_jobs(queue_name):
    default_grace = current_app.config.get('QUEUE_CLEAN_GRACE_MS', DEFAULT_GRACE_MS)
    try:
        grace = _int_arg('grace', default_grace)
        result = service.clean_jobs(
            queue_name,
            status=request.args.get('status', 'completed'),
            grace=grace,
        )
    except ValueError as e:
        return error(str(e), 400)
    except ApiClientError as e:
        return api_error_response(e, 'queues.clean')
    return success(result, 'Jobs cleaned')


@queues_bp.route('/<queue_name>/jobs/failed')
@owner_required
def api_failed_jobs(queue_name):
    page_size = current_app.config.get('QUEUE_PAGE_SIZE', 20)
    try:
        result = service.get_failed_jobs(
            queue_name,
            start=_int_arg('start', 0),
            end=_int_arg('end', page_size),
        )
    except ValueError as e:
        return error(str(e), 400)
    except ApiClientError as e:
        return api_error_response(e, 'queues.failed')
    return success(result)


@queues_bp.route('/<queue_name>/jobs/history')
@owner_required
def api_job_history(queue_name):
    page_size = current_app.config.get('QUEUE_PAGE_SIZE', 20)
    try:
        result = service.get_job_history(
            queue_name,
            status=request.args.get('status', 'completed'),
            start=_int_arg('start', 0),
            end=_int_arg('end', page_size),
        )
    except ValueError as e:
        return error(str(e), 400)
    except ApiClientError as e:
        return api_error_response(e, 'queues.history')
    return success(result)

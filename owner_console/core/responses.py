"""
Console response envelopes
The console answers the browser in the same envelope shapes the backend uses.
"""
import logging
from datetime import datetime, timezone

from flask import current_app, jsonify

from .api_client import SessionExpiredError

logger = logging.getLogger(__name__)


def _timestamp():
    return datetime.now(timezone.utc).isoformat()


def success(data=None, message='OK', status_code=200, pagination=None):
    body = {
        'success': True,
        'statusCode': status_code,
        'message': message,
        'data': data,
        'timestamp': _timestamp(),
    }
    if pagination is not None:
        body['pagination'] = pagination
    return jsonify(body), status_code


def paginated(result, message='OK'):
    """Envelope for {'data', 'pagination'} results from the client"""
    return success(result['data'], message, pagination=result['pagination'])


def error(message, status_code, errors=None, **extra):
    body = {
        'success': False,
        'statusCode': status_code,
        'message': message,
        'errors': errors,
        'timestamp': _timestamp(),
    }
    body.update(extra)
    return jsonify(body), status_code


def _record(level, message, **context):
    activity_log = current_app.extensions.get('activity_log')
    if activity_log is not None:
        activity_log.add(level, message, **context)


def api_error_response(err, action=None):
    """Map an ApiClientError raised by an upstream call to a console response

    Network failures (status 0) become 502 and timeouts (408) become 504 so
    the browser can tell a dead backend from a rejected request.
    """
    status = err.status_code or 0
    if status == 0:
        http_status = 502
    elif status == 408:
        http_status = 504
    else:
        http_status = status

    _record(
        'WARNING' if 400 <= http_status < 500 else 'ERROR',
        err.message,
        action=action,
        status=status,
    )

    if isinstance(err, SessionExpiredError):
        return error(err.message, 401, err.errors, redirect=err.redirect)
    return error(err.message, http_status, err.errors, upstreamStatus=status)


def validation_error_response(err):
    return error(err.message, 400, err.errors)

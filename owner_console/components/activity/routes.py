"""
Activity API Routes
"""
from flask import Blueprint, request

from owner_console.core.auth import owner_required
from owner_console.core.responses import error, success
from .service import ActivityService

activity_bp = Blueprint('activity', __name__, url_prefix='/api/activity')

service = ActivityService()


@activity_bp.route('')
@owner_required
def api_activity():
    """Most recent entries, filtered by ?level= and capped by ?limit="""
    limit = request.args.get('limit', 50, type=int)
    if limit is None or limit < 1:
        return error('limit must be a positive integer', 400)
    try:
        entries = service.get_entries(request.args.get('level', 'ALL'), limit)
    except ValueError as e:
        return error(str(e), 400)
    return success(entries)


@activity_bp.route('', methods=['DELETE'])
@owner_required
def api_clear_activity():
    service.clear()
    return success(None, 'Activity cleared')

"""
Cron Jobs API Routes
"""
from flask import Blueprint, current_app, request

from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import owner_required
from owner_console.core.responses import api_error_response, error, success
from .service import CronJobsService

cron_jobs_bp = Blueprint('cron_jobs', __name__, url_prefix='/api/admin/cron-jobs')

service = CronJobsService()


@cron_jobs_bp.route('')
@owner_required
def api_cron_jobs():
    """All scheduled jobs with per-job health and totals"""
    try:
        overview = service.get_overview()
    except ApiClientError as e:
        return api_error_response(e, 'cron_jobs.list')
    overview['pollingInterval'] = current_app.config['POLLING_INTERVALS']['cron_jobs']
    return success(overview)


@cron_jobs_bp.route('/<job_name>')
@owner_required
def api_cron_job(job_name):
    try:
        job = service.get_status(job_name)
    except ApiClientError as e:
        return api_error_response(e, 'cron_jobs.get')
    return success(job)


@cron_jobs_bp.route('/<job_name>/history')
@owner_required
def api_cron_job_history(job_name):
    limit = request.args.get('limit', 50, type=int)
    if limit is None or limit < 1:
        return error('limit must be a positive integer', 400)
    try:
        history = service.get_history(job_name, limit=limit)
    except ApiClientError as e:
        return api_error_response(e, 'cron_jobs.history')
    return success(history)

"""
Cron Jobs Component
Scheduled job status and execution history
"""
from .routes import cron_jobs_bp
from .service import CronJobsService


def init_cron_jobs(app):
    """Initialize Cron Jobs component with Flask app"""
    app.register_blueprint(cron_jobs_bp)
    return cron_jobs_bp


__all__ = ['cron_jobs_bp', 'CronJobsService', 'init_cron_jobs']

"""
Queues Business Logic
"""
import logging
from urllib.parse import quote

from owner_console.components import ApiService, register_component

logger = logging.getLogger(__name__)

CLEAN_STATUSES = ('completed', 'failed', 'all')
HISTORY_STATUSES = ('completed', 'failed', 'active', 'waiting', 'delayed')
QUEUE_COUNTERS = ('waiting', 'active', 'completed', 'failed', 'delayed')
DEFAULT_GRACE_MS = 1000 * 60 * 60 * 24


def queue_health(stats):
    """Badge from the failure share: error above 10%, warning above 5%"""
    total = sum(stats.get(key) or 0 for key in QUEUE_COUNTERS)
    failure_rate = (stats.get('failed') or 0) / total if total else 0
    if failure_rate > 0.1:
        return 'error'
    if failure_rate > 0.05:
        return 'warning'
    return 'healthy'


def aggregate_stats(queues):
    """Counters summed across every queue"""
    totals = dict.fromkeys(QUEUE_COUNTERS, 0)
    for stats in queues.values():
        for key in QUEUE_COUNTERS:
            totals[key] += stats.get(key) or 0
    return totals


def _queue_path(queue_name):
    return f"/admin/queues/{quote(queue_name, safe='')}"


@register_component('queues')
class QueuesService(ApiService):
    """Service for queue monitoring and maintenance"""

    def get_stats(self):
        """Per-queue counters keyed by queue name"""
        data = self.client.get_data('/admin/queues/stats')
        if not isinstance(data, dict):
            return {}
        queues = data.get('queues')
        if not isinstance(queues, dict):
            return {}
        # A queue without a stats object has nothing to show
        return {name: stats for name, stats in queues.items() if isinstance(stats, dict)}

    def get_overview(self):
        queues = self.get_stats()
        return {
            'queues': {
                name: dict(stats, health=queue_health(stats))
                for name, stats in queues.items()
            },
            'summary': aggregate_stats(queues),
        }

    def retry_job(self, queue_name, job_id):
        logger.info(f'[QUEUE] Retrying job {job_id} on {queue_name}')
        return self.client.post_data(
            f"{_queue_path(queue_name)}/jobs/{quote(str(job_id), safe='')}/retry"
        )

    def clean_jobs(self, queue_name, status='completed', grace=DEFAULT_GRACE_MS):
        """Remove finished jobs older than grace milliseconds"""
        if status not in CLEAN_STATUSES:
            raise ValueError(f"status must be one of: {', '.join(CLEAN_STATUSES)}")
        if grace < 0:
            raise ValueError('grace must not be negative')

        logger.info(f'[QUEUE] Cleaning {status} jobs on {queue_name} (grace={grace}ms)')
        response = self.client.delete(
            f'{_queue_path(queue_name)}/jobs/clean',
            params={'status': status, 'grace': grace},
        )
        # Accept both the envelope and a bare result
        if isinstance(response, dict) and isinstance(response.get('data'), dict):
            return response['data']
        return response

    def get_failed_jobs(self, queue_name, start=0, end=20):
        return self.client.get_data(
            f'{_queue_path(queue_name)}/jobs/failed',
            params={'start': start, 'end': end},
        )

    def get_job_history(self, queue_name, status='completed', start=0, end=20):
        if status not in HISTORY_STATUSES:
            raise ValueError(f"status must be one of: {', '.join(HISTORY_STATUSES)}")
        return self.client.get_data(
            f'{_queue_path(queue_name)}/jobs/history',
            params={'status': status, 'start': start, 'end': end},
        )

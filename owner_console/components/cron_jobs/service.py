"""
Cron Jobs Business Logic
"""
from urllib.parse import quote

from owner_console.components import ApiService, register_component


def success_rate(job):
    """Whole-number percentage of successful executions; 0 when never run"""
    total = job.get('executionCount') or 0
    if total == 0:
        return 0
    return round((job.get('successCount') or 0) / total * 100)


def job_health(job):
    """'healthy', 'warning' or 'error' badge for a job card"""
    rate = success_rate(job)
    recent = job.get('recentExecutions') or []
    if rate < 80 or any(not execution.get('success') for execution in recent):
        return 'error'
    if rate < 95:
        return 'warning'
    return 'healthy'


@register_component('cron_jobs')
class CronJobsService(ApiService):
    """Service for scheduled job monitoring"""

    def get_statuses(self):
        data = self.client.get_data('/admin/cron-jobs')
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            return data.get('jobs') or []
        return []

    def get_overview(self):
        """Job list decorated with success rate and health, plus counts"""
        jobs = []
        for job in self.get_statuses():
            jobs.append(dict(job, successRate=success_rate(job), health=job_health(job)))

        summary = {'total': len(jobs), 'enabled': 0, 'disabled': 0, 'failing': 0}
        for job in jobs:
            if job.get('enabled', True):
                summary['enabled'] += 1
            else:
                summary['disabled'] += 1
            if job['health'] == 'error':
                summary['failing'] += 1
        return {'jobs': jobs, 'summary': summary}

    def get_status(self, job_name):
        return self.client.get_data(f"/admin/cron-jobs/{quote(job_name, safe='')}")

    def get_history(self, job_name, limit=50):
        return self.client.get_data(
            f"/admin/cron-jobs/{quote(job_name, safe='')}/history",
            params={'limit': limit},
        )

"""
Metrics Business Logic
"""
from owner_console.components import ApiService, register_component

QUEUE_COUNTERS = ('waiting', 'active', 'completed', 'failed', 'delayed')


def summarize_metrics(metrics):
    """Totals for the dashboard cards derived from a metrics snapshot"""
    metrics = metrics or {}
    totals = dict.fromkeys(QUEUE_COUNTERS, 0)
    for queue in metrics.get('queues') or []:
        for key in QUEUE_COUNTERS:
            totals[key] += queue.get(key) or 0

    finished = totals['completed'] + totals['failed']
    success_rate = round(totals['completed'] / finished * 100, 1) if finished else 0.0

    api = metrics.get('api') or {}
    api_requests = api.get('requests') or {}
    redis = metrics.get('redis') or {}
    mongodb = metrics.get('mongodb') or {}

    return {
        'queues': dict(totals, total=sum(totals.values())),
        'queueCount': len(metrics.get('queues') or []),
        'successRate': success_rate,
        'apiRequests': api_requests.get('total', 0),
        'apiRequestRate': api_requests.get('rate', 0),
        'apiErrorRate': api.get('errorRate', 0),
        'averageResponseTime': (api.get('responseTime') or {}).get('average', 0),
        'redisConnected': bool(redis.get('connected')),
        'mongoConnected': bool(mongodb.get('connected')),
        'timestamp': metrics.get('timestamp'),
    }


@register_component('metrics')
class MetricsService(ApiService):
    """Service for system metrics"""

    def get_metrics(self):
        return self.client.get_data('/admin/metrics')

    def get_summary(self):
        return summarize_metrics(self.get_metrics())

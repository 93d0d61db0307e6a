"""
Health Business Logic
"""
import logging
from datetime import datetime, timezone

from owner_console.components import ApiService, register_component
from owner_console.core.api_client import ApiClientError, SessionExpiredError

logger = logging.getLogger(__name__)


def _now():
    return datetime.now(timezone.utc).isoformat()


def redis_status(report):
    """healthy, warning (connected but unhealthy) or error"""
    if report.get('healthy'):
        return 'healthy'
    if report.get('connected'):
        return 'warning'
    return 'error'


@register_component('health')
class HealthService(ApiService):
    """Service for backend health checks"""

    def get_redis_health(self):
        report = self.client.get_data('/health/redis') or {}
        return {
            'status': redis_status(report),
            'message': report.get('status'),
            'timestamp': report.get('timestamp'),
            'connected': bool(report.get('connected')),
            'healthy': report.get('healthy'),
            'host': report.get('host'),
            'port': report.get('port'),
        }

    def get_system_health(self):
        """Aggregated health, assembled from /health/redis when /admin/health fails"""
        try:
            return self.client.get_data('/admin/health')
        except SessionExpiredError:
            raise
        except ApiClientError as e:
            logger.warning(f'[MONITOR] /admin/health unavailable ({e.message}), using fallback')

        try:
            redis = self.get_redis_health()
        except SessionExpiredError:
            raise
        except ApiClientError as e:
            logger.warning(f'[MONITOR] Redis health check failed: {e.message}')
            redis = {
                'status': 'error',
                'message': 'Redis health check failed',
                'timestamp': _now(),
                'connected': False,
            }

        return {
            'api': {
                'status': 'healthy',
                'message': 'API server is responding',
                'timestamp': _now(),
            },
            'redis': redis,
            'mongodb': {
                'status': 'healthy',
                'message': 'MongoDB connection status unknown',
                'timestamp': _now(),
                'connected': True,
            },
        }

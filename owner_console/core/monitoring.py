"""
Console monitoring
Activity feed of surfaced failures plus a background upstream health poller
"""
import logging
import threading
from collections import deque
from datetime import datetime

import requests

logger = logging.getLogger(__name__)

LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


class ActivityLog:
    """Bounded, thread-safe feed of console notifications

    Every error shown to the owner as a toast is also recorded here so the
    admin dashboard can list recent failures.
    """

    def __init__(self, maxlen=1000):
        self._entries = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def add(self, level, message, **context):
        entry = {
            'timestamp': datetime.now().isoformat(),
            'level': level,
            'message': message,
        }
        if context:
            entry['context'] = context
        with self._lock:
            self._entries.append(entry)
        return entry

    def get(self, level_filter='ALL', limit=50):
        """Get the most recent entries, optionally filtered by level"""
        with self._lock:
            entries = list(self._entries)

        if level_filter != 'ALL':
            entries = [e for e in entries if e['level'] == level_filter]

        if limit and len(entries) > limit:
            entries = entries[-limit:]
        return entries

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __len__(self):
        return len(self._entries)


class UpstreamMonitor:
    """Polls the backend health endpoint in a daemon thread"""

    def __init__(self, base_url, activity_log, interval=30, timeout=3, http_session=None):
        self.health_url = f"{base_url.rstrip('/')}/health"
        self.activity_log = activity_log
        self.interval = interval
        self.timeout = timeout
        self.http_session = http_session or requests.Session()
        self.thread = None
        self._stop_event = threading.Event()
        self.status = {
            'status': 'unknown',
            'last_check': None,
            'status_code': None,
            'error': None,
            'healthy_since': None,
        }

    def start(self):
        """Start monitoring thread"""
        if self.thread is None or not self.thread.is_alive():
            self._stop_event.clear()
            self.thread = threading.Thread(target=self._monitor_loop, daemon=True)
            self.thread.start()
            logger.info(f'[MONITOR] Upstream monitor started for {self.health_url}')

    def stop(self):
        """Stop monitoring thread"""
        self._stop_event.set()
        if self.thread:
            self.thread.join(timeout=2)

    def is_running(self):
        return self.thread is not None and self.thread.is_alive()

    def _monitor_loop(self):
        while not self._stop_event.is_set():
            try:
                self.check_once()
            except Exception as e:
                logger.exception(f'[MONITOR] Monitor loop error: {e}')
                self.activity_log.add('ERROR', f'Monitor loop error: {e}')
            self._stop_event.wait(self.interval)

    def check_once(self):
        """Run one health check and record status transitions"""
        status_code = None
        error = None
        try:
            response = self.http_session.request('GET', self.health_url, timeout=self.timeout)
            status_code = response.status_code
            status = 'healthy' if response.status_code == 200 else 'unhealthy'
        except requests.exceptions.RequestException as e:
            status = 'down'
            error = str(e)

        old_status = self.status['status']
        if status != old_status:
            level = 'INFO' if status == 'healthy' else 'WARNING'
            self.activity_log.add(level, f'Backend API status changed: {old_status} -> {status}')
            logger.info(f'[MONITOR] Backend API status changed: {old_status} -> {status}')

        now = datetime.now()
        healthy_since = self.status['healthy_since']
        if status != 'healthy':
            healthy_since = None
        elif healthy_since is None:
            healthy_since = now.isoformat()

        self.status = {
            'status': status,
            'last_check': now.isoformat(),
            'status_code': status_code,
            'error': error,
            'healthy_since': healthy_since,
        }
        return status

    def get_status(self):
        return dict(self.status)

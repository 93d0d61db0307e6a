import requests

from owner_console.core.monitoring import ActivityLog, UpstreamMonitor

BASE = 'http://api.test/api/v1'


def test_activity_log_filters_and_limits():
    log = ActivityLog(maxlen=10)
    log.add('INFO', 'started')
    log.add('ERROR', 'first failure', action='budgets.create')
    log.add('ERROR', 'second failure')

    errors = log.get(level_filter='ERROR')
    assert [entry['message'] for entry in errors] == ['first failure', 'second failure']
    assert errors[0]['context'] == {'action': 'budgets.create'}
    assert 'context' not in errors[1]

    latest = log.get(limit=1)
    assert [entry['message'] for entry in latest] == ['second failure']


def test_activity_log_is_bounded():
    log = ActivityLog(maxlen=3)
    for i in range(5):
        log.add('INFO', f'message {i}')

    assert len(log) == 3
    assert log.get()[0]['message'] == 'message 2'

    log.clear()
    assert len(log) == 0


def test_monitor_reports_healthy_backend(upstream):
    upstream.add('GET', '/health', json={'status': 'ok'})
    log = ActivityLog()
    monitor = UpstreamMonitor(BASE, log, http_session=upstream)

    assert monitor.check_once() == 'healthy'

    status = monitor.get_status()
    assert status['status'] == 'healthy'
    assert status['status_code'] == 200
    assert status['healthy_since'] is not None
    assert log.get()[0]['message'] == 'Backend API status changed: unknown -> healthy'


def test_monitor_records_only_transitions(upstream):
    upstream.add('GET', '/health', json={'status': 'ok'})
    upstream.add('GET', '/health', json={'status': 'ok'})
    upstream.add('GET', '/health', status=503, json={'status': 'degraded'})
    log = ActivityLog()
    monitor = UpstreamMonitor(BASE, log, http_session=upstream)

    monitor.check_once()
    monitor.check_once()
    monitor.check_once()

    messages = [entry['message'] for entry in log.get()]
    assert messages == [
        'Backend API status changed: unknown -> healthy',
        'Backend API status changed: healthy -> unhealthy',
    ]
    assert log.get()[-1]['level'] == 'WARNING'
    assert monitor.get_status()['healthy_since'] is None


def test_monitor_marks_unreachable_backend_down(upstream):
    upstream.add('GET', '/health', exc=requests.exceptions.ConnectionError('refused'))
    monitor = UpstreamMonitor(BASE, ActivityLog(), http_session=upstream)

    assert monitor.check_once() == 'down'
    assert 'refused' in monitor.get_status()['error']


def test_monitor_thread_starts_and_stops(upstream):
    upstream.add('GET', '/health', json={'status': 'ok'})
    monitor = UpstreamMonitor(BASE, ActivityLog(), interval=60, http_session=upstream)

    monitor.start()
    try:
        assert monitor.is_running()
    finally:
        monitor.stop()
    assert not monitor.is_running()

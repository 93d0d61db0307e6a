"""
Main routes for the console
"""
import os
import time
from datetime import datetime

import psutil
from flask import Blueprint, current_app

from owner_console import __version__
from owner_console.components import registry
from owner_console.core.responses import success
from owner_console.core.tokens import SessionTokenStore

main_bp = Blueprint('main', __name__)

STARTED_AT = time.time()


def process_info():
    """Resource usage of the console process itself"""
    process = psutil.Process(os.getpid())
    with process.oneshot():
        memory = process.memory_info()
        return {
            'pid': process.pid,
            'cpuPercent': process.cpu_percent(interval=None),
            'memoryRss': memory.rss // 1024 // 1024,  # MB
            'threads': process.num_threads(),
            'uptime': round(time.time() - STARTED_AT, 1),
        }


@main_bp.route('/')
def index():
    """Console index: components, polling intervals and session state"""
    store = SessionTokenStore()
    user = store.get_user() or {}
    return success({
        'name': 'owner-console',
        'version': __version__,
        'components': sorted(registry.get_all_components()),
        'pollingIntervals': current_app.config['POLLING_INTERVALS'],
        'session': {
            'authenticated': store.has_tokens(),
            'isOwner': user.get('role') == current_app.config.get('OWNER_ROLE', 'owner'),
        },
    })


@main_bp.route('/health')
def health():
    """Liveness of the console and its last view of the backend"""
    monitor = current_app.extensions.get('upstream_monitor')
    upstream = monitor.get_status() if monitor else None
    return success({
        'status': 'healthy',
        'timestamp': datetime.now().isoformat(),
        'process': process_info(),
        'upstream': upstream,
        'monitorRunning': bool(monitor and monitor.is_running()),
    })

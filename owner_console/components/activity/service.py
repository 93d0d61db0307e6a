"""
Activity Service
"""
from flask import current_app

from owner_console.components import register_component
from owner_console.core.monitoring import LEVELS


@register_component('activity')
class ActivityService:
    """Read access to the console activity feed"""

    def __init__(self, activity_log=None):
        self._activity_log = activity_log

    @property
    def activity_log(self):
        if self._activity_log is not None:
            return self._activity_log
        return current_app.extensions['activity_log']

    def get_entries(self, level_filter='ALL', limit=50):
        level_filter = (level_filter or 'ALL').upper()
        if level_filter != 'ALL' and level_filter not in LEVELS:
            raise ValueError(f"level must be ALL or one of: {', '.join(LEVELS)}")
        return self.activity_log.get(level_filter=level_filter, limit=limit)

    def clear(self):
        self.activity_log.clear()

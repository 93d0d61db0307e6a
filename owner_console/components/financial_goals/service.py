"""
Financial Goals Business Logic
"""
import logging

from owner_console.components import ApiService, register_component
from owner_console.core.envelopes import build_query
from owner_console.core.schemas import (
    GOAL_CATEGORIES,
    BulkDeleteInput,
    FinancialGoalInput,
    GoalAmountInput,
    check_date_filters,
    parse_payload,
    select_filters,
)

logger = logging.getLogger(__name__)

PROGRESS_FILTERS = ('category', 'achieved', 'targetDate', 'startDate', 'endDate', 'search')
GOAL_FILTERS = ('page', 'limit') + PROGRESS_FILTERS + ('sortBy', 'sortOrder')
FILTER_CHOICES = {
    'category': GOAL_CATEGORIES,
    'achieved': ('true', 'false'),
    'sortBy': ('name', 'targetAmount', 'currentAmount', 'targetDate', 'createdAt', 'updatedAt'),
    'sortOrder': ('asc', 'desc'),
}
DATE_FILTERS = ('targetDate', 'startDate', 'endDate')


def _filters(filters, allowed):
    selected = select_filters(filters or {}, allowed, FILTER_CHOICES)
    return build_query(check_date_filters(selected, DATE_FILTERS))


@register_component('financial_goals')
class FinancialGoalsService(ApiService):
    """Service for financial goals"""

    base_path = '/finance/financial-goals'

    def list_goals(self, filters=None):
        return self.client.get_paginated_data(self.base_path, params=_filters(filters, GOAL_FILTERS))

    def get_progress_summary(self, filters=None):
        """Progress of every matching goal, without pagination"""
        return self.client.get_data(f'{self.base_path}/progress', params=_filters(filters, PROGRESS_FILTERS))

    def get_milestones(self):
        return self.client.get_data(f'{self.base_path}/milestones') or []

    def get_goal(self, goal_id):
        return self.client.get_data(f'{self.base_path}/{goal_id}')

    def get_goal_progress(self, goal_id):
        return self.client.get_data(f'{self.base_path}/{goal_id}/progress')

    def create_goal(self, payload):
        data = parse_payload(FinancialGoalInput, payload)
        return self.client.post_data(self.base_path, data)

    def update_goal(self, goal_id, payload):
        data = parse_payload(FinancialGoalInput, payload, partial=True)
        return self.client.patch_data(f'{self.base_path}/{goal_id}', data)

    def delete_goal(self, goal_id):
        self.client.delete(f'{self.base_path}/{goal_id}')

    def bulk_delete(self, payload):
        data = parse_payload(BulkDeleteInput, payload)
        logger.info(f"[API] Bulk deleting {len(data['ids'])} financial goals")
        return self.client.post_data(f'{self.base_path}/bulk-delete', data)

    def add_amount(self, goal_id, payload):
        data = parse_payload(GoalAmountInput, payload)
        return self.client.post_data(f'{self.base_path}/{goal_id}/add-amount', data)

    def subtract_amount(self, goal_id, payload):
        data = parse_payload(GoalAmountInput, payload)
        return self.client.post_data(f'{self.base_path}/{goal_id}/subtract-amount', data)

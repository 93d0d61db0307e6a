"""
Budgets Business Logic
"""
import logging

from owner_console.components import ApiService, register_component
from owner_console.core.envelopes import build_query
from owner_console.core.schemas import (
    BudgetInput,
    BulkDeleteInput,
    parse_payload,
    select_filters,
)

logger = logging.getLogger(__name__)

BUDGET_FILTERS = (
    'page',
    'limit',
    'period',
    'categoryType',
    'categoryId',
    'startDate',
    'endDate',
    'search',
    'alertLevel',
    'sortBy',
    'sortOrder',
)
FILTER_CHOICES = {
    'period': ('monthly', 'yearly'),
    'categoryType': ('ExpenseCategory', 'IncomeCategory'),
    'alertLevel': ('none', 'warning', 'critical', 'exceeded'),
    'sortBy': ('name', 'amount', 'startDate', 'createdAt', 'updatedAt'),
    'sortOrder': ('asc', 'desc'),
}


@register_component('budgets')
class BudgetsService(ApiService):
    """Service for budgets"""

    base_path = '/finance/budgets'

    def _filters(self, filters):
        return build_query(select_filters(filters or {}, BUDGET_FILTERS, FILTER_CHOICES))

    def list_budgets(self, filters=None):
        return self.client.get_paginated_data(self.base_path, params=self._filters(filters))

    def list_budgets_with_stats(self, filters=None):
        return self.client.get_paginated_data(f'{self.base_path}/stats', params=self._filters(filters))

    def get_alerts(self):
        return self.client.get_data(f'{self.base_path}/alerts') or []

    def get_budget(self, budget_id):
        return self.client.get_data(f'{self.base_path}/{budget_id}')

    def get_budget_stats(self, budget_id):
        return self.client.get_data(f'{self.base_path}/{budget_id}/stats')

    def create_budget(self, payload):
        data = parse_payload(BudgetInput, payload)
        return self.client.post_data(self.base_path, data)

    def update_budget(self, budget_id, payload):
        data = parse_payload(BudgetInput, payload, partial=True)
        return self.client.patch_data(f'{self.base_path}/{budget_id}', data)

    def delete_budget(self, budget_id):
        self.client.delete(f'{self.base_path}/{budget_id}')

    def bulk_delete(self, payload):
        data = parse_payload(BulkDeleteInput, payload)
        logger.info(f"[API] Bulk deleting {len(data['ids'])} budgets")
        return self.client.post_data(f'{self.base_path}/bulk-delete', data)

    def rollover(self, budget_id):
        """Carry the unused amount into the next period; None when nothing rolled"""
        return self.client.post_data(f'{self.base_path}/{budget_id}/rollover', {})

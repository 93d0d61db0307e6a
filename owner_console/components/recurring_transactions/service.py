"""
Recurring Transactions Business Logic
"""
import logging

from owner_console.components import ApiService, register_component
from owner_console.core.envelopes import build_query, extract_data
from owner_console.core.schemas import (
    BulkDeleteInput,
    PayloadValidationError,
    RecurringTransactionInput,
    parse_date,
    parse_payload,
    select_filters,
)

logger = logging.getLogger(__name__)

RECURRING_FILTERS = ('frequency', 'isActive', 'search')
FILTER_CHOICES = {
    'frequency': ('daily', 'weekly', 'monthly', 'yearly', 'custom'),
    'isActive': ('true', 'false'),
}


def _as_list(body):
    data = extract_data(body)
    if isinstance(data, dict):
        data = data.get('data')
    return data if isinstance(data, list) else []


def _inner_data(body):
    """Unwrap {'data': ...} from a raw response"""
    if isinstance(body, dict) and 'data' in body:
        return body['data']
    return body


@register_component('recurring_transactions')
class RecurringTransactionsService(ApiService):
    """Service for recurring transactions"""

    base_path = '/finance/recurring-transactions'

    def list_recurring(self, filters=None):
        if filters is not None and isinstance(filters.get('isActive'), bool):
            filters = dict(filters, isActive='true' if filters['isActive'] else 'false')
        params = build_query(select_filters(filters or {}, RECURRING_FILTERS, FILTER_CHOICES))
        return _as_list(self.client.get(self.base_path, params=params))

    def get_recurring(self, recurring_id):
        return self.client.get_data(f'{self.base_path}/{recurring_id}')

    def create_recurring(self, payload):
        data = parse_payload(RecurringTransactionInput, payload)
        return self.client.post_data(self.base_path, data)

    def update_recurring(self, recurring_id, payload):
        data = parse_payload(RecurringTransactionInput, payload, partial=True)
        return self.client.patch_data(f'{self.base_path}/{recurring_id}', data)

    def delete_recurring(self, recurring_id):
        self.client.delete(f'{self.base_path}/{recurring_id}')

    def bulk_delete(self, payload):
        """Returns {deletedCount, failedIds}"""
        data = parse_payload(BulkDeleteInput, payload)
        return self.client.post_data(f'{self.base_path}/bulk-delete', data)

    def pause(self, recurring_id):
        return self.client.patch_data(f'{self.base_path}/{recurring_id}/pause', {})

    def resume(self, recurring_id):
        return self.client.patch_data(f'{self.base_path}/{recurring_id}/resume', {})

    def skip_next(self, recurring_id):
        return self.client.patch_data(f'{self.base_path}/{recurring_id}/skip-next', {})

    def generate(self, recurring_id, generate_until_date=None):
        """Materialize due transactions, optionally up to a date"""
        params = {}
        if generate_until_date:
            try:
                parse_date(generate_until_date)
            except ValueError:
                raise PayloadValidationError({'generateUntilDate': ['Invalid date']})
            params['generateUntilDate'] = generate_until_date

        body = self.client.post(f'{self.base_path}/{recurring_id}/generate', {}, params=params)
        result = _inner_data(body)
        logger.info(f"[API] Generated {(result or {}).get('generatedCount', 0)} transactions for {recurring_id}")
        return result

    def edit_future(self, recurring_id, payload, end_current=True):
        """Apply changes to future occurrences only

        With end_current the existing schedule is ended and a new one is
        created; the result holds 'current' and, when created, 'new'.
        """
        data = parse_payload(RecurringTransactionInput, payload, partial=True)
        params = {'endCurrent': 'true'} if end_current else {}
        body = self.client.post(f'{self.base_path}/{recurring_id}/edit-future', data, params=params)
        return _inner_data(body)

"""
Transactions Business Logic
"""
import logging

from owner_console.components import ApiService, register_component
from owner_console.core.envelopes import build_query
from owner_console.core.schemas import (
    BulkDeleteInput,
    BulkDuplicateInput,
    DuplicateInput,
    FromTemplateInput,
    SaveAsTemplateInput,
    TransactionInput,
    check_date_filters,
    parse_payload,
    select_filters,
)

logger = logging.getLogger(__name__)

TRANSACTION_FILTERS = (
    'page',
    'limit',
    'type',
    'categoryId',
    'startDate',
    'endDate',
    'search',
    'tags',
    'paymentMethod',
    'currency',
    'sortBy',
    'sortOrder',
)
STATISTICS_FILTERS = ('startDate', 'endDate')
FILTER_CHOICES = {
    'type': ('expense', 'income'),
    'sortBy': ('date', 'amount', 'createdAt', 'updatedAt'),
    'sortOrder': ('asc', 'desc'),
}


def _body(payload):
    # Optional request bodies arrive as None
    return {} if payload is None else payload


@register_component('transactions')
class TransactionsService(ApiService):
    """Service for transactions"""

    base_path = '/finance/transactions'

    def list_transactions(self, filters=None):
        selected = check_date_filters(select_filters(filters or {}, TRANSACTION_FILTERS, FILTER_CHOICES))
        return self.client.get_paginated_data(self.base_path, params=build_query(selected))

    def get_statistics(self, filters=None):
        """Income, expense and net totals for the period"""
        selected = check_date_filters(select_filters(filters or {}, STATISTICS_FILTERS))
        return self.client.get_data(f'{self.base_path}/statistics', params=build_query(selected))

    def get_transaction(self, transaction_id):
        return self.client.get_data(f'{self.base_path}/{transaction_id}')

    def create_transaction(self, payload):
        data = parse_payload(TransactionInput, payload)
        return self.client.post_data(self.base_path, data)

    def update_transaction(self, transaction_id, payload):
        data = parse_payload(TransactionInput, payload, partial=True)
        return self.client.patch_data(f'{self.base_path}/{transaction_id}', data)

    def delete_transaction(self, transaction_id):
        self.client.delete(f'{self.base_path}/{transaction_id}')

    def bulk_delete(self, payload):
        data = parse_payload(BulkDeleteInput, payload)
        logger.info(f"[API] Bulk deleting {len(data['ids'])} transactions")
        return self.client.post_data(f'{self.base_path}/bulk-delete', data)

    def duplicate(self, transaction_id, payload=None):
        data = parse_payload(DuplicateInput, _body(payload))
        return self.client.post_data(f'{self.base_path}/{transaction_id}/duplicate', data)

    def bulk_duplicate(self, payload):
        data = parse_payload(BulkDuplicateInput, payload)
        logger.info(f"[API] Duplicating {len(data['ids'])} transactions")
        return self.client.post_data(f'{self.base_path}/bulk-duplicate', data)

    def save_as_template(self, transaction_id, payload):
        data = parse_payload(SaveAsTemplateInput, payload)
        return self.client.post_data(f'{self.base_path}/{transaction_id}/save-as-template', data)

    def create_from_template(self, template_id, payload):
        data = parse_payload(FromTemplateInput, payload)
        return self.client.post_data(f'{self.base_path}/from-template/{template_id}', data)

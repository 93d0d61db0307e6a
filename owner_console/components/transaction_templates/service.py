"""
Transaction Templates Business Logic
"""
import logging

from owner_console.components import ApiService, register_component
from owner_console.core.envelopes import build_query
from owner_console.core.schemas import (
    BulkDeleteInput,
    SavedTransactionTemplateInput,
    parse_payload,
    select_filters,
)

logger = logging.getLogger(__name__)

TEMPLATE_FILTERS = ('type', 'category', 'search', 'sortBy', 'sortOrder')
FILTER_CHOICES = {
    'type': ('expense', 'income'),
    'sortBy': ('usageCount', 'name', 'createdAt', 'updatedAt'),
    'sortOrder': ('asc', 'desc'),
}


@register_component('transaction_templates')
class TransactionTemplatesService(ApiService):
    """Service for transaction templates"""

    base_path = '/finance/transaction-templates'

    def list_templates(self, filters=None):
        params = build_query(select_filters(filters or {}, TEMPLATE_FILTERS, FILTER_CHOICES))
        return self.client.get_data(self.base_path, params=params) or []

    def get_template(self, template_id):
        return self.client.get_data(f'{self.base_path}/{template_id}')

    def create_template(self, payload):
        data = parse_payload(SavedTransactionTemplateInput, payload)
        return self.client.post_data(self.base_path, data)

    def update_template(self, template_id, payload):
        data = parse_payload(SavedTransactionTemplateInput, payload, partial=True)
        return self.client.patch_data(f'{self.base_path}/{template_id}', data)

    def delete_template(self, template_id):
        self.client.delete(f'{self.base_path}/{template_id}')

    def bulk_delete(self, payload):
        data = parse_payload(BulkDeleteInput, payload)
        logger.info(f"[API] Bulk deleting {len(data['ids'])} transaction templates")
        return self.client.post_data(f'{self.base_path}/bulk-delete', data)

    def increment_usage(self, template_id):
        """Count one more use after the template filled a transaction"""
        return self.client.post_data(f'{self.base_path}/{template_id}/increment-usage', {})

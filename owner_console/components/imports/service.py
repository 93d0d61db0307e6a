"""
Imports Business Logic
"""
import logging
import os

from owner_console.components import ApiService, register_component
from owner_console.core.schemas import PayloadValidationError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = ('.csv', '.xlsx', '.xls')
FILE_TYPE_MESSAGE = 'Please upload a CSV or Excel file (.csv, .xlsx, .xls)'
COLUMN_MAPPING_FIELDS = (
    'date',
    'type',
    'amount',
    'description',
    'category',
    'notes',
    'tags',
    'paymentMethod',
    'reference',
    'currency',
)


def check_import_file(filename, allowed_extensions=ALLOWED_EXTENSIONS):
    if not filename:
        raise PayloadValidationError({'file': ['Please select a file to import']})
    extension = os.path.splitext(filename)[1].lower()
    if extension not in allowed_extensions:
        raise PayloadValidationError({'file': [FILE_TYPE_MESSAGE]})


def column_mapping_form(mapping):
    """Form fields for the mapped columns; unmapped entries are left out"""
    form = {}
    for field in COLUMN_MAPPING_FIELDS:
        column = (mapping or {}).get(field)
        if column:
            form[field] = column
    return form


@register_component('imports')
class ImportsService(ApiService):
    """Service for transaction imports"""

    def __init__(self, client=None, allowed_extensions=ALLOWED_EXTENSIONS):
        super().__init__(client)
        self.allowed_extensions = allowed_extensions

    def _upload(self, endpoint, upload, mapping):
        check_import_file(upload.filename, self.allowed_extensions)
        files = {
            'file': (
                upload.filename,
                upload.stream,
                upload.mimetype or 'application/octet-stream',
            )
        }
        return self.client.post_form_data(endpoint, files=files, data=column_mapping_form(mapping))

    def preview(self, upload, mapping=None):
        """Validate a file upstream and return row counts, errors and a sample"""
        return self._upload('/finance/import/preview', upload, mapping)

    def import_transactions(self, upload, mapping=None):
        result = self._upload('/finance/import', upload, mapping)
        if isinstance(result, dict):
            logger.info(
                f"[API] Imported {result.get('importedCount', 0)} transactions "
                f"from {upload.filename} ({result.get('failedCount', 0)} failed)"
            )
        return result

    def get_history(self, limit=50):
        return self.client.get_data('/finance/import/history', params={'limit': limit}) or []

    def get_history_entry(self, import_id):
        return self.client.get_data(f'/finance/import/history/{import_id}')

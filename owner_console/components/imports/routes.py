"""
Imports API Routes
"""
from flask import Blueprint, current_app, request

from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import owner_required
from owner_console.core.responses import (
    api_error_response,
    error,
    success,
    validation_error_response,
)
from owner_console.core.schemas import PayloadValidationError
from .service import ALLOWED_EXTENSIONS, ImportsService

imports_bp = Blueprint('imports', __name__, url_prefix='/api/finance/import')


def _service():
    allowed = current_app.config.get('IMPORT_ALLOWED_EXTENSIONS', ALLOWED_EXTENSIONS)
    return ImportsService(allowed_extensions=tuple(allowed))


def _upload_request(action, message):
    upload = request.files.get('file')
    if upload is None:
        return error('Please select a file to import', 400, {'file': ['Please select a file to import']})

    try:
        result = getattr(_service(), action)(upload, request.form)
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, f'imports.{action}')
    return success(result, message)


@imports_bp.route('/preview', methods=['POST'])
@owner_required
def api_import_preview():
    """Multipart upload: file plus optional column mapping fields"""
    return _upload_request('preview', 'Preview ready')


@imports_bp.route('', methods=['POST'])
@owner_required
def api_import():
    return _upload_request('import_transactions', 'Import completed')


@imports_bp.route('/history')
@owner_required
def api_import_history():
    default_limit = current_app.config.get('IMPORT_HISTORY_LIMIT', 50)
    limit = request.args.get('limit', default_limit, type=int)
    if limit is None or limit < 1:
        return error('limit must be a positive integer', 400)
    try:
        history = _service().get_history(limit)
    except ApiClientError as e:
        return api_error_response(e, 'imports.history')
    return success(history)


@imports_bp.route('/history/<import_id>')
@owner_required
def api_import_history_entry(import_id):
    try:
        entry = _service().get_history_entry(import_id)
    except ApiClientError as e:
        return api_error_response(e, 'imports.history_entry')
    return success(entry)

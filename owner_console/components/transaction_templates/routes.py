"""
Transaction Templates API Routes
"""
from flask import Blueprint, request

from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import owner_required
from owner_console.core.responses import api_error_response, success, validation_error_response
from owner_console.core.schemas import PayloadValidationError
from .service import TransactionTemplatesService

transaction_templates_bp = Blueprint(
    'transaction_templates', __name__, url_prefix='/api/finance/transaction-templates'
)

service = TransactionTemplatesService()


@transaction_templates_bp.route('')
@owner_required
def api_templates():
    try:
        templates = service.list_templates(request.args)
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transaction_templates.list')
    return success(templates)


@transaction_templates_bp.route('', methods=['POST'])
@owner_required
def api_create_template():
    try:
        template = service.create_template(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transaction_templates.create')
    return success(template, 'Template created', 201)


@transaction_templates_bp.route('/bulk-delete', methods=['POST'])
@owner_required
def api_bulk_delete_templates():
    try:
        result = service.bulk_delete(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transaction_templates.bulk_delete')
    return success(result, 'Templates deleted')


@transaction_templates_bp.route('/<template_id>')
@owner_required
def api_template(template_id):
    try:
        template = service.get_template(template_id)
    except ApiClientError as e:
        return api_error_response(e, 'transaction_templates.get')
    return success(template)


@transaction_templates_bp.route('/<template_id>', methods=['PATCH'])
@owner_required
def api_update_template(template_id):
    try:
        template = service.update_template(template_id, request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transaction_templates.update')
    return success(template, 'Template updated')


@transaction_templates_bp.route('/<template_id>', methods=['DELETE'])
@owner_required
def api_delete_template(template_id):
    try:
        service.delete_template(template_id)
    except ApiClientError as e:
        return api_error_response(e, 'transaction_templates.delete')
    return success(None, 'Template deleted')


@transaction_templates_bp.route('/<template_id>/increment-usage', methods=['POST'])
@owner_required
def api_increment_template_usage(template_id):
    try:
        template = service.increment_usage(template_id)
    except ApiClientError as e:
        return api_error_response(e, 'transaction_templates.increment_usage')
    return success(template)

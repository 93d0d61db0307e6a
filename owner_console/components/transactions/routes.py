"""
Transactions API Routes
"""
from flask import Blueprint, request

from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import owner_required
from owner_console.core.responses import (
    api_error_response,
    paginated,
    success,
    validation_error_response,
)
from owner_console.core.schemas import PayloadValidationError
from .service import TransactionsService

transactions_bp = Blueprint('transactions', __name__, url_prefix='/api/finance/transactions')

service = TransactionsService()


@transactions_bp.route('')
@owner_required
def api_transactions():
    try:
        result = service.list_transactions(request.args)
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.list')
    return paginated(result)


@transactions_bp.route('/statistics')
@owner_required
def api_transaction_statistics():
    try:
        stats = service.get_statistics(request.args)
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.statistics')
    return success(stats)


@transactions_bp.route('', methods=['POST'])
@owner_required
def api_create_transaction():
    try:
        transaction = service.create_transaction(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.create')
    return success(transaction, 'Transaction created', 201)


@transactions_bp.route('/bulk-delete', methods=['POST'])
@owner_required
def api_bulk_delete_transactions():
    try:
        result = service.bulk_delete(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.bulk_delete')
    return success(result, 'Transactions deleted')


@transactions_bp.route('/bulk-duplicate', methods=['POST'])
@owner_required
def api_bulk_duplicate_transactions():
    try:
        result = service.bulk_duplicate(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.bulk_duplicate')
    return success(result, 'Transactions duplicated', 201)


@transactions_bp.route('/from-template/<template_id>', methods=['POST'])
@owner_required
def api_transaction_from_template(template_id):
    try:
        transaction = service.create_from_template(template_id, request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.from_template')
    return success(transaction, 'Transaction created', 201)


@transactions_bp.route('/<transaction_id>')
@owner_required
def api_transaction(transaction_id):
    try:
        transaction = service.get_transaction(transaction_id)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.get')
    return success(transaction)


@transactions_bp.route('/<transaction_id>', methods=['PATCH'])
@owner_required
def api_update_transaction(transaction_id):
    try:
        transaction = service.update_transaction(transaction_id, request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.update')
    return success(transaction, 'Transaction updated')


@transactions_bp.route('/<transaction_id>', methods=['DELETE'])
@owner_required
def api_delete_transaction(transaction_id):
    try:
        service.delete_transaction(transaction_id)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.delete')
    return success(None, 'Transaction deleted')


@transactions_bp.route('/<transaction_id>/duplicate', methods=['POST'])
@owner_required
def api_duplicate_transaction(transaction_id):
    try:
        transaction = service.duplicate(transaction_id, request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.duplicate')
    return success(transaction, 'Transaction duplicated', 201)


@transactions_bp.route('/<transaction_id>/save-as-template', methods=['POST'])
@owner_required
def api_save_transaction_as_template(transaction_id):
    try:
        template = service.save_as_template(transaction_id, request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'transactions.save_as_template')
    return success(template, 'Template saved', 201)

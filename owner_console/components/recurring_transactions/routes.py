"""
Recurring Transactions API Routes
"""
from flask import Blueprint, request

from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import owner_required
from owner_console.core.responses import (
    api_error_response,
    success,
    validation_error_response,
)
from owner_console.core.schemas import PayloadValidationError
from .service import RecurringTransactionsService

recurring_transactions_bp = Blueprint(
    'recurring_transactions',
    __name__,
    url_prefix='/api/finance/recurring-transactions',
)

service = RecurringTransactionsService()


def _lifecycle(recurring_id, action, message):
    try:
        result = getattr(service, action)(recurring_id)
    except ApiClientError as e:
        return api_error_response(e, f'recurring_transactions.{action}')
    return success(result, message)


@recurring_transactions_bp.route('')
@owner_required
def api_recurring_transactions():
    try:
        items = service.list_recurring(request.args)
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'recurring_transactions.list')
    return success(items)


@recurring_transactions_bp.route('', methods=['POST'])
@owner_required
def api_create_recurring_transaction():
    try:
        item = service.create_recurring(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'recurring_transactions.create')
    return success(item, 'Recurring transaction created', 201)


@recurring_transactions_bp.route('/bulk-delete', methods=['POST'])
@owner_required
def api_bulk_delete_recurring_transactions():
    try:
        result = service.bulk_delete(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'recurring_transactions.bulk_delete')
    return success(result, 'Recurring transactions deleted')


@recurring_transactions_bp.route('/<recurring_id>')
@owner_required
def api_recurring_transaction(recurring_id):
    try:
        item = service.get_recurring(recurring_id)
    except ApiClientError as e:
        return api_error_response(e, 'recurring_transactions.get')
    return success(item)


@recurring_transactions_bp.route('/<recurring_id>', methods=['PATCH'])
@owner_required
def api_update_recurring_transaction(recurring_id):
    try:
        item = service.update_recurring(recurring_id, request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'recurring_transactions.update')
    return success(item, 'Recurring transaction updated')


@recurring_transactions_bp.route('/<recurring_id>', methods=['DELETE'])
@owner_required
def api_delete_recurring_transaction(recurring_id):
    try:
        service.delete_recurring(recurring_id)
    except ApiClientError as e:
        return api_error_response(e, 'recurring_transactions.delete')
    return success(None, 'Recurring transaction deleted')


@recurring_transactions_bp.route('/<recurring_id>/pause', methods=['PATCH'])
@owner_required
def api_pause_recurring_transaction(recurring_id):
    return _lifecycle(recurring_id, 'pause', 'Recurring transaction paused')


@recurring_transactions_bp.route('/<recurring_id>/resume', methods=['PATCH'])
@owner_required
def api_resume_recurring_transaction(recurring_id):
    return _lifecycle(recurring_id, 'resume', 'Recurring transaction resumed')


@recurring_transactions_bp.route('/<recurring_id>/skip-next', methods=['PATCH'])
@owner_required
def api_skip_next_recurring_transaction(recurring_id):
    return _lifecycle(recurring_id, 'skip_next', 'Next occurrence skipped')


@recurring_transactions_bp.route('/<recurring_id>/generate', methods=['POST'])
@owner_required
def api_generate_recurring_transaction(recurring_id):
    try:
        result = service.generate(recurring_id, request.args.get('generateUntilDate'))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'recurring_transactions.generate')
    return success(result, 'Transactions generated')


@recurring_transactions_bp.route('/<recurring_id>/edit-future', methods=['POST'])
@owner_required
def api_edit_future_recurring_transaction(recurring_id):
    end_current = request.args.get('endCurrent', 'true').lower() != 'false'
    try:
        result = service.edit_future(recurring_id, request.get_json(silent=True), end_current)
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'recurring_transactions.edit_future')
    return success(result, 'Future occurrences updated')

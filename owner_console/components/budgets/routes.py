"""
Budgets API Routes
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
from .service import BudgetsService

budgets_bp = Blueprint('budgets', __name__, url_prefix='/api/finance/budgets')

service = BudgetsService()


@budgets_bp.route('')
@owner_required
def api_budgets():
    try:
        result = service.list_budgets(request.args)
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'budgets.list')
    return paginated(result)


@budgets_bp.route('/stats')
@owner_required
def api_budgets_with_stats():
    """Budgets with actual spend, remaining amount and alert level"""
    try:
        result = service.list_budgets_with_stats(request.args)
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'budgets.list_stats')
    return paginated(result)


@budgets_bp.route('/alerts')
@owner_required
def api_budget_alerts():
    try:
        alerts = service.get_alerts()
    except ApiClientError as e:
        return api_error_response(e, 'budgets.alerts')
    return success(alerts)


@budgets_bp.route('', methods=['POST'])
@owner_required
def api_create_budget():
    try:
        budget = service.create_budget(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'budgets.create')
    return success(budget, 'Budget created', 201)


@budgets_bp.route('/bulk-delete', methods=['POST'])
@owner_required
def api_bulk_delete_budgets():
    try:
        result = service.bulk_delete(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'budgets.bulk_delete')
    return success(result, 'Budgets deleted')


@budgets_bp.route('/<budget_id>')
@owner_required
def api_budget(budget_id):
    try:
        budget = service.get_budget(budget_id)
    except ApiClientError as e:
        return api_error_response(e, 'budgets.get')
    return success(budget)


@budgets_bp.route('/<budget_id>/stats')
@owner_required
def api_budget_stats(budget_id):
    try:
        budget = service.get_budget_stats(budget_id)
    except ApiClientError as e:
        return api_error_response(e, 'budgets.stats')
    return success(budget)


@budgets_bp.route('/<budget_id>', methods=['PATCH'])
@owner_required
def api_update_budget(budget_id):
    try:
        budget = service.update_budget(budget_id, request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'budgets.update')
    return success(budget, 'Budget updated')


@budgets_bp.route('/<budget_id>', methods=['DELETE'])
@owner_required
def api_delete_budget(budget_id):
    try:
        service.delete_budget(budget_id)
    except ApiClientError as e:
        return api_error_response(e, 'budgets.delete')
    return success(None, 'Budget deleted')


@budgets_bp.route('/<budget_id>/rollover', methods=['POST'])
@owner_required
def api_budget_rollover(budget_id):
    try:
        budget = service.rollover(budget_id)
    except ApiClientError as e:
        return api_error_response(e, 'budgets.rollover')
    if budget is None:
        return success(None, 'Nothing to roll over')
    return success(budget, 'Budget rolled over')

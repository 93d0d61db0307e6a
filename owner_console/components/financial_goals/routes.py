"""
Financial Goals API Routes
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
from .service import FinancialGoalsService

financial_goals_bp = Blueprint('financial_goals', __name__, url_prefix='/api/finance/financial-goals')

service = FinancialGoalsService()


@financial_goals_bp.route('')
@owner_required
def api_goals():
    try:
        result = service.list_goals(request.args)
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.list')
    return paginated(result)


@financial_goals_bp.route('/progress')
@owner_required
def api_goals_progress():
    try:
        progress = service.get_progress_summary(request.args)
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.progress')
    return success(progress)


@financial_goals_bp.route('/milestones')
@owner_required
def api_goal_milestones():
    try:
        milestones = service.get_milestones()
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.milestones')
    return success(milestones)


@financial_goals_bp.route('', methods=['POST'])
@owner_required
def api_create_goal():
    try:
        goal = service.create_goal(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.create')
    return success(goal, 'Goal created', 201)


@financial_goals_bp.route('/bulk-delete', methods=['POST'])
@owner_required
def api_bulk_delete_goals():
    try:
        result = service.bulk_delete(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.bulk_delete')
    return success(result, 'Goals deleted')


@financial_goals_bp.route('/<goal_id>')
@owner_required
def api_goal(goal_id):
    try:
        goal = service.get_goal(goal_id)
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.get')
    return success(goal)


@financial_goals_bp.route('/<goal_id>/progress')
@owner_required
def api_goal_progress(goal_id):
    try:
        progress = service.get_goal_progress(goal_id)
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.goal_progress')
    return success(progress)


@financial_goals_bp.route('/<goal_id>', methods=['PATCH'])
@owner_required
def api_update_goal(goal_id):
    try:
        goal = service.update_goal(goal_id, request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.update')
    return success(goal, 'Goal updated')


@financial_goals_bp.route('/<goal_id>', methods=['DELETE'])
@owner_required
def api_delete_goal(goal_id):
    try:
        service.delete_goal(goal_id)
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.delete')
    return success(None, 'Goal deleted')


@financial_goals_bp.route('/<goal_id>/add-amount', methods=['POST'])
@owner_required
def api_add_goal_amount(goal_id):
    try:
        goal = service.add_amount(goal_id, request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.add_amount')
    return success(goal, 'Amount added')


@financial_goals_bp.route('/<goal_id>/subtract-amount', methods=['POST'])
@owner_required
def api_subtract_goal_amount(goal_id):
    try:
        goal = service.subtract_amount(goal_id, request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'financial_goals.subtract_amount')
    return success(goal, 'Amount subtracted')

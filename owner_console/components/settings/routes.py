"""
Settings API Routes
Available to any logged-in account, not only the owner.
"""
import json

from flask import Blueprint, Response, request

from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import login_required
from owner_console.core.responses import (
    api_error_response,
    error,
    success,
    validation_error_response,
)
from owner_console.core.schemas import PayloadValidationError
from .service import SettingsService

settings_bp = Blueprint('settings', __name__, url_prefix='/api/settings')

service = SettingsService()


@settings_bp.route('/sessions')
@login_required
def api_sessions():
    active_only = request.args.get('active', 'false').lower() == 'true'
    try:
        sessions = service.list_sessions(active_only=active_only)
    except ApiClientError as e:
        return api_error_response(e, 'settings.sessions')
    return success(sessions)


@settings_bp.route('/sessions', methods=['DELETE'])
@login_required
def api_revoke_all_sessions():
    try:
        service.revoke_all_sessions()
    except ApiClientError as e:
        return api_error_response(e, 'settings.revoke_all_sessions')
    return success(None, 'All other sessions revoked')


@settings_bp.route('/sessions/<session_id>', methods=['DELETE'])
@login_required
def api_revoke_session(session_id):
    try:
        service.revoke_session(session_id)
    except ApiClientError as e:
        return api_error_response(e, 'settings.revoke_session')
    return success(None, 'Session revoked')


@settings_bp.route('/password', methods=['POST'])
@login_required
def api_change_password():
    try:
        service.change_password(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'settings.change_password')
    return success(None, 'Password changed')


@settings_bp.route('/preferences')
@login_required
def api_preferences():
    try:
        preferences = service.get_preferences()
    except ApiClientError as e:
        return api_error_response(e, 'settings.preferences')
    return success(preferences)


@settings_bp.route('/preferences', methods=['PATCH'])
@login_required
def api_update_preferences():
    try:
        preferences = service.update_preferences(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'settings.update_preferences')
    return success(preferences, 'Preferences saved')


@settings_bp.route('/preferences/reset', methods=['POST'])
@login_required
def api_reset_preferences():
    try:
        preferences = service.reset_preferences()
    except ApiClientError as e:
        return api_error_response(e, 'settings.reset_preferences')
    return success(preferences, 'Preferences reset')


@settings_bp.route('/profile', methods=['PATCH'])
@login_required
def api_update_profile():
    try:
        user = service.update_profile(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'settings.update_profile')
    return success(user, 'Profile updated')


@settings_bp.route('/account/request-deletion', methods=['POST'])
@login_required
def api_request_account_deletion():
    try:
        service.request_account_deletion()
    except ApiClientError as e:
        return api_error_response(e, 'settings.request_deletion')
    return success(None, 'Check your email to confirm the deletion')


@settings_bp.route('/account', methods=['DELETE'])
@login_required
def api_delete_account():
    try:
        message = service.delete_account(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'settings.delete_account')
    return success({'redirect': '/login'}, message)


@settings_bp.route('/account/deactivate', methods=['POST'])
@login_required
def api_deactivate_account():
    try:
        result = service.deactivate_account()
    except ApiClientError as e:
        return api_error_response(e, 'settings.deactivate_account')
    return success(result, 'Account deactivated')


@settings_bp.route('/account/reactivate', methods=['POST'])
@login_required
def api_reactivate_account():
    try:
        result = service.reactivate_account()
    except ApiClientError as e:
        return api_error_response(e, 'settings.reactivate_account')
    return success(result, 'Account reactivated')


@settings_bp.route('/account/export')
@login_required
def api_export_account():
    """Download the account data as an attachment"""
    export_format = request.args.get('format', 'json')
    try:
        body = service.export_account(export_format)
    except ValueError as e:
        return error(str(e), 400)
    except ApiClientError as e:
        return api_error_response(e, 'settings.export_account')

    if export_format == 'json':
        content, mimetype = json.dumps(body, indent=2), 'application/json'
    else:
        content, mimetype = body or '', 'text/csv'
    return Response(
        content,
        mimetype=mimetype,
        headers={'Content-Disposition': f'attachment; filename=account-export.{export_format}'},
    )

"""
Auth API Routes
"""
from flask import Blueprint, current_app, request

from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import login_required
from owner_console.core.responses import (
    api_error_response,
    success,
    validation_error_response,
)
from owner_console.core.schemas import PayloadValidationError
from owner_console.extensions import limiter
from .service import AuthService

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')

service = AuthService()


def _required(body, *fields):
    missing = {name: [f'{name} is required'] for name in fields if not body.get(name)}
    if missing:
        raise PayloadValidationError(missing)


@auth_bp.route('/login', methods=['POST'])
@limiter.limit('10 per minute')
def api_login():
    """Log in and start a console session

    Any account can log in; isOwner tells the browser whether the
    management screens will be available.
    """
    try:
        user = service.login(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'auth.login')

    owner_role = current_app.config.get('OWNER_ROLE', 'owner')
    return success(
        {'user': user, 'isOwner': user.get('role') == owner_role},
        'Logged in',
    )


@auth_bp.route('/register', methods=['POST'])
@limiter.limit('5 per minute')
def api_register():
    try:
        user = service.register(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'auth.register')
    return success({'user': user}, 'Account created', 201)


@auth_bp.route('/logout', methods=['POST'])
def api_logout():
    service.logout()
    return success(None, 'Logged out')


@auth_bp.route('/me')
@login_required
def api_me():
    try:
        user = service.current_user()
    except ApiClientError as e:
        return api_error_response(e, 'auth.me')
    return success(user)


@auth_bp.route('/forgot-password', methods=['POST'])
@limiter.limit('5 per minute')
def api_forgot_password():
    body = request.get_json(silent=True) or {}
    try:
        _required(body, 'email')
        result = service.forgot_password(body['email'])
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'auth.forgot_password')
    return success(result, 'Password reset email sent')


@auth_bp.route('/reset-password', methods=['POST'])
def api_reset_password():
    body = request.get_json(silent=True) or {}
    try:
        _required(body, 'token', 'password')
        result = service.reset_password(body['token'], body['password'])
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'auth.reset_password')
    return success(result, 'Password has been reset')


@auth_bp.route('/verify-email', methods=['POST'])
def api_verify_email():
    body = request.get_json(silent=True) or {}
    try:
        _required(body, 'token')
        result = service.verify_email(body['token'])
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'auth.verify_email')
    return success(result, 'Email verified')

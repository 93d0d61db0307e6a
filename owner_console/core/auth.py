"""
Route guards
Unauthenticated requests are sent to the login page; management screens
additionally require the owner role.
"""
import logging
from functools import wraps
from urllib.parse import quote

from flask import current_app, request

from .responses import error
from .tokens import SessionTokenStore

logger = logging.getLogger(__name__)


def _login_redirect():
    login_path = current_app.config.get('LOGIN_PATH', '/login')
    return f'{login_path}?redirect={quote(request.path)}'


def login_required(view):
    """Reject requests that carry no console session"""
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not SessionTokenStore().has_tokens():
            return error('Authentication required', 401, redirect=_login_redirect())
        return view(*args, **kwargs)
    return wrapper


def owner_required(view):
    """Reject requests from anyone but the owner"""
    @wraps(view)
    def wrapper(*args, **kwargs):
        store = SessionTokenStore()
        if not store.has_tokens():
            return error('Authentication required', 401, redirect=_login_redirect())

        user = store.get_user() or {}
        owner_role = current_app.config.get('OWNER_ROLE', 'owner')
        if user.get('role') != owner_role:
            logger.warning(f"[AUTH] Non-owner access to {request.path} (role={user.get('role')})")
            return error('Owner access required', 403, redirect='/403')
        return view(*args, **kwargs)
    return wrapper

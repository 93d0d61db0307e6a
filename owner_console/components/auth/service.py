"""
Auth Business Logic
"""
import logging

from owner_console.components import ApiService, register_component
from owner_console.core.api_client import ApiClientError
from owner_console.core.schemas import LoginInput, RegisterInput, parse_payload

logger = logging.getLogger(__name__)


@register_component('auth')
class AuthService(ApiService):
    """Service for the console session"""

    def login(self, payload):
        """Log in and keep the token pair and user in the console session"""
        credentials = parse_payload(LoginInput, payload)
        result = self.client.post_data('/auth/login', credentials, skip_auth=True)
        user = self._store_session(result)
        logger.info(f"[AUTH] Logged in as {user.get('email')} (role={user.get('role')})")
        return user

    def register(self, payload):
        data = parse_payload(RegisterInput, payload)
        result = self.client.post_data('/auth/register', data, skip_auth=True)
        return self._store_session(result)

    def logout(self):
        """Tell the backend, then drop the local session whatever it answers"""
        try:
            self.client.post('/auth/logout')
        except ApiClientError as e:
            logger.info(f'[AUTH] Ignoring logout error: {e.message}')
        finally:
            self.client.token_store.clear_tokens()

    def current_user(self):
        user = self.client.get_data('/auth/me')
        if isinstance(user, dict):
            self.client.token_store.set_user(user)
        return user

    def forgot_password(self, email):
        return self.client.post_data('/auth/forgot-password', {'email': email}, skip_auth=True)

    def reset_password(self, token, password):
        return self.client.post_data(
            '/auth/reset-password',
            {'token': token, 'password': password},
            skip_auth=True,
        )

    def verify_email(self, token):
        return self.client.post_data('/auth/verify-email', {'token': token}, skip_auth=True)

    def _store_session(self, result):
        if not isinstance(result, dict):
            raise ApiClientError('Unexpected login response', 502)
        access_token = result.get('accessToken')
        refresh_token = result.get('refreshToken')
        if not access_token or not refresh_token:
            raise ApiClientError('Login response did not include tokens', 502)

        user = result.get('user') or {}
        store = self.client.token_store
        store.set_tokens(access_token, refresh_token)
        store.set_user(user)
        return user

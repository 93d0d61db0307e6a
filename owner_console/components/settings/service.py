"""
Settings Business Logic
"""
import logging

from owner_console.components import ApiService, register_component
from owner_console.core.schemas import (
    ChangePasswordInput,
    DeleteAccountInput,
    PreferencesInput,
    ProfileInput,
    parse_payload,
)

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('json', 'csv')


@register_component('settings')
class SettingsService(ApiService):
    """Service for the signed-in account"""

    def list_sessions(self, active_only=False):
        response = self.client.get('/sessions')
        if isinstance(response, list):
            sessions = response
        elif isinstance(response, dict):
            sessions = response.get('data') or []
        else:
            sessions = []

        if active_only:
            sessions = [session for session in sessions if session.get('isActive')]
        return sessions

    def revoke_session(self, session_id):
        logger.info(f'[AUTH] Revoking session {session_id}')
        self.client.delete(f'/sessions/{session_id}')

    def revoke_all_sessions(self):
        """Revoke every session except the current one"""
        logger.info('[AUTH] Revoking all other sessions')
        self.client.delete('/sessions')

    def change_password(self, payload):
        data = parse_payload(ChangePasswordInput, payload)
        return self.client.post_data('/auth/change-password', data)

    def get_preferences(self):
        return self.client.get_data('/settings/preferences')

    def update_preferences(self, payload):
        data = parse_payload(PreferencesInput, payload, partial=True)
        return self.client.patch_data('/settings/preferences', data)

    def reset_preferences(self):
        return self.client.post_data('/settings/preferences/reset')

    def update_profile(self, payload):
        """Save profile fields and refresh the cached user shown in the console"""
        data = parse_payload(ProfileInput, payload, partial=True)
        user = self.client.patch_data('/users/profile', data)
        cached = self.client.token_store.get_user()
        if cached and isinstance(user, dict):
            self.client.token_store.set_user(dict(cached, **user))
        return user

    def request_account_deletion(self):
        """Ask the backend to email a deletion confirmation token"""
        logger.info('[AUTH] Account deletion requested')
        return self.client.post_data('/users/account/request-deletion')

    def delete_account(self, payload):
        """Delete the account with the emailed token; the local session ends too"""
        data = parse_payload(DeleteAccountInput, payload)
        response = self.client.delete('/users/account', data)
        self.client.token_store.clear_tokens()
        logger.info('[AUTH] Account deleted')

        if isinstance(response, dict):
            inner = response.get('data')
            if isinstance(inner, dict) and inner.get('message'):
                return inner['message']
            if response.get('message'):
                return response['message']
        return 'Account deleted'

    def deactivate_account(self):
        logger.info('[AUTH] Deactivating account')
        return self.client.post_data('/users/account/deactivate')

    def reactivate_account(self):
        logger.info('[AUTH] Reactivating account')
        return self.client.post_data('/users/account/reactivate')

    def export_account(self, export_format='json'):
        """Account data as parsed JSON or CSV text"""
        if export_format not in EXPORT_FORMATS:
            raise ValueError(f"format must be one of: {', '.join(EXPORT_FORMATS)}")
        return self.client.get('/users/account/export', params={'format': export_format})

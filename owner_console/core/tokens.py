"""
Token storage
The browser console kept tokens in local storage plus cookies; here they live
in the signed Flask session so every console request carries them.
"""
from flask import session


class TokenStore:
    """Interface for access/refresh token persistence"""

    def get_access_token(self):
        raise NotImplementedError

    def get_refresh_token(self):
        raise NotImplementedError

    def set_tokens(self, access_token, refresh_token):
        raise NotImplementedError

    def clear_tokens(self):
        raise NotImplementedError

    def has_tokens(self):
        return bool(self.get_access_token() or self.get_refresh_token())


class SessionTokenStore(TokenStore):
    """Tokens kept in the Flask session cookie"""

    ACCESS_KEY = 'access_token'
    REFRESH_KEY = 'refresh_token'
    USER_KEY = 'user'

    def get_access_token(self):
        return session.get(self.ACCESS_KEY)

    def get_refresh_token(self):
        return session.get(self.REFRESH_KEY)

    def set_tokens(self, access_token, refresh_token):
        session.permanent = True
        session[self.ACCESS_KEY] = access_token
        session[self.REFRESH_KEY] = refresh_token

    def clear_tokens(self):
        session.pop(self.ACCESS_KEY, None)
        session.pop(self.REFRESH_KEY, None)
        session.pop(self.USER_KEY, None)

    def get_user(self):
        return session.get(self.USER_KEY)

    def set_user(self, user):
        session[self.USER_KEY] = user


class MemoryTokenStore(TokenStore):
    """In-process token store for scripts and tests"""

    def __init__(self, access_token=None, refresh_token=None):
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.user = None

    def get_access_token(self):
        return self.access_token

    def get_refresh_token(self):
        return self.refresh_token

    def set_tokens(self, access_token, refresh_token):
        self.access_token = access_token
        self.refresh_token = refresh_token

    def clear_tokens(self):
        self.access_token = None
        self.refresh_token = None
        self.user = None

    def get_user(self):
        return self.user

    def set_user(self, user):
        self.user = user

"""
API Client
requests wrapper with error handling, token management and envelope unwrapping
"""
import logging
import time

import requests
from flask import current_app, g

from . import envelopes
from .tokens import SessionTokenStore

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = (
    'Request timeout. The server took too long to respond. '
    'Please check if the backend is running.'
)
RETRY_TIMEOUT_MESSAGE = 'Request timeout. Please try again.'
SESSION_EXPIRED_MESSAGE = 'Session expired. Please login again.'


class ApiClientError(Exception):
    """Error raised for any failed upstream call"""

    def __init__(self, message, status_code=None, errors=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors

    def to_dict(self):
        return {
            'message': self.message,
            'statusCode': self.status_code,
            'errors': self.errors,
        }


class SessionExpiredError(ApiClientError):
    """Refresh failed; the owner has to log in again"""

    redirect = '/login'

    def __init__(self, message=SESSION_EXPIRED_MESSAGE):
        super().__init__(message, 401)


class ApiClient:
    """Client for the backend REST API

    One refresh-and-retry is attempted when an authenticated request gets a
    401. If the refresh fails the stored tokens are cleared and
    SessionExpiredError is raised.
    """

    def __init__(self, base_url, token_store, timeout=30, session=None):
        self.base_url = base_url.rstrip('/')
        self.token_store = token_store
        self.timeout = timeout
        self.session = session or requests.Session()

    def request(self, method, endpoint, params=None, json=None, data=None,
                files=None, headers=None, skip_auth=False, extract_data=False):
        """Make an API request with automatic token handling and refresh"""
        url = f'{self.base_url}{endpoint}'

        # Multipart and form bodies get their content type from requests
        request_headers = {}
        if files is None and data is None:
            request_headers['Content-Type'] = 'application/json'
        if headers:
            request_headers.update(headers)

        if not skip_auth:
            token = self.token_store.get_access_token()
            if token:
                request_headers['Authorization'] = f'Bearer {token}'
            else:
                logger.debug(f'[API] No auth token available for {method} {endpoint}')

        started = time.monotonic()
        try:
            response = self._send(method, url, request_headers, params, json, data, files)
        except requests.exceptions.Timeout:
            logger.error(f'[API] Request timeout after {self.timeout}s: {method} {url}')
            raise ApiClientError(TIMEOUT_MESSAGE, 408)
        except requests.exceptions.RequestException as e:
            raise self._network_error(e, url)

        logger.debug(
            f'[API] {method} {url} -> {response.status_code} '
            f'({(time.monotonic() - started) * 1000:.0f}ms)'
        )

        if response.status_code == 401 and not skip_auth:
            logger.warning('[API] Received 401, attempting token refresh...')
            new_token = self.refresh_access_token()
            if not new_token:
                logger.error('[API] Token refresh failed, login required')
                self.token_store.clear_tokens()
                raise SessionExpiredError()

            request_headers['Authorization'] = f'Bearer {new_token}'
            _rewind_files(files)
            try:
                response = self._send(method, url, request_headers, params, json, data, files)
            except requests.exceptions.Timeout:
                logger.error(f'[API] Retry request timeout after {self.timeout}s')
                raise ApiClientError(RETRY_TIMEOUT_MESSAGE, 408)
            except requests.exceptions.RequestException as e:
                raise self._network_error(e, url)
            logger.info(f'[API] Retry after refresh returned {response.status_code}')

        body = self._parse_body(response)

        if not response.ok:
            error = self._error_from_response(response.status_code, body)
            logger.error(f'[API] Request failed: {method} {endpoint} {error.status_code} {error.message}')
            raise error

        if extract_data:
            if envelopes.is_paginated_response(body):
                return envelopes.extract_paginated_data(body)
            if envelopes.is_success_response(body):
                return envelopes.extract_data(body)

        return body

    def refresh_access_token(self):
        """Exchange the stored refresh token for a new token pair

        Returns the new access token, or None when refreshing is impossible.
        """
        refresh_token = self.token_store.get_refresh_token()
        if not refresh_token:
            logger.warning('[API] No refresh token available')
            return None

        try:
            response = self.session.request(
                'POST',
                f'{self.base_url}/auth/refresh',
                json={'refreshToken': refresh_token},
                headers={'Content-Type': 'application/json'},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f'[API] Token refresh error: {e}')
            self.token_store.clear_tokens()
            return None

        if not response.ok:
            logger.error(f'[API] Token refresh failed with status {response.status_code}')
            self.token_store.clear_tokens()
            return None

        payload = self._parse_body(response)
        tokens = envelopes.extract_data(payload) if isinstance(payload, dict) else None
        if not isinstance(tokens, dict) or not tokens.get('accessToken') or not tokens.get('refreshToken'):
            logger.error('[API] Token refresh response missing tokens')
            self.token_store.clear_tokens()
            return None

        self.token_store.set_tokens(tokens['accessToken'], tokens['refreshToken'])
        logger.info('[API] Token refreshed successfully')
        return tokens['accessToken']

    # Verb helpers

    def get(self, endpoint, params=None, **kwargs):
        return self.request('GET', endpoint, params=params, **kwargs)

    def post(self, endpoint, body=None, **kwargs):
        return self.request('POST', endpoint, json=body, **kwargs)

    def put(self, endpoint, body=None, **kwargs):
        return self.request('PUT', endpoint, json=body, **kwargs)

    def patch(self, endpoint, body=None, **kwargs):
        return self.request('PATCH', endpoint, json=body, **kwargs)

    def delete(self, endpoint, body=None, **kwargs):
        return self.request('DELETE', endpoint, json=body, **kwargs)

    # Envelope-aware helpers

    def get_data(self, endpoint, params=None, **kwargs):
        return envelopes.extract_data(self.get(endpoint, params=params, **kwargs))

    def get_paginated_data(self, endpoint, params=None, **kwargs):
        return envelopes.extract_paginated_data(self.get(endpoint, params=params, **kwargs))

    def post_data(self, endpoint, body=None, **kwargs):
        return envelopes.extract_data(self.post(endpoint, body, **kwargs))

    def patch_data(self, endpoint, body=None, **kwargs):
        return envelopes.extract_data(self.patch(endpoint, body, **kwargs))

    def put_data(self, endpoint, body=None, **kwargs):
        return envelopes.extract_data(self.put(endpoint, body, **kwargs))

    def post_form_data(self, endpoint, files=None, data=None, **kwargs):
        return envelopes.extract_data(
            self.request('POST', endpoint, files=files, data=data, **kwargs)
        )

    # Internals

    def _send(self, method, url, headers, params, json, data, files):
        return self.session.request(
            method,
            url,
            params=params,
            json=json,
            data=data,
            files=files,
            headers=headers,
            timeout=self.timeout,
        )

    def _network_error(self, exc, url):
        if isinstance(exc, requests.exceptions.ConnectionError):
            logger.error(f'[API] Connection failed for {url}: {exc}')
            return ApiClientError(
                f'Network error. Please check if the backend server is running at '
                f'{self.base_url} and CORS is configured correctly.',
                0,
            )
        logger.error(f'[API] Transport error for {url}: {exc}')
        return ApiClientError(f'Network error: {exc}', 0)

    @staticmethod
    def _parse_body(response):
        if not response.content:
            return None
        content_type = response.headers.get('Content-Type', '')
        if 'application/json' in content_type:
            try:
                return response.json()
            except ValueError:
                return response.text
        return response.text

    @staticmethod
    def _error_from_response(status_code, body):
        default_message = f'Request failed with status {status_code}'
        errors = None

        if isinstance(body, dict):
            message = body.get('message') or body.get('error') or default_message
            errors = envelopes.normalize_errors(body.get('errors'))
            if isinstance(message, list):
                # Validation pipes may send a list of messages
                errors = errors or {'_general': [str(m) for m in message]}
                message = ', '.join(str(m) for m in message)
        elif isinstance(body, str) and body:
            message = body
        else:
            message = default_message

        return ApiClientError(str(message), status_code, errors)


def _rewind_files(files):
    """Seek uploaded streams back to the start before a retry"""
    if not files:
        return
    values = files.values() if isinstance(files, dict) else [item[1] for item in files]
    for value in values:
        stream = value[1] if isinstance(value, tuple) else value
        if hasattr(stream, 'seek'):
            stream.seek(0)


def init_api_client(app, http_session=None):
    """Attach the shared HTTP session used by per-request clients"""
    app.extensions['http_session'] = http_session or requests.Session()


def get_api_client():
    """API client bound to the current console session"""
    if 'api_client' not in g:
        g.api_client = ApiClient(
            current_app.config['API_URL'],
            SessionTokenStore(),
            timeout=current_app.config.get('API_TIMEOUT', 30),
            session=current_app.extensions['http_session'],
        )
    return g.api_client

import io

import pytest
import requests

from owner_console.core.api_client import (
    RETRY_TIMEOUT_MESSAGE,
    TIMEOUT_MESSAGE,
    ApiClient,
    ApiClientError,
    SessionExpiredError,
)
from owner_console.core.tokens import MemoryTokenStore

BASE = 'http://api.test/api/v1'


@pytest.fixture()
def store():
    return MemoryTokenStore('access-1', 'refresh-1')


@pytest.fixture()
def api(upstream, store):
    return ApiClient(BASE, store, timeout=5, session=upstream)


def test_authenticated_request_sends_bearer_token_and_json_type(api, upstream):
    upstream.add('GET', '/auth/me', json={'id': 'u1'})

    assert api.get('/auth/me') == {'id': 'u1'}

    call = upstream.calls[0]
    assert call.headers['Authorization'] == 'Bearer access-1'
    assert call.headers['Content-Type'] == 'application/json'


def test_skip_auth_omits_token(api, upstream):
    upstream.add('POST', '/auth/login', json={'ok': True})

    api.post('/auth/login', {'email': 'a@b.co'}, skip_auth=True)

    assert 'Authorization' not in upstream.calls[0].headers
    assert upstream.calls[0].json == {'email': 'a@b.co'}


def test_missing_token_sends_no_authorization_header(upstream):
    api = ApiClient(BASE, MemoryTokenStore(), session=upstream)
    upstream.add('GET', '/finance/budgets', json=[])

    api.get('/finance/budgets')

    assert 'Authorization' not in upstream.calls[0].headers


def test_401_refreshes_and_retries_once(api, upstream, store):
    upstream.add('GET', '/admin/metrics', status=401, json={'message': 'expired'})
    upstream.add('GET', '/admin/metrics', json=upstream.envelope({'queues': []}))
    upstream.add('POST', '/auth/refresh', json={'accessToken': 'access-2', 'refreshToken': 'refresh-2'})

    assert api.get_data('/admin/metrics') == {'queues': []}

    assert [call.path for call in upstream.calls] == ['/admin/metrics', '/auth/refresh', '/admin/metrics']
    assert upstream.calls[1].json == {'refreshToken': 'refresh-1'}
    assert upstream.calls[2].headers['Authorization'] == 'Bearer access-2'
    assert store.get_access_token() == 'access-2'
    assert store.get_refresh_token() == 'refresh-2'


def test_refresh_accepts_tokens_inside_envelope(api, upstream, store):
    upstream.add('GET', '/auth/me', status=401)
    upstream.add('GET', '/auth/me', json={'id': 'u1'})
    upstream.add(
        'POST',
        '/auth/refresh',
        json=upstream.envelope({'accessToken': 'access-3', 'refreshToken': 'refresh-3'}),
    )

    api.get('/auth/me')

    assert store.get_access_token() == 'access-3'


def test_second_401_after_refresh_is_not_retried_again(api, upstream):
    upstream.add('GET', '/auth/me', status=401, json={'message': 'Unauthorized'})
    upstream.add('POST', '/auth/refresh', json={'accessToken': 'access-2', 'refreshToken': 'refresh-2'})

    with pytest.raises(ApiClientError) as exc_info:
        api.get('/auth/me')

    assert exc_info.value.status_code == 401
    assert not isinstance(exc_info.value, SessionExpiredError)
    assert len(upstream.calls_to('GET', '/auth/me')) == 2
    assert len(upstream.calls_to('POST', '/auth/refresh')) == 1


def test_failed_refresh_clears_tokens_and_expires_session(api, upstream, store):
    upstream.add('GET', '/auth/me', status=401)
    upstream.add('POST', '/auth/refresh', status=401, json={'message': 'Invalid refresh token'})

    with pytest.raises(SessionExpiredError) as exc_info:
        api.get('/auth/me')

    assert exc_info.value.redirect == '/login'
    assert exc_info.value.message == 'Session expired. Please login again.'
    assert store.get_access_token() is None
    assert store.get_refresh_token() is None


def test_refresh_without_refresh_token_expires_session(upstream):
    store = MemoryTokenStore('access-1', None)
    api = ApiClient(BASE, store, session=upstream)
    upstream.add('GET', '/auth/me', status=401)

    with pytest.raises(SessionExpiredError):
        api.get('/auth/me')
    assert upstream.calls_to('POST', '/auth/refresh') == []


def test_refresh_response_without_tokens_expires_session(api, upstream, store):
    upstream.add('GET', '/auth/me', status=401)
    upstream.add('POST', '/auth/refresh', json=upstream.envelope({'accessToken': 'only-access'}))

    with pytest.raises(SessionExpiredError):
        api.get('/auth/me')
    assert store.get_access_token() is None


def test_skip_auth_401_is_returned_as_error_without_refresh(api, upstream):
    upstream.add('POST', '/auth/login', status=401, json={'message': 'Invalid credentials'})

    with pytest.raises(ApiClientError) as exc_info:
        api.post('/auth/login', {}, skip_auth=True)

    assert exc_info.value.message == 'Invalid credentials'
    assert upstream.calls_to('POST', '/auth/refresh') == []


def test_timeout_maps_to_408(api, upstream):
    upstream.add('GET', '/admin/metrics', exc=requests.exceptions.Timeout('slow'))

    with pytest.raises(ApiClientError) as exc_info:
        api.get('/admin/metrics')

    assert exc_info.value.status_code == 408
    assert exc_info.value.message == TIMEOUT_MESSAGE


def test_timeout_on_retry_uses_retry_message(api, upstream):
    upstream.add('GET', '/admin/metrics', status=401)
    upstream.add('GET', '/admin/metrics', exc=requests.exceptions.Timeout('slow'))
    upstream.add('POST', '/auth/refresh', json={'accessToken': 'a2', 'refreshToken': 'r2'})

    with pytest.raises(ApiClientError) as exc_info:
        api.get('/admin/metrics')

    assert exc_info.value.status_code == 408
    assert exc_info.value.message == RETRY_TIMEOUT_MESSAGE


def test_connection_error_maps_to_status_zero(api, upstream):
    upstream.add('GET', '/admin/metrics', exc=requests.exceptions.ConnectionError('refused'))

    with pytest.raises(ApiClientError) as exc_info:
        api.get('/admin/metrics')

    assert exc_info.value.status_code == 0
    assert BASE in exc_info.value.message


def test_error_message_list_is_joined_and_kept_as_errors(api, upstream):
    upstream.add(
        'POST',
        '/finance/budgets',
        status=400,
        json={'success': False, 'statusCode': 400, 'message': ['name is required', 'amount must be positive']},
    )

    with pytest.raises(ApiClientError) as exc_info:
        api.post('/finance/budgets', {})

    err = exc_info.value
    assert err.status_code == 400
    assert err.message == 'name is required, amount must be positive'
    assert err.errors == {'_general': ['name is required', 'amount must be positive']}


def test_error_falls_back_to_error_field_then_default(api, upstream):
    upstream.add('GET', '/a', status=500, json={'error': 'Boom'})
    upstream.add('GET', '/b', status=502)

    with pytest.raises(ApiClientError) as first:
        api.get('/a')
    with pytest.raises(ApiClientError) as second:
        api.get('/b')

    assert first.value.message == 'Boom'
    assert second.value.message == 'Request failed with status 502'


def test_field_errors_are_normalized(api, upstream):
    upstream.add(
        'PATCH',
        '/settings/preferences',
        status=422,
        json={'message': 'Validation failed', 'errors': {'theme': 'Invalid theme'}},
    )

    with pytest.raises(ApiClientError) as exc_info:
        api.patch('/settings/preferences', {'theme': 'neon'})

    assert exc_info.value.errors == {'theme': ['Invalid theme']}
    assert exc_info.value.to_dict()['statusCode'] == 422


def test_empty_body_returns_none(api, upstream):
    upstream.add('DELETE', '/finance/budgets/b1', status=204)

    assert api.delete('/finance/budgets/b1') is None


def test_plain_text_body_is_returned_as_text(api, upstream):
    upstream.add('GET', '/health', text='ok')

    assert api.get('/health') == 'ok'


def test_extract_data_unwraps_envelopes(api, upstream):
    upstream.add('GET', '/finance/budgets/b1', json=upstream.envelope({'id': 'b1'}))
    upstream.add(
        'GET',
        '/finance/budgets',
        json=upstream.envelope([{'id': 'b1'}], pagination={'page': 1, 'limit': 10, 'total': 1, 'totalPages': 1}),
    )

    assert api.request('GET', '/finance/budgets/b1', extract_data=True) == {'id': 'b1'}
    result = api.request('GET', '/finance/budgets', extract_data=True)
    assert result['data'] == [{'id': 'b1'}]
    assert result['pagination']['total'] == 1


def test_get_paginated_data_wraps_bare_lists(api, upstream):
    upstream.add('GET', '/portfolio/projects', json=[{'id': 'p1'}, {'id': 'p2'}])

    result = api.get_paginated_data('/portfolio/projects')

    assert result['data'] == [{'id': 'p1'}, {'id': 'p2'}]
    assert result['pagination']['total'] == 2
    assert result['pagination']['totalPages'] == 1


def test_multipart_upload_leaves_content_type_to_requests(api, upstream):
    upstream.add('POST', '/finance/import/preview', json=upstream.envelope({'totalRows': 3}))
    stream = io.BytesIO(b'date,amount\n2026-01-01,5\n')

    result = api.post_form_data(
        '/finance/import/preview',
        files={'file': ('bank.csv', stream, 'text/csv')},
        data={'date': 'date'},
    )

    assert result == {'totalRows': 3}
    call = upstream.calls[0]
    assert 'Content-Type' not in call.headers
    assert call.data == {'date': 'date'}


def test_upload_stream_is_rewound_before_retry(api, upstream):
    upstream.add('POST', '/finance/import', status=401)
    upstream.add('POST', '/finance/import', json={'importedCount': 1})
    upstream.add('POST', '/auth/refresh', json={'accessToken': 'a2', 'refreshToken': 'r2'})
    stream = io.BytesIO(b'date,amount\n')
    stream.read()

    api.post_form_data('/finance/import', files={'file': ('bank.csv', stream, 'text/csv')})

    assert stream.tell() == 0

import requests


def login_reply(upstream, role='owner'):
    upstream.add(
        'POST',
        '/auth/login',
        json=upstream.envelope({
            'user': {'id': 'u1', 'email': 'owner@example.com', 'role': role},
            'accessToken': 'access-1',
            'refreshToken': 'refresh-1',
        }),
    )


def test_login_stores_tokens_in_console_session(client, upstream):
    login_reply(upstream)

    response = client.post('/api/auth/login', json={'email': 'owner@example.com', 'password': 'Secret123'})

    body = response.get_json()
    assert response.status_code == 200
    assert body['data']['isOwner'] is True
    assert upstream.calls[0].json == {'email': 'owner@example.com', 'password': 'Secret123'}
    assert 'Authorization' not in upstream.calls[0].headers
    with client.session_transaction() as session:
        assert session['access_token'] == 'access-1'
        assert session['refresh_token'] == 'refresh-1'
        assert session['user']['role'] == 'owner'


def test_login_as_member_is_not_owner(client, upstream):
    login_reply(upstream, role='user')

    response = client.post('/api/auth/login', json={'email': 'owner@example.com', 'password': 'Secret123'})

    assert response.get_json()['data']['isOwner'] is False


def test_login_validation_happens_before_upstream(client, upstream):
    response = client.post('/api/auth/login', json={})

    body = response.get_json()
    assert response.status_code == 400
    assert body['success'] is False
    assert body['errors'] == {
        'email': ['Please enter a valid email address'],
        'password': ['Password is required'],
    }
    assert upstream.calls == []


def test_login_rejects_malformed_email(client, upstream):
    response = client.post('/api/auth/login', json={'email': 'nope', 'password': 'x'})

    assert response.status_code == 400
    assert response.get_json()['errors'] == {'email': ['Please enter a valid email address']}
    assert upstream.calls == []


def test_login_rejected_by_backend(client, upstream):
    upstream.add('POST', '/auth/login', status=401, json={'message': 'Invalid credentials'})

    response = client.post('/api/auth/login', json={'email': 'owner@example.com', 'password': 'wrong'})

    body = response.get_json()
    assert response.status_code == 401
    assert body['message'] == 'Invalid credentials'
    assert body['upstreamStatus'] == 401


def test_login_response_without_tokens_is_an_error(client, upstream):
    upstream.add('POST', '/auth/login', json=upstream.envelope({'user': {'role': 'owner'}}))

    response = client.post('/api/auth/login', json={'email': 'owner@example.com', 'password': 'Secret123'})

    assert response.status_code == 502
    with client.session_transaction() as session:
        assert 'access_token' not in session


def test_logout_clears_session_even_when_backend_fails(owner_client, upstream):
    upstream.add('POST', '/auth/logout', exc=requests.exceptions.ConnectionError('refused'))

    response = owner_client.post('/api/auth/logout')

    assert response.status_code == 200
    with owner_client.session_transaction() as session:
        assert 'access_token' not in session
        assert 'user' not in session


def test_me_refreshes_cached_user(owner_client, upstream):
    upstream.add('GET', '/auth/me', json=upstream.envelope({'id': 'u1', 'role': 'owner', 'firstName': 'Ada'}))

    response = owner_client.get('/api/auth/me')

    assert response.get_json()['data']['firstName'] == 'Ada'
    with owner_client.session_transaction() as session:
        assert session['user']['firstName'] == 'Ada'


def test_me_requires_login(client):
    response = client.get('/api/auth/me')

    body = response.get_json()
    assert response.status_code == 401
    assert body['redirect'] == '/login?redirect=/api/auth/me'


def test_password_reset_flow_is_unauthenticated(client, upstream):
    upstream.add('POST', '/auth/forgot-password', json=upstream.envelope({'message': 'sent'}))
    upstream.add('POST', '/auth/reset-password', json=upstream.envelope({'message': 'reset'}))

    forgot = client.post('/api/auth/forgot-password', json={'email': 'owner@example.com'})
    reset = client.post('/api/auth/reset-password', json={'token': 't1', 'password': 'NewSecret1'})

    assert forgot.status_code == 200
    assert reset.status_code == 200
    assert upstream.calls[1].json == {'token': 't1', 'password': 'NewSecret1'}
    assert all('Authorization' not in call.headers for call in upstream.calls)


def test_reset_password_requires_token(client, upstream):
    response = client.post('/api/auth/reset-password', json={'password': 'NewSecret1'})

    assert response.status_code == 400
    assert response.get_json()['errors'] == {'token': ['token is required']}
    assert upstream.calls == []


def test_verify_email(client, upstream):
    upstream.add('POST', '/auth/verify-email', json=upstream.envelope({'verified': True}))

    response = client.post('/api/auth/verify-email', json={'token': 'abc'})

    assert response.get_json()['data'] == {'verified': True}


def test_owner_screens_reject_members(member_client, upstream):
    response = member_client.get('/api/admin/metrics')

    body = response.get_json()
    assert response.status_code == 403
    assert body['redirect'] == '/403'
    assert upstream.calls == []


def test_owner_screens_redirect_anonymous_users(client):
    response = client.get('/api/finance/budgets')

    assert response.status_code == 401
    assert response.get_json()['redirect'] == '/login?redirect=/api/finance/budgets'


def test_expired_session_is_reported_with_login_redirect(owner_client, upstream):
    upstream.add('GET', '/admin/metrics', status=401)
    upstream.add('POST', '/auth/refresh', status=401)

    response = owner_client.get('/api/admin/metrics')

    body = response.get_json()
    assert response.status_code == 401
    assert body['message'] == 'Session expired. Please login again.'
    assert body['redirect'] == '/login'
    with owner_client.session_transaction() as session:
        assert 'access_token' not in session


def test_refreshed_tokens_are_kept_in_session(owner_client, upstream):
    upstream.add('GET', '/admin/metrics', status=401)
    upstream.add('GET', '/admin/metrics', json=upstream.envelope({'queues': []}))
    upstream.add('POST', '/auth/refresh', json={'accessToken': 'access-2', 'refreshToken': 'refresh-2'})

    response = owner_client.get('/api/admin/metrics')

    assert response.status_code == 200
    with owner_client.session_transaction() as session:
        assert session['access_token'] == 'access-2'
        assert session['refresh_token'] == 'refresh-2'

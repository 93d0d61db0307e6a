import json

import pytest

from owner_console.config.settings import TestingConfig
from owner_console.console_app import ConsoleApp

API_BASE = TestingConfig.API_URL

OWNER = {'id': 'u1', 'email': 'owner@example.com', 'role': 'owner'}
MEMBER = {'id': 'u2', 'email': 'member@example.com', 'role': 'user'}


class FakeResponse:
    def __init__(self, status_code=200, json_body=None, text=None):
        self.status_code = status_code
        if json_body is not None:
            self.content = json.dumps(json_body).encode()
            self.headers = {'Content-Type': 'application/json; charset=utf-8'}
        elif text:
            self.content = text.encode()
            self.headers = {'Content-Type': 'text/plain'}
        else:
            self.content = b''
            self.headers = {}
        self.text = self.content.decode()

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return json.loads(self.text)


class Call:
    def __init__(self, method, path, params, json_body, data, files, headers):
        self.method = method
        self.path = path
        self.params = params
        self.json = json_body
        self.data = data
        self.files = files
        self.headers = headers or {}


class FakeSession:
    """Stands in for requests.Session; replies are scripted per method and path

    A path scripted with several replies hands them out in order and then
    keeps repeating the last one. Unscripted paths answer 404.
    """

    def __init__(self, base=API_BASE):
        self.base = base
        self.routes = {}
        self.calls = []

    @staticmethod
    def envelope(data, message='OK', status_code=200, pagination=None):
        body = {
            'success': True,
            'statusCode': status_code,
            'message': message,
            'data': data,
            'timestamp': '2026-01-01T00:00:00Z',
        }
        if pagination is not None:
            body['pagination'] = pagination
        return body

    def add(self, method, path, status=200, json=None, text=None, exc=None):
        reply = exc if exc is not None else FakeResponse(status, json, text)
        self.routes.setdefault((method, path), []).append(reply)
        return self

    def request(self, method, url, params=None, json=None, data=None, files=None,
                headers=None, timeout=None):
        path = url[len(self.base):] if url.startswith(self.base) else url
        self.calls.append(Call(method, path, params, json, data, files, headers))

        replies = self.routes.get((method, path))
        if not replies:
            return FakeResponse(404, {'success': False, 'statusCode': 404, 'message': 'Not Found'})
        reply = replies.pop(0) if len(replies) > 1 else replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply

    def calls_to(self, method, path):
        return [call for call in self.calls if call.method == method and call.path == path]


def _log_in(client, user):
    with client.session_transaction() as session:
        session['access_token'] = 'access-1'
        session['refresh_token'] = 'refresh-1'
        session['user'] = user
    return client


@pytest.fixture()
def upstream():
    return FakeSession()


@pytest.fixture()
def app(upstream):
    return ConsoleApp().create_app(TestingConfig, http_session=upstream)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def owner_client(app):
    return _log_in(app.test_client(), OWNER)


@pytest.fixture()
def member_client(app):
    return _log_in(app.test_client(), MEMBER)

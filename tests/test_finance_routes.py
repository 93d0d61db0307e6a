import io

PAGINATION = {
    'page': 1,
    'limit': 10,
    'total': 1,
    'totalPages': 1,
    'hasNextPage': False,
    'hasPreviousPage': False,
}

BUDGET = {
    'id': 'b1',
    'name': 'Groceries',
    'amount': 400,
    'period': 'monthly',
    'startDate': '2026-01-01',
    'rolloverEnabled': False,
}


# Budgets

def test_list_budgets_forwards_filters(owner_client, upstream):
    upstream.add('GET', '/finance/budgets', json=upstream.envelope([BUDGET], pagination=PAGINATION))

    response = owner_client.get('/api/finance/budgets?page=1&limit=10&period=monthly&search=&sortOrder=desc&foo=bar')

    body = response.get_json()
    assert body['data'] == [BUDGET]
    assert body['pagination'] == PAGINATION
    assert upstream.calls[0].params == {'page': '1', 'limit': '10', 'period': 'monthly', 'sortOrder': 'desc'}


def test_list_budgets_rejects_bad_filter(owner_client, upstream):
    response = owner_client.get('/api/finance/budgets?alertLevel=panic')

    assert response.status_code == 400
    assert 'alertLevel' in response.get_json()['errors']
    assert upstream.calls == []


def test_list_budgets_with_stats(owner_client, upstream):
    row = dict(BUDGET, stats={'actualAmount': 120, 'percentageUsed': 30, 'remainingAmount': 280, 'alertLevel': 'none'})
    upstream.add('GET', '/finance/budgets/stats', json={'data': [row], 'pagination': PAGINATION})

    response = owner_client.get('/api/finance/budgets/stats')

    assert response.get_json()['data'][0]['stats']['remainingAmount'] == 280


def test_budget_alerts(owner_client, upstream):
    upstream.add('GET', '/finance/budgets/alerts', json=upstream.envelope([BUDGET]))

    response = owner_client.get('/api/finance/budgets/alerts')

    assert response.get_json()['data'] == [BUDGET]


def test_get_budget_and_its_stats(owner_client, upstream):
    upstream.add('GET', '/finance/budgets/b1', json=upstream.envelope(BUDGET))
    upstream.add('GET', '/finance/budgets/b1/stats', json=upstream.envelope(dict(BUDGET, stats={'alertLevel': 'warning'})))

    budget = owner_client.get('/api/finance/budgets/b1').get_json()['data']
    stats = owner_client.get('/api/finance/budgets/b1/stats').get_json()['data']

    assert budget['name'] == 'Groceries'
    assert stats['stats']['alertLevel'] == 'warning'


def test_create_budget(owner_client, upstream):
    upstream.add('POST', '/finance/budgets', status=201, json=upstream.envelope(BUDGET, status_code=201))

    response = owner_client.post('/api/finance/budgets', json={
        'name': 'Groceries',
        'amount': '400',
        'period': 'monthly',
        'startDate': '2026-01-01',
        'categoryId': '',
        'alertThresholds': {'warning': 50, 'critical': 80, 'exceeded': 100},
    })

    assert response.status_code == 201
    assert upstream.calls[0].json == {
        'name': 'Groceries',
        'amount': 400.0,
        'period': 'monthly',
        'startDate': '2026-01-01',
        'alertThresholds': {'warning': 50.0, 'critical': 80.0, 'exceeded': 100.0},
    }


def test_create_budget_with_bad_thresholds_never_reaches_backend(owner_client, upstream):
    response = owner_client.post('/api/finance/budgets', json={
        'name': 'Groceries',
        'amount': 400,
        'period': 'monthly',
        'startDate': '2026-01-01',
        'alertThresholds': {'warning': 80, 'critical': 50},
    })

    body = response.get_json()
    assert response.status_code == 400
    assert body['errors'] == {
        'alertThresholds.warning': ['Warning threshold must be less than critical threshold'],
    }
    assert upstream.calls == []


def test_update_budget_sends_partial_patch(owner_client, upstream):
    upstream.add('PATCH', '/finance/budgets/b1', json=upstream.envelope(dict(BUDGET, amount=500)))

    response = owner_client.patch('/api/finance/budgets/b1', json={'amount': 500})

    assert response.get_json()['data']['amount'] == 500
    assert upstream.calls[0].json == {'amount': 500.0}


def test_delete_budget(owner_client, upstream):
    upstream.add('DELETE', '/finance/budgets/b1', status=204)

    response = owner_client.delete('/api/finance/budgets/b1')

    assert response.status_code == 200
    assert response.get_json()['message'] == 'Budget deleted'


def test_bulk_delete_budgets(owner_client, upstream):
    upstream.add('POST', '/finance/budgets/bulk-delete', json=upstream.envelope({'deletedCount': 2, 'failedIds': []}))

    response = owner_client.post('/api/finance/budgets/bulk-delete', json={'ids': ['b1', 'b2']})

    assert response.get_json()['data'] == {'deletedCount': 2, 'failedIds': []}
    assert upstream.calls[0].json == {'ids': ['b1', 'b2']}


def test_bulk_delete_requires_selection(owner_client, upstream):
    response = owner_client.post('/api/finance/budgets/bulk-delete', json={'ids': []})

    assert response.status_code == 400
    assert upstream.calls == []


def test_budget_rollover(owner_client, upstream):
    upstream.add('POST', '/finance/budgets/b1/rollover', json=upstream.envelope(dict(BUDGET, id='b2')))
    upstream.add('POST', '/finance/budgets/b3/rollover', json=upstream.envelope(None))

    rolled = owner_client.post('/api/finance/budgets/b1/rollover').get_json()
    nothing = owner_client.post('/api/finance/budgets/b3/rollover').get_json()

    assert rolled['data']['id'] == 'b2'
    assert upstream.calls[0].json == {}
    assert nothing['data'] is None
    assert nothing['message'] == 'Nothing to roll over'


def test_backend_validation_errors_are_passed_through(owner_client, upstream):
    upstream.add(
        'POST',
        '/finance/budgets',
        status=409,
        json={'success': False, 'statusCode': 409, 'message': 'Budget already exists'},
    )

    response = owner_client.post('/api/finance/budgets', json={
        'name': 'Groceries',
        'amount': 400,
        'period': 'monthly',
        'startDate': '2026-01-01',
    })

    assert response.status_code == 409
    assert response.get_json()['message'] == 'Budget already exists'


# Recurring transactions

RECURRING = {
    'id': 'r1',
    'template': {'amount': 50, 'description': 'Gym', 'type': 'expense'},
    'frequency': 'monthly',
    'interval': 1,
    'startDate': '2026-01-01',
    'isActive': True,
}


def test_list_recurring_with_filters(owner_client, upstream):
    upstream.add('GET', '/finance/recurring-transactions', json={'data': [RECURRING]})

    response = owner_client.get('/api/finance/recurring-transactions?frequency=monthly&isActive=false')

    assert response.get_json()['data'] == [RECURRING]
    assert upstream.calls[0].params == {'frequency': 'monthly', 'isActive': 'false'}


def test_list_recurring_accepts_envelope(owner_client, upstream):
    upstream.add('GET', '/finance/recurring-transactions', json=upstream.envelope([RECURRING]))

    response = owner_client.get('/api/finance/recurring-transactions')

    assert response.get_json()['data'] == [RECURRING]


def test_create_recurring_requires_interval_for_custom(owner_client, upstream):
    payload = dict(RECURRING, frequency='custom')
    del payload['interval']

    response = owner_client.post('/api/finance/recurring-transactions', json=payload)

    assert response.status_code == 400
    assert response.get_json()['errors'] == {'interval': ['Interval is required when frequency is custom']}


def test_create_recurring(owner_client, upstream):
    upstream.add('POST', '/finance/recurring-transactions', json=upstream.envelope(RECURRING))
    payload = {key: value for key, value in RECURRING.items() if key != 'id'}

    response = owner_client.post('/api/finance/recurring-transactions', json=payload)

    assert response.status_code == 201
    assert upstream.calls[0].json['template'] == {'amount': 50.0, 'description': 'Gym', 'type': 'expense'}


def test_lifecycle_actions_use_patch(owner_client, upstream):
    for action in ('pause', 'resume', 'skip-next'):
        upstream.add('PATCH', f'/finance/recurring-transactions/r1/{action}', json=RECURRING)

    for action in ('pause', 'resume', 'skip-next'):
        response = owner_client.patch(f'/api/finance/recurring-transactions/r1/{action}')
        assert response.status_code == 200

    assert [call.path for call in upstream.calls] == [
        '/finance/recurring-transactions/r1/pause',
        '/finance/recurring-transactions/r1/resume',
        '/finance/recurring-transactions/r1/skip-next',
    ]
    assert all(call.json == {} for call in upstream.calls)


def test_generate_until_date(owner_client, upstream):
    upstream.add(
        'POST',
        '/finance/recurring-transactions/r1/generate',
        json={'data': {'generatedCount': 3, 'transactions': []}},
    )

    response = owner_client.post('/api/finance/recurring-transactions/r1/generate?generateUntilDate=2026-04-01')

    assert response.get_json()['data']['generatedCount'] == 3
    assert upstream.calls[0].params == {'generateUntilDate': '2026-04-01'}


def test_generate_rejects_bad_date(owner_client, upstream):
    response = owner_client.post('/api/finance/recurring-transactions/r1/generate?generateUntilDate=someday')

    assert response.status_code == 400
    assert upstream.calls == []


def test_edit_future_ends_current_by_default(owner_client, upstream):
    upstream.add(
        'POST',
        '/finance/recurring-transactions/r1/edit-future',
        json={'data': {'current': RECURRING, 'new': dict(RECURRING, id='r2')}},
    )

    response = owner_client.post(
        '/api/finance/recurring-transactions/r1/edit-future',
        json={'template': {'amount': 60}},
    )

    assert response.get_json()['data']['new']['id'] == 'r2'
    assert upstream.calls[0].params == {'endCurrent': 'true'}
    assert upstream.calls[0].json == {'template': {'amount': 60.0}}


def test_edit_future_without_ending_current(owner_client, upstream):
    upstream.add('POST', '/finance/recurring-transactions/r1/edit-future', json={'data': {'current': RECURRING}})

    owner_client.post('/api/finance/recurring-transactions/r1/edit-future?endCurrent=false', json={})

    assert upstream.calls[0].params == {}


def test_bulk_delete_recurring(owner_client, upstream):
    upstream.add(
        'POST',
        '/finance/recurring-transactions/bulk-delete',
        json=upstream.envelope({'deletedCount': 1, 'failedIds': ['r9']}),
    )

    response = owner_client.post('/api/finance/recurring-transactions/bulk-delete', json={'ids': ['r1', 'r9']})

    assert response.get_json()['data']['failedIds'] == ['r9']


# Imports

def upload(name='bank.csv', content=b'date,amount\n2026-01-01,12.50\n'):
    return (io.BytesIO(content), name)


def test_import_preview_forwards_file_and_mapping(owner_client, upstream):
    preview = {'totalRows': 1, 'validRows': 1, 'invalidRows': 0, 'errors': [], 'sample': []}
    upstream.add('POST', '/finance/import/preview', json=upstream.envelope(preview))

    response = owner_client.post(
        '/api/finance/import/preview',
        data={'file': upload(), 'date': 'date', 'amount': 'amount', 'notes': '', 'bogus': 'x'},
        content_type='multipart/form-data',
    )

    assert response.get_json()['data'] == preview
    call = upstream.calls[0]
    assert call.data == {'date': 'date', 'amount': 'amount'}
    filename, stream, _ = call.files['file']
    assert filename == 'bank.csv'
    assert 'Content-Type' not in call.headers


def test_import_rejects_other_file_types(owner_client, upstream):
    response = owner_client.post(
        '/api/finance/import',
        data={'file': upload('notes.txt')},
        content_type='multipart/form-data',
    )

    assert response.status_code == 400
    assert response.get_json()['errors'] == {'file': ['Please upload a CSV or Excel file (.csv, .xlsx, .xls)']}
    assert upstream.calls == []


def test_import_requires_file(owner_client, upstream):
    response = owner_client.post('/api/finance/import', data={}, content_type='multipart/form-data')

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Please select a file to import'


def test_import_excel_file(owner_client, upstream):
    upstream.add('POST', '/finance/import', json=upstream.envelope({'importedCount': 10, 'failedCount': 0, 'errors': []}))

    response = owner_client.post(
        '/api/finance/import',
        data={'file': upload('Statement.XLSX', b'binary')},
        content_type='multipart/form-data',
    )

    assert response.get_json()['data']['importedCount'] == 10


def test_import_history(owner_client, upstream):
    upstream.add('GET', '/finance/import/history', json=upstream.envelope([{'id': 'i1', 'status': 'completed'}]))
    upstream.add('GET', '/finance/import/history/i1', json=upstream.envelope({'id': 'i1', 'status': 'completed'}))

    history = owner_client.get('/api/finance/import/history').get_json()['data']
    entry = owner_client.get('/api/finance/import/history/i1').get_json()['data']

    assert history[0]['id'] == 'i1'
    assert upstream.calls[0].params == {'limit': 50}
    assert entry['status'] == 'completed'

"""
Response envelope helpers
Standard backend shapes:
  success:   { success, statusCode, message, data, timestamp }
  paginated: same plus pagination { page, limit, total, totalPages, hasNextPage, hasPreviousPage }
  error:     { success: false, statusCode, message, error?, errors?, timestamp }
"""


def default_pagination(page=1, limit=10, total=0, total_pages=0):
    """Pagination block used when the backend did not send one"""
    return {
        'page': page,
        'limit': limit,
        'total': total,
        'totalPages': total_pages,
        'hasNextPage': page < total_pages,
        'hasPreviousPage': page > 1,
    }


def is_success_response(body):
    return (
        isinstance(body, dict)
        and body.get('success') is True
        and 'data' in body
        and 'pagination' not in body
    )


def is_paginated_response(body):
    return (
        isinstance(body, dict)
        and body.get('success') is True
        and 'data' in body
        and 'pagination' in body
    )


def is_error_response(body):
    return isinstance(body, dict) and body.get('success') is False


def extract_data(body):
    """Unwrap a success envelope; anything else is already the data"""
    if is_success_response(body):
        return body['data']
    return body


def extract_paginated_data(body):
    """Return {'data': [...], 'pagination': {...}} for any list-ish response"""
    if is_paginated_response(body):
        return {'data': body['data'], 'pagination': body['pagination']}

    # Legacy shape without the success flag
    if isinstance(body, dict) and 'data' in body and 'pagination' in body:
        return {'data': body['data'], 'pagination': body['pagination']}

    if isinstance(body, list):
        return {
            'data': body,
            'pagination': default_pagination(
                page=1, limit=len(body), total=len(body), total_pages=1
            ),
        }

    return {'data': [], 'pagination': default_pagination()}


def extract_pagination(body):
    if isinstance(body, dict) and isinstance(body.get('pagination'), dict):
        return body['pagination']
    return default_pagination()


def normalize_errors(raw):
    """Field errors as {field: [messages]}; bare lists go under '_general'"""
    if isinstance(raw, list):
        return {'_general': [str(item) for item in raw]}
    if isinstance(raw, dict):
        normalized = {}
        for field, messages in raw.items():
            if isinstance(messages, (list, tuple)):
                normalized[field] = [str(m) for m in messages]
            else:
                normalized[field] = [str(messages)]
        return normalized
    return None


def build_query(filters):
    """Convert a filter mapping into query params

    None and empty strings are dropped, booleans become 'true'/'false'.
    Zero is a real value and is kept.
    """
    params = {}
    for key, value in (filters or {}).items():
        if value is None or value == '':
            continue
        if isinstance(value, bool):
            params[key] = 'true' if value else 'false'
        else:
            params[key] = str(value)
    return params

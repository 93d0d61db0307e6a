"""
Generic REST collections
Several screen groups manage collections with the same upstream shape:
list, get, create, partial update, delete and optionally reorder and bulk
delete. A Resource describes how one collection differs; ResourceService
and add_resource_routes serve every collection in a table.
"""
import logging

from flask import request

from owner_console.components import ApiService
from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import owner_required
from owner_console.core.envelopes import build_query, extract_data
from owner_console.core.responses import (
    api_error_response,
    error,
    paginated,
    success,
    validation_error_response,
)
from owner_console.core.schemas import (
    BulkDeleteInput,
    PayloadValidationError,
    ReorderInput,
    parse_payload,
    select_filters,
)

logger = logging.getLogger(__name__)

BOOLEAN_CHOICES = ('true', 'false')


class ResourceError(Exception):
    """Unknown collection (404) or an action the collection lacks (405)"""

    def __init__(self, message, status_code):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class Resource:
    """Description of one collection"""

    def __init__(self, name, schema, path, filters=('page', 'limit'), filter_choices=None,
                 reorder_key=None, bulk_delete=False, paginated=True):
        self.name = name
        self.schema = schema
        self.path = path
        self.filters = filters
        self.filter_choices = filter_choices or {}
        self.reorder_key = reorder_key
        self.bulk_delete = bulk_delete
        self.paginated = paginated

    def describe(self):
        return {
            'name': self.name,
            'filters': list(self.filters),
            'reorder': self.reorder_key is not None,
            'bulkDelete': self.bulk_delete,
            'paginated': self.paginated,
        }


def sort_by_order(items):
    """Manual display order; items without an order go last"""
    return sorted(items, key=lambda item: (item.get('order') is None, item.get('order') or 0))


class ResourceService(ApiService):
    """CRUD over a table of Resource descriptions

    Subclasses set resources and kind (used in the unknown collection message).
    """

    resources = {}
    kind = 'collection'

    def __init__(self, client=None, resources=None):
        super().__init__(client)
        if resources is not None:
            self.resources = resources

    def resource(self, name):
        resource = self.resources.get(name)
        if resource is None:
            raise ResourceError(f'Unknown {self.kind}: {name}', 404)
        return resource

    def list_items(self, name, filters=None):
        resource = self.resource(name)
        params = build_query(
            select_filters(filters or {}, resource.filters, resource.filter_choices)
        )
        if resource.paginated:
            return self.client.get_paginated_data(resource.path, params=params)

        # Flat list or, with grouped=true, {group: [items]}
        data = extract_data(self.client.get(resource.path, params=params))
        if isinstance(data, list):
            return sort_by_order(data)
        if isinstance(data, dict):
            return {
                key: sort_by_order(items) if isinstance(items, list) else items
                for key, items in data.items()
            }
        return []

    def get_item(self, name, item_id):
        return self.client.get_data(f'{self.resource(name).path}/{item_id}')

    def create_item(self, name, payload):
        resource = self.resource(name)
        data = parse_payload(resource.schema, payload)
        return self.client.post_data(resource.path, data)

    def update_item(self, name, item_id, payload):
        resource = self.resource(name)
        data = parse_payload(resource.schema, payload, partial=True)
        return self.client.patch_data(f'{resource.path}/{item_id}', data)

    def delete_item(self, name, item_id):
        self.client.delete(f'{self.resource(name).path}/{item_id}')

    def reorder(self, name, payload):
        """Persist a new display order; accepts {'ids': [...]} or the collection's own key"""
        resource = self.resource(name)
        if resource.reorder_key is None:
            raise ResourceError(f'{name} cannot be reordered', 405)

        if isinstance(payload, dict) and 'ids' not in payload and resource.reorder_key in payload:
            payload = {'ids': payload[resource.reorder_key]}
        data = parse_payload(ReorderInput, payload)
        logger.info(f"[API] Reordering {len(data['ids'])} {name}")
        return self.client.patch(f'{resource.path}/reorder', {resource.reorder_key: data['ids']})

    def bulk_delete(self, name, payload):
        resource = self.resource(name)
        if not resource.bulk_delete:
            raise ResourceError(f'{name} cannot be bulk deleted', 405)
        data = parse_payload(BulkDeleteInput, payload)
        return self.client.post_data(f'{resource.path}/bulk-delete', data)


def add_resource_routes(blueprint, service, action_prefix):
    """Register the collection routes of service on blueprint

    Actions in the activity feed are named '<action_prefix>.<collection>.<verb>'.
    """

    def action(collection, verb):
        return f'{action_prefix}.{collection}.{verb}'

    @blueprint.route('')
    @owner_required
    def api_collections():
        return success([resource.describe() for resource in service.resources.values()])

    @blueprint.route('/<collection>')
    @owner_required
    def api_list_items(collection):
        try:
            result = service.list_items(collection, request.args)
        except ResourceError as e:
            return error(e.message, e.status_code)
        except PayloadValidationError as e:
            return validation_error_response(e)
        except ApiClientError as e:
            return api_error_response(e, action(collection, 'list'))

        if service.resource(collection).paginated:
            return paginated(result)
        return success(result)

    @blueprint.route('/<collection>', methods=['POST'])
    @owner_required
    def api_create_item(collection):
        try:
            item = service.create_item(collection, request.get_json(silent=True))
        except ResourceError as e:
            return error(e.message, e.status_code)
        except PayloadValidationError as e:
            return validation_error_response(e)
        except ApiClientError as e:
            return api_error_response(e, action(collection, 'create'))
        return success(item, 'Created', 201)

    @blueprint.route('/<collection>/reorder', methods=['PATCH'])
    @owner_required
    def api_reorder_items(collection):
        try:
            service.reorder(collection, request.get_json(silent=True))
        except ResourceError as e:
            return error(e.message, e.status_code)
        except PayloadValidationError as e:
            return validation_error_response(e)
        except ApiClientError as e:
            return api_error_response(e, action(collection, 'reorder'))
        return success(None, 'Order saved')

    @blueprint.route('/<collection>/bulk-delete', methods=['POST'])
    @owner_required
    def api_bulk_delete_items(collection):
        try:
            result = service.bulk_delete(collection, request.get_json(silent=True))
        except ResourceError as e:
            return error(e.message, e.status_code)
        except PayloadValidationError as e:
            return validation_error_response(e)
        except ApiClientError as e:
            return api_error_response(e, action(collection, 'bulk_delete'))
        return success(result, 'Deleted')

    @blueprint.route('/<collection>/<item_id>')
    @owner_required
    def api_get_item(collection, item_id):
        try:
            item = service.get_item(collection, item_id)
        except ResourceError as e:
            return error(e.message, e.status_code)
        except ApiClientError as e:
            return api_error_response(e, action(collection, 'get'))
        return success(item)

    @blueprint.route('/<collection>/<item_id>', methods=['PATCH'])
    @owner_required
    def api_update_item(collection, item_id):
        try:
            item = service.update_item(collection, item_id, request.get_json(silent=True))
        except ResourceError as e:
            return error(e.message, e.status_code)
        except PayloadValidationError as e:
            return validation_error_response(e)
        except ApiClientError as e:
            return api_error_response(e, action(collection, 'update'))
        return success(item, 'Updated')

    @blueprint.route('/<collection>/<item_id>', methods=['DELETE'])
    @owner_required
    def api_delete_item(collection, item_id):
        try:
            service.delete_item(collection, item_id)
        except ResourceError as e:
            return error(e.message, e.status_code)
        except ApiClientError as e:
            return api_error_response(e, action(collection, 'delete'))
        return success(None, 'Deleted')

    return blueprint

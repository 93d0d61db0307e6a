"""
Component registry for the console
Each component registers its service class under the screen group it serves.
"""
from owner_console.core.api_client import get_api_client


class ComponentRegistry:
    """Registry for console components"""

    def __init__(self):
        self.components = {}

    def register_component(self, name, component_class):
        """Register a console component"""
        self.components[name] = component_class

    def get_component(self, name):
        """Get a registered component"""
        return self.components.get(name)

    def get_all_components(self):
        """Get all registered components"""
        return dict(self.components)


# Global registry instance
registry = ComponentRegistry()


def register_component(name):
    """Decorator for registering components"""
    def decorator(component_class):
        registry.register_component(name, component_class)
        return component_class
    return decorator


class ApiService:
    """Base for component services that talk to the backend API

    A client can be injected; otherwise the per-request client bound to the
    console session is used.
    """

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        return self._client or get_api_client()


__all__ = ['ComponentRegistry', 'registry', 'register_component', 'ApiService']

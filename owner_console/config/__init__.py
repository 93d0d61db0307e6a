from .settings import ConsoleConfig, TestingConfig

__all__ = ['ConsoleConfig', 'TestingConfig']

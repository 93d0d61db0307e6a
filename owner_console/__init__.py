"""
Owner Console
Backend-for-frontend for the owner's admin, finance and portfolio screens
"""

__version__ = '0.1.0'

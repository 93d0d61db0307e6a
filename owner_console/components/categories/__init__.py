"""
Categories Component
Expense and income categories and merchant to category mappings
"""
from .routes import categories_bp
from .service import CATEGORY_RESOURCES, CategoriesService


def init_categories(app):
    """Initialize Categories component with Flask app"""
    app.register_blueprint(categories_bp)
    return categories_bp


__all__ = ['categories_bp', 'CategoriesService', 'CATEGORY_RESOURCES', 'init_categories']

"""
Categories API Routes
"""
from flask import Blueprint

from owner_console.components.resources import add_resource_routes
from .service import CategoriesService

categories_bp = Blueprint('categories', __name__, url_prefix='/api/finance/categories')

service = CategoriesService()

add_resource_routes(categories_bp, service, 'categories')

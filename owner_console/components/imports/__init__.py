"""
Imports Component
CSV and Excel transaction import with preview and history
"""
from .routes import imports_bp
from .service import ImportsService


def init_imports(app):
    """Initialize Imports component with Flask app"""
    app.register_blueprint(imports_bp)
    return imports_bp


__all__ = ['imports_bp', 'ImportsService', 'init_imports']

"""
Transaction Templates Component
Saved transactions that can be reused to fill the transaction form
"""
from .routes import transaction_templates_bp
from .service import TransactionTemplatesService


def init_transaction_templates(app):
    """Initialize Transaction Templates component with Flask app"""
    app.register_blueprint(transaction_templates_bp)
    return transaction_templates_bp


__all__ = ['transaction_templates_bp', 'TransactionTemplatesService', 'init_transaction_templates']

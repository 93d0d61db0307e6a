"""
Transactions Component
Income and expense transactions, statistics, duplication and templates
"""
from .routes import transactions_bp
from .service import TransactionsService


def init_transactions(app):
    """Initialize Transactions component with Flask app"""
    app.register_blueprint(transactions_bp)
    return transactions_bp


__all__ = ['transactions_bp', 'TransactionsService', 'init_transactions']

"""
Recurring Transactions Component
Recurring transaction schedules and their lifecycle actions
"""
from .routes import recurring_transactions_bp
from .service import RecurringTransactionsService


def init_recurring_transactions(app):
    """Initialize Recurring Transactions component with Flask app"""
    app.register_blueprint(recurring_transactions_bp)
    return recurring_transactions_bp


__all__ = [
    'recurring_transactions_bp',
    'RecurringTransactionsService',
    'init_recurring_transactions',
]

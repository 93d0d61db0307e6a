"""
Budgets Component
Budget management, usage stats, alerts and rollover
"""
from .routes import budgets_bp
from .service import BudgetsService


def init_budgets(app):
    """Initialize Budgets component with Flask app"""
    app.register_blueprint(budgets_bp)
    return budgets_bp


__all__ = ['budgets_bp', 'BudgetsService', 'init_budgets']

"""
Financial Goals Component
Savings goals, milestones and progress
"""
from .routes import financial_goals_bp
from .service import FinancialGoalsService


def init_financial_goals(app):
    """Initialize Financial Goals component with Flask app"""
    app.register_blueprint(financial_goals_bp)
    return financial_goals_bp


__all__ = ['financial_goals_bp', 'FinancialGoalsService', 'init_financial_goals']

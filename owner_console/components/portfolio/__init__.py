"""
Portfolio Component
Projects, testimonials, skills, experiences, blog posts, certifications,
companies, contacts, education and the profile of the public portfolio
"""
from .routes import portfolio_bp
from .service import PORTFOLIO_RESOURCES, PortfolioService


def init_portfolio(app):
    """Initialize Portfolio component with Flask app"""
    app.register_blueprint(portfolio_bp)
    return portfolio_bp


__all__ = [
    'portfolio_bp',
    'PortfolioService',
    'PORTFOLIO_RESOURCES',
    'init_portfolio',
]

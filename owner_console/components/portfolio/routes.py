"""
Portfolio API Routes
The collection routes serve every entry of PORTFOLIO_RESOURCES; the profile
has its own routes.
"""
from flask import Blueprint, request

from owner_console.components.resources import add_resource_routes
from owner_console.core.api_client import ApiClientError
from owner_console.core.auth import owner_required
from owner_console.core.responses import api_error_response, success, validation_error_response
from owner_console.core.schemas import PayloadValidationError
from .service import PortfolioService

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/api/portfolio')

service = PortfolioService()


@portfolio_bp.route('/profile')
@owner_required
def api_get_profile():
    try:
        profile = service.get_profile()
    except ApiClientError as e:
        return api_error_response(e, 'portfolio.profile.get')
    return success(profile)


@portfolio_bp.route('/profile', methods=['PATCH'])
@owner_required
def api_update_profile():
    try:
        profile = service.update_profile(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'portfolio.profile.update')
    return success(profile, 'Profile updated')


@portfolio_bp.route('/profile/avatar', methods=['POST'])
@owner_required
def api_set_avatar():
    try:
        profile = service.set_avatar(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'portfolio.profile.avatar')
    return success(profile, 'Avatar updated')


@portfolio_bp.route('/profile/resume', methods=['POST'])
@owner_required
def api_set_resume():
    try:
        profile = service.set_resume(request.get_json(silent=True))
    except PayloadValidationError as e:
        return validation_error_response(e)
    except ApiClientError as e:
        return api_error_response(e, 'portfolio.profile.resume')
    return success(profile, 'Resume updated')


add_resource_routes(portfolio_bp, service, 'portfolio')

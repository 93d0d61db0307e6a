"""
Portfolio Business Logic
Every portfolio collection shares the same REST shape; the profile is a
single record with its own avatar and resume actions.
"""
import logging

from owner_console.components import register_component
from owner_console.components.resources import (
    BOOLEAN_CHOICES,
    Resource,
    ResourceService,
)
from owner_console.core.schemas import (
    BlogInput,
    CertificationInput,
    CompanyInput,
    ContactInput,
    EducationInput,
    ExperienceInput,
    PayloadValidationError,
    PortfolioProfileInput,
    ProjectInput,
    SkillInput,
    TestimonialInput,
    parse_payload,
)

logger = logging.getLogger(__name__)

PROFILE_PATH = '/portfolio/profile'


def _portfolio(name, schema, **options):
    return Resource(name, schema, f'/portfolio/{name}', **options)


PORTFOLIO_RESOURCES = {
    'projects': _portfolio(
        'projects',
        ProjectInput,
        filters=('page', 'limit', 'search', 'featured'),
        filter_choices={'featured': BOOLEAN_CHOICES},
        reorder_key='projectIds',
        bulk_delete=True,
    ),
    'testimonials': _portfolio(
        'testimonials',
        TestimonialInput,
        reorder_key='testimonialIds',
        bulk_delete=True,
    ),
    'skills': _portfolio(
        'skills',
        SkillInput,
        filters=('grouped',),
        filter_choices={'grouped': BOOLEAN_CHOICES},
        reorder_key='skillIds',
        paginated=False,
    ),
    'experiences': _portfolio('experiences', ExperienceInput, bulk_delete=True),
    'blog': _portfolio(
        'blog',
        BlogInput,
        filters=('page', 'limit', 'published'),
        filter_choices={'published': BOOLEAN_CHOICES},
    ),
    'certifications': _portfolio('certifications', CertificationInput),
    'companies': _portfolio('companies', CompanyInput, bulk_delete=True),
    'contacts': _portfolio(
        'contacts',
        ContactInput,
        filters=('page', 'limit', 'activeOnly'),
        filter_choices={'activeOnly': BOOLEAN_CHOICES},
        reorder_key='contactIds',
        bulk_delete=True,
    ),
    'education': _portfolio('education', EducationInput),
}


@register_component('portfolio')
class PortfolioService(ResourceService):
    """Service for portfolio collections and the portfolio profile"""

    resources = PORTFOLIO_RESOURCES
    kind = 'portfolio collection'

    def get_profile(self):
        return self.client.get_data(PROFILE_PATH)

    def update_profile(self, payload):
        data = parse_payload(PortfolioProfileInput, payload, partial=True)
        return self.client.patch_data(PROFILE_PATH, data)

    def _profile_link(self, action, field, label, payload):
        """Validate one profile URL field that must be present"""
        data = parse_payload(PortfolioProfileInput, payload, partial=True)
        if not data.get(field):
            raise PayloadValidationError({field: [f'{label} is required']})
        logger.info(f'[API] Updating portfolio {action}')
        return self.client.post_data(f'{PROFILE_PATH}/{action}', {field: data[field]})

    def set_avatar(self, payload):
        return self._profile_link('avatar', 'avatar', 'Avatar', payload)

    def set_resume(self, payload):
        return self._profile_link('resume', 'resumeUrl', 'Resume URL', payload)

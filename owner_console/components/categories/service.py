"""
Categories Business Logic
"""
from owner_console.components import register_component
from owner_console.components.resources import Resource, ResourceService
from owner_console.core.schemas import CategoryInput, MerchantCategoryInput

CATEGORY_RESOURCES = {
    'expense': Resource(
        'expense',
        CategoryInput,
        '/finance/expense-categories',
        filters=(),
        reorder_key='categoryIds',
        bulk_delete=True,
        paginated=False,
    ),
    'income': Resource(
        'income',
        CategoryInput,
        '/finance/income-categories',
        filters=(),
        reorder_key='categoryIds',
        bulk_delete=True,
        paginated=False,
    ),
    # Maps a merchant name to a category for imports and suggestions
    'merchant': Resource(
        'merchant',
        MerchantCategoryInput,
        '/finance/merchant-categories',
        filters=(),
        paginated=False,
    ),
}


@register_component('categories')
class CategoriesService(ResourceService):
    """Service for finance categories"""

    resources = CATEGORY_RESOURCES
    kind = 'category collection'

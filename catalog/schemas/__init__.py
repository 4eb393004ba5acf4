from .category import CategoryCreateSchema
from .product import ProductCreateSchema

__all__ = [
    "CategoryCreateSchema",
    "ProductCreateSchema",
]

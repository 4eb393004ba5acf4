import logging
from decimal import Decimal

from flask_sqlalchemy.pagination import SelectPagination
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from catalog.exceptions import ConflictError, NotFoundError
from catalog.models.category import Category
from catalog.models.product import Product

logger = logging.getLogger(__name__)

DUPLICATE_SKU = "Product with this SKU already exists"


class ProductService:
    """Product queries and mutations against an injected SQLAlchemy session"""

    def __init__(self, session):
        self.session = session

    def get_product(self, product_id: str) -> Product:
        """Get product by ID, with its category"""
        product = self.session.get(
            Product, product_id, options=[joinedload(Product.category)]
        )
        if product is None:
            raise NotFoundError("Product not found")
        return product

    def list_products(self, page: int = 1, limit: int = 10, active: bool = None,
                      query: str = None, max_limit: int = 100) -> SelectPagination:
        """Search products with filters"""
        stmt = select(Product).options(joinedload(Product.category))

        if active is not None:
            stmt = stmt.where(Product.is_active == active)

        if query and query.strip():
            stmt = stmt.where(Product.name.contains(query, autoescape=True))

        stmt = stmt.order_by(Product.created_at.desc(), Product.id.desc())

        return SelectPagination(
            select=stmt,
            session=self.session,
            page=page,
            per_page=limit,
            max_per_page=max_limit,
            error_out=False,
        )

    def create_product(self, name: str, sku: str, price: Decimal, **kwargs) -> Product:
        """Create new product.

        Empty ``description``, ``image_url`` and ``category_id`` are stored as
        NULL. A non-empty ``category_id`` must reference an existing category.
        """
        self._ensure_unique_sku(sku)

        category_id = kwargs.get("category_id") or None
        if category_id and self.session.get(Category, category_id) is None:
            raise NotFoundError("Category not found", field="categoryId")

        stock = kwargs.get("stock")
        is_active = kwargs.get("is_active")

        product = Product(
            name=name,
            sku=sku,
            price=price,
            description=kwargs.get("description") or None,
            stock=stock if stock is not None else 0,
            image_url=kwargs.get("image_url") or None,
            is_active=is_active if is_active is not None else True,
            category_id=category_id,
        )

        self.session.add(product)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.warning(f"Unique constraint hit while creating product with sku '{sku}'")
            self._ensure_unique_sku(sku)
            if category_id and self.session.get(Category, category_id) is None:
                raise NotFoundError("Category not found", field="categoryId")
            raise

        logger.info(f"Created product {product.id} (sku={product.sku})")
        return product

    def _ensure_unique_sku(self, sku: str):
        if self.session.scalar(select(Product.id).where(Product.sku == sku)):
            raise ConflictError(DUPLICATE_SKU, field="sku")

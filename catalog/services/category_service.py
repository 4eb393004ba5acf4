import logging

from flask_sqlalchemy.pagination import SelectPagination
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from catalog.exceptions import ConflictError, NotFoundError
from catalog.models.category import Category
from catalog.utils.helpers import slugify

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Category with this name already exists"
DUPLICATE_SLUG = "Category with this slug already exists"


class CategoryService:
    """Category queries and mutations against an injected SQLAlchemy session"""

    def __init__(self, session):
        self.session = session

    def get_category(self, category_id: str) -> Category:
        """Get category by ID, with its products newest first"""
        category = self.session.get(
            Category, category_id, options=[selectinload(Category.products)]
        )
        if category is None:
            raise NotFoundError("Category not found")
        return category

    def list_categories(self, page: int = 1, limit: int = 10, active: bool = None,
                        query: str = None, max_limit: int = 100) -> SelectPagination:
        """Paginated category list, optionally filtered by flag and name substring"""
        stmt = select(Category)

        if active is not None:
            stmt = stmt.where(Category.active == active)

        if query and query.strip():
            stmt = stmt.where(Category.name.contains(query, autoescape=True))

        stmt = stmt.order_by(Category.created_at.desc(), Category.id.desc())

        return SelectPagination(
            select=stmt,
            session=self.session,
            page=page,
            per_page=limit,
            max_per_page=max_limit,
            error_out=False,
        )

    def create_category(self, name: str, description: str = None) -> Category:
        """Create new category"""
        name = name.strip()
        slug = slugify(name)

        # Fast path only; the unique indexes decide at commit time
        self._ensure_unique(name, slug)

        category = Category(
            name=name,
            slug=slug,
            description=description or None,
            active=True,
        )

        self.session.add(category)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.warning(f"Unique constraint hit while creating category '{name}'")
            self._ensure_unique(name, slug)
            raise

        logger.info(f"Created category {category.id} ({category.slug})")
        return category

    def _ensure_unique(self, name: str, slug: str):
        if self.session.scalar(select(Category.id).where(Category.name == name)):
            raise ConflictError(DUPLICATE_NAME, field="name")

        if self.session.scalar(select(Category.id).where(Category.slug == slug)):
            raise ConflictError(DUPLICATE_SLUG, field="slug")

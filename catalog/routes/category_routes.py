from flask import Blueprint, current_app, request
from catalog.extensions import db
from catalog.schemas import CategoryCreateSchema
from catalog.services.category_service import CategoryService
from catalog.utils.helpers import pagination_meta
from catalog.utils.responses import success_response
from catalog.utils.validators import (
    parse_active_filter,
    parse_search_query,
    validate_pagination,
    validate_schema,
)

category_bp = Blueprint("categories", __name__)


@category_bp.route("", methods=["GET"])
def list_categories():
    """List categories"""
    page, limit = validate_pagination()

    pagination = CategoryService(db.session).list_categories(
        page=page,
        limit=limit,
        active=parse_active_filter(),
        query=parse_search_query(),
        max_limit=current_app.config["MAX_PAGE_LIMIT"],
    )

    return success_response(
        [c.to_list_item() for c in pagination.items],
        pagination=pagination_meta(pagination),
    )


@category_bp.route("", methods=["POST"])
@validate_schema(CategoryCreateSchema)
def create_category():
    """Create category"""
    data = request.validated_data
    category = CategoryService(db.session).create_category(**data)

    return success_response(
        category.to_dict(), 201, message="Category created successfully"
    )


@category_bp.route("/<category_id>", methods=["GET"])
def get_category(category_id):
    """Get category detail with its products"""
    category = CategoryService(db.session).get_category(category_id)
    return success_response(category.to_dict(include_products=True))

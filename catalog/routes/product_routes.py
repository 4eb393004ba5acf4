from flask import Blueprint, current_app, request
from catalog.extensions import db
from catalog.schemas import ProductCreateSchema
from catalog.services.product_service import ProductService
from catalog.utils.helpers import pagination_meta
from catalog.utils.responses import success_response
from catalog.utils.validators import (
    parse_active_filter,
    parse_search_query,
    validate_pagination,
    validate_schema,
)

product_bp = Blueprint("products", __name__)


@product_bp.route("", methods=["GET"])
def list_products():
    """List products"""
    page, limit = validate_pagination()

    pagination = ProductService(db.session).list_products(
        page=page,
        limit=limit,
        active=parse_active_filter(),
        query=parse_search_query(),
        max_limit=current_app.config["MAX_PAGE_LIMIT"],
    )

    return success_response(
        [p.to_list_item() for p in pagination.items],
        pagination=pagination_meta(pagination),
    )


@product_bp.route("", methods=["POST"])
@validate_schema(ProductCreateSchema)
def create_product():
    data = request.validated_data
    product = ProductService(db.session).create_product(**data)

    return success_response(
        product.to_dict(include_category=True), 201, message="Product created successfully"
    )


@product_bp.route("/<product_id>", methods=["GET"])
def get_product(product_id):
    """Get product detail"""
    product = ProductService(db.session).get_product(product_id)
    return success_response(product.to_dict(include_category=True, summary=True))

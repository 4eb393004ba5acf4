import uuid
from decimal import Decimal

from marshmallow import EXCLUDE, ValidationError, fields, post_load, validate, validates

from catalog.extensions import ma
from catalog.schemas.fields import StrictBoolean, TrimmedString

_absolute_url = validate.URL(relative=False, require_tld=False, error="Invalid image URL")
CENTS = Decimal("0.01")
# Largest value a Numeric(10, 2) price column holds
MAX_PRICE = Decimal("99999999.99")
# Products.stock is a 32-bit signed integer column
MAX_STOCK = 2**31 - 1


class ProductCreateSchema(ma.Schema):
    """Payload of ``POST /api/product``.

    JSON keys are camelCase; loaded data uses the model's snake_case names.
    ``imageUrl`` and ``categoryId`` accept an empty string meaning "none".
    """

    class Meta:
        unknown = EXCLUDE

    name = TrimmedString(
        required=True,
        validate=[
            validate.Length(min=1, error="Name is required"),
            validate.Length(max=255, error="Name cannot be longer than {max} characters"),
        ],
        error_messages={"required": "Name is required", "null": "Name is required"},
    )
    sku = TrimmedString(
        required=True,
        validate=[
            validate.Length(min=1, error="SKU is required"),
            validate.Length(max=100, error="SKU cannot be longer than {max} characters"),
        ],
        error_messages={"required": "SKU is required", "null": "SKU is required"},
    )
    description = TrimmedString(load_default="", allow_none=True)
    price = fields.Decimal(
        required=True,
        validate=[
            validate.Range(min=0, min_inclusive=False, error="Price must be greater than 0"),
            validate.Range(max=MAX_PRICE, error="Price cannot be greater than {max}"),
        ],
        error_messages={
            "required": "Price is required",
            "null": "Price is required",
            "invalid": "Price must be a number",
            "special": "Price must be a number",
        },
    )
    stock = fields.Integer(
        strict=True,
        load_default=0,
        validate=[
            validate.Range(min=0, error="Stock cannot be negative"),
            validate.Range(max=MAX_STOCK, error="Stock cannot be greater than {max}"),
        ],
        error_messages={"invalid": "Stock must be an integer", "null": "Stock must be an integer"},
    )
    image_url = TrimmedString(
        data_key="imageUrl",
        load_default="",
        validate=validate.Length(max=500, error="Image URL cannot be longer than {max} characters"),
    )
    is_active = StrictBoolean(
        data_key="isActive",
        load_default=True,
        error_messages={"invalid": "isActive must be a boolean", "null": "isActive must be a boolean"},
    )
    category_id = TrimmedString(data_key="categoryId", load_default="")

    @validates("price")
    def validate_price_places(self, value, **kwargs):
        if value != value.quantize(CENTS):
            raise ValidationError("Price cannot have more than 2 decimal places")

    @validates("image_url")
    def validate_image_url(self, value, **kwargs):
        if value:
            _absolute_url(value)

    @validates("category_id")
    def validate_category_id(self, value, **kwargs):
        if not value:
            return
        try:
            uuid.UUID(value)
        except ValueError:
            raise ValidationError("Invalid category id")

    @post_load
    def quantize_price(self, data, **kwargs):
        data["price"] = data["price"].quantize(CENTS)
        return data

    @post_load
    def canonicalize_category_id(self, data, **kwargs):
        if data.get("category_id"):
            data["category_id"] = str(uuid.UUID(data["category_id"]))
        return data

from flask import current_app
from marshmallow import EXCLUDE, ValidationError, validate, validates

from catalog.extensions import ma
from catalog.schemas.fields import TrimmedString
from catalog.utils.helpers import slugify


class CategoryCreateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = TrimmedString(
        required=True,
        validate=[
            validate.Length(min=1, error="Name is required"),
            validate.Length(max=100, error="Name cannot be longer than {max} characters"),
        ],
        error_messages={"required": "Name is required", "null": "Name is required"},
    )
    description = TrimmedString(load_default=None, allow_none=True)

    @validates("name")
    def validate_name(self, value, **kwargs):
        if value and not slugify(value):
            raise ValidationError("Name must contain at least one letter or digit")

    @validates("description")
    def validate_description(self, value, **kwargs):
        max_length = current_app.config["CATEGORY_DESCRIPTION_MAX_LENGTH"]
        if value and len(value) > max_length:
            raise ValidationError(f"Description cannot be longer than {max_length} characters")

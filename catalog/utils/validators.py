from functools import wraps
from flask import request, current_app
from marshmallow import ValidationError

from catalog.utils.responses import error_response


def load_payload(schema, payload):
    """Validate ``payload`` against ``schema``.

    Returns ``(data, errors)``; exactly one of them is ``None``. Errors are a
    mapping of field name to a list of messages.
    """
    try:
        return schema.load(payload), None
    except ValidationError as err:
        return None, err.messages


def validate_schema(schema_class):
    """Decorator to validate request data against schema"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            data, errors = load_payload(schema_class(), request.get_json(silent=True))
            if errors is not None:
                return error_response("Validation error", 400, details=errors)
            request.validated_data = data
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def validate_pagination():
    """Validate pagination parameters"""
    default_limit = current_app.config["DEFAULT_PAGE_LIMIT"]
    max_limit = current_app.config["MAX_PAGE_LIMIT"]

    page = request.args.get('page', 1, type=int)
    limit = request.args.get('limit', default_limit, type=int)

    if page < 1:
        page = 1
    if limit < 1 or limit > max_limit:
        limit = default_limit

    return page, limit


def parse_active_filter():
    """Read the ``active`` query flag: None when absent, True only for 'true'"""
    value = request.args.get('active')
    if value is None or value.strip() == '':
        return None
    return value.strip().lower() == 'true'


def parse_search_query():
    """Read the ``query`` search term; blank terms mean no search"""
    query = request.args.get('query', '')
    return query if query.strip() else None

from catalog.extensions import db
from catalog.utils.helpers import to_camel_case
from datetime import datetime, timezone
from decimal import Decimal
import uuid


class BaseModel(db.Model):
    """Base model with common fields and methods"""

    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # Microsecond timestamps keep rows written in one second or one transaction ordered
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = db.Column(
        db.DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc), nullable=False
    )

    def to_dict(self):
        """Convert model to a JSON-ready dictionary with camelCase keys"""
        result = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, Decimal):
                value = float(value)
            result[to_camel_case(column.key)] = value
        return result

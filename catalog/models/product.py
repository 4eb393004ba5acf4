from catalog.models.base import BaseModel
from catalog.extensions import db


class Product(BaseModel):
    __tablename__ = "products"

    category_id = db.Column(
        db.String(36),
        db.ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name = db.Column(db.String(255), nullable=False, index=True)
    sku = db.Column(db.String(100), unique=True, nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    stock = db.Column(db.Integer, default=0, nullable=False)
    image_url = db.Column(db.String(500))
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    # Relationships
    category = db.relationship("Category", back_populates="products")

    def to_list_item(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.to_dict() if self.category else None,
        }

    def to_dict(self, include_category=False, summary=False):
        """Serialize the product.

        With ``include_category`` the owning category is embedded under
        ``category`` (``None`` when unassigned); ``summary`` limits it to
        id, name and slug.
        """
        data = super().to_dict()
        if include_category:
            if self.category is None:
                data["category"] = None
            elif summary:
                data["category"] = self.category.to_summary()
            else:
                data["category"] = self.category.to_dict()
        return data

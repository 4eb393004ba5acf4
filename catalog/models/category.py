from catalog.models.base import BaseModel
from catalog.extensions import db


class Category(BaseModel):
    """Category model"""
    __tablename__ = 'categories'

    name = db.Column(db.String(100), unique=True, nullable=False)
    slug = db.Column(db.String(150), unique=True, nullable=False, index=True)
    description = db.Column(db.Text)
    active = db.Column(db.Boolean, default=True, nullable=False)

    # Relationships
    products = db.relationship(
        'Product', back_populates='category', order_by='[Product.created_at.desc(), Product.id.desc()]'
    )

    def to_summary(self):
        return {"id": self.id, "name": self.name, "slug": self.slug}

    def to_list_item(self):
        return {"id": self.id, "name": self.name}

    def to_dict(self, include_products=False):
        data = super().to_dict()
        if include_products:
            data["products"] = [product.to_dict() for product in self.products]
        return data

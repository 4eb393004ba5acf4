import pytest
from decimal import Decimal
from catalog import create_app, db
from catalog.config import TestingConfig
from catalog.models.category import Category
from catalog.models.product import Product


@pytest.fixture(scope="function")
def app():
    """Create application for testing"""
    app = create_app(TestingConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client"""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Test CLI runner"""
    return app.test_cli_runner()


# Data fixtures
@pytest.fixture
def category(app):
    """Create a test category"""
    category = Category(
        name="Electronics", slug="electronics", description="Gadgets"
    )
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def inactive_category(app):
    """Create an inactive category"""
    category = Category(name="Archive", slug="archive", active=False)
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def product(app, category):
    """Create a test product"""
    product = Product(
        category_id=category.id,
        name="iPhone 15 Pro",
        sku="IPH-15-PRO",
        description="Latest iPhone",
        price=Decimal("4999.99"),
        stock=10,
        image_url="https://example.com/iphone.jpg",
        is_active=True,
    )
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def many_categories(app):
    """Create 25 active categories"""
    categories = [
        Category(name=f"Category {i:02d}", slug=f"category-{i:02d}")
        for i in range(25)
    ]
    db.session.add_all(categories)
    db.session.commit()
    return categories

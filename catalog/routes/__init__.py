from catalog.routes.category_routes import category_bp
from catalog.routes.product_routes import product_bp


def register_blueprints(app):
    """Register all blueprints"""
    app.register_blueprint(category_bp, url_prefix='/api/category')
    app.register_blueprint(product_bp, url_prefix='/api/product')

import uuid
from decimal import Decimal

import pytest
from catalog.extensions import db
from catalog.models.category import Category
from catalog.services.category_service import CategoryService
from catalog.services.product_service import ProductService


class TestListCategories:
    """Test GET /api/category"""

    def test_list_empty(self, client):
        response = client.get('/api/category')

        assert response.status_code == 200
        assert response.json == {
            'success': True,
            'data': [],
            'pagination': {
                'page': 1,
                'limit': 10,
                'total': 0,
                'totalPages': 0,
                'hasNext': False,
                'hasPrev': False,
            },
        }

    def test_list_returns_id_and_name_only(self, client, category):
        response = client.get('/api/category')

        assert response.status_code == 200
        assert response.json['data'] == [{'id': category.id, 'name': 'Electronics'}]

    def test_list_pagination(self, client, many_categories):
        first = client.get('/api/category?page=1&limit=10').json
        last = client.get('/api/category?page=3&limit=10').json

        assert len(first['data']) == 10
        assert first['pagination']['totalPages'] == 3
        assert first['pagination']['hasNext'] is True
        assert first['pagination']['hasPrev'] is False

        assert len(last['data']) == 5
        assert last['pagination']['hasNext'] is False
        assert last['pagination']['hasPrev'] is True

    def test_list_page_past_the_end(self, client, many_categories):
        response = client.get('/api/category?page=9&limit=10')

        assert response.status_code == 200
        assert response.json['data'] == []
        assert response.json['pagination']['total'] == 25

    def test_list_search(self, client, category, inactive_category):
        response = client.get('/api/category?query=Elec')
        assert [c['name'] for c in response.json['data']] == ['Electronics']

        response = client.get('/api/category?query=Garden')
        assert response.json['data'] == []

    def test_empty_search_same_as_no_search(self, client, category, inactive_category):
        with_query = client.get('/api/category?query=').json
        without_query = client.get('/api/category').json

        assert with_query == without_query

    @pytest.mark.parametrize('flag, expected', [('true', ['Electronics']), ('false', ['Archive'])])
    def test_list_active_filter(self, client, category, inactive_category, flag, expected):
        response = client.get(f'/api/category?active={flag}')
        assert [c['name'] for c in response.json['data']] == expected

    def test_list_newest_first_within_one_second(self, client):
        """Categories created back to back are listed newest first"""
        service = CategoryService(db.session)
        for i in range(6):
            service.create_category(f'Shelf {i}')

        response = client.get('/api/category')

        assert [c['name'] for c in response.json['data']] == [f'Shelf {i}' for i in range(5, -1, -1)]


class TestCreateCategory:
    """Test POST /api/category"""

    def test_create_success(self, client):
        response = client.post('/api/category', json={'name': ' Home & Garden ', 'description': ''})

        assert response.status_code == 201
        assert response.json['success'] is True
        assert response.json['message'] == 'Category created successfully'

        data = response.json['data']
        assert data['name'] == 'Home & Garden'
        assert data['slug'] == 'home-garden'
        assert data['description'] is None
        assert data['active'] is True
        assert {'id', 'createdAt', 'updatedAt'} <= set(data)
        assert db.session.get(Category, data['id']) is not None

    def test_create_without_description(self, client):
        response = client.post('/api/category', json={'name': 'Books'})
        assert response.status_code == 201
        assert response.json['data']['slug'] == 'books'

    def test_create_duplicate_name(self, client, category):
        response = client.post('/api/category', json={'name': 'Electronics', 'description': 'New'})

        assert response.status_code == 409
        assert response.json['success'] is False
        assert response.json['error'] == 'Category with this name already exists'
        assert 'name' in response.json['details']

    def test_create_duplicate_slug(self, client, category):
        response = client.post('/api/category', json={'name': 'electronics!'})

        assert response.status_code == 409
        assert response.json['error'] == 'Category with this slug already exists'
        assert 'slug' in response.json['details']

    def test_create_validation_error(self, client):
        response = client.post('/api/category', json={'name': '   ', 'description': 'x' * 21})

        assert response.status_code == 400
        assert response.json['success'] is False
        assert response.json['error'] == 'Validation error'
        assert 'name' in response.json['details']
        assert 'description' in response.json['details']

    def test_create_without_json_body(self, client):
        response = client.post('/api/category', data='not json', content_type='text/plain')

        assert response.status_code == 400
        assert response.json['error'] == 'Validation error'


class TestGetCategory:
    """Test GET /api/category/<id>"""

    def test_get_with_products(self, client, category, product):
        response = client.get(f'/api/category/{category.id}')

        assert response.status_code == 200
        data = response.json['data']
        assert data['name'] == 'Electronics'
        assert data['slug'] == 'electronics'
        assert [p['sku'] for p in data['products']] == ['IPH-15-PRO']
        assert data['products'][0]['price'] == 4999.99

    def test_get_without_products(self, client, category):
        response = client.get(f'/api/category/{category.id}')
        assert response.json['data']['products'] == []

    def test_get_not_found(self, client):
        response = client.get(f'/api/category/{uuid.uuid4()}')

        assert response.status_code == 404
        assert response.json == {'success': False, 'error': 'Category not found'}

    def test_products_newest_first_within_one_second(self, client, category):
        """Products created back to back are nested newest first"""
        service = ProductService(db.session)
        for i in range(6):
            service.create_product(
                name=f'Item {i}', sku=f'SKU-{i}', price=Decimal('1.00'), category_id=category.id
            )
        db.session.expire_all()

        response = client.get(f'/api/category/{category.id}')

        assert [p['sku'] for p in response.json['data']['products']] == [
            f'SKU-{i}' for i in range(5, -1, -1)
        ]

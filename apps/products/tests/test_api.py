import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.orders.models import Order
from apps.products.models import Product


@pytest.mark.django_db
class TestProductList:
    """Tests for GET /api/products/"""

    def test_list_only_own_products(self, authenticated_client, product, other_product):
        url = reverse('products:product-list')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        names = [p['name'] for p in response.data['results']]
        assert names == ['Kopi Susu']

    def test_filter_by_category(self, authenticated_client, product, user):
        Product.objects.create(user=user, name='Donat', category='Makanan', price=Decimal('5000'))
        url = reverse('products:product-list')
        response = authenticated_client.get(url, {'category': 'makanan'})

        assert [p['name'] for p in response.data['results']] == ['Donat']

    def test_search(self, authenticated_client, product):
        url = reverse('products:product-list')
        response = authenticated_client.get(url, {'search': 'susu'})

        assert len(response.data['results']) == 1

    def test_list_unauthenticated(self, api_client):
        url = reverse('products:product-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestProductCreate:
    """Tests for POST /api/products/"""

    def test_create_product(self, authenticated_client, user):
        url = reverse('products:product-list')
        response = authenticated_client.post(url, {
            'name': 'Teh Tarik',
            'category': 'Minuman',
            'price': '12000.00',
            'stock': 5,
        })

        assert response.status_code == status.HTTP_201_CREATED
        assert Product.objects.get(name='Teh Tarik').user == user

    def test_create_rejects_negative_price(self, authenticated_client):
        url = reverse('products:product-list')
        response = authenticated_client.post(url, {'name': 'X', 'price': '-1'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_rejects_blank_name(self, authenticated_client):
        url = reverse('products:product-list')
        response = authenticated_client.post(url, {'name': '   ', 'price': '1'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestProductDetail:

    def test_cannot_read_other_tenant_product(self, authenticated_client, other_product):
        url = reverse('products:product-detail', args=[other_product.id])
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_stock(self, authenticated_client, product):
        url = reverse('products:product-detail', args=[product.id])
        response = authenticated_client.patch(url, {'stock': 3})

        assert response.status_code == status.HTTP_200_OK
        product.refresh_from_db()
        assert product.stock == 3

    def test_delete_product(self, authenticated_client, product):
        url = reverse('products:product-detail', args=[product.id])
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Product.objects.filter(id=product.id).exists()

    def test_delete_product_with_orders_refused(self, authenticated_client, product, user):
        Order.objects.create(user=user, product=product, customer_name='Budi')
        url = reverse('products:product-detail', args=[product.id])
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Product.objects.filter(id=product.id).exists()

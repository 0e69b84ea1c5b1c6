import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status

from apps.pvz.models import PickupPoint, Reception, Product


def close_url(pvz_id):
    return reverse('pvz:close-last-reception', kwargs={'pvz_id': pvz_id})


def delete_url(pvz_id):
    return reverse('pvz:delete-last-product', kwargs={'pvz_id': pvz_id})


# =============================================================================
# Pickup Point Tests
# =============================================================================

@pytest.mark.django_db
class TestPickupPointCreate:
    """Tests for POST /pvz"""

    def test_moderator_creates_pickup_point(self, moderator_client):
        response = moderator_client.post(reverse('pvz:pvz-list'), {'city': 'Moscow'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['city'] == 'Moscow'
        assert response.data['id']
        assert response.data['registrationDate']
        assert PickupPoint.objects.filter(id=response.data['id']).exists()

    def test_create_with_id_and_date(self, moderator_client):
        pvz_id = str(uuid4())
        data = {'id': pvz_id, 'registrationDate': '2024-05-01T10:00:00Z', 'city': 'Kazan'}
        response = moderator_client.post(reverse('pvz:pvz-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['id'] == pvz_id
        assert response.data['registrationDate'].startswith('2024-05-01T10:00:00')

    def test_employee_cannot_create(self, employee_client):
        response = employee_client.post(reverse('pvz:pvz-list'), {'city': 'Moscow'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not PickupPoint.objects.exists()

    def test_unserved_city(self, moderator_client):
        response = moderator_client.post(reverse('pvz:pvz-list'), {'city': 'Paris'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_duplicate_id(self, moderator_client, pickup_point):
        data = {'id': str(pickup_point.id), 'city': 'Moscow'}
        response = moderator_client.post(reverse('pvz:pvz-list'), data, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_requires_token(self, api_client):
        response = api_client.post(reverse('pvz:pvz-list'), {'city': 'Moscow'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestPickupPointList:
    """Tests for GET /pvz"""

    def test_nested_listing(self, employee_client, open_reception):
        product = Product.objects.create(reception=open_reception, type='shoes', position=1)

        response = employee_client.get(reverse('pvz:pvz-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        tree = response.data[0]
        assert tree['pvz']['id'] == str(open_reception.pickup_point_id)
        assert tree['receptions'][0]['reception']['status'] == 'in_progress'
        assert tree['receptions'][0]['products'][0]['id'] == str(product.id)
        assert tree['receptions'][0]['products'][0]['type'] == 'shoes'

    def test_moderator_may_list(self, moderator_client):
        response = moderator_client.get(reverse('pvz:pvz-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_pagination_parameters(self, employee_client, open_reception):
        for position in range(1, 4):
            Product.objects.create(reception=open_reception, type='clothing', position=position)

        response = employee_client.get(reverse('pvz:pvz-list'), {'page': 2, 'limit': 2})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data[0]['receptions'][0]['products']) == 1

    @pytest.mark.parametrize('params', [
        {'page': 0},
        {'limit': 0},
        {'page': 'first'},
        {'startDate': 'yesterday'},
        {'startDate': '2024-02-01T00:00:00Z', 'endDate': '2024-01-01T00:00:00Z'},
    ])
    def test_invalid_query(self, employee_client, params):
        response = employee_client.get(reverse('pvz:pvz-list'), params)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Reception Tests
# =============================================================================

@pytest.mark.django_db
class TestReceptions:
    """Tests for POST /receptions and POST /pvz/{pvzId}/close_last_reception"""

    def test_open_reception(self, employee_client, pickup_point):
        response = employee_client.post(
            reverse('pvz:reception-create'), {'pvzId': str(pickup_point.id)}, format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['pvzId'] == str(pickup_point.id)
        assert response.data['status'] == 'in_progress'

    def test_open_twice_conflicts(self, employee_client, open_reception):
        response = employee_client.post(
            reverse('pvz:reception-create'),
            {'pvzId': str(open_reception.pickup_point_id)},
            format='json',
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_open_unknown_pickup_point(self, employee_client):
        response = employee_client.post(
            reverse('pvz:reception-create'), {'pvzId': str(uuid4())}, format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_moderator_cannot_open(self, moderator_client, pickup_point):
        response = moderator_client.post(
            reverse('pvz:reception-create'), {'pvzId': str(pickup_point.id)}, format='json'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Reception.objects.exists()

    def test_close_reception(self, employee_client, open_reception):
        response = employee_client.post(close_url(open_reception.pickup_point_id))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(open_reception.id)
        assert response.data['status'] == 'close'

    def test_close_already_closed(self, employee_client, closed_reception):
        response = employee_client.post(close_url(closed_reception.pickup_point_id))

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_close_without_receptions(self, employee_client, pickup_point):
        response = employee_client.post(close_url(pickup_point.id))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_close_malformed_id(self, employee_client):
        response = employee_client.post(close_url('not-a-uuid'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Product Tests
# =============================================================================

@pytest.mark.django_db
class TestProducts:
    """Tests for POST /products and POST /pvz/{pvzId}/delete_last_product"""

    def test_add_product(self, employee_client, employee, open_reception):
        data = {'pvzId': str(open_reception.pickup_point_id), 'type': 'electronics'}
        response = employee_client.post(reverse('pvz:product-create'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['type'] == 'electronics'
        assert response.data['receptionId'] == str(open_reception.id)
        assert Product.objects.get(id=response.data['id']).created_by_id == employee.id

    def test_add_without_open_reception(self, employee_client, pickup_point):
        data = {'pvzId': str(pickup_point.id), 'type': 'shoes'}
        response = employee_client.post(reverse('pvz:product-create'), data, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_add_unknown_type(self, employee_client, open_reception):
        data = {'pvzId': str(open_reception.pickup_point_id), 'type': 'food'}
        response = employee_client.post(reverse('pvz:product-create'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_moderator_cannot_add(self, moderator_client, open_reception):
        data = {'pvzId': str(open_reception.pickup_point_id), 'type': 'shoes'}
        response = moderator_client.post(reverse('pvz:product-create'), data, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_delete_last_product(self, employee_client, open_reception):
        pvz_id = str(open_reception.pickup_point_id)
        for product_type in ('electronics', 'clothing'):
            employee_client.post(
                reverse('pvz:product-create'), {'pvzId': pvz_id, 'type': product_type}, format='json'
            )

        response = employee_client.post(delete_url(pvz_id))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['type'] == 'clothing'
        assert list(Product.objects.values_list('type', flat=True)) == ['electronics']

    def test_delete_from_empty_reception(self, employee_client, open_reception):
        response = employee_client.post(delete_url(open_reception.pickup_point_id))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_without_open_reception(self, employee_client, closed_reception):
        response = employee_client.post(delete_url(closed_reception.pickup_point_id))

        assert response.status_code == status.HTTP_409_CONFLICT


# =============================================================================
# End-to-end Flow
# =============================================================================

@pytest.mark.django_db
def test_reception_flow(moderator_client, employee_client):
    """Create a pickup point, receive fifty products, close, and read back."""
    response = moderator_client.post(reverse('pvz:pvz-list'), {'city': 'Saint Petersburg'}, format='json')
    pvz_id = response.data['id']

    response = employee_client.post(reverse('pvz:reception-create'), {'pvzId': pvz_id}, format='json')
    assert response.status_code == status.HTTP_201_CREATED

    for index in range(50):
        product_type = ('electronics', 'clothing', 'shoes')[index % 3]
        response = employee_client.post(
            reverse('pvz:product-create'), {'pvzId': pvz_id, 'type': product_type}, format='json'
        )
        assert response.status_code == status.HTTP_201_CREATED

    response = employee_client.post(close_url(pvz_id))
    assert response.status_code == status.HTTP_200_OK

    response = employee_client.get(reverse('pvz:pvz-list'), {'limit': 100})
    receptions = response.data[0]['receptions']
    assert receptions[0]['reception']['status'] == 'close'
    assert len(receptions[0]['products']) == 50

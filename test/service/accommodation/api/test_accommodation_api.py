"""
API tests for accommodation and room maintenance plus availability lookups
"""

import pytest

from src.platform.constant.route_constant import ACCOMMODATION_BASE, BOOKING_BASE, BOOKING_CANCEL
from src.service.accommodation.domain.entity.booking_entity import BookingStatus
from test.service.accommodation.api.conftest import days_ahead


pytestmark = pytest.mark.unit

NEW_HOTEL = {
    'name': 'Riverside Inn',
    'location': 'Taipei',
    'total_rooms': 12,
    'price_per_night': '89.90',
    'amenities': 'wifi,breakfast',
}


class TestAccommodationCrud:
    def test_admin_creates_and_reads_accommodation(
        self, client, admin_headers, participant_headers
    ):
        # When: admin creates
        response = client.post(ACCOMMODATION_BASE, json=NEW_HOTEL, headers=admin_headers)

        # Then: 201 with decimals as strings
        assert response.status_code == 201
        body = response.json()
        assert body['name'] == 'Riverside Inn'
        assert body['price_per_night'] == '89.90'
        assert body['is_active'] is True
        assert body['rooms'] == []

        # And: any authenticated user can read it
        fetched = client.get(f'{ACCOMMODATION_BASE}/{body["id"]}', headers=participant_headers)
        assert fetched.status_code == 200
        assert fetched.json()['amenities'] == 'wifi,breakfast'

    def test_participant_cannot_create(self, client, participant_headers):
        response = client.post(ACCOMMODATION_BASE, json=NEW_HOTEL, headers=participant_headers)

        assert response.status_code == 403
        assert response.json() == {'detail': 'Admin access required'}

    def test_organizer_cannot_create(self, client, organizer_headers):
        response = client.post(ACCOMMODATION_BASE, json=NEW_HOTEL, headers=organizer_headers)

        assert response.status_code == 403

    def test_missing_token(self, client):
        response = client.get(ACCOMMODATION_BASE)

        assert response.status_code == 401
        assert response.json() == {'detail': 'Not authenticated'}

    def test_invalid_token(self, client):
        response = client.get(ACCOMMODATION_BASE, headers={'Authorization': 'Bearer nope'})

        assert response.status_code == 401

    def test_non_positive_price(self, client, admin_headers):
        response = client.post(
            ACCOMMODATION_BASE, json={**NEW_HOTEL, 'price_per_night': '0'}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json() == {'detail': 'price_per_night must be greater than 0'}

    def test_missing_body_field_is_400(self, client, admin_headers):
        payload = {k: v for k, v in NEW_HOTEL.items() if k != 'location'}

        response = client.post(ACCOMMODATION_BASE, json=payload, headers=admin_headers)

        assert response.status_code == 400

    def test_list_filters(self, client, hotel, admin_headers, participant_headers):
        client.post(ACCOMMODATION_BASE, json=NEW_HOTEL, headers=admin_headers)

        cheap = client.get(f'{ACCOMMODATION_BASE}?max_price=95', headers=participant_headers)
        by_location = client.get(
            f'{ACCOMMODATION_BASE}?location=keel', headers=participant_headers
        )
        inverted = client.get(
            f'{ACCOMMODATION_BASE}?min_price=200&max_price=100', headers=participant_headers
        )

        assert [a['name'] for a in cheap.json()] == ['Riverside Inn']
        assert [a['name'] for a in by_location.json()] == [hotel.name]
        assert inverted.status_code == 400

    def test_partial_update(self, client, hotel, admin_headers):
        response = client.put(
            f'{ACCOMMODATION_BASE}/{hotel.id}',
            json={'price_per_night': '120.5'},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()['price_per_night'] == '120.50'
        assert response.json()['name'] == hotel.name

    def test_get_unknown_accommodation(self, client, participant_headers):
        response = client.get(f'{ACCOMMODATION_BASE}/999', headers=participant_headers)

        assert response.status_code == 404
        assert response.json() == {'detail': 'Accommodation not found'}

    def test_delete_cascades_to_rooms(self, client, store, hotel, room, admin_headers):
        response = client.delete(f'{ACCOMMODATION_BASE}/{hotel.id}', headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {'message': 'Accommodation deleted successfully'}
        assert hotel.id not in store.accommodations
        assert room.id not in store.rooms

    def test_delete_refused_when_booked(
        self, client, hotel, booking_payload, admin_headers, participant_headers
    ):
        client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers)

        response = client.delete(f'{ACCOMMODATION_BASE}/{hotel.id}', headers=admin_headers)

        assert response.status_code == 400


class TestRooms:
    def test_add_room_and_see_it_on_accommodation(self, client, hotel, admin_headers):
        response = client.post(
            f'{ACCOMMODATION_BASE}/{hotel.id}/rooms',
            json={'room_number': '201', 'room_type': 'suite', 'capacity': 3},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()['room_type'] == 'suite'
        assert response.json()['is_available'] is True

        fetched = client.get(f'{ACCOMMODATION_BASE}/{hotel.id}', headers=admin_headers).json()
        assert [r['room_number'] for r in fetched['rooms']] == ['201']

    def test_duplicate_room_number(self, client, hotel, room, admin_headers):
        response = client.post(
            f'{ACCOMMODATION_BASE}/{hotel.id}/rooms',
            json={'room_number': room.room_number, 'room_type': 'single'},
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json() == {'detail': 'Room number already exists in this accommodation'}

    def test_invalid_room_type(self, client, hotel, admin_headers):
        response = client.post(
            f'{ACCOMMODATION_BASE}/{hotel.id}/rooms',
            json={'room_number': '301', 'room_type': 'penthouse'},
            headers=admin_headers,
        )

        assert response.status_code == 400

    def test_update_room(self, client, room, admin_headers):
        response = client.put(
            f'{ACCOMMODATION_BASE}/rooms/{room.id}',
            json={'is_available': False},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()['is_available'] is False
        assert response.json()['room_number'] == room.room_number

    def test_delete_room(self, client, room, admin_headers):
        response = client.delete(f'{ACCOMMODATION_BASE}/rooms/{room.id}', headers=admin_headers)
        again = client.delete(f'{ACCOMMODATION_BASE}/rooms/{room.id}', headers=admin_headers)

        assert response.json() == {'message': 'Room deleted successfully'}
        assert again.status_code == 404
        assert again.json() == {'detail': 'Room not found'}


class TestAvailability:
    def test_available_rooms_excludes_overlap(
        self, client, store, hotel, room, booking_payload, participant_headers
    ):
        other = store.add_room(accommodation_id=hotel.id, room_number='102', room_type='single')
        client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers)

        response = client.get(
            f'{ACCOMMODATION_BASE}/{hotel.id}/available-rooms',
            params={'check_in_date': days_ahead(31), 'check_out_date': days_ahead(32)},
            headers=participant_headers,
        )

        assert response.status_code == 200
        assert [r['id'] for r in response.json()['rooms']] == [other.id]

    def test_available_rooms_past_dates_rejected(self, client, hotel, participant_headers):
        response = client.get(
            f'{ACCOMMODATION_BASE}/{hotel.id}/available-rooms',
            params={'check_in_date': days_ahead(-2), 'check_out_date': days_ahead(1)},
            headers=participant_headers,
        )

        assert response.status_code == 400
        assert response.json() == {'detail': 'Check-in date cannot be in the past'}

    def test_room_conflict_check(self, client, room, booking_payload, participant_headers):
        client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers)

        overlapping = client.get(
            f'{ACCOMMODATION_BASE}/rooms/{room.id}/conflict',
            params={'check_in_date': days_ahead(33), 'check_out_date': days_ahead(36)},
            headers=participant_headers,
        )
        back_to_back = client.get(
            f'{ACCOMMODATION_BASE}/rooms/{room.id}/conflict',
            params={'check_in_date': days_ahead(34), 'check_out_date': days_ahead(36)},
            headers=participant_headers,
        )

        assert overlapping.json()['has_conflict'] is True
        assert back_to_back.json()['has_conflict'] is False

    def test_availability_summary(self, client, store, hotel, room, participant_headers):
        store.add_room(
            accommodation_id=hotel.id, room_number='102', room_type='single', is_available=False
        )

        response = client.get(
            f'{ACCOMMODATION_BASE}/availability/summary', headers=participant_headers
        )

        assert response.status_code == 200
        assert response.json()[0]['total_rooms'] == 2
        assert response.json()[0]['available_rooms'] == 1

    def test_cancelled_booking_frees_the_room(
        self, client, store, hotel, room, booking_payload, participant_headers
    ):
        created = client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers)
        booking_id = created.json()['id']
        client.put(BOOKING_CANCEL.format(booking_id=booking_id), headers=participant_headers)

        response = client.get(
            f'{ACCOMMODATION_BASE}/{hotel.id}/available-rooms',
            params={'check_in_date': days_ahead(31), 'check_out_date': days_ahead(32)},
            headers=participant_headers,
        )

        assert store.bookings[booking_id].status == BookingStatus.CANCELLED
        assert [r['id'] for r in response.json()['rooms']] == [room.id]

"""
API tests for the booking lifecycle

Scenario coverage:
1. Create -> partial payment -> completed -> confirm -> check in -> check out
2. Overlap rejected with 409, back-to-back accepted
3. Visibility: owners see their own, staff see all
4. Cancellation rules and payments on cancelled bookings
"""

import pytest

from src.platform.constant.route_constant import (
    BOOKING_BASE,
    BOOKING_CANCEL,
    BOOKING_GET,
    BOOKING_MY_BOOKINGS,
    BOOKING_PAYMENTS,
    BOOKING_STATUS,
)
from test.service.accommodation.api.conftest import days_ahead
from test.util_constant import PARTICIPANT_USER_ID


pytestmark = pytest.mark.unit


def _payment(amount: str, method: str = 'credit_card') -> dict:
    return {'amount': amount, 'payment_date': days_ahead(0), 'payment_method': method}


class TestBookingFlow:
    def test_full_lifecycle(
        self, client, booking_payload, participant_headers, organizer_headers
    ):
        # Given: a 4 night stay at 100.00
        created = client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers)
        assert created.status_code == 201
        booking = created.json()
        assert booking['total_price'] == '400.00'
        assert booking['status'] == 'pending'
        assert booking['payment_status'] == 'pending'
        assert booking['user_id'] == PARTICIPANT_USER_ID
        payments_url = BOOKING_PAYMENTS.format(booking_id=booking['id'])
        status_url = BOOKING_STATUS.format(booking_id=booking['id'])

        # When: 100.00 paid, then the remaining 300.00
        first = client.post(payments_url, json=_payment('100'), headers=participant_headers)
        second = client.post(
            payments_url, json=_payment('300.00', 'bank_transfer'), headers=participant_headers
        )

        # Then: partial, then completed
        assert first.status_code == 201
        assert first.json()['payment_status'] == 'partial'
        assert first.json()['payment']['amount'] == '100.00'
        assert second.json()['payment_status'] == 'completed'

        # And: the organizer walks it through the stay
        for target in ('confirmed', 'checked_in', 'checked_out'):
            moved = client.put(status_url, json={'status': target}, headers=organizer_headers)
            assert moved.status_code == 200
            assert moved.json()['status'] == target

        detail = client.get(
            BOOKING_GET.format(booking_id=booking['id']), headers=participant_headers
        ).json()
        assert detail['status'] == 'checked_out'
        assert detail['payment_status'] == 'completed'
        assert detail['room_number'] == '101'
        assert detail['event_title'] == 'PyCon Taiwan'
        assert [p['amount'] for p in detail['payments']] == ['100.00', '300.00']

        ledger = client.get(payments_url, headers=participant_headers).json()
        assert [p['payment_method'] for p in ledger] == ['credit_card', 'bank_transfer']

    def test_overlapping_booking_is_409(
        self, client, booking_payload, participant_headers, another_participant_headers
    ):
        client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers)

        response = client.post(
            BOOKING_BASE,
            json={
                **booking_payload,
                'check_in_date': days_ahead(32),
                'check_out_date': days_ahead(36),
            },
            headers=another_participant_headers,
        )

        assert response.status_code == 409
        assert response.json() == {'detail': 'Room is not available for the selected dates'}

    def test_back_to_back_booking_is_accepted(
        self, client, booking_payload, participant_headers, another_participant_headers
    ):
        client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers)

        response = client.post(
            BOOKING_BASE,
            json={
                **booking_payload,
                'check_in_date': booking_payload['check_out_date'],
                'check_out_date': days_ahead(36),
            },
            headers=another_participant_headers,
        )

        assert response.status_code == 201
        assert response.json()['total_price'] == '200.00'

    def test_rebook_after_cancellation(self, client, booking_payload, participant_headers):
        booking_id = client.post(
            BOOKING_BASE, json=booking_payload, headers=participant_headers
        ).json()['id']
        client.put(BOOKING_CANCEL.format(booking_id=booking_id), headers=participant_headers)

        response = client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers)

        assert response.status_code == 201

    def test_room_out_of_service(self, client, store, room, booking_payload, participant_headers):
        store.rooms[room.id].is_available = False

        response = client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers)

        assert response.status_code == 409
        assert response.json() == {'detail': 'Room is currently out of service'}

    def test_unknown_event(self, client, booking_payload, participant_headers):
        response = client.post(
            BOOKING_BASE, json={**booking_payload, 'event_id': 999}, headers=participant_headers
        )

        assert response.status_code == 404
        assert response.json() == {'detail': 'Event not found'}

    def test_check_out_before_check_in(self, client, booking_payload, participant_headers):
        response = client.post(
            BOOKING_BASE,
            json={**booking_payload, 'check_out_date': booking_payload['check_in_date']},
            headers=participant_headers,
        )

        assert response.status_code == 400
        assert response.json() == {'detail': 'Check-out date must be after check-in date'}

    def test_requires_token(self, client, booking_payload):
        response = client.post(BOOKING_BASE, json=booking_payload)

        assert response.status_code == 401


class TestBookingStatus:
    @pytest.fixture
    def booking_id(self, client, booking_payload, participant_headers) -> int:
        created = client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers)
        return created.json()['id']

    def test_participant_cannot_change_status(self, client, booking_id, participant_headers):
        response = client.put(
            BOOKING_STATUS.format(booking_id=booking_id),
            json={'status': 'confirmed'},
            headers=participant_headers,
        )

        assert response.status_code == 403

    def test_illegal_transition(self, client, booking_id, admin_headers):
        response = client.put(
            BOOKING_STATUS.format(booking_id=booking_id),
            json={'status': 'checked_in'},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json() == {
            'detail': "Cannot change booking status from 'pending' to 'checked_in'"
        }

    def test_unknown_status_value(self, client, booking_id, admin_headers):
        response = client.put(
            BOOKING_STATUS.format(booking_id=booking_id),
            json={'status': 'archived'},
            headers=admin_headers,
        )

        assert response.status_code == 400

    def test_cancel_twice(self, client, booking_id, participant_headers):
        first = client.put(
            BOOKING_CANCEL.format(booking_id=booking_id), headers=participant_headers
        )
        second = client.put(
            BOOKING_CANCEL.format(booking_id=booking_id), headers=participant_headers
        )

        assert first.status_code == 200
        assert first.json()['status'] == 'cancelled'
        assert second.status_code == 400
        assert second.json() == {'detail': 'Booking is already cancelled'}

    def test_cancel_after_check_in(self, client, booking_id, admin_headers, participant_headers):
        status_url = BOOKING_STATUS.format(booking_id=booking_id)
        client.put(status_url, json={'status': 'confirmed'}, headers=admin_headers)
        client.put(status_url, json={'status': 'checked_in'}, headers=admin_headers)

        response = client.put(
            BOOKING_CANCEL.format(booking_id=booking_id), headers=participant_headers
        )

        assert response.status_code == 400
        assert response.json() == {'detail': "Cannot cancel booking in 'checked_in' status"}

    def test_stranger_cannot_cancel(self, client, booking_id, another_participant_headers):
        response = client.put(
            BOOKING_CANCEL.format(booking_id=booking_id), headers=another_participant_headers
        )

        assert response.status_code == 403

    def test_payment_on_cancelled_booking(self, client, booking_id, participant_headers):
        client.put(BOOKING_CANCEL.format(booking_id=booking_id), headers=participant_headers)

        response = client.post(
            BOOKING_PAYMENTS.format(booking_id=booking_id),
            json=_payment('50.00'),
            headers=participant_headers,
        )

        assert response.status_code == 400
        assert response.json() == {'detail': 'Cannot add payment to a cancelled booking'}

    def test_non_positive_payment(self, client, booking_id, participant_headers):
        response = client.post(
            BOOKING_PAYMENTS.format(booking_id=booking_id),
            json=_payment('0'),
            headers=participant_headers,
        )

        assert response.status_code == 400

    def test_unknown_booking(self, client, admin_headers):
        response = client.get(BOOKING_GET.format(booking_id=999), headers=admin_headers)

        assert response.status_code == 404
        assert response.json() == {'detail': 'Booking not found'}


class TestBookingVisibility:
    @pytest.fixture
    def two_bookings(
        self,
        client,
        store,
        hotel,
        booking_payload,
        participant_headers,
        another_participant_headers,
    ):
        other_room = store.add_room(
            accommodation_id=hotel.id, room_number='102', room_type='single'
        )
        mine = client.post(BOOKING_BASE, json=booking_payload, headers=participant_headers).json()
        theirs = client.post(
            BOOKING_BASE,
            json={**booking_payload, 'room_id': other_room.id},
            headers=another_participant_headers,
        ).json()
        return mine, theirs

    def test_participant_lists_only_own(self, client, two_bookings, participant_headers):
        mine, _ = two_bookings

        listed = client.get(BOOKING_BASE, headers=participant_headers).json()
        my = client.get(BOOKING_MY_BOOKINGS, headers=participant_headers).json()

        assert [b['id'] for b in listed] == [mine['id']]
        assert [b['id'] for b in my] == [mine['id']]

    def test_staff_lists_all_with_filters(self, client, two_bookings, organizer_headers):
        mine, theirs = two_bookings

        everything = client.get(BOOKING_BASE, headers=organizer_headers).json()
        only_theirs = client.get(
            BOOKING_BASE, params={'user_id': theirs['user_id']}, headers=organizer_headers
        ).json()
        pending = client.get(
            BOOKING_BASE, params={'status': 'pending', 'limit': 1}, headers=organizer_headers
        ).json()

        assert {b['id'] for b in everything} == {mine['id'], theirs['id']}
        assert [b['id'] for b in only_theirs] == [theirs['id']]
        assert len(pending) == 1

    @pytest.mark.parametrize('params', [{'limit': -5}, {'limit': 0}, {'offset': -1}])
    def test_bad_paging_is_400(self, client, two_bookings, organizer_headers, params):
        response = client.get(BOOKING_BASE, params=params, headers=organizer_headers)

        assert response.status_code == 400
        assert 'detail' in response.json()

    def test_stranger_cannot_view_booking_or_payments(
        self, client, two_bookings, another_participant_headers
    ):
        mine, _ = two_bookings

        detail = client.get(
            BOOKING_GET.format(booking_id=mine['id']), headers=another_participant_headers
        )
        payments = client.get(
            BOOKING_PAYMENTS.format(booking_id=mine['id']), headers=another_participant_headers
        )
        pay = client.post(
            BOOKING_PAYMENTS.format(booking_id=mine['id']),
            json=_payment('10.00'),
            headers=another_participant_headers,
        )

        assert detail.status_code == 403
        assert payments.status_code == 403
        assert pay.status_code == 403

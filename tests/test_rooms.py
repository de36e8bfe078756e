from datetime import date

import pytest
from fastapi import status
from hotel_booking.models.booking import Booking, BookingRoom
from tests.conf_tests import (
    client,
    clear_db,
    test_db,
    test_user_data,
    test_user,
    auth_headers,
    test_hotel,
    test_room,
)


@pytest.fixture
def stay_in_test_room(test_db, test_user, test_hotel, test_room):
    booking = Booking(
        user_id=test_user.id,
        hotel_id=test_hotel.id,
        check_in_date=date(2025, 4, 10),
        check_out_date=date(2025, 4, 15),
        number_of_guests=1,
        booking_rooms=[BookingRoom(room_id=test_room.id)],
    )
    test_db.add(booking)
    test_db.commit()
    return booking


# Tests
def test_create_room_unauthorized(test_hotel):
    response = client.post(
        "/rooms/", json={"hotel_id": test_hotel.id, "name": "Suite", "quantity": 5}
    )
    assert response.status_code in [
        status.HTTP_401_UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN,
    ]


def test_create_room_success(auth_headers, test_hotel):
    room_data = {"hotel_id": test_hotel.id, "name": "Suite", "quantity": 5}
    response = client.post("/rooms/", json=room_data, headers=auth_headers)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["hotel_id"] == test_hotel.id
    assert data["quantity"] == 5


def test_create_room_unknown_hotel(auth_headers):
    response = client.post("/rooms/", json={"hotel_id": 404, "name": "Suite", "quantity": 5}, headers=auth_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Hotel not found."


def test_create_room_negative_quantity(auth_headers, test_hotel):
    response = client.post(
        "/rooms/", json={"hotel_id": test_hotel.id, "name": "Suite", "quantity": -1}, headers=auth_headers
    )
    assert response.status_code == 422


def test_get_rooms_with_data(test_room):
    response = client.get("/rooms/")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == test_room.id
    assert data[0]["name"] == test_room.name


def test_get_room_success(test_room):
    response = client.get(f"/rooms/{test_room.id}")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == test_room.id
    assert data["quantity"] == test_room.quantity


def test_get_room_not_found():
    response = client.get("/rooms/9999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Room with ID 9999 not found."


def test_update_room_unauthorized(test_room):
    response = client.put(f"/rooms/{test_room.id}", json={"name": "Updated Name"})
    assert response.status_code in [
        status.HTTP_401_UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN,
    ]


def test_update_room_success(auth_headers, test_room):
    update_data = {"name": "Family", "quantity": 8}
    response = client.put(
        f"/rooms/{test_room.id}", json=update_data, headers=auth_headers
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["name"] == update_data["name"]
    assert data["quantity"] == update_data["quantity"]


def test_delete_room_success(auth_headers, test_room):
    response = client.delete(f"/rooms/{test_room.id}", headers=auth_headers)
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/rooms/{test_room.id}").status_code == status.HTTP_404_NOT_FOUND


def test_room_availability_counts_overlapping_stays(auth_headers, test_room, stay_in_test_room):
    response = client.get(
        f"/rooms/{test_room.id}/availability?check_in_date=2025-04-12&check_out_date=2025-04-18",
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["quantity"] == 2
    assert data["committed"] == 1
    assert data["available"] == 1


def test_room_availability_ignores_back_to_back_stays(auth_headers, test_room, stay_in_test_room):
    response = client.get(
        f"/rooms/{test_room.id}/availability?check_in_date=2025-04-15&check_out_date=2025-04-18",
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["available"] == 2


def test_room_availability_invalid_dates(auth_headers, test_room):
    response = client.get(
        f"/rooms/{test_room.id}/availability?check_in_date=2025-04-15&check_out_date=2025-04-15",
        headers=auth_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Check-out date must be after check-in date."


def test_delete_room_with_bookings_conflicts(auth_headers, test_room, stay_in_test_room):
    response = client.delete(f"/rooms/{test_room.id}", headers=auth_headers)
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["detail"] == f"Room with ID {test_room.id} has bookings."
    assert client.get(f"/rooms/{test_room.id}").status_code == status.HTTP_200_OK

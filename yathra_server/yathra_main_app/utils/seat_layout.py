"""Deterministic default seat layout used before any booking exists"""
import math

from .constants import BusinessRules, SeatStatus, SeatType


def seat_id(row, position):
    return f'seat-{row}-{position}'


def seat_number(row, position):
    return f'{row}{chr(64 + position)}'


def generate_default_seats(capacity=BusinessRules.DEFAULT_SEAT_CAPACITY,
                           base_price=BusinessRules.BASE_SEAT_PRICE,
                           premium_multiplier=BusinessRules.PREMIUM_SEAT_MULTIPLIER,
                           seats_per_row=BusinessRules.SEATS_PER_ROW):
    """
    Build the seat map for a bus with no stored availability.

    Exactly `capacity` seats in rows of seats_per_row (the last row may be
    short). Row 1 is premium at round(base * multiplier), the first seat of
    every third row is wheelchair at base price, everything else is regular.
    """
    seats = {}
    rows = math.ceil(capacity / seats_per_row)

    for row in range(1, rows + 1):
        for position in range(1, seats_per_row + 1):
            if (row - 1) * seats_per_row + position > capacity:
                break

            seat_type = SeatType.REGULAR
            price = base_price

            if row == 1:
                seat_type = SeatType.PREMIUM
                price = round(base_price * premium_multiplier)
            elif position == 1 and row % BusinessRules.WHEELCHAIR_ROW_INTERVAL == 0:
                seat_type = SeatType.WHEELCHAIR

            seats[seat_id(row, position)] = {
                'seatNumber': seat_number(row, position),
                'status': SeatStatus.AVAILABLE,
                'price': price,
                'type': seat_type,
            }

    return seats

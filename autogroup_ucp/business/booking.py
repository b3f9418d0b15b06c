"""
Car booking and selling for the carbooking group.
"""

import logging

from ..capabilities import ResultEnvelope

logger = logging.getLogger("autogroup.business.booking")

CONFIRMATION_NUMBER = "ABC123XYZ"


def book_car(
    car_type: str,
    pickup_location: str,
    dropoff_location: str,
    pickup_date: str,
    dropoff_date: str,
) -> ResultEnvelope:
    """Book a car and return the booking details."""
    logger.info("Booking %s from %s to %s", car_type, pickup_location, dropoff_location)
    details = {
        "carType": car_type,
        "pickupLocation": pickup_location,
        "dropoffLocation": dropoff_location,
        "pickupDate": pickup_date,
        "dropoffDate": dropoff_date,
        "confirmationNumber": CONFIRMATION_NUMBER,
    }
    return ResultEnvelope.of(details)


def book_car_text(
    car_type: str,
    pickup_location: str,
    dropoff_location: str,
    pickup_date: str,
    dropoff_date: str,
) -> str:
    return (
        f"Car booked: {car_type} from {pickup_location} to {dropoff_location} "
        f"between {pickup_date} and {dropoff_date}"
    )


def sell_car(
    car_type: str,
    pickup_location: str,
    dropoff_location: str,
    pickup_date: str,
    dropoff_date: str,
) -> str:
    return (
        f"Car sold: {car_type} from {pickup_location} to {dropoff_location} "
        f"between {pickup_date} and {dropoff_date}"
    )

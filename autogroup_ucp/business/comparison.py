"""
Car comparison and stock check for the compareCar group.
"""

import logging

logger = logging.getLogger("autogroup.business.comparison")

PREFERRED_MAKE = "toyota"


def compare_cars(car1: str, car2: str) -> str:
    """Compare two cars. A Toyota wins, otherwise the first car does."""
    logger.info("Comparing cars: %s vs %s", car1, car2)
    if PREFERRED_MAKE in car1.lower():
        better = car1
    elif PREFERRED_MAKE in car2.lower():
        better = car2
    else:
        better = car1
    worse = car2 if better == car1 else car1
    return f"{better} is better than {worse}"


def check_stock(model: str) -> str:
    """Check stock for a specific model."""
    logger.info("Checking stock for model: %s", model)
    # No inventory backend yet, every model reports as stocked
    status = "In Stock"
    return f"The model {model} is currently: {status}"

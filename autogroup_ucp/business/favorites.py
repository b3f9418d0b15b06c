"""
Favorite car lookup for the favoriteCar group.
"""

from ..capabilities import ResultEnvelope

# lowercase name -> (display name, car)
FAVORITE_CARS = {
    "alice": ("Alice", "Tesla Model S"),
    "bob": ("Bob", "Ford Mustang"),
    "vishal": ("Vishal", "BMW M3"),
}


def favorite_car(person_name: str) -> ResultEnvelope:
    known = FAVORITE_CARS.get(person_name.lower())
    if known is None:
        return ResultEnvelope.of("Unknown", f"I don't know the favorite car of {person_name}")
    name, car = known
    return ResultEnvelope.of(car, f"{name}'s favorite car is {car}")

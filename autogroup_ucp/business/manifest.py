"""
Demo business manifest for AutoGroup North.

Wires the example business handlers into groups:
    compareCar   primary business, REST comparison plus RPC checkout stubs
    carbooking   REST + RPC, plus one in-process action
    favoriteCar  RPC
"""

from typing import Optional

from ..capabilities import (
    BusinessGroup,
    BusinessIdentity,
    CapabilityBinding,
    CapabilityDescriptor,
    GroupManifest,
    Transport,
)
from ..config import BusinessConfig, settings
from . import booking, comparison, favorites, shopping

NAMESPACE = "io.example"

COMPARE_PROMPT = (
    "you are a car comparison assistant. Provide users with detailed comparisons "
    "between two car models based on their features, performance, and specifications."
)
BOOKING_PROMPT = (
    "You are a car booking assistant. Help users book cars based on their "
    "preferences and requirements."
)

CHECKOUT_ACTIONS = (
    (shopping.create_checkout, "create_checkout", "Create a new checkout session"),
    (shopping.get_checkout, "get_checkout", "Retrieve checkout details by ID"),
    (shopping.update_checkout, "update_checkout", "Update checkout information"),
    (shopping.complete_checkout, "complete_checkout",
     "Complete the checkout process with payment"),
    (shopping.cancel_checkout, "cancel_checkout", "Cancel an existing checkout session"),
    (shopping.link_identity, "link_identity", "Link user identity via OAuth"),
    (shopping.get_order, "get_order", "Retrieve order details by ID"),
)


def _descriptor(
    config: BusinessConfig,
    name: str,
    group: str,
    transport: Transport,
    description: str,
    doc: Optional[str] = None,
) -> CapabilityDescriptor:
    # Only published capabilities carry spec and schema links
    spec_uri = schema_uri = None
    if transport is not Transport.NONE:
        doc = doc or name.replace("_", "-")
        spec_uri = f"{config.spec_base_url}/specs/{doc}"
        schema_uri = f"{config.spec_base_url}/schemas/{doc.replace('-', '_')}.json"
    return CapabilityDescriptor(
        qualified_name=f"{NAMESPACE}.{name}",
        version=config.version,
        group_name=group,
        declared_transport=transport,
        spec_uri=spec_uri,
        schema_uri=schema_uri,
        description=description,
    )


def build_demo_manifest(config: Optional[BusinessConfig] = None) -> list[GroupManifest]:
    """Build the demo manifest for the configured business."""
    config = config or settings.business

    def bind(handler, name, group, transport, description, doc=None):
        return CapabilityBinding(
            descriptor=_descriptor(config, name, group, transport, description, doc),
            handler=handler,
        )

    compare = GroupManifest(
        group=BusinessGroup(
            group_name="compareCar",
            exposed_transports=frozenset({Transport.REST, Transport.RPC}),
            description="compare 2 cars",
            primary=True,
            prompt=COMPARE_PROMPT,
            business=BusinessIdentity(name=config.name, version=config.version),
        ),
        entries=(
            bind(comparison.compare_cars, "car_comparison", "compareCar",
                 Transport.REST, "compare 2 cars", doc="car-comparison"),
            bind(comparison.check_stock, "inventory_search", "compareCar",
                 Transport.REST, "Check real-time stock for a specific model"),
        ) + tuple(
            bind(handler, f"checkout.{name}", "compareCar", Transport.RPC, description,
                 doc="checkout")
            for handler, name, description in CHECKOUT_ACTIONS
        ),
    )

    car_booking = GroupManifest(
        group=BusinessGroup(
            group_name="carbooking",
            exposed_transports=frozenset({Transport.REST, Transport.RPC}),
            description="car booking service",
            prompt=BOOKING_PROMPT,
        ),
        entries=(
            bind(booking.book_car, "car_booking", "carbooking",
                 Transport.REST, "Book a car based on user preferences"),
            bind(booking.book_car_text, "car_booking_rpc", "carbooking",
                 Transport.RPC, "Book a car based on user preferences", doc="car-booking"),
            bind(booking.sell_car, "sell_car", "carbooking",
                 Transport.NONE, "Sell a car based on user preferences"),
        ),
    )

    favorite = GroupManifest(
        group=BusinessGroup(
            group_name="favoriteCar",
            exposed_transports=frozenset({Transport.RPC}),
            description="Handles favorite car related actions",
        ),
        entries=(
            bind(favorites.favorite_car, "favorite_car", "favoriteCar",
                 Transport.RPC, "Get the favorite car of a person"),
        ),
    )

    return [compare, car_booking, favorite]

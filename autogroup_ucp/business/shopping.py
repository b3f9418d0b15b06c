"""
Checkout session capabilities.

These are placeholders until a checkout backend exists; every call
returns None.
"""

from typing import Any, Optional


def create_checkout(checkout_request: dict[str, Any]) -> Optional[dict[str, Any]]:
    return None


def get_checkout(checkout_id: str) -> Optional[dict[str, Any]]:
    return None


def update_checkout(checkout_id: str, checkout_update: dict[str, Any]) -> Optional[dict[str, Any]]:
    return None


def complete_checkout(checkout_id: str, payment_details: dict[str, Any]) -> Optional[dict[str, Any]]:
    return None


def cancel_checkout(checkout_id: str) -> Optional[dict[str, Any]]:
    return None


def link_identity(oauth_request: dict[str, Any]) -> Optional[dict[str, Any]]:
    return None


def get_order(order_id: str) -> Optional[dict[str, Any]]:
    return None

"""Tests for transport eligibility validation.

Covers:
- declared transport vs. group exposed transports
- the single primary business rule
- cancellable feature checks against handler signatures
"""

import pytest

from autogroup_ucp.capabilities import (
    BusinessGroup,
    CapabilityDescriptor,
    DuplicatePrimaryBusiness,
    FeatureMismatch,
    GroupMismatch,
    HandlerFeature,
    Transport,
    TransportMismatch,
    TransportValidator,
    ValidationError,
    inspect_handler,
)


def _group(name="compareCar", transports=(Transport.REST,), primary=False):
    return BusinessGroup(
        group_name=name,
        exposed_transports=frozenset(transports),
        description="test group",
        primary=primary,
    )


def _descriptor(transport, group="compareCar", features=frozenset()):
    return CapabilityDescriptor(
        qualified_name="io.example.car_comparison",
        version="2026-01-19",
        group_name=group,
        declared_transport=transport,
        features=features,
    )


@pytest.fixture
def validator():
    return TransportValidator()


class TestValidateDescriptor:

    def test_rest_under_rest_group(self, validator):
        assert validator.validate(_descriptor(Transport.REST), _group()) is None

    def test_rest_under_rpc_only_group_fails(self, validator):
        group = _group(transports=(Transport.RPC,))
        with pytest.raises(TransportMismatch) as exc_info:
            validator.validate(_descriptor(Transport.REST), group)
        assert "REST" in str(exc_info.value)
        assert isinstance(exc_info.value, ValidationError)

    def test_rpc_under_rest_only_group_fails(self, validator):
        with pytest.raises(TransportMismatch):
            validator.validate(_descriptor(Transport.RPC), _group())

    def test_none_transport_always_allowed(self, validator):
        group = _group(transports=())
        validator.validate(_descriptor(Transport.NONE), group)

    def test_both_transports_exposed(self, validator):
        group = _group(transports=(Transport.REST, Transport.RPC))
        validator.validate(_descriptor(Transport.REST), group)
        validator.validate(_descriptor(Transport.RPC), group)

    def test_group_name_must_match(self, validator):
        with pytest.raises(GroupMismatch):
            validator.validate(_descriptor(Transport.REST, group="carbooking"), _group())


class TestValidateFeatures:

    def test_cancellable_requires_cancel_token(self, validator):
        def handler(car1: str):
            return car1

        descriptor = _descriptor(
            Transport.REST, features=frozenset({HandlerFeature.CANCELLABLE})
        )
        with pytest.raises(FeatureMismatch):
            validator.validate(descriptor, _group(), signature=inspect_handler(handler))

    def test_cancellable_with_cancel_token(self, validator):
        def handler(car1: str, cancel_token=None):
            return car1

        descriptor = _descriptor(
            Transport.REST, features=frozenset({HandlerFeature.CANCELLABLE})
        )
        validator.validate(descriptor, _group(), signature=inspect_handler(handler))


class TestValidateGroup:

    def test_second_primary_fails(self, validator):
        first = _group("compareCar", primary=True)
        second = _group("carbooking", primary=True)
        with pytest.raises(DuplicatePrimaryBusiness):
            validator.validate_group(second, [first])

    def test_second_non_primary_succeeds(self, validator):
        first = _group("compareCar", primary=True)
        second = _group("carbooking", primary=False)
        validator.validate_group(second, [first])

    def test_first_primary_succeeds(self, validator):
        validator.validate_group(_group(primary=True), [])

    def test_none_transport_cannot_be_exposed(self, validator):
        with pytest.raises(TransportMismatch):
            validator.validate_group(_group(transports=(Transport.NONE,)), [])

"""Tests for the capability registry.

Covers:
- group and capability registration errors
- resolve identity and registration order
- sealing
- handler signature introspection
- manifest loading and rendering
"""

from typing import Any, Optional

import pytest

from autogroup_ucp.capabilities import (
    BusinessGroup,
    BusinessIdentity,
    CapabilityBinding,
    CapabilityDescriptor,
    CapabilityRegistry,
    DuplicateCapability,
    DuplicateGroup,
    DuplicatePrimaryBusiness,
    GroupManifest,
    RegistrySealed,
    Transport,
    TransportMismatch,
    UnknownGroup,
    inspect_handler,
    load_manifest,
)


def compare(car1: str, car2: str) -> str:
    return f"{car1} is better than {car2}"


def check_stock(model: str) -> str:
    return f"The model {model} is currently: In Stock"


COMPARE_GROUP = BusinessGroup(
    group_name="compareCar",
    exposed_transports=frozenset({Transport.REST}),
    description="compare 2 cars",
    primary=True,
    business=BusinessIdentity(name="AutoGroup North", version="2026-01-19"),
)
RPC_GROUP = BusinessGroup(
    group_name="favoriteCar",
    exposed_transports=frozenset({Transport.RPC}),
)


def _descriptor(name, group="compareCar", transport=Transport.REST):
    return CapabilityDescriptor(
        qualified_name=name,
        version="2026-01-19",
        group_name=group,
        declared_transport=transport,
        spec_uri=f"https://example.com/specs/{name}",
        schema_uri=f"https://example.com/schemas/{name}.json",
    )


@pytest.fixture
def registry():
    reg = CapabilityRegistry()
    reg.register_group(COMPARE_GROUP)
    return reg


class TestRegisterGroup:

    def test_duplicate_group(self, registry):
        with pytest.raises(DuplicateGroup):
            registry.register_group(COMPARE_GROUP)

    def test_duplicate_primary(self, registry):
        other = BusinessGroup(
            group_name="carbooking",
            exposed_transports=frozenset({Transport.REST}),
            primary=True,
        )
        with pytest.raises(DuplicatePrimaryBusiness):
            registry.register_group(other)
        assert registry.get_group("carbooking") is None

    def test_second_group_without_marker(self, registry):
        registry.register_group(RPC_GROUP)
        assert registry.get_group("favoriteCar") is RPC_GROUP
        assert registry.primary_group() is COMPARE_GROUP


class TestRegister:

    def test_resolve_returns_exact_objects(self, registry):
        descriptor = _descriptor("io.example.car_comparison")
        registry.register(descriptor, compare)

        resolved = registry.resolve("io.example.car_comparison")
        assert resolved is not None
        assert resolved[0] is descriptor
        assert resolved[1] is compare

    def test_resolve_unknown_returns_none(self, registry):
        assert registry.resolve("io.example.nothing") is None

    def test_duplicate_capability(self, registry):
        registry.register(_descriptor("io.example.car_comparison"), compare)
        with pytest.raises(DuplicateCapability):
            registry.register(_descriptor("io.example.car_comparison"), check_stock)

    def test_duplicate_capability_across_groups(self, registry):
        registry.register_group(RPC_GROUP)
        registry.register(_descriptor("io.example.car_comparison"), compare)
        with pytest.raises(DuplicateCapability):
            registry.register(
                _descriptor("io.example.car_comparison", "favoriteCar", Transport.RPC),
                compare,
            )

    def test_unknown_group(self, registry):
        with pytest.raises(UnknownGroup):
            registry.register(_descriptor("io.example.x", group="missing"), compare)

    def test_transport_mismatch_not_inserted(self, registry):
        registry.register_group(RPC_GROUP)
        descriptor = _descriptor("io.example.rest_on_rpc", "favoriteCar", Transport.REST)
        with pytest.raises(TransportMismatch):
            registry.register(descriptor, compare)
        assert registry.resolve("io.example.rest_on_rpc") is None
        assert registry.list_by_group("favoriteCar") == []

    def test_list_by_group_keeps_registration_order(self, registry):
        names = ["io.example.b", "io.example.a", "io.example.c"]
        for name in names:
            registry.register(_descriptor(name), check_stock)

        listed = registry.list_by_group("compareCar")
        assert [d.qualified_name for d in listed] == names
        # Restartable: a second listing yields the same sequence
        assert registry.list_by_group("compareCar") == listed

    def test_list_by_unknown_group_is_empty(self, registry):
        assert registry.list_by_group("missing") == []

    def test_contains_and_len(self, registry):
        registry.register(_descriptor("io.example.car_comparison"), compare)
        assert "io.example.car_comparison" in registry
        assert len(registry) == 1


class TestSealing:

    def test_register_after_seal_fails(self, registry):
        registry.register(_descriptor("io.example.car_comparison"), compare)
        registry.seal()

        with pytest.raises(RegistrySealed):
            registry.register(_descriptor("io.example.inventory_search"), check_stock)
        assert registry.resolve("io.example.car_comparison") is not None
        assert registry.resolve("io.example.inventory_search") is None

    def test_register_group_after_seal_fails(self, registry):
        registry.seal()
        with pytest.raises(RegistrySealed):
            registry.register_group(RPC_GROUP)

    def test_seal_is_idempotent(self, registry):
        registry.seal()
        registry.seal()
        assert registry.is_sealed

    def test_sealed_listing_still_ordered(self, registry):
        registry.register(_descriptor("io.example.b"), check_stock)
        registry.register(_descriptor("io.example.a"), check_stock)
        registry.seal()
        assert [d.qualified_name for d in registry.list_by_group("compareCar")] == [
            "io.example.b",
            "io.example.a",
        ]


class TestInspectHandler:

    def test_parameter_kinds(self):
        def handler(name: str, count: int, ratio: float, payload: dict[str, Any], other):
            return None

        sig = inspect_handler(handler)
        assert [(p.name, p.kind) for p in sig.parameters] == [
            ("name", "string"),
            ("count", "number"),
            ("ratio", "number"),
            ("payload", "object"),
            ("other", "any"),
        ]
        assert not sig.accepts_cancel_token

    def test_optional_and_defaults(self):
        def handler(checkout_id: str, update: Optional[dict] = None):
            return None

        sig = inspect_handler(handler)
        assert sig.min_arity == 1
        assert sig.max_arity == 2
        assert sig.parameters[1].kind == "object"
        assert not sig.parameters[1].required

    def test_cancel_token_is_not_a_parameter(self):
        def handler(model: str, *, cancel_token=None):
            return model

        sig = inspect_handler(handler)
        assert sig.names == ["model"]
        assert sig.accepts_cancel_token


class TestManifest:

    def _manifest(self):
        return [
            GroupManifest(
                group=COMPARE_GROUP,
                entries=(
                    CapabilityBinding(_descriptor("io.example.car_comparison"), compare),
                    CapabilityBinding(
                        _descriptor("io.example.local_only", transport=Transport.NONE),
                        check_stock,
                    ),
                ),
            ),
            GroupManifest(group=RPC_GROUP),
        ]

    def test_load_manifest_seals(self):
        registry = load_manifest(CapabilityRegistry(), self._manifest())
        assert registry.is_sealed
        assert len(registry) == 2
        assert [g.group_name for g in registry.list_groups()] == ["compareCar", "favoriteCar"]

    def test_load_manifest_without_seal(self):
        registry = load_manifest(CapabilityRegistry(), self._manifest(), seal=False)
        assert not registry.is_sealed

    def test_invalid_manifest_propagates(self):
        bad = [
            GroupManifest(
                group=RPC_GROUP,
                entries=(
                    CapabilityBinding(
                        _descriptor("io.example.rest", "favoriteCar", Transport.REST),
                        compare,
                    ),
                ),
            )
        ]
        with pytest.raises(TransportMismatch):
            load_manifest(CapabilityRegistry(), bad)

    def test_build_manifest_omits_in_process_capabilities(self):
        registry = load_manifest(CapabilityRegistry(), self._manifest())
        manifest = registry.build_manifest()

        assert manifest["business"] == {"name": "AutoGroup North", "version": "2026-01-19"}
        assert [c["name"] for c in manifest["capabilities"]] == ["io.example.car_comparison"]
        assert manifest["capabilities"][0]["transport"] == "rest"
        assert manifest["groups"][0] == {
            "name": "compareCar",
            "description": "compare 2 cars",
            "transports": ["rest"],
            "primary": True,
        }

    def test_build_manifest_without_primary(self):
        registry = CapabilityRegistry()
        registry.register_group(RPC_GROUP)
        assert registry.build_manifest()["business"] is None

"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Application services don't depend on adapters
- Adapters can depend on domain
- No circular dependencies
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("nearby_places.domain.models*")
        .should_not_import("nearby_places.adapters*")
        .should_not_import("nearby_places.application*")
        .should_not_import("nearby_places.domain.ports*")
        .may_import("nearby_places.domain.models*")
        .check("nearby_places")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("nearby_places.domain.ports*")
        .should_not_import("nearby_places.adapters*")
        .should_not_import("nearby_places.application*")
        .may_import("nearby_places.domain.ports*")
        .may_import("nearby_places.domain.models*")
        .check("nearby_places")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("nearby_places.application*")
        .should_not_import("nearby_places.adapters*")
        .may_import("nearby_places.domain*")
        .may_import("nearby_places.application*")
        .check("nearby_places")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("nearby_places.adapters*")
        .should_not_import("nearby_places.application*")
        .may_import("nearby_places.domain*")
        .may_import("nearby_places.adapters*")
        .check("nearby_places", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("nearby_places.domain*")
        .should_not_import("nearby_places.adapters*")
        .should_not_import("nearby_places.application*")
        .may_import("nearby_places.domain*")
        .check("nearby_places", only_direct_imports=True)
    )


def test_cli_dont_import_adapters() -> None:
    """CLI presentation should only talk to the application layer, not to adapters."""
    (
        archrule("CLI independence", comment="CLI should not depend on adapters")
        .match("nearby_places.cli")
        .should_not_import("nearby_places.adapters*")
        .may_import("nearby_places.domain*")
        .may_import("nearby_places.application*")
        .check("nearby_places")
    )

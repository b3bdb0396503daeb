from __future__ import annotations

import itertools

import pytest

from logto_seeds import (
    ADMIN_TENANT_ID,
    DEFAULT_MANAGEMENT_API,
    DEFAULT_TENANT_ID,
    AdminData,
    PredefinedScope,
    UserRole,
    create_admin_data,
    create_admin_data_in_admin_tenant,
    create_me_api_in_admin_tenant,
    get_management_api_admin_name,
    get_management_api_resource_indicator,
    is_standard_id,
)
import logto_seeds.management_api as management_api


def _counter_ids() -> tuple[list[str], management_api.IdFactory]:
    issued: list[str] = []
    counter = itertools.count(1)

    def factory() -> str:
        value = f"id-{next(counter)}"
        issued.append(value)
        return value

    return issued, factory


def _tenant_ids(data: AdminData) -> set[str]:
    return {data.resource.tenant_id, data.scope.tenant_id, data.role.tenant_id}


def _ids(data: AdminData) -> tuple[str, str, str]:
    return data.resource.id, data.scope.id, data.role.id


def test_resource_indicator_formats() -> None:
    assert get_management_api_resource_indicator("acme") == "https://acme.logto.app/api"
    assert get_management_api_resource_indicator("acme", "me") == "https://acme.logto.app/me"
    assert get_management_api_resource_indicator("acme", path="v2/api") == "https://acme.logto.app/v2/api"


def test_resource_indicator_does_not_validate_or_escape() -> None:
    assert get_management_api_resource_indicator("", "") == "https://.logto.app/"
    assert get_management_api_resource_indicator("a b", "x?y") == "https://a b.logto.app/x?y"


def test_admin_name_binds_tenant_to_admin_role() -> None:
    assert get_management_api_admin_name("acme") == "acme:admin"
    assert get_management_api_admin_name(DEFAULT_TENANT_ID) == "default:admin"


def test_default_management_api_literals() -> None:
    data = DEFAULT_MANAGEMENT_API
    assert data.resource.tenant_id == "default"
    assert data.resource.id == "management-api"
    assert data.resource.indicator == "https://default.logto.app/api"
    assert data.resource.name == "Logto Management API"
    assert data.scope.tenant_id == "default"
    assert data.scope.id == "management-api-all"
    assert data.scope.name == "all"
    assert data.scope.description == "Default scope for Management API, allows all permissions."
    assert data.scope.resource_id == "management-api"
    assert data.role.tenant_id == "default"
    assert data.role.id == "admin-role"
    assert data.role.name == "admin"
    assert data.role.description == "Admin role for Logto."


def test_default_management_api_is_stable_and_immutable() -> None:
    from logto_seeds.management_api import DEFAULT_MANAGEMENT_API as again

    assert again is DEFAULT_MANAGEMENT_API
    with pytest.raises(AttributeError):
        DEFAULT_MANAGEMENT_API.resource.id = "changed"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        DEFAULT_MANAGEMENT_API.role = DEFAULT_MANAGEMENT_API.role  # type: ignore[misc]
    assert DEFAULT_MANAGEMENT_API.resource.id == "management-api"


def test_create_admin_data_for_tenant() -> None:
    data = create_admin_data("acme")
    assert _tenant_ids(data) == {"acme"}
    assert data.scope.resource_id == data.resource.id
    assert data.resource.indicator == "https://acme.logto.app/api"
    assert data.resource.name == "Logto Management API"
    assert data.scope.name == PredefinedScope.ALL
    assert data.role.name == UserRole.ADMIN
    assert data.role.description == "Admin role for Logto."
    assert all(is_standard_id(value) for value in _ids(data))
    assert len(set(_ids(data))) == 3


def test_create_admin_data_in_admin_tenant() -> None:
    data = create_admin_data_in_admin_tenant("acme")
    assert _tenant_ids(data) == {ADMIN_TENANT_ID}
    assert data.scope.resource_id == data.resource.id
    assert data.resource.indicator == "https://acme.logto.app/api"
    assert data.resource.name == "Logto Management API for tenant acme"
    assert data.scope.name == "all"
    assert data.scope.description == "Default scope for Management API, allows all permissions."
    assert data.role.name == "acme:admin"
    assert data.role.description == "Admin role for Logto."


def test_create_me_api_in_admin_tenant() -> None:
    data = create_me_api_in_admin_tenant()
    assert _tenant_ids(data) == {ADMIN_TENANT_ID}
    assert data.scope.resource_id == data.resource.id
    assert data.resource.indicator == "https://admin.logto.app/me"
    assert data.resource.indicator.endswith("/me")
    assert data.resource.name == "Logto Me API"
    assert data.scope.description == "Default scope for Me API, allows all permissions."
    assert data.role.name == UserRole.USER
    assert data.role.name != UserRole.ADMIN
    assert data.role.description == "Default role for admin tenant."


@pytest.mark.parametrize(
    "factory",
    [
        lambda: create_admin_data("acme"),
        lambda: create_admin_data_in_admin_tenant("acme"),
        create_me_api_in_admin_tenant,
    ],
)
def test_generated_bundles_are_fresh_but_otherwise_deterministic(factory) -> None:
    first = factory()
    second = factory()
    assert set(_ids(first)).isdisjoint(_ids(second))
    for kind in ("resource", "scope", "role"):
        left = getattr(first, kind)
        right = getattr(second, kind)
        assert left.tenant_id == right.tenant_id
        assert left.name == right.name
    assert first.resource.indicator == second.resource.indicator
    assert first.scope.description == second.scope.description
    assert first.role.description == second.role.description


def test_tenant_ids_never_leak_across_variants() -> None:
    for tenant in ("acme", "beta", DEFAULT_TENANT_ID):
        assert _tenant_ids(create_admin_data(tenant)) == {tenant}
        assert _tenant_ids(create_admin_data_in_admin_tenant(tenant)) == {ADMIN_TENANT_ID}


def test_factories_call_id_source_three_times_in_record_order() -> None:
    issued, factory = _counter_ids()
    data = create_admin_data("acme", generate_id=factory)
    assert issued == ["id-1", "id-2", "id-3"]
    assert _ids(data) == ("id-1", "id-2", "id-3")
    assert data.scope.resource_id == "id-1"

    create_admin_data_in_admin_tenant("acme", generate_id=factory)
    create_me_api_in_admin_tenant(generate_id=factory)
    assert len(issued) == 9


def test_default_id_source_is_used(monkeypatch: pytest.MonkeyPatch) -> None:
    issued, factory = _counter_ids()
    monkeypatch.setattr(management_api, "generate_standard_id", factory)
    data = create_me_api_in_admin_tenant()
    assert _ids(data) == ("id-1", "id-2", "id-3")
    assert len(issued) == 3


def test_id_source_failures_propagate() -> None:
    class Exhausted(RuntimeError):
        pass

    calls = itertools.count()

    def failing() -> str:
        if next(calls) == 1:
            raise Exhausted("entropy pool empty")
        return "first"

    with pytest.raises(Exhausted, match="entropy pool empty"):
        create_admin_data("acme", generate_id=failing)


def test_bundle_creation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    _, factory = _counter_ids()
    with caplog.at_level("DEBUG", logger="logto_seeds.management_api"):
        create_admin_data("acme", generate_id=factory)
    assert any(
        "https://acme.logto.app/api" in record.getMessage() and "id-1" in record.getMessage()
        for record in caplog.records
    )

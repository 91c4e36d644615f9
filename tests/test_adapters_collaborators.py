"""Tests for HTTP collaborator adapters using httpx mock transports."""

from __future__ import annotations

from decimal import Decimal

import httpx
import pytest

from rental_lifecycle.adapters import (
    CollaboratorTimeoutError,
    CollaboratorUnavailableError,
    HttpDocumentLookupAdapter,
    HttpIdentityLookupAdapter,
    HttpPropertyLookupAdapter,
)


def _build_transport(routes: dict[str, httpx.Response]) -> httpx.MockTransport:
    """Build a transport answering fixed responses by request path; unknown paths answer 404."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return routes.get(request.url.path, httpx.Response(404))

    return httpx.MockTransport(_handler)


def test_identity_adapter_projects_user_summary() -> None:
    transport = _build_transport(
        {
            "/api/usuarios/1": httpx.Response(
                200,
                json={"id": 1, "nombre": "Ana Perez", "email": "ana@example.com", "rol": "inquilino"},
            )
        }
    )
    adapter = HttpIdentityLookupAdapter(base_url="http://identity.test", transport=transport)

    summary = adapter.adapter_fetch_user_summary(1)

    assert summary is not None
    assert summary.user_id == 1
    assert summary.display_name == "Ana Perez"
    assert summary.email == "ana@example.com"
    assert summary.role == "INQUILINO"
    assert adapter.adapter_user_exists(1) is True


def test_identity_adapter_maps_not_found_to_absent() -> None:
    adapter = HttpIdentityLookupAdapter(base_url="http://identity.test", transport=_build_transport({}))

    assert adapter.adapter_fetch_user_summary(99) is None
    assert adapter.adapter_user_exists(99) is False


def test_identity_adapter_raises_unavailable_on_server_error() -> None:
    transport = _build_transport({"/api/usuarios/1": httpx.Response(503, text="maintenance")})
    adapter = HttpIdentityLookupAdapter(base_url="http://identity.test", transport=transport)

    with pytest.raises(CollaboratorUnavailableError) as error_info:
        adapter.adapter_user_exists(1)

    assert error_info.value.collaborator == "identity_service"
    assert error_info.value.error_code == "503"


def test_identity_adapter_raises_timeout_error_on_timeout() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    adapter = HttpIdentityLookupAdapter(
        base_url="http://identity.test",
        timeout_seconds=0.5,
        transport=httpx.MockTransport(_handler),
    )

    with pytest.raises(CollaboratorTimeoutError):
        adapter.adapter_fetch_user_summary(1)


def test_identity_adapter_raises_unavailable_on_connection_failure() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    adapter = HttpIdentityLookupAdapter(base_url="http://identity.test", transport=httpx.MockTransport(_handler))

    with pytest.raises(CollaboratorUnavailableError) as error_info:
        adapter.adapter_user_exists(1)

    assert not isinstance(error_info.value, CollaboratorTimeoutError)


def test_identity_adapter_rejects_non_json_body() -> None:
    transport = _build_transport({"/api/usuarios/1": httpx.Response(200, text="<html>oops</html>")})
    adapter = HttpIdentityLookupAdapter(base_url="http://identity.test", transport=transport)

    with pytest.raises(CollaboratorUnavailableError):
        adapter.adapter_fetch_user_summary(1)


def test_property_adapter_projects_summary_and_availability() -> None:
    transport = _build_transport(
        {
            "/api/propiedades/10": httpx.Response(
                200,
                json={
                    "id": 10,
                    "direccion": "Calle 1 # 2-3",
                    "precioMensual": 1500000.50,
                    "titulo": "Apartamento centro",
                    "divisa": "COP",
                },
            ),
            "/api/propiedades/11": httpx.Response(200, json={"id": 11, "direccion": "Calle 9", "disponible": False}),
        }
    )
    adapter = HttpPropertyLookupAdapter(base_url="http://property.test/", transport=transport)

    summary = adapter.adapter_fetch_property_summary(10)

    assert summary is not None
    assert summary.address == "Calle 1 # 2-3"
    assert summary.monthly_price == Decimal("1500000.5")
    assert summary.currency == "COP"
    assert summary.available is None
    assert adapter.adapter_property_exists(10) is True
    assert adapter.adapter_property_is_available(10) is True
    assert adapter.adapter_property_exists(11) is True
    assert adapter.adapter_property_is_available(11) is False
    assert adapter.adapter_property_exists(12) is False
    assert adapter.adapter_property_is_available(12) is False


def test_property_adapter_rejects_unparseable_price() -> None:
    transport = _build_transport({"/api/propiedades/10": httpx.Response(200, json={"id": 10, "precioMensual": "n/a"})})
    adapter = HttpPropertyLookupAdapter(base_url="http://property.test", transport=transport)

    with pytest.raises(CollaboratorUnavailableError):
        adapter.adapter_fetch_property_summary(10)


@pytest.mark.parametrize("raw_id", ["not-a-number", {"value": 1}, [1], True, 1.5])
def test_identity_adapter_rejects_malformed_user_id(raw_id: object) -> None:
    transport = _build_transport({"/api/usuarios/1": httpx.Response(200, json={"id": raw_id, "nombre": "Ana"})})
    adapter = HttpIdentityLookupAdapter(base_url="http://identity.test", transport=transport)

    with pytest.raises(CollaboratorUnavailableError) as error_info:
        adapter.adapter_fetch_user_summary(1)
    assert error_info.value.collaborator == "identity_service"

    with pytest.raises(CollaboratorUnavailableError):
        adapter.adapter_user_exists(1)


@pytest.mark.parametrize("raw_id", ["not-a-number", {"value": 10}, [10]])
def test_property_adapter_rejects_malformed_property_id(raw_id: object) -> None:
    transport = _build_transport({"/api/propiedades/10": httpx.Response(200, json={"id": raw_id})})
    adapter = HttpPropertyLookupAdapter(base_url="http://property.test", transport=transport)

    with pytest.raises(CollaboratorUnavailableError) as error_info:
        adapter.adapter_fetch_property_summary(10)
    assert error_info.value.collaborator == "property_service"


def test_identity_adapter_accepts_numeric_string_id() -> None:
    transport = _build_transport({"/api/usuarios/1": httpx.Response(200, json={"id": "1"})})
    adapter = HttpIdentityLookupAdapter(base_url="http://identity.test", transport=transport)

    summary = adapter.adapter_fetch_user_summary(1)

    assert summary is not None
    assert summary.user_id == 1


@pytest.mark.parametrize("raw_flag", ["false", "true", 0, 1, {"value": False}])
def test_property_adapter_rejects_non_boolean_availability(raw_flag: object) -> None:
    transport = _build_transport({"/api/propiedades/10": httpx.Response(200, json={"id": 10, "disponible": raw_flag})})
    adapter = HttpPropertyLookupAdapter(base_url="http://property.test", transport=transport)

    with pytest.raises(CollaboratorUnavailableError):
        adapter.adapter_property_is_available(10)


def test_document_adapter_only_accepts_literal_true() -> None:
    transport = _build_transport(
        {
            "/api/documentos/usuario/1/verificar-aprobados": httpx.Response(200, json=True),
            "/api/documentos/usuario/2/verificar-aprobados": httpx.Response(200, json=False),
            "/api/documentos/usuario/3/verificar-aprobados": httpx.Response(200, json="true"),
        }
    )
    adapter = HttpDocumentLookupAdapter(base_url="http://documents.test", transport=transport)

    assert adapter.adapter_user_has_approved_documents(1) is True
    assert adapter.adapter_user_has_approved_documents(2) is False
    assert adapter.adapter_user_has_approved_documents(3) is False
    assert adapter.adapter_user_has_approved_documents(4) is False


def test_collaborator_adapter_validates_constructor_arguments() -> None:
    with pytest.raises(ValueError):
        HttpIdentityLookupAdapter(base_url="  ")
    with pytest.raises(ValueError):
        HttpPropertyLookupAdapter(base_url="http://property.test", timeout_seconds=0)

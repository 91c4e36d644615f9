"""Document-service adapter for approved-document checks."""

from __future__ import annotations

import httpx

from .http_collaborator import HttpCollaboratorAdapter
from .interfaces import DocumentLookupPort


class HttpDocumentLookupAdapter(HttpCollaboratorAdapter, DocumentLookupPort):
    """Adapter for `GET /api/documentos/usuario/{id}/verificar-aprobados`."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ):
        super().__init__(
            source_name="document_service",
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            transport=transport,
        )

    def adapter_user_has_approved_documents(self, user_id: int) -> bool:
        """Return the document service approval verdict for one user.

        Args:
            user_id: External user identifier.

        Returns:
            bool: True only when upstream answers a JSON `true`.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """

        payload = self._adapter_get_json(f"/api/documentos/usuario/{int(user_id)}/verificar-aprobados")
        return payload is True

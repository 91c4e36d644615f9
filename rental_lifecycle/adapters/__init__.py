"""Adapter layer package for external collaborator boundaries."""

from .document_service import HttpDocumentLookupAdapter
from .errors import CollaboratorError, CollaboratorTimeoutError, CollaboratorUnavailableError
from .http_collaborator import HttpCollaboratorAdapter
from .identity_service import HttpIdentityLookupAdapter
from .interfaces import DocumentLookupPort, IdentityLookupPort, PropertyLookupPort
from .property_service import HttpPropertyLookupAdapter

__all__ = [
	"CollaboratorError",
	"CollaboratorTimeoutError",
	"CollaboratorUnavailableError",
	"DocumentLookupPort",
	"HttpCollaboratorAdapter",
	"HttpDocumentLookupAdapter",
	"HttpIdentityLookupAdapter",
	"HttpPropertyLookupAdapter",
	"IdentityLookupPort",
	"PropertyLookupPort",
]

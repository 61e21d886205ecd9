"""Client for atomic index alias updates on a search cluster."""

from .actions import ActionBatch, AliasAction, AliasActionType
from .client import SearchClient
from .config import Settings
from .errors import AliasClientError, DecodeError, ServiceError, TransportError
from .filters import Filter, RawFilter, TermFilter
from .models import AliasResult
from .service import ALIASES_PATH, AliasService
from .transport import HttpTransport, Transport

__all__ = [
    "ALIASES_PATH",
    "ActionBatch",
    "AliasAction",
    "AliasActionType",
    "AliasClientError",
    "AliasResult",
    "AliasService",
    "DecodeError",
    "Filter",
    "HttpTransport",
    "RawFilter",
    "SearchClient",
    "ServiceError",
    "Settings",
    "TermFilter",
    "Transport",
    "TransportError",
]

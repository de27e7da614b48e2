"""HTTP helpers: pooled httpx clients and the retrying transport."""

from .client import close_all_clients, get_httpx_client
from .transport import TransportClient, buffer_body

__all__ = ["get_httpx_client", "close_all_clients", "TransportClient", "buffer_body"]

"""WoodCore core-banking API client.

This package provides the async client for the WoodCore API: ledgers,
clients, transfers, loans, products and savings.
"""

from .client import WoodCore
from .collections import Accounting, Clients, IntraTransfer, Loans, Products, Savings
from .config import ClientConfiguration, resolve_environment
from .endpoints import BoundEndpoint, Endpoint, EndpointGroup
from .errors import ConfigurationError, RemoteAPIError, TransportError, WoodCoreError
from .http import PendingRequest, RequestDescriptor, WoodCoreHTTP

__version__ = "0.1.0"

__all__ = [
    "WoodCore",
    "Accounting",
    "Clients",
    "IntraTransfer",
    "Loans",
    "Products",
    "Savings",
    "ClientConfiguration",
    "resolve_environment",
    "BoundEndpoint",
    "Endpoint",
    "EndpointGroup",
    "WoodCoreError",
    "RemoteAPIError",
    "TransportError",
    "ConfigurationError",
    "PendingRequest",
    "RequestDescriptor",
    "WoodCoreHTTP",
]

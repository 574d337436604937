"""Endpoint groups exposed by :class:`woodcore.WoodCore`."""

from .accounting import Accounting
from .clients import Clients
from .intra_transfer import IntraTransfer
from .loans import Loans
from .products import Products
from .savings import Savings

__all__ = ["Accounting", "Clients", "IntraTransfer", "Loans", "Products", "Savings"]

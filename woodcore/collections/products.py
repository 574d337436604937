"""Savings, loan and fixed deposit product catalogs."""
from __future__ import annotations

from ..endpoints import Endpoint, EndpointGroup

__all__ = ["Products"]


class Products(EndpointGroup):
    group_name = "products"

    list_savings_products = Endpoint("GET", "/savingsproducts", doc="List deposit products.")
    retrieve_savings_product = Endpoint(
        "GET", "/savingsproducts/{productId}", doc="Retrieve a deposit product."
    )
    list_loan_products = Endpoint("GET", "/loanproducts", doc="List loan products.")
    retrieve_loan_product = Endpoint(
        "GET", "/loanproducts/{loanProductId}", doc="Retrieve a loan product."
    )
    list_fixed_deposit_products = Endpoint(
        "GET", "/fixeddepositproducts", doc="List fixed deposit products."
    )
    retrieve_fixed_deposit_product = Endpoint(
        "GET", "/fixeddepositproducts/{productId}", doc="Retrieve a fixed deposit product."
    )

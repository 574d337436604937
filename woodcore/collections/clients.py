"""Individual and corporate customers."""
from __future__ import annotations

from ..endpoints import Endpoint, EndpointGroup

__all__ = ["Clients"]


class Clients(EndpointGroup):
    group_name = "clients"

    create_individual_client = Endpoint(
        "POST", "/clients",
        body=(
            "officeId", "firstname", "lastname", "middlename", "externalId", "_isActive",
            "clientType", "createdDate", "mobileNo", "emailAddress", "_isAddressEnabled",
            "tierLevel", "country", "street", "city", "createDepositAccount", "productId",
        ),
        doc="Create an individual or corporate customer. With ``is_active=False`` "
            "the client is created pending and must be activated.",
    )
    activate_client = Endpoint(
        "POST", "/clients/{clientId}/activate",
        body=("activationDate",),
        doc="Activate a pending client.",
    )
    change_client_tier = Endpoint(
        "POST", "/clients/{clientId}/updateTier",
        body=("tierRank",),
        doc="Upgrade or reduce a customer tier level.",
    )
    retrieve_customers = Endpoint(
        "GET", "/clients",
        query=("perPage", "page"),
        doc="List all customers, individual and corporate (paginated).",
    )
    retrieve_client = Endpoint(
        "GET", "/clients/{clientId}",
        doc="Retrieve a customer by id.",
    )
    list_customers_accounts = Endpoint(
        "GET", "/clients/{clientId}/accounts",
        doc="List the accounts held by a customer.",
    )

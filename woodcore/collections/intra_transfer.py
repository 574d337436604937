"""Transfers between accounts of the same bank."""
from __future__ import annotations

from ..endpoints import Endpoint, EndpointGroup

__all__ = ["IntraTransfer"]


class IntraTransfer(EndpointGroup):
    group_name = "intra_transfer"

    create_intra_transfer = Endpoint(
        "POST", "/intratransfer",
        body=(
            "fromOfficeId", "fromClientId", "fromAccountType", "fromAccountId",
            "toOfficeId", "toClientId", "toAccountType", "toAccountId",
            "transactionDate", "transferAmount", "comment",
        ),
        doc="Transfer between two customers of the bank. Account type 1 is a "
            "loan account, 2 a savings account.",
    )
    list_account_transfers = Endpoint(
        "GET", "/accounttransfers",
        query=("page", "perPage"),
        doc="List account transfers (paginated).",
    )
    retrieve_intra_transfer = Endpoint(
        "GET", "/accounttransfers/{accountTransferId}",
        doc="Retrieve a single account transfer.",
    )

"""Savings (deposit) and fixed deposit accounts."""
from __future__ import annotations

from ..endpoints import Endpoint, EndpointGroup

__all__ = ["Savings"]

_ACCOUNT = "/savingsaccounts/{accountId}"
_FIXED = "/fixeddepositaccounts/{accountId}"
_CLOSURE_FIELDS = (
    "closedOnDate", "onAccountClosureId", "toSavingsAccountId", "transferDescription", "note",
)


class Savings(EndpointGroup):
    group_name = "savings"

    create_savings_account = Endpoint(
        "POST", "/savingsaccounts",
        body=("clientId", "productId", "createdDate", "activate"),
        doc="Create a savings account.",
    )
    activate_savings_account = Endpoint(
        "POST", _ACCOUNT + "/activate",
        body=("activatedOnDate",),
        doc="Turn an approved savings application into an active account.",
    )
    list_savings_accounts = Endpoint(
        "GET", "/savingsaccounts",
        query=("perPage", "page"),
        doc="List deposit accounts (paginated).",
    )
    retrieve_savings_account = Endpoint("GET", _ACCOUNT, doc="Retrieve a deposit account.")
    make_deposit = Endpoint(
        "POST", _ACCOUNT + "/deposit",
        body=("transactionDate", "transactionAmount"),
        doc="Deposit into a deposit account.",
    )
    make_withdrawal = Endpoint(
        "POST", _ACCOUNT + "/withdraw",
        body=("transactionDate", "transactionAmount"),
        doc="Withdraw from a deposit account.",
    )
    undo_savings_account_transaction = Endpoint(
        "POST", _ACCOUNT + "/transactions/{transactionId}",
        query=("action",),
        doc="Reverse a deposit account transaction (``action='undo'``).",
    )
    list_savings_account_transactions = Endpoint(
        "GET", _ACCOUNT + "/transactions",
        query=("perPage", "page"),
        doc="List transactions of a deposit account (paginated).",
    )
    retrieve_savings_account_transaction = Endpoint(
        "GET", _ACCOUNT + "/transactions/{transactionId}",
        doc="Retrieve one deposit account transaction.",
    )
    place_lien = Endpoint(
        "POST", _ACCOUNT + "/lien",
        body=("transactionDate", "transactionAmount"),
        doc="Hold an amount on a deposit account.",
    )
    release_lien = Endpoint(
        "POST", _ACCOUNT + "/lien/{resourceId}",
        doc="Release a held amount.",
    )
    list_liens = Endpoint("GET", _ACCOUNT + "/lien", doc="List liens on a deposit account.")
    block_savings_account = Endpoint(
        "POST", _ACCOUNT + "/block",
        doc="Suspend all credits and debits on a deposit account.",
    )
    unblock_savings_account = Endpoint(
        "POST", _ACCOUNT + "/unblock", doc="Lift a deposit account block."
    )
    block_credits = Endpoint(
        "POST", _ACCOUNT + "/setpnc", doc="Post no credit: block credit operations."
    )
    unblock_credits = Endpoint(
        "POST", _ACCOUNT + "/removepnc", doc="Remove a post-no-credit block."
    )
    block_debits = Endpoint(
        "POST", _ACCOUNT + "/setpnd", doc="Post no debit: block debit operations."
    )
    unblock_debits = Endpoint(
        "POST", _ACCOUNT + "/removepnd", doc="Remove a post-no-debit block."
    )
    list_savings_account_charges = Endpoint(
        "GET", _ACCOUNT + "/charges", doc="List charges on a deposit account."
    )
    retrieve_savings_account_charge = Endpoint(
        "GET", _ACCOUNT + "/charges/{chargeId}", doc="Retrieve one deposit account charge."
    )

    create_fixed_deposit_application = Endpoint(
        "POST", "/fixeddepositaccounts",
        body=(
            "clientId", "productId", "createdDate", "depositAmount", "depositPeriod",
            "depositPeriodFrequencyId", "activate",
        ),
        doc="Create a fixed deposit account application.",
    )
    activate_fixed_deposit_account = Endpoint(
        "POST", _FIXED + "/activate",
        body=("activatedOnDate",),
        doc="Turn an approved fixed deposit application into an active account.",
    )
    close_fixed_deposit_account = Endpoint(
        "POST", _FIXED + "/close",
        body=_CLOSURE_FIELDS,
        doc="Close a matured fixed deposit account.",
    )
    premature_close_fixed_deposit_account = Endpoint(
        "POST", _FIXED + "/prematureClose",
        body=_CLOSURE_FIELDS,
        doc="Close an active fixed deposit account before maturity.",
    )
    list_fixed_deposit_accounts = Endpoint(
        "GET", "/fixeddepositaccounts", doc="List fixed deposit accounts."
    )
    retrieve_fixed_deposit_account = Endpoint(
        "GET", _FIXED, doc="Retrieve a fixed deposit account."
    )

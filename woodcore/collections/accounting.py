"""General ledger accounts and journal entries."""
from __future__ import annotations

from ..endpoints import Endpoint, EndpointGroup

__all__ = ["Accounting"]

_JOURNAL_FIELDS = ("officeId", "transactionDate", "credits", "debits", "currencyCode", "comments")


class Accounting(EndpointGroup):
    group_name = "accounting"

    create_general_ledger_account = Endpoint(
        "POST", "/ledger",
        body=("name", "glCode", "manualEntriesAllowed", "type", "usage", "parentId", "description"),
        doc="Create a general ledger account. ``type`` is one of asset, liability, "
            "income, expense or equity; ``usage`` is header or detail.",
    )
    retrieve_all_general_ledger_accounts = Endpoint(
        "GET", "/ledger",
        doc="List all general ledger accounts.",
    )
    retrieve_general_ledger_account = Endpoint(
        "GET", "/ledger/{glAccountId}",
        doc="Retrieve a single ledger account by id.",
    )
    ledger_to_ledger = Endpoint(
        "POST", "/journalentries",
        body=_JOURNAL_FIELDS,
        doc="Post a ledger to ledger journal entry (reconciliation).",
    )
    reverse_journal_entry = Endpoint(
        "POST", "/journalentries/{journalEntryId}/reverse",
        body=("comments",),
        doc="Reverse a journal entry; ``comments`` replaces the default reversal note.",
    )
    customer_to_ledger = Endpoint(
        "POST", "/accountgl",
        body=(
            "officeId", "transactionDate", "currencyCode", "credits", "debits",
            "operationType", "referenceNumber", "customerAccounts", "comments",
        ),
        doc="Move funds between a deposit account and a ledger account.",
    )
    retrieve_all_journal_entries = Endpoint(
        "GET", "/journalentries",
        query=("perPage", "page"),
        doc="List journal entries (paginated).",
    )
    retrieve_journal_entry = Endpoint(
        "GET", "/journalentries/{journalEntryId}",
        query=("runningBalance", "transactionDetails"),
        doc="Retrieve a single journal entry.",
    )

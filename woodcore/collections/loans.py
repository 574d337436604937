"""Loan account lifecycle: application, approval, disbursement, repayment, closure."""
from __future__ import annotations

from ..endpoints import Endpoint, EndpointGroup

__all__ = ["Loans"]

_LOAN = "/loans/{loanAccountId}"


class Loans(EndpointGroup):
    group_name = "loans"

    calculate_loan = Endpoint(
        "POST", "/loans/calculate",
        body=(
            "clientId", "productId", "principal", "duration", "durationBy",
            "numberOfRepayments", "repaymentEvery", "repaymentFrequency", "interestRate",
            "interestType", "expectedDisbursementDate", "createdDate", "linkDepositAccountId",
        ),
        doc="Preview interest, schedule, fees and charges for a prospective loan.",
    )
    create_loan_account = Endpoint(
        "POST", "/loans",
        body=(
            "clientId", "productId", "principal", "loanType", "numberOfRepayments",
            "repaymentEvery", "repaymentFrequency", "interestRate", "interestType",
            "interestCalculationPeriodType", "transactionProcessingStrategyId",
            "expectedDisbursementDate", "createdDate", "linkDepositAccountId",
        ),
        doc="Submit a loan application. ``loan_type`` is individual, group or jlg.",
    )
    approve_loan_account = Endpoint(
        "POST", _LOAN + "/approve",
        body=("approvedOnDate", "expectedDisbursementDate", "comment"),
        doc="Approve a pending loan application.",
    )
    undo_approval_for_loan_account = Endpoint(
        "POST", _LOAN,
        query=("command",),
        body=("comment",),
        doc="Undo the approval of a loan (``command='undoapproval'``).",
    )
    disburse_loan = Endpoint(
        "POST", _LOAN + "/disburse",
        body=("disbursementDate", "transactionAmount", "bankName", "referenceNumber", "comment"),
        doc="Disburse a loan.",
    )
    disburse_loan_to_savings = Endpoint(
        "POST", _LOAN + "/disbursetosavings",
        body=("disbursementDate", "bankName", "referenceNumber", "transactionAmount", "comment"),
        doc="Disburse a loan into the deposit account linked at creation.",
    )
    undo_disburse_loan = Endpoint(
        "POST", _LOAN + "/undodisburse",
        body=("comment",),
        doc="Undo a loan disbursal.",
    )
    retrieve_all_loan_accounts = Endpoint(
        "GET", "/loans",
        query=("status", "perPage", "page", "sortBy", "orderBy", "officeId", "accountNo"),
        doc="List loan accounts (paginated, sortable, filterable).",
    )
    retrieve_loan_account = Endpoint("GET", _LOAN, doc="Retrieve a loan account.")
    make_repayment_for_loan = Endpoint(
        "POST", _LOAN + "/repayment",
        body=("transactionAmount", "transactionDate", "paymentTypeId", "comment"),
        doc="Record a loan repayment.",
    )
    foreclose_loan = Endpoint(
        "POST", _LOAN + "/foreclosure",
        body=("transactionDate", "locale", "dateFormat", "comment"),
        doc="Foreclose an active loan.",
    )
    waive_interest_on_loan_account = Endpoint(
        "POST", _LOAN + "/waiveInterest",
        body=("transactionDate", "transactionAmount", "locale", "dateFormat", "comment"),
        doc="Waive interest on a loan account.",
    )
    write_off_loan = Endpoint(
        "POST", _LOAN + "/writeoff",
        body=("transactionDate", "comment"),
        doc="Write off a loan.",
    )
    undo_write_off_for_loan = Endpoint(
        "POST", _LOAN + "/undowriteoff",
        doc="Undo a loan write-off.",
    )
    list_loan_account_transactions = Endpoint(
        "GET", _LOAN + "/transactions",
        query=("perPage", "page"),
        doc="List transactions of a loan account (paginated).",
    )
    retrieve_loan_account_transaction = Endpoint(
        "GET", _LOAN + "/transactions/{transactionId}",
        doc="Retrieve one loan account transaction.",
    )

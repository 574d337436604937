from __future__ import annotations

"""Offline smoke script for the WoodCore client.
Runs against a mock transport: pages through loan accounts, posts a repayment
and checks error normalization. Prints 'WOODCORE SMOKE: OK' on success.
"""

import asyncio
import sys

import httpx

from woodcore import RemoteAPIError, WoodCore
from woodcore.log import configure_logging

_LOANS = [{"id": i, "accountNo": f"00000{i}", "status": {"value": "Active"}} for i in range(1, 8)]


def handler(request: httpx.Request) -> httpx.Response:  # noqa: D401
    path = request.url.path
    if request.method == "GET" and path.endswith("/loans"):
        page = int(request.url.params["page"])
        per_page = int(request.url.params["perPage"])
        chunk = _LOANS[(page - 1) * per_page: page * per_page]
        total = -(-len(_LOANS) // per_page)
        return httpx.Response(200, json={"data": chunk, "meta": {"currentPage": page, "totalPage": total}})
    if request.method == "POST" and path.endswith("/repayment"):
        return httpx.Response(200, json={"resourceId": 101, "loanId": 1})
    return httpx.Response(404, json={"message": {"message": "Not found", "error": path}})


async def main() -> int:
    configure_logging(service_name="woodcore-smoke")
    transport = httpx.MockTransport(handler)

    async with WoodCore("wc_test_smoke", transport=transport) as wc:
        seen = 0
        async for page in wc.loans.retrieve_all_loan_accounts.pages(per_page=3):
            seen += len(page["data"])
            print(f"page {page['meta']['currentPage']}/{page['meta']['totalPage']}: {len(page['data'])} loans")
        if seen != len(_LOANS):
            print(f"SMOKE ERR: expected {len(_LOANS)} loans, got {seen}", file=sys.stderr)
            return 1

        receipt = await wc.loans.make_repayment_for_loan(1, transaction_amount=2500, transaction_date="2024-03-01")
        print(f"repayment: {receipt}")

        try:
            await wc.savings.retrieve_savings_account(999)
        except RemoteAPIError as exc:
            print(f"error normalized: {exc.to_dict()}")
        else:
            print("SMOKE ERR: expected RemoteAPIError", file=sys.stderr)
            return 1

    print("WOODCORE SMOKE: OK")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

from __future__ import annotations

import argparse
import json
import os
import urllib.error
import urllib.request

from packages.shared.schemas.checkout_v1 import CartItemV1, CheckoutRequestV1


def _parse_item(raw: str) -> CartItemV1:
    # name:price:quantity, e.g. "Scarf:150:2"
    name, price, quantity = raw.rsplit(":", 2)
    return CartItemV1(name=name, price=float(price), quantity=int(quantity))


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Post a cart to a running checkout service and print the redirect URL"
    )
    parser.add_argument(
        "--base-url",
        default=os.getenv("CHECKOUT_API_URL", "http://localhost:10000"),
        help="Checkout service base URL (default: http://localhost:10000)",
    )
    parser.add_argument(
        "--origin",
        default=os.getenv("CHECKOUT_FRONTEND_ORIGIN", "https://evelinarudin.github.io"),
        help="Origin header to send (must match the service's allowed origin)",
    )
    parser.add_argument(
        "--item",
        action="append",
        default=[],
        help="Cart item as name:price:quantity. Repeatable (default: Scarf:150:2)",
    )

    args = parser.parse_args()

    items = [_parse_item(raw) for raw in args.item or ["Scarf:150:2"]]
    body = CheckoutRequestV1(cartItems=items).model_dump()

    url = f"{args.base_url.rstrip('/')}/create-checkout-session"
    req = urllib.request.Request(url, method="POST")
    req.add_header("Content-Type", "application/json")
    req.add_header("Origin", args.origin)

    try:
        with urllib.request.urlopen(req, data=json.dumps(body).encode("utf-8"), timeout=30) as resp:
            payload = json.loads(resp.read().decode("utf-8"))
    except urllib.error.HTTPError as e:
        raw = e.read().decode("utf-8", errors="replace")
        print(f"HTTP {e.code}: {raw}")
        return 1

    print(payload["url"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

import asyncio
import json

import krakenspot
from krakenspot.errors import InsufficientFunds


with open("account.json", "r") as fp:
    cfg = json.load(fp)

cfg.setdefault("nonce_generator", "unix_millis")
cfg["handle_errors"] = True


async def main():
    """Submit an order, selling 0.01 XBT @ 100000 USD/XBT"""

    async with krakenspot.Client(config=cfg) as client:
        ticker = await client.get_ticker_information("XBTUSD")
        print(ticker.result)

        try:
            # Only validated, remove `validate` to actually submit it
            submitted = await client.add_order(
                "XBTUSD", "sell", "limit", "0.01",
                price="100000",
                oflags=["post"],
                validate=True
            )
        except InsufficientFunds:
            print("Not enough XBT to sell.")
            return

        # See the order's description
        print(repr(submitted.result))


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("Exiting...")

import asyncio
import json
import logging

import krakenspot


logging.basicConfig(level=logging.DEBUG)

with open("account.json", "r") as fp:
    cfg = json.load(fp)

cfg.setdefault("nonce_generator", "unix_millis")


async def main():

    async with krakenspot.Client(config=cfg) as client:
        status = await client.get_system_status()
        print(f"Kraken is {status.result}")

        # Balances, keyed by asset
        balance = await client.get_account_balance()

        for asset, amount in balance.result.items():
            print(f"{asset}: {amount}")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("Exiting...")

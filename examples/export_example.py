import asyncio
import json

import krakenspot
from krakenspot import Context, SecurityOptions


with open("account.json", "r") as fp:
    cfg = json.load(fp)

cfg.setdefault("nonce_generator", "unix_millis")
cfg["handle_errors"] = True


async def main():
    """Export last month's trades, then download the report."""

    async with krakenspot.Client(config=cfg) as client:
        security = SecurityOptions(cfg["otp"]) if cfg.get("otp") else None

        report = await client.request_export_report(
            "trades", "last month", format="CSV", security=security
        )
        report_id = report.result.id

        # Reports are processed asynchronously
        while True:
            status = await client.get_export_report_status("trades", security=security)
            processed = [r for r in status.result if r.id == report_id and r.status == "Processed"]

            if processed:
                break

            await asyncio.sleep(5)

        ctx = Context(timeout=120)

        async with await client.retrieve_data_export(report_id, security=security, ctx=ctx) as export:
            path = await export.save(f"{report_id}.zip")

        print(f"Saved report to {path}")

        await client.delete_export_report(report_id, security=security)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("Exiting...")

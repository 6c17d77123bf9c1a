from __future__ import annotations

import logging

from .bootstrap import AdminAppBootstrap


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def run() -> int:
    configure_logging()
    bootstrap = AdminAppBootstrap()
    table = bootstrap.product_table()
    if not table.load():
        print(f"Boutique admin could not load products: {table.error_message}")
        return 1
    print(f"Boutique admin ready: {len(table.products)} products loaded.")
    return 0


if __name__ == "__main__":
    raise SystemExit(run())

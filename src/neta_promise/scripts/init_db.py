# src/neta_promise/scripts/init_db.py
"""Create (or recreate) the schema directly from the ORM metadata.

Handy for local SQLite databases; production deployments use ``migrate``.
"""

from __future__ import annotations

import argparse
import logging

from neta_promise.core.settings import settings
from neta_promise.db.session import create_tables, drop_tables

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--drop",
        action="store_true",
        help="drop every table before creating the schema",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper())
    if args.drop:
        logger.warning("Dropping all tables")
        drop_tables()
    create_tables()
    logger.info("Database initialized.")


if __name__ == "__main__":
    main()

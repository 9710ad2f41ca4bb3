#!/usr/bin/env python3
"""
Seed the QuickWash service catalogue.

The API never writes to the ``services`` table, so the catalogue is
loaded with this script.  It applies pending migrations, then inserts
the default services (Laundry, Ironing, Shoe Clean, Dry Clean) or the
entries of a JSON file.  Services whose name already exists are left
untouched, so the script can be re‑run safely.

Usage:
    python seed_services.py
    python seed_services.py --db ./quickwash.db --file services.json

The JSON file must hold a list of objects with ``name`` and ``price``
and optional ``description`` and ``icon``.
"""

import argparse
import json
import logging
import os
import sys

from quickwash_api.app.core.config import settings
from quickwash_api.app.core.db import get_database_path, init_db
from quickwash_api.app.core.logging_config import setup_logging
from quickwash_api.app.services.catalog_service import CatalogService


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Seed the QuickWash service catalogue.")
    ap.add_argument("--db", help="Path to the SQLite DB file (defaults to DATABASE_URL)")
    ap.add_argument("--file", help="JSON file with the services to insert")
    args = ap.parse_args(argv)

    setup_logging(settings)
    if args.db:
        settings.database_url = os.path.abspath(args.db)

    services = None
    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                services = json.load(f)
        except (OSError, ValueError) as e:
            print(f"[!] Cannot read {args.file}: {e}", file=sys.stderr)
            return 1
        if not isinstance(services, list):
            print(f"[!] {args.file} must contain a JSON list", file=sys.stderr)
            return 1

    init_db()
    inserted = CatalogService.seed_default_services(services)
    logging.getLogger(__name__).info("Catalogue at %s", get_database_path())
    print(f"[+] Inserted {inserted} service(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())

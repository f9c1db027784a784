#!/usr/bin/env python

"""
Time Manager - Main Entry Point

Loads the dashboard state from the configured store and prints the
dashboard summary (logged time, tasks, balance, monthly totals, categories).

Usage:
    python main.py [output_file]

Requirements:
    - Python 3.10+
    - See pyproject.toml for dependencies
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from timemanager.i18n import set_language
from timemanager.infra.config import get_settings
from timemanager.infra.db import open_store
from timemanager.infra.repository import StateRepository
from timemanager.services import DashboardStore, ReportService


def main():
    """Main entry point"""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    settings = get_settings()
    prefs = settings.preferences
    set_language(prefs.language)

    store = DashboardStore(StateRepository(open_store(settings.get_db_url())), preferences=prefs)
    report = ReportService(currency=prefs.currency)

    output_file = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print(report.render_summary(store, output_file=output_file))
    return 0


if __name__ == "__main__":
    sys.exit(main())

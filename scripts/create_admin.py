from __future__ import annotations

import argparse
import getpass
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.employee_records.employee_records.database.bootstrap import ensure_admin_user


def main() -> None:
    parser = argparse.ArgumentParser(description="Create or reset an admin account.")
    parser.add_argument("user_id")
    parser.add_argument("--full-name", default="Administrator")
    args = parser.parse_args()

    password = getpass.getpass("Admin password: ")
    if not password:
        sys.exit("Password must not be empty")

    settings = importlib.import_module(get_settings_module())
    ensure_admin_user(dict(settings.DB_CONFIG), user_id=args.user_id.strip(), password=password, full_name=args.full_name)
    print(f"OK: admin account '{args.user_id.strip()}' is ready")


if __name__ == "__main__":
    main()

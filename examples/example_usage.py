"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the use cases live in the services.
"""

import importlib
import sys

from config import get_settings_module

from src.employee_records.employee_records.container import build_container


def main():
    user_id = sys.argv[1] if len(sys.argv) > 1 else "E1"
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    record = container.employee_service.get(user_id)
    for key in ("totalAge", "currentExperience", "totalPreviousExperience", "totalExperience"):
        print(f"{key}: {record[key]}")


if __name__ == "__main__":
    main()

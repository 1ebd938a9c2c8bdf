"""Example: drive the service layer directly (no Flask).

Controllers stay thin; the business rules live in the services.
"""

import importlib
from datetime import date, timedelta

from config import get_settings_module

from src.hrms_system.hrms_system.common.serialization import to_json
from src.hrms_system.hrms_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_backend=settings.STORAGE_BACKEND, db_config=settings.DB_CONFIG)

    acme = container.company_service.create_company({"name": "Acme"})
    lic = container.license_service.create_license(
        acme.company_id,
        {"name": "L1", "expiry_date": date.today() + timedelta(days=10)},
    )
    ali = container.employee_service.create_employee(acme.company_id, {"full_name": "Ali", "license_id": lic.license_id})
    leave = container.leave_service.create_leave(
        {"employee_id": ali.employee_id, "start_date": "2024-07-01", "end_date": "2024-07-03"}
    )
    container.leave_service.approve_leave(leave.leave_id, "manager-1")

    print(to_json(container.company_service.get_company_stats(acme.company_id)))


if __name__ == "__main__":
    main()

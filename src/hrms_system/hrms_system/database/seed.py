from __future__ import annotations

from datetime import timedelta

import structlog

from ..container import Container

log = structlog.get_logger(__name__)

DEMO_COMPANIES = [
    {
        "name": "شركة التقنية المتقدمة",
        "description": "رائدة في حلول تقنية المعلومات والبرمجيات",
        "address": "الرياض، المملكة العربية السعودية",
        "phone": "+966123456789",
        "email": "info@techadvanced.sa",
        "website": "www.techadvanced.sa",
        "industry": "تقنية المعلومات",
        "status": "active",
        "established_date": "2015-01-01",
        "tax_number": "300123456789003",
        "commercial_registration_number": "1010123456",
    },
    {
        "name": "الشركة التجارية الكبرى",
        "description": "متخصصة في التجارة والاستيراد والتصدير",
        "address": "جدة، المملكة العربية السعودية",
        "phone": "+966987654321",
        "email": "info@trading.sa",
        "website": "www.trading.sa",
        "industry": "التجارة",
        "status": "active",
        "established_date": "2010-05-15",
        "tax_number": "300987654321003",
        "commercial_registration_number": "4030987654",
    },
]


def seed_demo_data(container: Container) -> bool:
    """Load the demo tenants through the services. Skipped when companies exist."""

    if container.company_service.get_all_companies():
        log.info("seed_skipped", reason="companies already present")
        return False

    companies = [container.company_service.create_company(data) for data in DEMO_COMPANIES]

    first = companies[0]
    today = first.created_at
    license = container.license_service.create_license(
        first.company_id,
        {
            "name": "الترخيص الرئيسي",
            "license_number": "L-1010123456",
            "license_type": "main",
            "issuing_authority": "وزارة التجارة",
            "issue_date": (today - timedelta(days=335)).date(),
            "expiry_date": (today + timedelta(days=30)).date(),
        },
    )
    container.employee_service.create_employee(
        first.company_id,
        {
            "full_name": "أحمد محمد",
            "job_title": "مهندس برمجيات",
            "employee_type": "citizen",
            "nationality": "سعودي",
            "monthly_salary": "12000.00",
            "license_id": license.license_id,
        },
    )

    log.info("seed_done", companies=len(companies))
    return True

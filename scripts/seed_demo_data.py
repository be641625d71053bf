#!/usr/bin/env python3
"""Seed demo data for local development and screenshots.

Creates a demo account with a few notifications plus sample rows in every
record module. Re-running clears the demo account and the sample rows first.

Usage:
    # From project root, with DATABASE_URL and JWT_SECRET set (or in .env):
    python scripts/seed_demo_data.py
"""

import os
import sys
from datetime import UTC, datetime, timedelta

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from smart_erp.database import SessionLocal, init_db
from smart_erp.models import (
    Complaint,
    Evaluation,
    Incident,
    InventoryItem,
    JobApplication,
    Lead,
    Notification,
    Order,
    ProcurementRequest,
    TrainingSession,
    User,
    Vendor,
)
from smart_erp.models.enums import NotificationType, Role
from smart_erp.services.auth import get_password_hash

DEMO_EMAIL = "demo@smart-erp.local"
DEMO_PASSWORD = "Demo123!@"

SAMPLE_SKUS = ["DSK-100", "CHR-220", "MON-270", "KBD-010"]


def seed_demo_data():
    """Seed the database with a demo account and representative records."""
    init_db()
    session = SessionLocal()

    try:
        existing_user = session.query(User).filter_by(email=DEMO_EMAIL).first()
        if existing_user:
            print("Demo data already exists. Clearing and re-seeding...")
            session.query(Notification).filter_by(user_id=existing_user.id).delete()
            session.delete(existing_user)
            session.query(InventoryItem).filter(InventoryItem.sku.in_(SAMPLE_SKUS)).delete(
                synchronize_session=False
            )
            session.commit()

        print("Creating demo user...")
        user = User(
            email=DEMO_EMAIL,
            password_hash=get_password_hash(DEMO_PASSWORD),
            name="Demo Admin",
            role=Role.ADMIN.value,
            last_login=datetime.now(UTC) - timedelta(days=1),
        )
        session.add(user)
        session.flush()

        session.add_all(
            [
                Notification(
                    user_id=user.id,
                    type=NotificationType.SUCCESS.value,
                    title="Welcome to Smart ERP",
                    message="Your notification system is now fully live and connected to the backend!",
                    read=False,
                ),
                Notification(
                    user_id=user.id,
                    type=NotificationType.WARNING.value,
                    title="Low Stock",
                    message="Ergonomic Chair is below its reorder point.",
                    read=False,
                ),
                Notification(
                    user_id=user.id,
                    type=NotificationType.INFO.value,
                    title="New Inventory Added",
                    message="Standing Desk has been added to inventory.",
                    read=True,
                ),
            ]
        )

        # =================================================================
        # Supply chain
        # =================================================================
        session.add_all(
            [
                InventoryItem(
                    item_name="Standing Desk",
                    sku="DSK-100",
                    current_stock=42,
                    reorder_point=10,
                    unit_price=349.0,
                    supplier="Northwind Furniture",
                ),
                InventoryItem(
                    item_name="Ergonomic Chair",
                    sku="CHR-220",
                    current_stock=6,
                    reorder_point=15,
                    unit_price=189.5,
                    supplier="Northwind Furniture",
                ),
                InventoryItem(
                    item_name='27" Monitor',
                    sku="MON-270",
                    current_stock=25,
                    reorder_point=8,
                    unit_price=229.99,
                    supplier="Contoso Displays",
                ),
                InventoryItem(
                    item_name="Mechanical Keyboard",
                    sku="KBD-010",
                    current_stock=0,
                    reorder_point=12,
                    unit_price=79.0,
                    supplier="Fabrikam Peripherals",
                ),
            ]
        )
        session.add_all(
            [
                Order(
                    customer_name="Acme Corp",
                    email="purchasing@acme.example",
                    items=[
                        {"item_name": "Standing Desk", "quantity": 4, "price": 349.0},
                        {"item_name": "Ergonomic Chair", "quantity": 4, "price": 189.5},
                    ],
                    total_amount=2154.0,
                    status="Approved",
                    shipping_address="12 Industrial Way, Springfield",
                ),
                Order(
                    customer_name="Globex",
                    email="ops@globex.example",
                    items=[{"item_name": '27" Monitor', "quantity": 10, "price": 229.99}],
                    total_amount=2299.9,
                    status="Pending",
                    shipping_address="1 Globex Plaza, Cypress Creek",
                ),
            ]
        )
        session.add_all(
            [
                ProcurementRequest(
                    item_name="Mechanical Keyboard",
                    department="Engineering",
                    quantity=20,
                    budget=1600.0,
                    status="Requested",
                ),
                ProcurementRequest(
                    item_name="Printer Toner",
                    department="Finance",
                    quantity=6,
                    budget=420.0,
                    status="Ordered",
                ),
            ]
        )
        session.add_all(
            [
                Vendor(
                    vendor_name="Northwind Furniture",
                    service_type="Office Furniture",
                    contact_email="sales@northwind.example",
                    rating=4,
                    status="Approved",
                ),
                Vendor(
                    vendor_name="Fabrikam Peripherals",
                    service_type="IT Hardware",
                    contact_email="hello@fabrikam.example",
                    rating=None,
                    status="Evaluated",
                ),
            ]
        )

        # =================================================================
        # People
        # =================================================================
        session.add_all(
            [
                JobApplication(
                    candidate_name="Priya Raman",
                    position="Backend Engineer",
                    email="priya.raman@mail.example",
                    status="Interview",
                    resume_link="https://files.example/resumes/priya-raman.pdf",
                ),
                JobApplication(
                    candidate_name="Tomás Ortega",
                    position="Warehouse Lead",
                    email="tomas.ortega@mail.example",
                    status="Applied",
                    resume_link="https://files.example/resumes/tomas-ortega.pdf",
                ),
            ]
        )
        session.add_all(
            [
                TrainingSession(
                    employee_name="Jordan Lee",
                    training_topic="Forklift Safety",
                    completion_date=datetime.now(UTC) - timedelta(days=14),
                    status="Completed",
                ),
                TrainingSession(
                    employee_name="Sam Patel",
                    training_topic="GDPR Basics",
                    completion_date=None,
                    status="Scheduled",
                ),
            ]
        )
        session.add(
            Evaluation(
                employee_name="Jordan Lee",
                review_period="2025-H2",
                score=4.5,
                comments="Consistently exceeds throughput targets.",
            )
        )

        # =================================================================
        # Customers and support
        # =================================================================
        session.add_all(
            [
                Complaint(
                    customer_name="Acme Corp",
                    issue_type="Damaged Goods",
                    description="Two chairs arrived with broken casters.",
                    priority="High",
                    status="Open",
                ),
                Incident(
                    requester_name="Sam Patel",
                    issue_description="VPN drops every 10 minutes.",
                    priority="Low",
                    status="Resolved",
                ),
                Lead(
                    customer_name="Initech",
                    phone="+1-555-0134",
                    interest_level="Hot",
                    status="Contacted",
                ),
                Lead(
                    customer_name="Umbrella Ltd",
                    phone="+1-555-0188",
                    interest_level="Cold",
                    status="New",
                ),
            ]
        )

        session.commit()
        print("Demo data seeded successfully!")
        print(f"Sign in with {DEMO_EMAIL} / {DEMO_PASSWORD}")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()

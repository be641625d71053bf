"""Record collection routers for the ERP modules."""

from sqlalchemy.orm import Session

from smart_erp.api.crud import build_crud_router
from smart_erp.models import (
    Complaint,
    Evaluation,
    Incident,
    InventoryItem,
    JobApplication,
    Lead,
    Order,
    ProcurementRequest,
    TrainingSession,
    Vendor,
)
from smart_erp.models.enums import NotificationType
from smart_erp.models.user import User
from smart_erp.schemas.complaint import ComplaintCreate, ComplaintResponse, ComplaintUpdate
from smart_erp.schemas.evaluation import EvaluationCreate, EvaluationResponse, EvaluationUpdate
from smart_erp.schemas.incident import IncidentCreate, IncidentResponse, IncidentUpdate
from smart_erp.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
)
from smart_erp.schemas.job_application import (
    JobApplicationCreate,
    JobApplicationResponse,
    JobApplicationUpdate,
)
from smart_erp.schemas.lead import LeadCreate, LeadResponse, LeadUpdate
from smart_erp.schemas.order import OrderCreate, OrderResponse, OrderUpdate
from smart_erp.schemas.procurement import (
    ProcurementRequestCreate,
    ProcurementRequestResponse,
    ProcurementRequestUpdate,
)
from smart_erp.schemas.training import (
    TrainingSessionCreate,
    TrainingSessionResponse,
    TrainingSessionUpdate,
)
from smart_erp.schemas.vendor import VendorCreate, VendorResponse, VendorUpdate
from smart_erp.services.notification_service import NotificationService


def notify_inventory_added(db: Session, item: InventoryItem, current_user: User) -> None:
    """Tell the creator their item is in stock."""
    NotificationService(db).create(
        current_user.id,
        "New Inventory Added",
        f"{item.item_name} has been added to inventory.",
        NotificationType.INFO,
    )


inventory = build_crud_router(
    prefix="/api/inventory",
    tag="inventory",
    model=InventoryItem,
    create_schema=InventoryItemCreate,
    update_schema=InventoryItemUpdate,
    response_schema=InventoryItemResponse,
    label="Inventory item",
    after_create=notify_inventory_added,
)

orders = build_crud_router(
    prefix="/api/orders",
    tag="orders",
    model=Order,
    create_schema=OrderCreate,
    update_schema=OrderUpdate,
    response_schema=OrderResponse,
    label="Order",
)

jobs = build_crud_router(
    prefix="/api/jobs",
    tag="recruitment",
    model=JobApplication,
    create_schema=JobApplicationCreate,
    update_schema=JobApplicationUpdate,
    response_schema=JobApplicationResponse,
    label="Job application",
)

complaints = build_crud_router(
    prefix="/api/complaints",
    tag="complaints",
    model=Complaint,
    create_schema=ComplaintCreate,
    update_schema=ComplaintUpdate,
    response_schema=ComplaintResponse,
    label="Complaint",
)

procurement = build_crud_router(
    prefix="/api/procurement",
    tag="procurement",
    model=ProcurementRequest,
    create_schema=ProcurementRequestCreate,
    update_schema=ProcurementRequestUpdate,
    response_schema=ProcurementRequestResponse,
    label="Procurement request",
)

incidents = build_crud_router(
    prefix="/api/incidents",
    tag="it-support",
    model=Incident,
    create_schema=IncidentCreate,
    update_schema=IncidentUpdate,
    response_schema=IncidentResponse,
    label="Incident",
)

vendors = build_crud_router(
    prefix="/api/vendors",
    tag="vendors",
    model=Vendor,
    create_schema=VendorCreate,
    update_schema=VendorUpdate,
    response_schema=VendorResponse,
    label="Vendor",
)

training = build_crud_router(
    prefix="/api/training",
    tag="training",
    model=TrainingSession,
    create_schema=TrainingSessionCreate,
    update_schema=TrainingSessionUpdate,
    response_schema=TrainingSessionResponse,
    label="Training session",
)

evaluations = build_crud_router(
    prefix="/api/evaluations",
    tag="evaluations",
    model=Evaluation,
    create_schema=EvaluationCreate,
    update_schema=EvaluationUpdate,
    response_schema=EvaluationResponse,
    label="Evaluation",
)

leads = build_crud_router(
    prefix="/api/crm",
    tag="crm",
    model=Lead,
    create_schema=LeadCreate,
    update_schema=LeadUpdate,
    response_schema=LeadResponse,
    label="Lead",
)

routers = [
    inventory,
    orders,
    jobs,
    complaints,
    procurement,
    incidents,
    vendors,
    training,
    evaluations,
    leads,
]

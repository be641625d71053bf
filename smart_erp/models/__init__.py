"""SQLAlchemy models."""

from smart_erp.models.complaint import Complaint
from smart_erp.models.evaluation import Evaluation
from smart_erp.models.incident import Incident
from smart_erp.models.inventory import InventoryItem
from smart_erp.models.job_application import JobApplication
from smart_erp.models.lead import Lead
from smart_erp.models.notification import Notification
from smart_erp.models.order import Order
from smart_erp.models.procurement import ProcurementRequest
from smart_erp.models.training import TrainingSession
from smart_erp.models.used_reset_token import UsedResetToken
from smart_erp.models.user import User
from smart_erp.models.vendor import Vendor

__all__ = [
    "User",
    "Notification",
    "UsedResetToken",
    "InventoryItem",
    "Order",
    "JobApplication",
    "Complaint",
    "ProcurementRequest",
    "Incident",
    "Vendor",
    "TrainingSession",
    "Evaluation",
    "Lead",
]

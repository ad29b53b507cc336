"""
Database models module.
All SQLAlchemy models are exported from here for easy imports.
"""

from app.models.user import User
from app.models.profile import Profile
from app.models.client import Client, ClientStatus, BillingFrequency
from app.models.invoice import Invoice, InvoiceItem, InvoiceStatus
from app.models.payment import Payment, PaymentMethod
from app.models.settings import UserSettings


__all__ = [
    "User",
    "Profile",
    "Client",
    "ClientStatus",
    "BillingFrequency",
    "Invoice",
    "InvoiceItem",
    "InvoiceStatus",
    "Payment",
    "PaymentMethod",
    "UserSettings",
]

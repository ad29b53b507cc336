"""
UserSettings model: invoicing defaults and notification preferences.
One row per user, created with DEFAULT_SETTINGS on first read.
"""

import uuid
from copy import deepcopy
from decimal import Decimal
from typing import Any, Optional
from sqlalchemy import JSON, String, Text, ForeignKey, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


DEFAULT_EMAIL_NOTIFICATIONS = {
    "paymentReceived": True,
    "invoiceOverdue": True,
    "paymentReminder": True,
    "newClient": True,
    "weeklyReport": True,
    "monthlyReport": True,
}

DEFAULT_PUSH_NOTIFICATIONS = {
    "paymentReceived": True,
    "invoiceOverdue": True,
    "systemUpdates": True,
}

DEFAULT_REMINDER_SETTINGS = {
    "daysBeforeDue": "7",
    "overdueFrequency": "daily",
}

DEFAULT_SECURITY_SETTINGS = {
    "twoFactorEnabled": False,
    "passwordLastChanged": None,
    "loginNotifications": True,
}

DEFAULT_SUBSCRIPTION_PLAN = {
    "name": "Free",
    "price": "0",
    "billingCycle": "monthly",
    "features": ["Up to 50 invoices", "Basic templates", "Email support"],
    "current": True,
    "status": "active",
    "nextBillingDate": None,
}

DEFAULT_USAGE_STATS = {
    "invoicesSent": 0,
    "invoicesLimit": 50,
    "clientsAdded": 0,
    "clientsLimit": 100,
    "storageUsed": 0,
    "storageLimit": 100,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "company_logo_url": None,
    "default_template": "professional",
    "default_payment_terms": "net30",
    "default_tax_rate": Decimal("0.00"),
    "tax_label": "Tax",
    "invoice_prefix": "INV-",
    "invoice_footer": None,
    "email_notifications": DEFAULT_EMAIL_NOTIFICATIONS,
    "push_notifications": DEFAULT_PUSH_NOTIFICATIONS,
    "reminder_settings": DEFAULT_REMINDER_SETTINGS,
    "security_settings": DEFAULT_SECURITY_SETTINGS,
    "subscription_plan": DEFAULT_SUBSCRIPTION_PLAN,
    "usage_stats": DEFAULT_USAGE_STATS,
}


def default_settings() -> dict[str, Any]:
    """Fresh copy of the defaults, safe to mutate."""
    return deepcopy(DEFAULT_SETTINGS)


class UserSettings(BaseModel):
    """Per-user invoicing defaults and notification preferences."""

    __tablename__ = "user_settings"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )

    # Business defaults
    company_logo_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    default_template: Mapped[str] = mapped_column(String(50), nullable=False)
    default_payment_terms: Mapped[str] = mapped_column(String(50), nullable=False)
    default_tax_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=2),
        nullable=False,
    )
    tax_label: Mapped[str] = mapped_column(String(50), nullable=False)
    invoice_prefix: Mapped[str] = mapped_column(String(20), nullable=False)
    invoice_footer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Notification preferences
    email_notifications: Mapped[dict] = mapped_column(JSON, nullable=False)
    push_notifications: Mapped[dict] = mapped_column(JSON, nullable=False)
    reminder_settings: Mapped[dict] = mapped_column(JSON, nullable=False)

    # Account panels, read-only through this API
    security_settings: Mapped[dict] = mapped_column(JSON, nullable=False)
    subscription_plan: Mapped[dict] = mapped_column(JSON, nullable=False)
    usage_stats: Mapped[dict] = mapped_column(JSON, nullable=False)

    def __repr__(self) -> str:
        return f"<UserSettings(user_id={self.user_id}, prefix='{self.invoice_prefix}')>"

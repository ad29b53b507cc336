"""
Settings and profile schemas.

PUT bodies on the settings endpoints are full replacements of their subset:
every required field must be sent.
"""

from datetime import datetime
from typing import Any
from uuid import UUID
from pydantic import Field

from app.schemas.base import BaseSchema, HttpUrlStr, Money


class EmailNotifications(BaseSchema):
    paymentReceived: bool
    invoiceOverdue: bool
    paymentReminder: bool
    newClient: bool
    weeklyReport: bool
    monthlyReport: bool


class PushNotifications(BaseSchema):
    paymentReceived: bool
    invoiceOverdue: bool
    systemUpdates: bool


class ReminderSettings(BaseSchema):
    daysBeforeDue: str = Field(..., min_length=1)
    overdueFrequency: str = Field(..., min_length=1)


class BusinessSettingsUpdate(BaseSchema):
    """Invoicing defaults."""

    company_logo_url: HttpUrlStr | None = None
    default_template: str = Field(..., min_length=1)
    default_payment_terms: str = Field(..., min_length=1)
    default_tax_rate: Money = Field(..., ge=0, le=100)
    tax_label: str = Field(..., min_length=1)
    invoice_prefix: str = Field(..., min_length=1)
    invoice_footer: str | None = None


class NotificationSettingsUpdate(BaseSchema):
    """Notification preferences."""

    email_notifications: EmailNotifications
    push_notifications: PushNotifications
    reminder_settings: ReminderSettings


class SettingsUpdate(BusinessSettingsUpdate, NotificationSettingsUpdate):
    """Full settings update: business defaults plus notifications."""
    pass


class BusinessSettingsResponse(BaseSchema):
    company_logo_url: str | None
    default_template: str
    default_payment_terms: str
    default_tax_rate: Money
    tax_label: str
    invoice_prefix: str
    invoice_footer: str | None


class NotificationSettingsResponse(BaseSchema):
    email_notifications: dict[str, Any]
    push_notifications: dict[str, Any]
    reminder_settings: dict[str, Any]


class SettingsResponse(BusinessSettingsResponse, NotificationSettingsResponse):
    """Full settings row, account panels included."""

    id: UUID
    user_id: UUID
    security_settings: dict[str, Any]
    subscription_plan: dict[str, Any]
    usage_stats: dict[str, Any]
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(BaseSchema):
    """Profile update; omitted fields are left unchanged."""

    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=50)
    business_name: str | None = Field(None, max_length=255)
    business_address: str | None = None
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    country: str | None = Field(None, max_length=100)


class ProfileResponse(BaseSchema):
    id: UUID
    first_name: str | None
    last_name: str | None
    phone: str | None
    business_name: str | None
    business_address: str | None
    city: str | None
    state: str | None
    zip_code: str | None
    country: str | None
    created_at: datetime
    updated_at: datetime

"""
Pydantic schemas for request/response validation.
"""

from app.schemas.base import (
    MessageResponse,
    PaginationMeta,
    PaginationParams,
)
from app.schemas.user import UserResponse
from app.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientListResponse,
    ClientBulkDelete,
)
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
    InvoiceListResponse,
    InvoiceBulkAction,
    InvoiceBulkActionResponse,
    InvoiceItemCreate,
    InvoiceItemUpdate,
    InvoiceItemResponse,
)
from app.schemas.payment import (
    PaymentCreate,
    PaymentUpdate,
    PaymentResponse,
    PaymentListResponse,
)
from app.schemas.settings import (
    SettingsUpdate,
    SettingsResponse,
    BusinessSettingsUpdate,
    BusinessSettingsResponse,
    NotificationSettingsUpdate,
    NotificationSettingsResponse,
    ProfileUpdate,
    ProfileResponse,
)
from app.schemas.auth import (
    TokenPair,
    LoginRequest,
    RegisterRequest,
    RefreshTokenRequest,
)

__all__ = [
    # Common
    "MessageResponse",
    "PaginationMeta",
    "PaginationParams",
    # User
    "UserResponse",
    # Client
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "ClientListResponse",
    "ClientBulkDelete",
    # Invoice
    "InvoiceCreate",
    "InvoiceUpdate",
    "InvoiceResponse",
    "InvoiceListResponse",
    "InvoiceBulkAction",
    "InvoiceBulkActionResponse",
    "InvoiceItemCreate",
    "InvoiceItemUpdate",
    "InvoiceItemResponse",
    # Payment
    "PaymentCreate",
    "PaymentUpdate",
    "PaymentResponse",
    "PaymentListResponse",
    # Settings
    "SettingsUpdate",
    "SettingsResponse",
    "BusinessSettingsUpdate",
    "BusinessSettingsResponse",
    "NotificationSettingsUpdate",
    "NotificationSettingsResponse",
    "ProfileUpdate",
    "ProfileResponse",
    # Auth
    "TokenPair",
    "LoginRequest",
    "RegisterRequest",
    "RefreshTokenRequest",
]

# schemas/__init__.py
from .unit import UnitCreate, UnitUpdate, UnitResponse, UnitSummary, UnitStatusEnum
from .tenant import TenantCreate, TenantResponse, TenantSummary, TenantStatusEnum
from .payment import PaymentCreate, PaymentResponse, PaymentSummary, PaymentStatusEnum
from .reminder import ReminderRequest, ReminderPreview, ReminderResponse
from .report import ReportResponse, DashboardResponse
from .settings import SettingsUpdate, SettingsResponse
from .auth import SignUpRequest, SignInRequest, ChangePasswordRequest, UserResponse, SessionResponse

__all__ = [
     "UnitCreate",
     "UnitUpdate",
     "UnitResponse",
     "UnitSummary",
     "UnitStatusEnum",
     "TenantCreate",
     "TenantResponse",
     "TenantSummary",
     "TenantStatusEnum",
     "PaymentCreate",
     "PaymentResponse",
     "PaymentSummary",
     "PaymentStatusEnum",
     "ReminderRequest",
     "ReminderPreview",
     "ReminderResponse",
     "ReportResponse",
     "DashboardResponse",
     "SettingsUpdate",
     "SettingsResponse",
     "SignUpRequest",
     "SignInRequest",
     "ChangePasswordRequest",
     "UserResponse",
     "SessionResponse",
]

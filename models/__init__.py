# models/__init__.py
from .base import Base
from .user import User
from .unit import Unit
from .tenant import Tenant
from .payment import Payment
from .reminder import Reminder
from .user_settings import UserSettings

__all__ = [
     "Base",
     "User",
     "Unit",
     "Tenant",
     "Payment",
     "Reminder",
     "UserSettings",
]

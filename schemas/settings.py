# schemas/settings.py
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ContactMethodEnum(str, Enum):
     EMAIL = "email"
     SMS = "sms"
     BOTH = "both"


class Preferences(BaseModel):
     preferred_method: ContactMethodEnum = ContactMethodEnum.BOTH
     email_notifications: bool = True
     sms_notifications: bool = True
     payment_reminders: bool = True
     maintenance_alerts: bool = True


class PreferencesUpdate(BaseModel):
     model_config = ConfigDict(use_enum_values=True)

     preferred_method: Optional[ContactMethodEnum] = None
     email_notifications: Optional[bool] = None
     sms_notifications: Optional[bool] = None
     payment_reminders: Optional[bool] = None
     maintenance_alerts: Optional[bool] = None


class SettingsUpdate(BaseModel):
     """Any section left out is kept as stored."""
     preferences: Optional[PreferencesUpdate] = None
     payment_instructions: Optional[str] = None
     default_due_day: Optional[int] = Field(None, ge=1, le=28, description="Day of month rent is due")


class SettingsResponse(BaseModel):
     user_id: int
     preferences: Preferences
     payment_instructions: str
     default_due_day: int
     updated_at: Optional[datetime] = None

# schemas/reminder.py
import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipientGroupEnum(str, Enum):
     ALL = "all"
     OVERDUE = "overdue"
     SPECIFIC = "specific"


class ReminderTypeEnum(str, Enum):
     UPCOMING = "upcoming"
     DUE_TODAY = "due-today"
     OVERDUE = "overdue"


class ReminderRequest(BaseModel):
     recipients: RecipientGroupEnum = RecipientGroupEnum.ALL.value
     reminder_type: ReminderTypeEnum = ReminderTypeEnum.DUE_TODAY.value
     message: str = Field(..., min_length=1)
     include_payment_link: bool = True
     tenant_ids: List[int] = Field(default_factory=list, description="Used with recipients=specific")

     model_config = ConfigDict(
          use_enum_values=True,
          json_schema_extra={
               "example": {
                    "recipients": "overdue",
                    "reminder_type": "overdue",
                    "message": "Dear Tenant,\n\nYour rent payment is overdue. Please pay as soon as possible.",
                    "include_payment_link": True,
               }
          }
     )


class ReminderPreview(BaseModel):
     subject: str
     body: str
     recipients: str
     recipient_emails: List[str]


class ReminderResponse(BaseModel):
     id: int
     date: dt.date
     recipients: str
     type: str
     status: str
     opened: int
     message: Optional[str] = None
     created_at: Optional[dt.datetime] = None

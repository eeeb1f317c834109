# routers/reminders.py
"""
Reminder API routes: history, preview and send.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from dependencies import get_record_store, verify_token
from models import User
from schemas.reminder import ReminderPreview, ReminderRequest, ReminderResponse
from services import reminder_service
from services.record_store import RecordStore

router = APIRouter(prefix="/api/reminders", tags=["reminders"])


@router.get("", response_model=List[ReminderResponse], summary="Reminder history, newest first")
def list_reminders(
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     return store.list("reminders", order_by="created_at", descending=True)


@router.post("/preview", response_model=ReminderPreview, summary="Render a reminder without sending it")
def preview_reminder(
     body: ReminderRequest,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     return reminder_service.preview_reminder(
          store,
          user.id,
          body.recipients,
          body.reminder_type,
          body.message,
          include_payment_link=body.include_payment_link,
          tenant_ids=body.tenant_ids,
     )


@router.post(
     "/send",
     response_model=ReminderResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Email a reminder and log it",
)
def send_reminder(
     body: ReminderRequest,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     """
     - **recipients**: all, overdue, or specific (with tenant_ids)
     - **reminder_type**: upcoming, due-today or overdue
     - **include_payment_link**: append the payment instructions from settings
     """
     return reminder_service.send_reminder(
          store,
          user.id,
          body.recipients,
          body.reminder_type,
          body.message,
          include_payment_link=body.include_payment_link,
          tenant_ids=body.tenant_ids,
     )

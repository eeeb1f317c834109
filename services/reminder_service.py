# services/reminder_service.py
"""
Reminder Service - rent reminders to tenants.

A reminder is addressed to a recipient group (all tenants, tenants with an
overdue payment, or hand-picked tenants), rendered from the manager's
message plus an optional payment-instructions block, delivered by email,
and logged once in the reminders table.
"""
import logging
from datetime import date
from typing import List, Optional, Sequence

from services.exceptions import ValidationFailed
from services.record_store import RecordStore
from services.settings_service import get_settings
from utils.email import EmailDeliveryError, send_reminder_email

logger = logging.getLogger(__name__)

RECIPIENT_LABELS = {
     "all": "All Tenants",
     "overdue": "Overdue Tenants",
     "specific": "Specific Tenants",
}

REMINDER_TYPES = {
     "upcoming": ("Upcoming Payment", "Upcoming rent payment"),
     "due-today": ("Due Today", "Your rent is due today"),
     "overdue": ("Overdue Payment", "Your rent payment is overdue"),
}


def resolve_recipients(
     store: RecordStore,
     recipients: str,
     tenant_ids: Optional[Sequence[int]] = None,
) -> List[dict]:
     """Tenants addressed by a recipient group. Tenants without an email are skipped."""
     if recipients not in RECIPIENT_LABELS:
          raise ValidationFailed(f"Unknown recipient group '{recipients}'")

     tenants = store.list("tenants", order_by="name")
     if recipients == "all":
          chosen = [t for t in tenants if t.get("status") != "Inactive"]
     elif recipients == "overdue":
          overdue_names = {p["tenant_name"] for p in store.list("payments", filters={"status": "Overdue"})}
          chosen = [t for t in tenants if t["name"] in overdue_names]
     else:
          if not tenant_ids:
               raise ValidationFailed("Select at least one tenant")
          wanted = set(tenant_ids)
          chosen = [t for t in tenants if t["id"] in wanted]

     return [t for t in chosen if t.get("email")]


def render_message(message: str, include_payment_link: bool, payment_instructions: str) -> str:
     body = message.strip()
     if include_payment_link and payment_instructions:
          body = f"{body}\n\nPayment details:\n{payment_instructions.strip()}"
     return body


def _compose(store: RecordStore, user_id: int, recipients: str, reminder_type: str,
             message: str, include_payment_link: bool, tenant_ids):
     if reminder_type not in REMINDER_TYPES:
          raise ValidationFailed(f"Unknown reminder type '{reminder_type}'")
     if not (message or "").strip():
          raise ValidationFailed("Message cannot be empty")

     tenants = resolve_recipients(store, recipients, tenant_ids)
     if not tenants:
          raise ValidationFailed("No tenants with an email address match the selected recipients")

     settings = get_settings(store, user_id)
     subject = REMINDER_TYPES[reminder_type][1]
     body = render_message(message, include_payment_link, settings["payment_instructions"])
     return tenants, subject, body


def preview_reminder(
     store: RecordStore,
     user_id: int,
     recipients: str,
     reminder_type: str,
     message: str,
     include_payment_link: bool = True,
     tenant_ids: Optional[Sequence[int]] = None,
) -> dict:
     """What send_reminder would deliver, without sending or logging anything."""
     tenants, subject, body = _compose(
          store, user_id, recipients, reminder_type, message, include_payment_link, tenant_ids
     )
     return {
          "subject": subject,
          "body": body,
          "recipients": f"{RECIPIENT_LABELS[recipients]} ({len(tenants)})",
          "recipient_emails": [t["email"] for t in tenants],
     }


def send_reminder(
     store: RecordStore,
     user_id: int,
     recipients: str,
     reminder_type: str,
     message: str,
     include_payment_link: bool = True,
     tenant_ids: Optional[Sequence[int]] = None,
) -> dict:
     """
     Email every resolved tenant and write one reminders log row.

     Delivery failures do not abort the send; they set the logged status to
     "Partially Sent" or "Failed".
     """
     tenants, subject, body = _compose(
          store, user_id, recipients, reminder_type, message, include_payment_link, tenant_ids
     )

     failures = 0
     for tenant in tenants:
          try:
               send_reminder_email(tenant["email"], tenant["name"], subject, body)
          except EmailDeliveryError as exc:
               failures += 1
               logger.warning("Reminder to %s failed: %s", tenant["email"], exc)

     if failures == 0:
          status = "Sent"
     elif failures < len(tenants):
          status = "Partially Sent"
     else:
          status = "Failed"

     return store.insert("reminders", {
          "date": date.today(),
          "recipients": f"{RECIPIENT_LABELS[recipients]} ({len(tenants)})",
          "type": REMINDER_TYPES[reminder_type][0],
          "status": status,
          "opened": 0,
          "message": body,
     })

# services/settings_service.py
"""
Per-user settings: notification preferences, payment instructions and the
default rent due day. One row per user, upserted on user_id.
"""
from typing import Optional

from services.record_store import RecordStore

DEFAULT_PREFERENCES = {
     "preferred_method": "both",
     "email_notifications": True,
     "sms_notifications": True,
     "payment_reminders": True,
     "maintenance_alerts": True,
}


def default_settings(user_id: int) -> dict:
     return {
          "user_id": user_id,
          "preferences": dict(DEFAULT_PREFERENCES),
          "payment_instructions": "",
          "default_due_day": 1,
     }


def get_settings(store: RecordStore, user_id: int) -> dict:
     """Stored settings merged over the defaults."""
     rows = store.list("settings", filters={"user_id": user_id}, limit=1)
     settings = default_settings(user_id)
     if rows:
          stored = rows[0]
          settings["preferences"].update(stored.get("preferences") or {})
          if stored.get("payment_instructions") is not None:
               settings["payment_instructions"] = stored["payment_instructions"]
          settings["default_due_day"] = stored.get("default_due_day") or 1
          settings["updated_at"] = stored.get("updated_at")
     return settings


def save_settings(
     store: RecordStore,
     user_id: int,
     preferences: Optional[dict] = None,
     payment_instructions: Optional[str] = None,
     default_due_day: Optional[int] = None,
) -> dict:
     """Apply the provided sections on top of the current settings and upsert."""
     current = get_settings(store, user_id)
     if preferences is not None:
          current["preferences"].update(preferences)
     if payment_instructions is not None:
          current["payment_instructions"] = payment_instructions
     if default_due_day is not None:
          current["default_due_day"] = default_due_day

     store.upsert(
          "settings",
          {
               "user_id": user_id,
               "preferences": current["preferences"],
               "payment_instructions": current["payment_instructions"],
               "default_due_day": current["default_due_day"],
          },
          conflict_key="user_id",
     )
     return get_settings(store, user_id)

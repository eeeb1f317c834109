# routers/settings.py
from fastapi import APIRouter, Depends

from dependencies import get_record_store, verify_token
from models import User
from schemas.settings import SettingsResponse, SettingsUpdate
from services import settings_service
from services.record_store import RecordStore

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=SettingsResponse, summary="Current user's settings")
def get_settings(
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     return settings_service.get_settings(store, user.id)


@router.put("", response_model=SettingsResponse, summary="Save the current user's settings")
def save_settings(
     body: SettingsUpdate,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     preferences = body.preferences.model_dump(exclude_none=True) if body.preferences else None
     return settings_service.save_settings(
          store,
          user.id,
          preferences=preferences,
          payment_instructions=body.payment_instructions,
          default_due_day=body.default_due_day,
     )

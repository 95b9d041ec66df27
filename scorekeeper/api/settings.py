"""
Settings endpoints
"""
import logging

from fastapi import APIRouter, HTTPException

from scorekeeper.api.common import require_store
from scorekeeper.models import Settings, SettingsUpdate


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=Settings)
async def get_settings():
    return require_store().get_settings()


@router.put("", response_model=Settings)
async def update_settings(payload: SettingsUpdate):
    """
    Update team count and/or score increment

    Request:
        {"teamCount": 4, "scoreIncrement": 10}

    Changing teamCount adds or removes teams so the scoreboard matches it.
    """
    try:
        settings = require_store().update_settings(payload)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    logger.info(
        f"⚙️ Settings updated: teamCount={settings.team_count}, "
        f"scoreIncrement={settings.score_increment}"
    )
    return settings

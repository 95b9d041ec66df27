"""
Scoreboard-wide actions: reset scores, shuffle names
"""
import logging
from typing import List, Optional

from fastapi import APIRouter

from scorekeeper.api.common import require_store
from scorekeeper.models import ResetRequest, Team


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["admin"])


@router.post("/reset-scores", response_model=List[Team])
async def reset_scores(payload: Optional[ResetRequest] = None):
    """
    Reset every team's score to zero

    Request (optional):
        {"shuffleNames": true}
    """
    shuffle = payload.shuffle_names if payload else False
    teams = require_store().reset_scores(shuffle_names=shuffle)
    logger.info(f"🔄 Scores reset for {len(teams)} teams (shuffle names: {shuffle})")
    return teams


@router.post("/shuffle-team-names", response_model=List[Team])
async def shuffle_team_names():
    """Give every team a new random name"""
    teams = require_store().shuffle_team_names()
    logger.info(f"🔀 Shuffled names for {len(teams)} teams")
    return teams

"""
Team endpoints: CRUD and score controls
"""
import logging
from typing import List

from fastapi import APIRouter, HTTPException, Response

from scorekeeper.api.common import require_store, team_id_or_400
from scorekeeper.models import Team, TeamCreate, TeamUpdate
from scorekeeper.services.team_store import DECREMENT, INCREMENT


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.get("", response_model=List[Team])
async def list_teams():
    """All teams, ordered by id"""
    return require_store().get_teams()


@router.get("/{team_id}", response_model=Team)
async def get_team(team_id: str):
    team = require_store().get_team(team_id_or_400(team_id))
    if team is None:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


@router.post("", response_model=Team, status_code=201)
async def create_team(payload: TeamCreate):
    """
    Create a team

    Request:
        {"name": "Mighty Falcons", "score": 0, "color": "#10B981"}

    Every field is optional; missing name and color are filled in by the
    server.
    """
    team = require_store().create_team(payload)
    logger.info(f"➕ Created team {team.id} ({team.name})")
    return team


@router.put("/{team_id}", response_model=Team)
async def update_team(team_id: str, payload: TeamUpdate):
    """
    Update a team's name, score or color

    Send {"name": null} to have the server pick a new random name.
    """
    team = require_store().update_team(team_id_or_400(team_id), payload)
    if team is None:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


@router.delete("/{team_id}", status_code=204)
async def delete_team(team_id: str):
    tid = team_id_or_400(team_id)
    require_store().delete_team(tid)
    logger.info(f"🗑️ Deleted team {tid}")
    return Response(status_code=204)


@router.post("/{team_id}/increment", response_model=Team)
async def increment_score(team_id: str):
    """Add the configured score increment to a team"""
    return _adjust(team_id, INCREMENT)


@router.post("/{team_id}/decrement", response_model=Team)
async def decrement_score(team_id: str):
    """Subtract the configured score increment, never going below zero"""
    return _adjust(team_id, DECREMENT)


def _adjust(raw_id: str, direction: str) -> Team:
    team = require_store().adjust_score(team_id_or_400(raw_id), direction)
    if team is None:
        raise HTTPException(status_code=404, detail="Team not found")
    return team

"""Helpers shared by the API routers"""
from fastapi import HTTPException

from scorekeeper import state
from scorekeeper.services.team_store import TeamStore
from scorekeeper.utils import parse_team_id


def require_store() -> TeamStore:
    if state.STORE is None:
        raise HTTPException(status_code=503, detail="Team store is not initialised")
    return state.STORE


def team_id_or_400(raw: str) -> int:
    try:
        return parse_team_id(raw)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid team ID") from exc

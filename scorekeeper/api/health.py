"""
Health check and system status endpoints
"""
from fastapi import APIRouter

from scorekeeper import state
from scorekeeper.config import VERSION


router = APIRouter(tags=["health"])


@router.get("/")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": "Scorekeeper Server",
        "version": VERSION,
        "total_teams": len(state.STORE.get_teams()) if state.STORE else 0
    }

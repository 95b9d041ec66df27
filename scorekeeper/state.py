"""
Global application state
Shared resources accessible across all modules
"""
from typing import Optional

from scorekeeper.models import AppConfig
from scorekeeper.services.team_store import TeamStore

# Loaded at startup
CONFIG: AppConfig = AppConfig()

# Team and settings storage, built in the app lifespan
STORE: Optional[TeamStore] = None

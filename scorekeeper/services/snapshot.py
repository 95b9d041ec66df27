"""
YAML snapshot of the scoreboard

Best-effort persistence: the whole state is rewritten after each change
and read back once at startup.
"""
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from pydantic import ValidationError

from scorekeeper.models import Settings, Team


logger = logging.getLogger(__name__)

Snapshot = Tuple[List[Team], Settings, int]


def load_snapshot(state_path: str, default_settings: Optional[Settings] = None) -> Optional[Snapshot]:
    """
    Read teams, settings and the next team id from a snapshot file

    Settings missing from the file are taken from ``default_settings``.

    Returns:
        (teams, settings, next_id), or None when the file is missing or
        cannot be parsed
    """
    path = Path(state_path)
    if not path.exists():
        return None

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        teams = [Team(**t) for t in data.get('teams', [])]
        base = (default_settings or Settings()).model_dump()
        settings = Settings(**{**base, **(data.get('settings') or {})})
        stored_next_id = int(data.get('next_id') or 0)
    except (OSError, yaml.YAMLError, ValidationError, TypeError, ValueError, AttributeError) as exc:
        logger.error(f"❌ Ignoring unreadable snapshot {state_path}: {exc}")
        return None

    highest_id = max((t.id for t in teams), default=0)
    next_id = max(stored_next_id, highest_id + 1)
    logger.info(f"✅ Loaded {len(teams)} teams from {state_path}")
    return teams, settings, next_id


def save_snapshot(state_path: str, teams: List[Team], settings: Settings, next_id: int) -> None:
    """
    Write the full scoreboard state to a YAML file

    Write errors are logged, not raised: the in-memory state stays authoritative.
    """
    path = Path(state_path)
    data = {
        'next_id': next_id,
        'settings': settings.model_dump(),
        'teams': [t.model_dump() for t in teams],
    }
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
    except (OSError, yaml.YAMLError) as exc:
        logger.error(f"❌ Failed to write snapshot {state_path}: {exc}")

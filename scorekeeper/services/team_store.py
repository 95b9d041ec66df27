"""
In-memory team and settings storage

TeamStore keeps teams keyed by id in creation order, so listing is always
ascending by id. Ids come from a monotonic counter and are never reused.
"""
import logging
import random
from typing import Dict, List, Optional

from scorekeeper.models import (
    AppConfig, Settings, SettingsUpdate, Team, TeamCreate, TeamUpdate
)
from scorekeeper.name_generator import generate_team_name
from scorekeeper.services.snapshot import load_snapshot, save_snapshot


logger = logging.getLogger(__name__)

INCREMENT = "increment"
DECREMENT = "decrement"


class TeamStore:
    def __init__(self, config: Optional[AppConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or AppConfig()
        self.colors: List[str] = list(self.config.team_colors)
        self._rng = rng or random.Random()
        self._teams: Dict[int, Team] = {}
        self._settings = Settings()
        self._next_id = 1

        snapshot = None
        if self.config.state_file:
            snapshot = load_snapshot(self.config.state_file, self._default_settings())
        if snapshot:
            teams, self._settings, self._next_id = snapshot
            for team in sorted(teams, key=lambda t: t.id):
                self._teams[team.id] = team
        else:
            self.reset_storage()

    def reset_storage(self) -> None:
        """Restore the default teams and settings"""
        count = self.config.default_team_count
        self._teams = {}
        for index in range(count):
            team_id = index + 1
            self._teams[team_id] = Team(
                id=team_id,
                name=self._random_name(),
                score=0,
                color=self.colors[index % len(self.colors)],
            )
        self._next_id = count + 1
        self._settings = self._default_settings()
        self._save()

    # ==================== TEAMS ====================

    def get_teams(self) -> List[Team]:
        return list(self._teams.values())

    def get_team(self, team_id: int) -> Optional[Team]:
        return self._teams.get(team_id)

    def create_team(self, data: TeamCreate) -> Team:
        team = self._add_team(name=data.name, score=data.score, color=data.color)
        self._save()
        return team

    def update_team(self, team_id: int, patch: TeamUpdate) -> Optional[Team]:
        """
        Apply the fields present in ``patch`` to a team

        A name explicitly set to None is replaced by a fresh random name.

        Returns:
            Updated team, or None if no team has this id
        """
        team = self._teams.get(team_id)
        if team is None:
            return None

        changes = patch.model_dump(exclude_unset=True)
        if 'name' in changes and changes['name'] is None:
            changes['name'] = self._random_name()
        # score/color cannot be cleared
        changes = {k: v for k, v in changes.items() if v is not None}

        updated = team.model_copy(update=changes)
        self._teams[team_id] = updated
        self._save()
        return updated

    def delete_team(self, team_id: int) -> None:
        if self._teams.pop(team_id, None) is not None:
            self._save()

    def adjust_score(self, team_id: int, direction: str) -> Optional[Team]:
        """
        Move a team's score by the configured increment

        Decrements never take the score below zero.
        """
        team = self._teams.get(team_id)
        if team is None:
            return None

        step = self._settings.score_increment
        if direction == INCREMENT:
            score = team.score + step
        elif direction == DECREMENT:
            score = max(0, team.score - step)
        else:
            raise ValueError(f"Unknown score direction: {direction}")

        updated = team.model_copy(update={'score': score})
        self._teams[team_id] = updated
        self._save()
        return updated

    def reset_scores(self, shuffle_names: bool = False) -> List[Team]:
        """Zero every score, optionally drawing new names too"""
        for team_id, team in self._teams.items():
            changes = {'score': 0}
            if shuffle_names:
                changes['name'] = self._random_name()
            self._teams[team_id] = team.model_copy(update=changes)
        self._save()
        return self.get_teams()

    def shuffle_team_names(self) -> List[Team]:
        for team_id, team in self._teams.items():
            self._teams[team_id] = team.model_copy(update={'name': self._random_name()})
        self._save()
        return self.get_teams()

    # ==================== SETTINGS ====================

    def get_settings(self) -> Settings:
        return self._settings

    def update_settings(self, patch: SettingsUpdate) -> Settings:
        """
        Merge a settings update and reconcile the team list to teamCount

        Raises:
            ValueError: If teamCount is outside the configured limits
        """
        changes = {k: v for k, v in patch.model_dump(exclude_unset=True).items() if v is not None}

        target = changes.get('team_count')
        if target is not None and not (
            self.config.min_team_count <= target <= self.config.max_team_count
        ):
            raise ValueError(
                f"teamCount must be between {self.config.min_team_count} "
                f"and {self.config.max_team_count}"
            )

        self._settings = self._settings.model_copy(update=changes)
        if target is not None:
            self.reconcile_team_count(target)
        self._save()
        return self._settings

    def reconcile_team_count(self, target: int) -> None:
        """
        Add or remove teams until exactly ``target`` remain

        New teams take palette colors not yet in use, in palette order, and
        cycle through the full palette once those run out. Removal drops the
        newest teams (highest ids) first; survivors are left untouched.
        """
        current = len(self._teams)
        logger.info(f"Current team count: {current}, target count: {target}")

        if target == current:
            logger.info("Team count already matches target, no adjustment needed")
            return

        if target > current:
            to_add = target - current
            logger.info(f"Adding {to_add} teams to reach target of {target}")

            in_use = {t.color for t in self._teams.values()}
            available = [c for c in self.colors if c not in in_use]

            for i in range(to_add):
                if available:
                    color = available.pop(0)
                else:
                    color = self.colors[i % len(self.colors)]
                self._add_team(name=None, score=0, color=color)
        else:
            to_remove = current - target
            logger.info(f"Removing {to_remove} teams to reach target of {target}")

            newest_first = sorted(self._teams, reverse=True)
            for team_id in newest_first[:to_remove]:
                del self._teams[team_id]

        if len(self._teams) != target:
            logger.error(
                f"❌ Team reconciliation failed: wanted {target}, have {len(self._teams)}"
            )
        else:
            logger.info(f"Team count is now {len(self._teams)}")

    # ==================== HELPERS ====================

    def _default_settings(self) -> Settings:
        return Settings(
            id=1,
            team_count=self.config.default_team_count,
            score_increment=self.config.default_score_increment,
        )

    def _random_name(self) -> str:
        return generate_team_name(self._rng)

    def _add_team(self, name: Optional[str], score: Optional[int], color: Optional[str]) -> Team:
        team_id = self._next_id
        self._next_id += 1
        team = Team(
            id=team_id,
            name=name or self._random_name(),
            score=score if score is not None else 0,
            color=color or self.colors[(team_id - 1) % len(self.colors)],
        )
        self._teams[team_id] = team
        return team

    def _save(self) -> None:
        if self.config.state_file:
            save_snapshot(self.config.state_file, self.get_teams(), self._settings, self._next_id)

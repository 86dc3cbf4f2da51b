from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field


class JobRoleProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    role_id: str
    title: str
    essential_skills: tuple[str, ...]
    preferred_skills: tuple[str, ...]
    key_phrases: tuple[str, ...]
    skill_weight_by_category: dict[str, float] = Field(default_factory=dict)


class JobRoleCatalog:
    def __init__(self, roles_path: str | Path | None = None) -> None:
        path = Path(roles_path) if roles_path else Path(__file__).with_name("job_roles.json")
        self._roles = self._load_roles(path)

    @staticmethod
    def _load_roles(path: Path) -> Mapping[str, JobRoleProfile]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid job role catalog '{path}': expected a top-level mapping.")

        roles: dict[str, JobRoleProfile] = {}
        for role_id, payload in raw.items():
            roles[str(role_id)] = JobRoleProfile(
                role_id=str(role_id),
                title=payload["title"],
                essential_skills=tuple(payload.get("essential_skills", [])),
                preferred_skills=tuple(payload.get("preferred_skills", [])),
                key_phrases=tuple(payload.get("key_phrases", [])),
                skill_weight_by_category=dict(payload.get("skill_weight_by_category", {})),
            )
        return MappingProxyType(roles)

    def role_ids(self) -> list[str]:
        return list(self._roles)

    def get(self, role_id: str | None) -> JobRoleProfile | None:
        if not role_id:
            return None
        return self._roles.get(role_id.strip().upper())

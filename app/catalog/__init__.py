from functools import lru_cache

from .job_roles import JobRoleCatalog, JobRoleProfile


@lru_cache(maxsize=1)
def get_job_role_catalog() -> JobRoleCatalog:
    return JobRoleCatalog()


def get_available_roles() -> list[str]:
    return get_job_role_catalog().role_ids()


def get_role_by_id(role_id: str | None) -> JobRoleProfile | None:
    return get_job_role_catalog().get(role_id)


__all__ = [
    "JobRoleCatalog",
    "JobRoleProfile",
    "get_available_roles",
    "get_job_role_catalog",
    "get_role_by_id",
]

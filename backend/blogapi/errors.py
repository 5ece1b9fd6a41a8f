from typing import Any, Dict


class SeedError(Exception):
    """Base class for failures raised while seeding demo data."""


class LookupFailure(SeedError, LookupError):
    """A single-match lookup found zero rows or more than one."""

    def __init__(self, model: str, criteria: Dict[str, Any], matches: str) -> None:
        self.model = model
        self.criteria = criteria
        self.matches = matches
        described = ", ".join(f"{key}={value!r}" for key, value in criteria.items())
        super().__init__(f"Expected exactly one {model} matching {described or 'any'}, found {matches}")

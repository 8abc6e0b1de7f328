"""User queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetUserProfile:
    """Fetch a user's public profile."""

    user_id: UUID

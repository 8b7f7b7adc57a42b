"""
Resolution of the viewer descriptor used by publication access decisions.

Authentication itself is handled by DRF (JWT or session). This module only
turns an already-authenticated user into the small immutable profile the
access rules consume; anonymous requests resolve to None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from apps.accounts.models import UserRole


@dataclass(frozen=True)
class UserProfile:
    role: str
    provenance: Optional[str] = None
    user_id: Optional[int] = None
    email: Optional[str] = None

    @property
    def is_system_admin(self) -> bool:
        return self.role == UserRole.SYSTEM_ADMIN


def viewer_for_user(user) -> Optional[UserProfile]:
    if user is None or not getattr(user, 'is_authenticated', False):
        return None
    return UserProfile(
        role=getattr(user, 'role', None) or UserRole.PUBLIC,
        provenance=getattr(user, 'provenance', None) or None,
        user_id=getattr(user, 'pk', None),
        email=getattr(user, 'email', None) or None,
    )


def viewer_from_request(request) -> Optional[UserProfile]:
    return viewer_for_user(getattr(request, 'user', None))

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .cache import QueryCache

logger = logging.getLogger(__name__)

USER_ROLE_KEY = "user-role"

RoleLoader = Callable[[str], Optional[Role]]


@dataclass
class SessionState:
    """Per-process session: who is signed in, plus the cache of fetched records.

    Passed explicitly to the services that need it instead of living in a
    module global. The signed-in user's role is cached under
    ``("user-role", user_id)`` and evicted on every sign-in.
    """

    cache: QueryCache = field(default_factory=QueryCache)
    user_id: Optional[str] = None
    employee_id: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def role(self) -> Optional[Role]:
        if self.user_id is None:
            return None
        return self.cache.get((USER_ROLE_KEY, self.user_id))

    def sign_in(self, *, user_id: str, employee_id: Optional[str] = None, role: Optional[Role] = None) -> None:
        """Populate the session; ``role`` may be left for ``current_role`` to fetch."""
        self.cache.invalidate((USER_ROLE_KEY, user_id))
        self.user_id = user_id
        self.employee_id = employee_id
        if role is not None:
            self.cache.set((USER_ROLE_KEY, user_id), role)
        logger.info("Signed in user %s as %s", user_id, role.value if role else "(role pending)")

    def sign_out(self) -> None:
        logger.info("Signing out user %s", self.user_id)
        self.user_id = None
        self.employee_id = None
        self.cache.clear()

    def current_role(self, loader: Optional[RoleLoader] = None) -> Optional[Role]:
        """Cached role of the signed-in user, fetched through ``loader`` on a miss."""
        if self.user_id is None:
            return None
        key = (USER_ROLE_KEY, self.user_id)
        if key in self.cache or loader is None:
            return self.cache.get(key)
        role = loader(self.user_id)
        if role is not None:
            self.cache.set(key, role)
        return role

    def require_role(self, *roles: Role, loader: Optional[RoleLoader] = None) -> Role:
        role = self.current_role(loader)
        if role is None or role not in roles:
            raise AuthorizationError("You do not have permission for this action")
        return role

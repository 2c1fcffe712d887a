"""Process-local session state: active role and requested pickups."""

import logging
from dataclasses import dataclass, field

from zero_hunger.domain.roles import Role, Tab, tabs_for_role

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """Holds the user's current role and the listings they have claimed."""

    role: Role = Role.RECEIVER
    pickups: list[str] = field(default_factory=list)

    def toggle_role(self) -> Role:
        """Flip between donor and receiver mode."""
        self.role = self.role.toggled()
        logger.info("Switched role to %s", self.role.value)
        return self.role

    def tabs(self) -> list[Tab]:
        """Return the navigation tabs for the current role."""
        return tabs_for_role(self.role)

    def record_pickup(self, listing_id: str) -> None:
        """Remember a successfully claimed listing, most recent first."""
        self.pickups.insert(0, listing_id)

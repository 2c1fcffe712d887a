"""Domain models for the user's app mode."""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Which side of the marketplace the user is acting on."""

    DONOR = "donor"
    RECEIVER = "receiver"

    def toggled(self) -> "Role":
        """Return the opposite role."""
        return Role.RECEIVER if self is Role.DONOR else Role.DONOR


@dataclass(frozen=True)
class NavigationTab:
    """Declarative bottom navigation entry."""

    key: str
    label: str
    icon: str


class Tab(Enum):
    """Enum of navigation tabs (single source of truth)."""

    RESCUE_MAP = NavigationTab("map", "Rescue Map", "map")
    DONATE = NavigationTab("donate", "Donate", "add_circle")
    REQUESTS = NavigationTab("requests", "Requests", "list")
    PROFILE = NavigationTab("profile", "Profile", "person")


def tabs_for_role(role: Role) -> list[Tab]:
    """Return the navigation tabs shown for a role."""
    middle = Tab.DONATE if role is Role.DONOR else Tab.REQUESTS
    return [Tab.RESCUE_MAP, middle, Tab.PROFILE]

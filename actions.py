"""
Action definitions for Catan agents.
"""

from enum import Enum, auto
from dataclasses import dataclass


class ActionType(Enum):
    """Building actions an agent can take during its turn."""
    BUILD_SETTLEMENT = auto()
    BUILD_CITY = auto()
    BUILD_ROAD = auto()


@dataclass(frozen=True)
class Action:
    """
    A specific action with its target.

    - BUILD_SETTLEMENT: node id
    - BUILD_CITY: node id
    - BUILD_ROAD: edge id
    """
    action_type: ActionType
    location: int

    def __str__(self) -> str:
        """Human-readable action description."""
        if self.action_type == ActionType.BUILD_SETTLEMENT:
            return f"Built settlement at node {self.location}"
        elif self.action_type == ActionType.BUILD_CITY:
            return f"Upgraded to city at node {self.location}"
        return f"Built road at edge {self.location}"


def build_settlement_action(node_id: int) -> Action:
    """Create a build settlement action."""
    return Action(ActionType.BUILD_SETTLEMENT, node_id)


def build_city_action(node_id: int) -> Action:
    """Create a build city action."""
    return Action(ActionType.BUILD_CITY, node_id)


def build_road_action(edge_id: int) -> Action:
    """Create a build road action."""
    return Action(ActionType.BUILD_ROAD, edge_id)

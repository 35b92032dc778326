"""
Player ledger for Catan.
Holds the resources and victory points the engine credits and charges.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from game_constants import Resource, can_afford, deduct_resources, total_resources


@dataclass
class Player:
    """Represents a player's hand and score."""
    player_id: int
    name: Optional[str] = None

    # Resources
    resources: Dict[Resource, int] = field(default_factory=lambda: {r: 0 for r in Resource})

    victory_points: int = 0

    def __post_init__(self):
        if self.name is None:
            self.name = f"Player {self.player_id}"

    def add_victory_points(self, points: int):
        self.victory_points += points

    def add_resource(self, resource: Resource, amount: int = 1):
        """Add resources to player's hand."""
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount ({amount}) of {resource.value}")
        self.resources[resource] = self.resources.get(resource, 0) + amount

    def remove_resource(self, resource: Resource, amount: int = 1) -> bool:
        """Remove resources from player's hand. Returns False if insufficient."""
        if amount < 0:
            raise ValueError(f"Cannot remove a negative amount ({amount}) of {resource.value}")
        if self.resources.get(resource, 0) < amount:
            return False
        self.resources[resource] -= amount
        return True

    def resource_count(self, resource: Resource) -> int:
        return self.resources.get(resource, 0)

    def has_resources(self, cost: Dict[Resource, int]) -> bool:
        """Check if player can afford a cost."""
        return can_afford(self.resources, cost)

    def pay_cost(self, cost: Dict[Resource, int]) -> bool:
        """Pay a cost. Returns False, paying nothing, if resources are insufficient."""
        if not self.has_resources(cost):
            return False
        deduct_resources(self.resources, cost)
        return True

    def total_resource_count(self) -> int:
        """Get total number of resource cards."""
        return total_resources(self.resources)

    def __str__(self) -> str:
        return self.name

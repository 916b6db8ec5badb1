from dataclasses import dataclass

@dataclass(slots=True)
class Explorer:
    """Marker component for the entity controlled by the player."""
    pass

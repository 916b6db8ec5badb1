from dataclasses import dataclass

@dataclass
class AttackCharges:
    """Remaining ranged attacks for the explorer. Never negative."""
    current: int
    maximum: int

    def __post_init__(self) -> None:
        if self.current < 0 or self.maximum < 0:
            raise ValueError("attack charges cannot be negative")

    def has_charge(self) -> bool:
        return self.current > 0

    def spend(self) -> bool:
        if self.current <= 0:
            return False
        self.current -= 1
        return True

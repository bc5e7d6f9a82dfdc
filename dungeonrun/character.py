"""The player character."""

from __future__ import annotations

from dataclasses import dataclass, field

from .gamelog import GameLog, shared_log
from .items import Item

EXPERIENCE_PER_LEVEL = 100
MAX_LEVEL = 10


@dataclass
class Character:
    """A player character with stats, gold and an inventory of items."""

    name: str
    level: int = 1
    health: int = 200
    max_health: int = 200
    attack: int = 30
    experience: int = 0
    gold: int = 0
    inventory: list[Item] = field(default_factory=list)
    logger: GameLog = field(default_factory=lambda: shared_log, repr=False, compare=False)

    def __post_init__(self) -> None:
        print("캐릭터 생성자가 호출되었습니다")

    def show_status(self) -> None:
        """Log a one-line summary of the character's stats."""
        self.logger.log(
            f"[상태] 이름:  {self.name} | 레벨: {self.level} | 체력: {self.health}"
            f"/{self.max_health} | 공격력: {self.attack}"
            f" | 경험치: {self.experience}/{EXPERIENCE_PER_LEVEL} | 골드: {self.gold}"
        )

    def level_up(self) -> None:
        """Spend experience on as many levels as it pays for, up to the cap."""
        while self.experience >= EXPERIENCE_PER_LEVEL and self.level < MAX_LEVEL:
            self.experience -= EXPERIENCE_PER_LEVEL
            self.level += 1
            self.health += self.level * 20
            self.attack += self.level * 5
            self.max_health = self.health
            self.logger.log(
                f"레벨 업! 현재 레벨: {self.level}, 체력: {self.health}, 공격력: {self.attack}"
            )

    def use_item(self, index: int) -> bool:
        """Use and remove the item at a zero-based index; out-of-range indexes are ignored."""
        if not 0 <= index < len(self.inventory):
            return False
        item = self.inventory.pop(index)
        item.use(self, self.logger)
        return True
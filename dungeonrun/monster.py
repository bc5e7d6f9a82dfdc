"""Monsters the player fights."""

from __future__ import annotations

from typing import ClassVar

from .gamelog import GameLog, shared_log


class Monster:
    """A monster whose stats grow with the level it is spawned at."""

    kind: ClassVar[str] = ""
    base_health: ClassVar[int] = 0
    health_per_level: ClassVar[int] = 0
    base_attack: ClassVar[int] = 0

    def __init__(self, level: int, logger: GameLog | None = None) -> None:
        if not self.kind:
            raise TypeError("Monster must be created through one of its kinds")
        self.name = self.kind
        self.health = self.base_health + level * self.health_per_level
        self.attack = self.base_attack + level
        self.logger = logger if logger is not None else shared_log

    def __repr__(self) -> str:
        return f"{type(self).__name__}(health={self.health}, attack={self.attack})"

    def take_damage(self, damage: int) -> None:
        """Lose health, never dropping below zero, and log the hit."""
        self.health = max(0, self.health - damage)
        self.logger.log(f"{self.name}이(가) {damage} 피해를 입었습니다! 현재 체력: {self.health}")

    def is_dead(self) -> bool:
        return self.health <= 0


class Goblin(Monster):
    kind = "Goblin"
    base_health = 20
    health_per_level = 2
    base_attack = 5

    def __init__(self, level: int, logger: GameLog | None = None) -> None:
        print("고블린 생성 완료 ")
        super().__init__(level, logger)


class Orc(Monster):
    kind = "Orc"
    base_health = 30
    health_per_level = 3
    base_attack = 7


class Troll(Monster):
    kind = "Troll"
    base_health = 50
    health_per_level = 4
    base_attack = 10


class Slime(Monster):
    kind = "Slime"
    base_health = 10
    health_per_level = 2
    base_attack = 3
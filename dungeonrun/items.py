"""Consumable items a character can carry and use."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .character import Character
    from .gamelog import GameLog

HEALTH_POTION_HEAL = 50
ATTACK_BOOST_AMOUNT = 10


class Item(ABC):
    """Something a character can use once from the inventory."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the item."""

    @abstractmethod
    def use(self, character: Character, logger: GameLog) -> None:
        """Apply the item's effect to a character."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class HealthPotion(Item):
    """Restores health, never beyond the character's maximum."""

    @property
    def name(self) -> str:
        return "체력 포션"

    def use(self, character: Character, logger: GameLog) -> None:
        character.health = min(character.health + HEALTH_POTION_HEAL, character.max_health)
        logger.log(f"{character.name}이(가) 체력 포션을 사용했습니다! 체력 +{HEALTH_POTION_HEAL}")


class AttackBoost(Item):
    """Permanently raises attack power."""

    @property
    def name(self) -> str:
        return "공격력 증가 포션"

    def use(self, character: Character, logger: GameLog) -> None:
        character.attack += ATTACK_BOOST_AMOUNT
        logger.log(
            f"{character.name}이(가) 공격력 증가 포션을 사용했습니다! 공격력 +{ATTACK_BOOST_AMOUNT}"
        )
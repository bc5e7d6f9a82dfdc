"""Monster spawning, inventory display and turn-based battles."""

from __future__ import annotations

import random
from collections.abc import Callable

from .character import Character
from .gamelog import GameLog
from .items import AttackBoost, HealthPotion
from .monster import Goblin, Monster, Orc, Slime, Troll

MONSTER_KINDS: tuple[type[Monster], ...] = (Goblin, Orc, Troll, Slime)
BATTLE_EXPERIENCE = 50
GOLD_MIN = 10
GOLD_MAX = 20
DROP_CHANCE_PERCENT = 30

INVALID_CHOICE = "잘못된 입력입니다. 다시 선택해주세요."

Reader = Callable[[], str]


def _read_number(read: Reader) -> int | None:
    """Read one answer and turn it into a number, or None if it is not one."""
    try:
        return int(read().strip())
    except ValueError:
        return None


def generate_monster(level: int, rng: random.Random) -> Monster:
    """Spawn a monster of a random kind at the given level."""
    kind = MONSTER_KINDS[rng.randrange(len(MONSTER_KINDS))]
    return kind(level)


def display_inventory(player: Character, logger: GameLog) -> None:
    """Log the player's items, numbered from one."""
    logger.log("[인벤토리 목록]")
    for number, item in enumerate(player.inventory, start=1):
        logger.log(f"{number}. {item.name}")


def _choose_item(player: Character, logger: GameLog, read: Reader) -> None:
    if not player.inventory:
        logger.log("사용할 수 있는 아이템이 없습니다.")
        return
    while True:
        display_inventory(player, logger)
        logger.log("사용할 아이템 번호를 입력하세요 (0: 취소): ")
        number = _read_number(read)
        if number == 0:
            logger.log("아이템 사용을 취소했습니다.")
            return
        if number is not None and 1 <= number <= len(player.inventory):
            player.use_item(number - 1)
            return
        logger.log(INVALID_CHOICE)


def _player_turn(player: Character, monster: Monster, logger: GameLog, read: Reader) -> None:
    while True:
        logger.log("\n[턴 선택] 무엇을 하시겠습니까?\n1. 공격\n2. 아이템 사용")
        choice = _read_number(read)
        if choice == 1:
            monster.take_damage(player.attack)
            logger.log(
                f"{player.name}가 {monster.name}을(를) 공격합니다! "
                f"남은 체력: {max(0, monster.health)}"
            )
            return
        if choice == 2:
            _choose_item(player, logger, read)
            return
        logger.log(INVALID_CHOICE)


def _reward(player: Character, logger: GameLog, rng: random.Random) -> None:
    gold = rng.randint(GOLD_MIN, GOLD_MAX)
    player.experience += BATTLE_EXPERIENCE
    player.gold += gold
    logger.log(
        f"{player.name}가 전투에서 승리했습니다! 경험치: {BATTLE_EXPERIENCE} 골드: {gold}"
    )
    if rng.randrange(100) < DROP_CHANCE_PERCENT:
        if rng.randrange(2) == 0:
            player.inventory.append(HealthPotion())
            logger.log("[획득 아이템] 체력 포션")
        else:
            player.inventory.append(AttackBoost())
            logger.log("[획득 아이템] 공격력 포션")
    player.level_up()


def battle(player: Character, logger: GameLog, read: Reader, rng: random.Random) -> bool:
    """Fight one random monster; return True if the player survives."""
    monster = generate_monster(player.level, rng)
    monster.logger = logger
    logger.log(f"\n몬스터 {monster.name} 등장! 체력: {monster.health}, 공격력: {monster.attack}")

    while player.health > 0 and not monster.is_dead():
        logger.log(
            "\n--- 현재 상태 ---\n"
            f"| 내 상태 | 체력: {player.health} | 공격력: {player.attack}\n"
            f"| 몬스터 상태 | 체력: {monster.health} | 공격력: {monster.attack}"
        )
        _player_turn(player, monster, logger, read)
        if monster.is_dead():
            break
        player.health -= monster.attack
        logger.log(
            f"{monster.name}이(가) {player.name}을(를) 공격합니다! "
            f"남은 체력: {max(0, player.health)}"
        )

    if player.health <= 0:
        logger.log(f"{player.name}가 사망했습니다. 게임 오버!")
        return False

    _reward(player, logger, rng)
    return True
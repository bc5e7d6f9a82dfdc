import pytest

from dungeonrun.character import Character
from dungeonrun.gamelog import GameLog
from dungeonrun.items import AttackBoost, HealthPotion


@pytest.fixture
def log():
    return GameLog()


@pytest.fixture
def hero(log):
    return Character("Hero", logger=log)


def test_defaults(hero):
    assert (hero.level, hero.health, hero.max_health, hero.attack) == (1, 200, 200, 30)
    assert (hero.experience, hero.gold, hero.inventory) == (0, 0, [])


def test_constructor_announces_itself(capsys, log):
    Character("Someone", logger=log)
    assert "캐릭터 생성자가 호출되었습니다" in capsys.readouterr().out


def test_show_status_format(hero, log):
    hero.show_status()
    assert log.messages[-1] == (
        "[상태] 이름:  Hero | 레벨: 1 | 체력: 200/200 | 공격력: 30 | 경험치: 0/100 | 골드: 0"
    )


def test_level_up_needs_full_experience(hero, log):
    hero.experience = 99
    hero.level_up()
    assert hero.level == 1
    assert hero.experience == 99
    assert len(log) == 0


def test_level_up_single_level(hero, log):
    hero.experience = 150
    health_before, attack_before = hero.health, hero.attack
    hero.level_up()
    assert hero.level == 2
    assert hero.experience == 150 - 100
    assert hero.health > health_before
    assert hero.attack > attack_before
    assert hero.max_health == hero.health
    assert log.messages[-1].startswith("레벨 업! 현재 레벨: 2")


def test_level_up_multiple_levels_logs_each(hero, log):
    hero.experience = 300
    hero.level_up()
    assert hero.level == 4
    assert hero.experience == 0
    assert len(log) == 3


def test_level_up_gains_grow_with_level(log):
    hero = Character("Hero", logger=log)
    gains = []
    for _ in range(3):
        before = hero.health
        hero.experience += 100
        hero.level_up()
        gains.append(hero.health - before)
    assert gains == sorted(gains)
    assert len(set(gains)) == 3


def test_level_capped_at_ten(hero):
    hero.experience = 5000
    hero.level_up()
    assert hero.level == 10
    assert hero.experience == 5000 - 9 * 100


def test_use_item_consumes_it(hero, log):
    hero.inventory = [AttackBoost(), HealthPotion()]
    attack_before = hero.attack
    assert hero.use_item(0) is True
    assert hero.attack == attack_before + 10
    assert len(hero.inventory) == 1
    assert isinstance(hero.inventory[0], HealthPotion)


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_use_item_out_of_range_is_ignored(hero, log, index):
    hero.inventory = [AttackBoost()]
    attack_before = hero.attack
    assert hero.use_item(index) is False
    assert hero.attack == attack_before
    assert len(hero.inventory) == 1
    assert len(log) == 0


def test_use_item_on_empty_inventory(hero):
    assert hero.use_item(0) is False
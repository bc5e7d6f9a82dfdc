import pytest

from dungeonrun.character import Character
from dungeonrun.gamelog import GameLog
from dungeonrun.items import AttackBoost, HealthPotion, Item


@pytest.fixture
def log():
    return GameLog()


@pytest.fixture
def hero(log):
    return Character("Hero", logger=log)


def test_item_is_abstract():
    with pytest.raises(TypeError):
        Item()


def test_item_names():
    assert HealthPotion().name == "체력 포션"
    assert AttackBoost().name == "공격력 증가 포션"


def test_health_potion_heals_by_fifty(hero, log):
    hero.health = hero.max_health - 120
    before = hero.health
    HealthPotion().use(hero, log)
    assert hero.health == before + 50
    assert log.messages[-1] == "Hero이(가) 체력 포션을 사용했습니다! 체력 +50"


def test_health_potion_caps_at_max(hero, log):
    hero.health = hero.max_health - 10
    HealthPotion().use(hero, log)
    assert hero.health == hero.max_health


def test_health_potion_at_full_health_stays_full(hero, log):
    HealthPotion().use(hero, log)
    assert hero.health == hero.max_health


def test_attack_boost_adds_ten(hero, log):
    before = hero.attack
    AttackBoost().use(hero, log)
    assert hero.attack == before + 10
    assert log.messages[-1] == "Hero이(가) 공격력 증가 포션을 사용했습니다! 공격력 +10"


def test_attack_boost_stacks(hero, log):
    before = hero.attack
    boost = AttackBoost()
    boost.use(hero, log)
    boost.use(hero, log)
    assert hero.attack == before + 2 * 10
    assert len(log) == 2


def test_attack_boost_leaves_health_alone(hero, log):
    health_before = hero.health
    AttackBoost().use(hero, log)
    assert hero.health == health_before
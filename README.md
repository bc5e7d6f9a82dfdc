# dungeonrun

`dungeonrun` is a small turn-based role-playing game for the terminal. The game's
messages are in Korean.

You name your hero and then choose from a menu. You can fight a random monster
(Goblin, Orc, Troll or Slime), look at your status, list your inventory, or
review everything the game has logged so far.

Each victory gives you 50 experience and 10 to 20 gold. There is also a 30%
chance of a potion:

- **체력 포션** (health potion) restores 50 health, up to your maximum.
- **공격력 증가 포션** (attack boost) adds 10 to your attack.

Every 100 experience raises your level, which raises your health and attack.
The game ends when your hero dies or reaches level 10.

## Installation

```
pip install .
```

## Playing

```
dungeonrun
```

Options:

- `--seed N` seeds the random generator, so monsters, gold and drops repeat.
- `--no-pause` does not wait for Enter between screens.
- `--no-clear` does not clear the screen between screens.

At the prompts, type the number of the action you want and press Enter.
The main menu offers:

1. Fight a monster.
2. Show your status.
3. Show your inventory.
4. Show the log.

On your turn in a fight, choose `1` to attack or `2` to use an item. Choosing
item `0` cancels. Answers that are not valid numbers are rejected and asked
again. Ending input (Ctrl-D) quits the game; Ctrl-C quits with status 130.

## Using the pieces in code

The game is built from a few plain modules:

- `dungeonrun.gamelog.GameLog` prints messages and keeps them. `log(msg)`
  records and prints one message, `messages` returns them all, `show_logs()`
  prints them again and `save_to_file(filename)` writes them to a file, one
  per line. `dungeonrun.gamelog.shared_log` is the log used by objects that
  are not given one.
- `dungeonrun.character.Character` is the player, a dataclass with `name`,
  `level`, `health`, `max_health`, `attack`, `experience`, `gold`, `inventory`
  and `logger`. It has `show_status()`, `level_up()` and `use_item(index)`,
  which uses and removes the item at a zero-based index and returns `False`
  for an index out of range.
- `dungeonrun.items` defines the abstract `Item` and the `HealthPotion` and
  `AttackBoost` items. Each has a `name` and `use(character, logger)`.
- `dungeonrun.monster` defines `Monster` and its kinds `Goblin`, `Orc`,
  `Troll` and `Slime`, created with a level and an optional log. Each has
  `name`, `health`, `attack`, `take_damage(damage)` and `is_dead()`.
- `dungeonrun.manager` provides `generate_monster(level, rng)`,
  `display_inventory(player, logger)` and `battle(player, logger, read, rng)`.
  `battle` takes its turn choices from `read`, a function that returns the
  next input, and its dice from `rng`, a `random.Random`. It returns `True`
  when the player survives. This makes fights easy to script and repeat.
- `dungeonrun.main.main(argv=None)` runs the game and returns the exit
  status; `GameState` lists its states and `is_blank(s)` checks a name.

## What it does not do

The game keeps no saved games: a hero lasts only as long as one run. The
command does not write its log to disk; `GameLog.save_to_file` is there for
code that wants to.

## Running the tests

```
pip install .[test]
pytest
```
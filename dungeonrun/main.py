"""Command-line game loop: create a hero, fight monsters, check stats."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from .character import MAX_LEVEL, Character
from .gamelog import shared_log
from .manager import battle, display_inventory

PAUSE_PROMPT = "계속하려면 아무 키나 누르십시오 . . ."
CLEAR_SCREEN = "\033[2J\033[H"


class GameState(Enum):
    START = auto()
    PLAY = auto()
    FIGHT = auto()
    END = auto()
    QUIT = auto()


def is_blank(s: str) -> bool:
    """True if the text holds nothing but spaces and tabs."""
    return all(c in " \t" for c in s)


@dataclass
class _Console:
    pause_enabled: bool = True
    clear_enabled: bool = True

    def pause(self) -> None:
        if self.pause_enabled:
            input(PAUSE_PROMPT)

    def clear(self) -> None:
        if self.clear_enabled:
            print(CLEAR_SCREEN, end="", flush=True)


def _read_choice() -> int | None:
    try:
        return int(input().strip())
    except ValueError:
        return None


def _create_player(console: _Console) -> Character:
    shared_log.log("게임이 시작되었습니다!")
    shared_log.log("캐릭터의 이름을 입력해주세요:")
    while True:
        name = input("캐릭터 이름을 입력하세요: ")
        if not is_blank(name):
            break
        print("이름은 공백일 수 없습니다. 다시 입력하세요.")
    player = Character(name)
    shared_log.log(f"당신의 이름은: {name}입니다.")
    console.pause()
    return player


def _menu(player: Character, console: _Console) -> GameState:
    console.clear()
    if player.level >= MAX_LEVEL:
        shared_log.log("이미 만렙이라 게임이 끝납니다...")
        console.pause()
        return GameState.END

    shared_log.log("무엇을 하시겠습니까?")
    shared_log.log("1. 싸운다.  2. 상태창 확인.  3. 소지아이템 확인.  4. 로그 확인.")
    shared_log.log("선택: ")
    choice = _read_choice()

    if choice == 1:
        shared_log.log("플레이어가 전투를 선택함")
        return GameState.FIGHT
    if choice == 2:
        shared_log.log("플레이어가 상태창 확인을 선택함")
        player.show_status()
    elif choice == 3:
        shared_log.log("플레이어가 인벤토리 확인을 선택함")
        display_inventory(player, shared_log)
    elif choice == 4:
        shared_log.log("플레이어가 로그 확인을 선택함")
        shared_log.show_logs()
    else:
        shared_log.log("잘못된 입력 시도")
    console.pause()
    return GameState.PLAY


def _fight(player: Character, console: _Console, rng: random.Random) -> GameState:
    console.clear()
    shared_log.log("몬스터와의 전투가 시작되었습니다.")
    if battle(player, shared_log, input, rng):
        shared_log.log("전투 승리 → 다음 상태: PLAY")
        next_state = GameState.PLAY
    else:
        shared_log.log("전투 패배 → 게임 종료 상태로 이동")
        next_state = GameState.END
    console.pause()
    return next_state


def _run(console: _Console, rng: random.Random) -> None:
    state = GameState.START
    player = Character("")
    while state is not GameState.QUIT:
        if state is GameState.START:
            player = _create_player(console)
            state = GameState.PLAY
        elif state is GameState.PLAY:
            state = _menu(player, console)
        elif state is GameState.FIGHT:
            state = _fight(player, console, rng)
        else:
            shared_log.log("게임이 끝났습니다.")
            console.pause()
            state = GameState.QUIT


def main(argv: Sequence[str] | None = None) -> int:
    """Play the game on the console; returns the exit status."""
    parser = argparse.ArgumentParser(prog="dungeonrun", description="Text dungeon battle game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument("--no-pause", action="store_true", help="do not wait between screens")
    parser.add_argument("--no-clear", action="store_true", help="do not clear the screen")
    args = parser.parse_args(argv)

    console = _Console(pause_enabled=not args.no_pause, clear_enabled=not args.no_clear)
    try:
        _run(console, random.Random(args.seed))
    except EOFError:
        print()
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
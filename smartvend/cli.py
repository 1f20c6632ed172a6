"""Interactive console for driving a vending machine."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, NamedTuple, TextIO

from smartvend.machines import VM1, VM2
from smartvend.states import TransitionError

_SPACE = re.compile(r"\s*")
_WORD = re.compile(r"\S+")

MENU = (
    "0. create(price)\n1. coin(value)\n2. sugar()\n3. chocolate()/coffee()\n"
    "4. cappuccino()\n5. insert_cups(n)\n6. set_price(price)\n7. cancel()\n"
    "8. card(value)\nq. quit"
)


class _Scanner:
    """Reads whitespace-separated input from a stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line = ""
        self._pos = 0

    def _skip_space(self) -> None:
        while True:
            self._pos = _SPACE.match(self._line, self._pos).end()
            if self._pos < len(self._line):
                return
            self._line = self._stream.readline()
            self._pos = 0
            if not self._line:
                raise EOFError

    def char(self) -> str:
        """Return the next non-blank character."""
        self._skip_space()
        ch = self._line[self._pos]
        self._pos += 1
        return ch

    def word(self) -> str:
        """Return the next run of non-blank characters."""
        self._skip_space()
        match = _WORD.match(self._line, self._pos)
        self._pos = match.end()
        return match.group()


class _Operation(NamedTuple):
    action: Callable[..., None]
    prompt: str | None = None
    parse: Callable[[str], object] | None = None


def _whole(text: str) -> int:
    return int(float(text))


def _vm1_operations(vm: VM1) -> dict[str, _Operation]:
    return {
        "0": _Operation(vm.create, "Enter price: ", float),
        "1": _Operation(vm.coin, "Enter coin value: ", float),
        "2": _Operation(vm.sugar),
        "3": _Operation(vm.chocolate),
        "4": _Operation(vm.cappuccino),
        "5": _Operation(vm.insert_cups, "Enter cup count: ", int),
        "6": _Operation(vm.set_price, "Enter new price: ", float),
        "7": _Operation(vm.cancel),
        "8": _Operation(vm.card, "Enter card value: ", float),
    }


def _vm2_operations(vm: VM2) -> dict[str, _Operation]:
    # The second machine has one drink and treats a card like a coin.
    return {
        "0": _Operation(vm.create, "Enter price: ", _whole),
        "1": _Operation(vm.coin, "Enter coin value: ", _whole),
        "2": _Operation(vm.sugar),
        "3": _Operation(vm.coffee),
        "4": _Operation(vm.coffee),
        "5": _Operation(vm.insert_cups, "Enter cup count: ", int),
        "6": _Operation(vm.set_price, "Enter new price: ", _whole),
        "7": _Operation(vm.cancel),
        "8": _Operation(vm.coin, "Enter card value: ", _whole),
    }


def _choose_machine(scanner: _Scanner) -> tuple[int, dict[str, _Operation]] | None:
    print("Welcome to the Smart Vending Machine System")
    print("Select VM type:")
    print("1. Vending Machine 1 (float-based)")
    print("2. Vending Machine 2 (int-based)")
    print("Choice: ", end="")
    try:
        choice = int(scanner.word())
    except (EOFError, ValueError):
        return None
    if choice == 1:
        return choice, _vm1_operations(VM1())
    if choice == 2:
        return choice, _vm2_operations(VM2())
    return None


def _run(scanner: _Scanner, operations: dict[str, _Operation]) -> None:
    op_count = 0
    while True:
        print("\n-----------------------------")
        print(f"Operation Count: {op_count}")
        print("Select Operation (0-8 or q): ", end="")
        try:
            ch = scanner.char()
        except EOFError:
            return
        if ch == "q":
            return
        operation = operations.get(ch)
        if operation is None:
            print("Invalid operation.")
            continue

        args: tuple[object, ...] = ()
        if operation.prompt is not None:
            print(operation.prompt, end="")
            try:
                text = scanner.word()
            except EOFError:
                return
            try:
                args = (operation.parse(text),)
            except ValueError:
                print("Invalid number.")
                continue

        try:
            operation.action(*args)
        except TransitionError as exc:
            print(f"[ERROR] {exc}")
        op_count += 1


def main(argv: list[str] | None = None) -> int:
    """Run the interactive console on standard input; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="smartvend", description="Drive a vending machine interactively."
    )
    parser.parse_args(argv)

    print("\n" * 49)
    scanner = _Scanner(sys.stdin)
    chosen = _choose_machine(scanner)
    if chosen is None:
        print("Invalid choice. Exiting...")
        return 1
    choice, operations = chosen

    print(f"\nVending Machine-{choice} Menu")
    print(MENU)
    _run(scanner, operations)
    return 0


if __name__ == "__main__":
    sys.exit(main())
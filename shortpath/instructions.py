"""Parsing of the instruction stream that drives the shortest-path tool."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

# Number of integer arguments each command takes.
ARITY = {
    "Stop": 0,
    "PrintADJ": 0,
    "SingleSource": 1,
    "SinglePair": 2,
    "PrintPath": 2,
    "PrintLength": 2,
}

_COMMAND = re.compile(r"\s*(\S+)(.*)", re.DOTALL)
_INTEGER = r"\s*([+-]?\d+)"


@dataclass(frozen=True)
class Instruction:
    """A command with up to two vertex arguments."""

    command: str
    source: int | None = None
    target: int | None = None


def parse_instruction(line: str) -> Instruction | None:
    """Parse one line; return ``None`` when it is not a valid instruction.

    Only the leading part of each argument that reads as an integer counts,
    so trailing text after the last argument is ignored.
    """
    match = _COMMAND.match(line)
    if match is None:
        return None
    command, rest = match.groups()
    arity = ARITY.get(command)
    if arity is None:
        return None
    if arity == 0:
        return Instruction(command)
    args = re.match(_INTEGER * arity, rest)
    if args is None:
        return None
    return Instruction(command, *(int(value) for value in args.groups()))


def read_instructions(lines: Iterable[str]) -> Iterator[Instruction]:
    """Yield instructions until ``Stop``, an invalid line or the end of input.

    ``Stop`` itself is not yielded.
    """
    for line in lines:
        instruction = parse_instruction(line)
        if instruction is None or instruction.command == "Stop":
            return
        yield instruction
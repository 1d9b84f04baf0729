"""Enumerations with and without data, and matching on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Union


class MessageKind(Enum):
    QUIT = auto()
    ECHO = auto()
    MOVE = auto()
    CHANGE_COLOR = auto()


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Move:
    point: Point
    kind: ClassVar[MessageKind] = MessageKind.MOVE


@dataclass(frozen=True)
class Echo:
    text: str
    kind: ClassVar[MessageKind] = MessageKind.ECHO


@dataclass(frozen=True)
class ChangeColor:
    color: tuple[int, int, int]
    kind: ClassVar[MessageKind] = MessageKind.CHANGE_COLOR


@dataclass(frozen=True)
class Quit:
    kind: ClassVar[MessageKind] = MessageKind.QUIT


Message = Union[Move, Echo, ChangeColor, Quit]


def call(message: Message) -> str:
    """Print and return the debug form of a message."""
    text = repr(message)
    print(text)
    return text


@dataclass
class State:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        match message:
            case Move(point=point):
                self.position = point
            case Echo(text=text):
                print(text)
            case ChangeColor(color=color):
                self.color = color
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"not a message: {message!r}")
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Literal, NoReturn, TypeVar

from pymulti.errors import NeedMoreInput, ParseFailure

class OutcomeKind(Enum):
  DONE = 0
  ERROR = 1
  INCOMPLETE = 2

class NeededKind(Enum):
  UNKNOWN = 0
  SIZE = 1

E = TypeVar("E")
I = TypeVar("I")
T = TypeVar("T")
R = TypeVar("R")

@dataclass(init=False)
class Unknown:
  kind: Literal[NeededKind.UNKNOWN]

  def __init__(self):
    self.kind = NeededKind.UNKNOWN

  def shifted(self, offset: int) -> "Unknown":
    return self

  def __str__(self) -> str:
    return "unknown"

@dataclass(init=False)
class Size:
  kind: Literal[NeededKind.SIZE]
  n: int

  def __init__(self, n: int):
    self.kind = NeededKind.SIZE
    self.n = n

  def shifted(self, offset: int) -> "Size":
    return Size(self.n + offset)

  def __str__(self) -> str:
    return str(self.n)

Needed = Unknown | Size

@dataclass(init=False)
class Done(Generic[I, T]):
  kind: Literal[OutcomeKind.DONE]
  remaining: I
  value: T

  def __init__(self, remaining: I, value: T):
    self.kind = OutcomeKind.DONE
    self.remaining = remaining
    self.value = value

  def map(self, f: Callable[[T], R]) -> "Done[I, R]":
    return Done(self.remaining, f(self.value))

  def unwrap(self) -> tuple[I, T]:
    return self.remaining, self.value

@dataclass(init=False)
class Error(Generic[E]):
  kind: Literal[OutcomeKind.ERROR]
  cause: E

  def __init__(self, cause: E):
    self.kind = OutcomeKind.ERROR
    self.cause = cause

  def map(self, f: Callable[[Any], Any]) -> "Error[E]":
    return self

  def unwrap(self) -> NoReturn:
    raise ParseFailure(self.cause)

@dataclass(init=False)
class Incomplete:
  kind: Literal[OutcomeKind.INCOMPLETE]
  needed: Needed

  def __init__(self, needed: Needed):
    self.kind = OutcomeKind.INCOMPLETE
    self.needed = needed

  def map(self, f: Callable[[Any], Any]) -> "Incomplete":
    return self

  def unwrap(self) -> NoReturn:
    raise NeedMoreInput(self.needed)

Outcome = Done[I, T] | Error[Any] | Incomplete

@dataclass
class Parser(Generic[I, T]):
  f: Callable[[I], Outcome[I, T]]

  def __call__(self, inp: I) -> Outcome[I, T]:
    return self.f(inp)

  def parse(self, inp: I) -> T:
    return self.f(inp).unwrap()[1]

  def map(self, transformer: Callable[[T], R]) -> "Parser[I, R]":
    def map_impl(inp: I) -> Outcome[I, R]:
      return self.f(inp).map(transformer)
    return Parser(map_impl)

from collections.abc import Iterator, Sized
from dataclasses import dataclass
from enum import Enum
from typing import Any

class ErrorKind(Enum):
  REPETITION_STALLED = "repetition stalled"
  EXPECTED_AT_LEAST_ONE = "expected at least one"
  OUT_OF_RANGE = "out of range"
  COUNT = "count"
  LENGTH_VALUE = "length-value"
  SEPARATED_LIST = "separated-list stalled"
  TAG = "tag"
  SATISFY = "satisfy"

@dataclass(frozen=True)
class ParseError:
  """
  Error cause produced by the combinators.

  `input` is the input at the start of the overall attempt, not where the
  failing iteration was. `cause` keeps the wrapped sub-parser cause, if any.
  """
  kind: ErrorKind
  input: Any
  cause: Any = None

  def chain(self) -> "Iterator[ParseError]":
    err: Any = self
    while isinstance(err, ParseError):
      yield err
      err = err.cause

  def offset_in(self, source: Sized) -> int:
    return len(source) - len(self.input)

  def __str__(self) -> str:
    msg = self.kind.value
    if self.cause is not None:
      msg += f": {self.cause}"
    return msg

class ParseFailure(ValueError):
  def __init__(self, cause: Any):
    super().__init__(str(cause))
    self.cause = cause

class NeedMoreInput(ValueError):
  def __init__(self, needed: Any):
    super().__init__(f"incomplete input, needed: {needed}")
    self.needed = needed

import logging
from typing import Any, Callable, TypeVar

from pymulti.errors import ErrorKind, ParseError
from pymulti.outcome import Done, Error, Incomplete, Needed, Outcome, OutcomeKind, Parser, Unknown
from pymulti.progress import consumed_nothing, is_exhausted, relative_needed

logger = logging.getLogger(__name__)

I = TypeVar("I")
T = TypeVar("T")

UNBOUNDED = ~(-1 << 63)

SubParser = Callable[[I], Outcome[I, T]]

def check_range(min: int, max: int | None) -> int:
  if max is None:
    max = UNBOUNDED
  if min < 0:
    raise ValueError(f"minimum repetition count must not be negative, got {min}")
  if min > max:
    raise ValueError(f"minimum repetition count {min} exceeds maximum {max}")
  return max

def many0(parser: SubParser[I, T]) -> Parser[I, list[T]]:
  """
  Applies `parser` zero or more times.

  Sub-parser errors end the loop. A stall on the very first attempt is
  reported as a `REPETITION_STALLED` error, a later stall just ends the loop.
  """
  def many0_impl(inp: I) -> Outcome[I, list[T]]:
    fullparsed: list[T] = []
    curr = inp
    while not is_exhausted(curr):
      res = parser(curr)
      if res.kind is OutcomeKind.ERROR:
        break
      if res.kind is OutcomeKind.INCOMPLETE:
        return Incomplete(relative_needed(inp, curr, res.needed))
      if consumed_nothing(curr, res.remaining):
        logger.debug("many0 stalled after %d items", len(fullparsed))
        if not fullparsed:
          return Error(ParseError(ErrorKind.REPETITION_STALLED, inp))
        break
      fullparsed.append(res.value)
      curr = res.remaining
    return Done(curr, fullparsed)
  return Parser(many0_impl)

def many1(parser: SubParser[I, T]) -> Parser[I, list[T]]:
  """
  Applies `parser` one or more times.

  An `Incomplete` after the first item makes the whole attempt incomplete;
  the caller has to retry the entire sequence with more input.
  """
  def many1_impl(inp: I) -> Outcome[I, list[T]]:
    first = parser(inp)
    if first.kind is OutcomeKind.ERROR:
      return Error(ParseError(ErrorKind.EXPECTED_AT_LEAST_ONE, inp, first.cause))
    if first.kind is OutcomeKind.INCOMPLETE:
      return first
    if consumed_nothing(inp, first.remaining):
      logger.debug("many1 stalled on its first item")
      return Error(ParseError(ErrorKind.REPETITION_STALLED, inp))
    fullparsed = [first.value]
    curr = first.remaining
    while not is_exhausted(curr):
      res = parser(curr)
      if res.kind is OutcomeKind.ERROR:
        break
      if res.kind is OutcomeKind.INCOMPLETE:
        return Incomplete(relative_needed(inp, curr, res.needed))
      if consumed_nothing(curr, res.remaining):
        logger.debug("many1 stalled after %d items", len(fullparsed))
        break
      fullparsed.append(res.value)
      curr = res.remaining
    return Done(curr, fullparsed)
  return Parser(many1_impl)

def many_m_n(min: int, max: int | None, parser: SubParser[I, T]) -> Parser[I, list[T]]:
  """
  Applies `parser` between `min` and `max` times, both inclusive.

  `max=None` leaves the upper bound open. Fewer than `min` items is an
  `OUT_OF_RANGE` error if the loop stopped on a failure or a stall, and
  `Incomplete` if it stopped for lack of input.
  """
  max = check_range(min, max)
  def many_impl(inp: I) -> Outcome[I, list[T]]:
    fullparsed: list[T] = []
    curr = inp
    failed = False
    failure: Any = None
    needed: Needed | None = None
    while len(fullparsed) < max:
      res = parser(curr)
      if res.kind is OutcomeKind.ERROR:
        failed, failure = True, res.cause
        break
      if res.kind is OutcomeKind.INCOMPLETE:
        needed = relative_needed(inp, curr, res.needed)
        break
      if consumed_nothing(curr, res.remaining):
        logger.debug("many_m_n stalled after %d items", len(fullparsed))
        failed, failure = True, ParseError(ErrorKind.REPETITION_STALLED, curr)
        break
      fullparsed.append(res.value)
      curr = res.remaining
      if is_exhausted(curr):
        break
    if len(fullparsed) < min:
      if failed:
        logger.debug("many_m_n matched %d of at least %d items", len(fullparsed), min)
        return Error(ParseError(ErrorKind.OUT_OF_RANGE, inp, failure))
      return Incomplete(needed if needed is not None else Unknown())
    if needed is not None:
      return Incomplete(needed)
    return Done(curr, fullparsed)
  return Parser(many_impl)

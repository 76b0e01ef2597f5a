import copy
import logging
from typing import Any, Callable, TypeVar

from pymulti.errors import ErrorKind, ParseError
from pymulti.outcome import Done, Error, Incomplete, Needed, Outcome, OutcomeKind, Parser, Unknown
from pymulti.progress import consumed_nothing, is_exhausted, relative_needed
from pymulti.repeat import SubParser, check_range

logger = logging.getLogger(__name__)

I = TypeVar("I")
T = TypeVar("T")
R = TypeVar("R")

def fold_many0(parser: SubParser[I, T], folder: Callable[[R, T], R], initial: R) -> Parser[I, R]:
  def fold_many0_impl(inp: I) -> Outcome[I, R]:
    acc = copy.copy(initial)
    curr = inp
    n_matched = 0
    while not is_exhausted(curr):
      res = parser(curr)
      if res.kind is OutcomeKind.ERROR:
        break
      if res.kind is OutcomeKind.INCOMPLETE:
        return Incomplete(relative_needed(inp, curr, res.needed))
      if consumed_nothing(curr, res.remaining):
        logger.debug("fold_many0 stalled after %d items", n_matched)
        if n_matched == 0:
          return Error(ParseError(ErrorKind.REPETITION_STALLED, inp))
        break
      n_matched += 1
      acc = folder(acc, res.value)
      curr = res.remaining
    return Done(curr, acc)
  return Parser(fold_many0_impl)

def fold_many1(parser: SubParser[I, T], folder: Callable[[R, T], R], initial: R) -> Parser[I, R]:
  def fold_many1_impl(inp: I) -> Outcome[I, R]:
    first = parser(inp)
    if first.kind is OutcomeKind.ERROR:
      return Error(ParseError(ErrorKind.EXPECTED_AT_LEAST_ONE, inp, first.cause))
    if first.kind is OutcomeKind.INCOMPLETE:
      return first
    if consumed_nothing(inp, first.remaining):
      logger.debug("fold_many1 stalled on its first item")
      return Error(ParseError(ErrorKind.REPETITION_STALLED, inp))
    acc = folder(copy.copy(initial), first.value)
    curr = first.remaining
    while not is_exhausted(curr):
      res = parser(curr)
      if res.kind is OutcomeKind.ERROR:
        break
      if res.kind is OutcomeKind.INCOMPLETE:
        return Incomplete(relative_needed(inp, curr, res.needed))
      if consumed_nothing(curr, res.remaining):
        break
      acc = folder(acc, res.value)
      curr = res.remaining
    return Done(curr, acc)
  return Parser(fold_many1_impl)

def fold_many_m_n(
  min: int,
  max: int | None,
  parser: SubParser[I, T],
  folder: Callable[[R, T], R],
  initial: R,
) -> Parser[I, R]:
  """
  Folds between `min` and `max` matches of `parser` into `initial`.

  Termination follows `many_m_n`; only the carried value differs.
  """
  max = check_range(min, max)
  def fold_many_impl(inp: I) -> Outcome[I, R]:
    acc = copy.copy(initial)
    curr = inp
    n_matched = 0
    failed = False
    failure: Any = None
    needed: Needed | None = None
    while n_matched < max:
      res = parser(curr)
      if res.kind is OutcomeKind.ERROR:
        failed, failure = True, res.cause
        break
      if res.kind is OutcomeKind.INCOMPLETE:
        needed = relative_needed(inp, curr, res.needed)
        break
      if consumed_nothing(curr, res.remaining):
        logger.debug("fold_many_m_n stalled after %d items", n_matched)
        failed, failure = True, ParseError(ErrorKind.REPETITION_STALLED, curr)
        break
      n_matched += 1
      acc = folder(acc, res.value)
      curr = res.remaining
      if is_exhausted(curr):
        break
    if n_matched < min:
      if failed:
        return Error(ParseError(ErrorKind.OUT_OF_RANGE, inp, failure))
      return Incomplete(needed if needed is not None else Unknown())
    if needed is not None:
      return Incomplete(needed)
    return Done(curr, acc)
  return Parser(fold_many_impl)

import logging
from typing import Any, TypeVar

from pymulti.errors import ErrorKind, ParseError
from pymulti.outcome import Done, Error, Outcome, OutcomeKind, Parser
from pymulti.progress import consumed_nothing
from pymulti.repeat import SubParser

logger = logging.getLogger(__name__)

I = TypeVar("I")
T = TypeVar("T")

def separated_tail(sep: SubParser[I, Any], elem: SubParser[I, T], fullparsed: list[T], inp: I) -> Done[I, list[T]]:
  # a separator is only consumed together with the element after it
  curr = inp
  while True:
    sep_res = sep(curr)
    if sep_res.kind is not OutcomeKind.DONE or consumed_nothing(curr, sep_res.remaining):
      break
    res = elem(sep_res.remaining)
    if res.kind is not OutcomeKind.DONE or consumed_nothing(sep_res.remaining, res.remaining):
      break
    fullparsed.append(res.value)
    curr = res.remaining
  return Done(curr, fullparsed)

def separated_list(sep: SubParser[I, Any], elem: SubParser[I, T]) -> Parser[I, list[T]]:
  """
  Parses zero or more `elem` separated by `sep`, keeping only the elements.

  A first element that matches without consuming anything is an error; a
  zero-width element later in the list only ends it.
  """
  def separated_list_impl(inp: I) -> Outcome[I, list[T]]:
    first = elem(inp)
    if first.kind is OutcomeKind.ERROR:
      return Done(inp, [])
    if first.kind is OutcomeKind.INCOMPLETE:
      return first
    if consumed_nothing(inp, first.remaining):
      logger.debug("separated_list stalled on its first element")
      return Error(ParseError(ErrorKind.SEPARATED_LIST, inp))
    return separated_tail(sep, elem, [first.value], first.remaining)
  return Parser(separated_list_impl)

def separated_nonempty_list(sep: SubParser[I, Any], elem: SubParser[I, T]) -> Parser[I, list[T]]:
  def separated_nonempty_list_impl(inp: I) -> Outcome[I, list[T]]:
    first = elem(inp)
    if first.kind is OutcomeKind.ERROR:
      return Error(ParseError(ErrorKind.EXPECTED_AT_LEAST_ONE, inp, first.cause))
    if first.kind is OutcomeKind.INCOMPLETE:
      return first
    if consumed_nothing(inp, first.remaining):
      logger.debug("separated_nonempty_list stalled on its first element")
      return Error(ParseError(ErrorKind.SEPARATED_LIST, inp))
    return separated_tail(sep, elem, [first.value], first.remaining)
  return Parser(separated_nonempty_list_impl)

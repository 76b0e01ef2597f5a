import logging
import operator
from typing import TypeVar

from pymulti.errors import ErrorKind, ParseError
from pymulti.outcome import Done, Error, Incomplete, NeededKind, Outcome, OutcomeKind, Parser, Size, Unknown
from pymulti.progress import input_len
from pymulti.repeat import SubParser

logger = logging.getLogger(__name__)

I = TypeVar("I")
T = TypeVar("T")

def check_count(n: int) -> int:
  n = operator.index(n)
  if n < 0:
    raise ValueError(f"count must not be negative, got {n}")
  return n

def apply_n(parser: SubParser[I, T], n: int, inp: I) -> Outcome[I, list[T]]:
  fullparsed: list[T] = []
  curr = inp
  while len(fullparsed) < n:
    res = parser(curr)
    if res.kind is OutcomeKind.ERROR:
      return Error(ParseError(ErrorKind.COUNT, inp, res.cause))
    if res.kind is OutcomeKind.INCOMPLETE:
      return Incomplete(Unknown())
    fullparsed.append(res.value)
    curr = res.remaining
  return Done(curr, fullparsed)

def count(parser: SubParser[I, T], n: int) -> Parser[I, list[T]]:
  """
  Applies `parser` exactly `n` times.

  Errors are reported at the input the attempt started from. Incomplete
  input is always `Needed` unknown: sizes are not tracked across iterations.
  """
  n = check_count(n)
  return Parser(lambda inp: apply_n(parser, n, inp))

def count_fixed(parser: SubParser[I, T], n: int) -> Parser[I, tuple[T, ...]]:
  """Same as `count`, with the values returned as an `n`-tuple."""
  n = check_count(n)
  return Parser(lambda inp: apply_n(parser, n, inp).map(tuple))

def length_value(
  len_parser: SubParser[I, int],
  elem_parser: SubParser[I, T],
  size: int | None = None,
) -> Parser[I, list[T]]:
  """
  Reads a count with `len_parser`, then applies `elem_parser` that many times.

  When an element is incomplete, the needed size covers the length token plus
  all elements, using `size` as the element width if given and the element
  parser's own reported size otherwise.
  """
  if size is not None and size < 0:
    raise ValueError(f"element size must not be negative, got {size}")
  def length_value_impl(inp: I) -> Outcome[I, list[T]]:
    len_res = len_parser(inp)
    if len_res.kind is not OutcomeKind.DONE:
      return len_res
    n = operator.index(len_res.value)
    if n < 0:
      logger.debug("length_value read a negative count %d", n)
      return Error(ParseError(ErrorKind.LENGTH_VALUE, inp))
    orig_len = input_len(inp)
    rest_len = input_len(len_res.remaining)
    token_len = orig_len - rest_len if orig_len is not None and rest_len is not None else None
    fullparsed: list[T] = []
    curr = len_res.remaining
    while len(fullparsed) < n:
      res = elem_parser(curr)
      if res.kind is OutcomeKind.ERROR:
        return Error(ParseError(ErrorKind.LENGTH_VALUE, inp, res.cause))
      if res.kind is OutcomeKind.INCOMPLETE:
        if token_len is None or res.needed.kind is NeededKind.UNKNOWN:
          return Incomplete(Unknown())
        elem_size = size if size is not None else res.needed.n
        return Incomplete(Size(token_len + n * elem_size))
      fullparsed.append(res.value)
      curr = res.remaining
    return Done(curr, fullparsed)
  return Parser(length_value_impl)

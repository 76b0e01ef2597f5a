"""
Elementary parsers over sequences.

Each one reports `Incomplete(Size(n))` with `n` measured from its own input,
and never consumes anything when it returns `Error`.
"""
from collections.abc import Sequence
from typing import Any, Callable, Literal, TypeVar

from pymulti.errors import ErrorKind, ParseError
from pymulti.outcome import Done, Error, Incomplete, Outcome, Parser, Size

E = TypeVar("E")
T = TypeVar("T")

def tag(expected: Sequence[E]) -> Parser[Sequence[E], Sequence[E]]:
  sz = len(expected)
  def tag_impl(inp: Sequence[E]) -> Outcome[Sequence[E], Sequence[E]]:
    m = min(len(inp), sz)
    if inp[:m] != expected[:m]:
      return Error(ParseError(ErrorKind.TAG, inp))
    if m < sz:
      return Incomplete(Size(sz))
    return Done(inp[sz:], inp[:sz])
  return Parser(tag_impl)

def take(n: int) -> Parser[Sequence[E], Sequence[E]]:
  def take_impl(inp: Sequence[E]) -> Outcome[Sequence[E], Sequence[E]]:
    if len(inp) < n:
      return Incomplete(Size(n))
    return Done(inp[n:], inp[:n])
  return Parser(take_impl)

def satisfy(check: Callable[[E], bool]) -> Parser[Sequence[E], E]:
  def satisfy_impl(inp: Sequence[E]) -> Outcome[Sequence[E], E]:
    if len(inp) == 0:
      return Incomplete(Size(1))
    if not check(inp[0]):
      return Error(ParseError(ErrorKind.SATISFY, inp))
    return Done(inp[1:], inp[0])
  return Parser(satisfy_impl)

def succeed(v: T) -> Parser[Any, T]:
  return Parser(lambda inp: Done(inp, v))

def fail(cause: Any) -> Parser[Any, Any]:
  return Parser(lambda inp: Error(cause))

def uint(width: int, byteorder: Literal["big", "little"]) -> Parser[bytes, int]:
  def uint_impl(inp: bytes) -> Outcome[bytes, int]:
    if len(inp) < width:
      return Incomplete(Size(width))
    return Done(inp[width:], int.from_bytes(inp[:width], byteorder))
  return Parser(uint_impl)

be_u8 = uint(1, "big")
be_u16 = uint(2, "big")
le_u16 = uint(2, "little")
be_u32 = uint(4, "big")
le_u32 = uint(4, "little")

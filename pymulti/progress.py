"""
Progress guard shared by the repetition combinators.

A loop iteration whose sub-parser returned `Done` without consuming anything
is a stall: repeating it would never terminate.
"""
from collections.abc import Sized
from typing import Any

from pymulti.outcome import Needed, Unknown

def input_len(inp: Any) -> int | None:
  if isinstance(inp, Sized):
    return len(inp)
  return None

def is_exhausted(inp: Any) -> bool:
  return isinstance(inp, Sized) and len(inp) == 0

def consumed_nothing(before: Any, after: Any) -> bool:
  if isinstance(before, Sized) and isinstance(after, Sized):
    return len(after) == len(before)
  return after == before

def relative_needed(original: Any, current: Any, needed: Needed) -> Needed:
  """Re-expresses `needed`, reported for `current`, relative to `original`."""
  orig_len = input_len(original)
  curr_len = input_len(current)
  if orig_len is None or curr_len is None:
    return Unknown()
  return needed.shifted(orig_len - curr_len)

from typing import Callable

import pytest

from pymulti.outcome import Done


def match_a_or_nothing(inp: bytes) -> Done:
  if inp[:1] == b"a":
    return Done(inp[1:], b"a")
  return Done(inp, None)


@pytest.fixture
def a_or_nothing() -> Callable[[bytes], Done]:
  """Consumes one `a`, or succeeds without consuming anything."""
  return match_a_or_nothing

import pytest

from pymulti.elements import fail, satisfy, succeed, tag
from pymulti.errors import ErrorKind, ParseError
from pymulti.fold import fold_many0, fold_many1, fold_many_m_n
from pymulti.outcome import Done, Error, Incomplete, OutcomeKind, Size, Unknown


def fold_into_list(acc: list, item: object) -> list:
  return acc + [item]


def digit_value(acc: int, c: int) -> int:
  return acc * 10 + (c - ord("0"))


is_digit = satisfy(lambda c: ord("0") <= c <= ord("9"))


@pytest.mark.parametrize(
  "inp, expected",
  [
    (b"abcdef", Done(b"ef", [b"abcd"])),
    (b"abcdabcdefgh", Done(b"efgh", [b"abcd", b"abcd"])),
    (b"azerty", Done(b"azerty", [])),
    (b"abcdab", Incomplete(Size(8))),
    (b"abcd", Done(b"", [b"abcd"])),
    (b"", Done(b"", [])),
  ],
)
def test_fold_many0(inp: bytes, expected: object) -> None:
  assert fold_many0(tag(b"abcd"), fold_into_list, [])(inp) == expected


def test_fold_many0_reduces_without_a_list() -> None:
  parser = fold_many0(is_digit, digit_value, 0)
  assert parser(b"123x") == Done(b"x", 123)
  assert parser(b"x") == Done(b"x", 0)
  assert parser(b"42") == Done(b"", 42)


def test_fold_many0_initial_is_reused_across_calls() -> None:
  parser = fold_many0(tag(b"ab"), fold_into_list, [])
  assert parser(b"abab") == Done(b"", [b"ab", b"ab"])
  assert parser(b"ab") == Done(b"", [b"ab"])


def test_fold_many0_stalls() -> None:
  assert fold_many0(tag(b""), fold_into_list, [])(b"abcdef") == Error(
    ParseError(ErrorKind.REPETITION_STALLED, b"abcdef")
  )
  assert fold_many0(fail("nope"), fold_into_list, [])(b"abc") == Done(b"abc", [])


@pytest.mark.parametrize(
  "inp, expected",
  [
    (b"abcdef", Done(b"ef", [b"abcd"])),
    (b"abcdabcdefgh", Done(b"efgh", [b"abcd", b"abcd"])),
    (b"abcdab", Incomplete(Size(8))),
    (b"abcd", Done(b"", [b"abcd"])),
  ],
)
def test_fold_many1(inp: bytes, expected: object) -> None:
  assert fold_many1(tag(b"abcd"), fold_into_list, [])(inp) == expected


def test_fold_many1_failures() -> None:
  res = fold_many1(tag(b"abcd"), fold_into_list, [])(b"azerty")
  assert res.kind is OutcomeKind.ERROR
  assert res.cause.kind is ErrorKind.EXPECTED_AT_LEAST_ONE
  assert res.cause.input == b"azerty"
  assert fold_many1(succeed(1), fold_into_list, [])(b"abc") == Error(
    ParseError(ErrorKind.REPETITION_STALLED, b"abc")
  )
  assert fold_many1(is_digit, digit_value, 0)(b"7") == Done(b"", 7)


@pytest.mark.parametrize(
  "inp, expected",
  [
    (b"AbcdAbcdefgh", Done(b"efgh", [b"Abcd"] * 2)),
    (b"AbcdAbcdAbcdAbcdefgh", Done(b"efgh", [b"Abcd"] * 4)),
    (b"AbcdAbcdAbcdAbcdAbcdefgh", Done(b"Abcdefgh", [b"Abcd"] * 4)),
    (b"AbcdAb", Incomplete(Size(8))),
    (b"Abcd", Incomplete(Unknown())),
  ],
)
def test_fold_many_m_n(inp: bytes, expected: object) -> None:
  assert fold_many_m_n(2, 4, tag(b"Abcd"), fold_into_list, [])(inp) == expected


def test_fold_many_m_n_too_few_matches() -> None:
  res = fold_many_m_n(2, 4, tag(b"Abcd"), fold_into_list, [])(b"Abcdef")
  assert res == Error(ParseError(ErrorKind.OUT_OF_RANGE, b"Abcdef", ParseError(ErrorKind.TAG, b"ef")))


def test_fold_many_m_n_counts_matches() -> None:
  parser = fold_many_m_n(1, 3, tag(b"ab"), lambda acc, _: acc + 1, 0)
  assert parser(b"abababab") == Done(b"ab", 3)
  assert parser(b"abx") == Done(b"x", 1)
  with pytest.raises(ValueError):
    fold_many_m_n(2, 1, tag(b"ab"), fold_into_list, [])


def push(acc: list, item: object) -> list:
  acc.append(item)
  return acc


def test_appending_folder_starts_fresh_on_each_call() -> None:
  many = fold_many0(tag(b"ab"), push, [])
  assert many(b"abab") == Done(b"", [b"ab", b"ab"])
  assert many(b"ab") == Done(b"", [b"ab"])
  at_least_one = fold_many1(tag(b"ab"), push, [])
  assert at_least_one(b"abab") == Done(b"", [b"ab", b"ab"])
  assert at_least_one(b"abx") == Done(b"x", [b"ab"])
  bounded = fold_many_m_n(1, 3, tag(b"ab"), push, [])
  assert bounded(b"abab") == Done(b"", [b"ab", b"ab"])
  assert bounded(b"ab") == Done(b"", [b"ab"])


def test_fold_many1_later_stall_keeps_accumulator(a_or_nothing) -> None:
  assert fold_many1(a_or_nothing, fold_into_list, [])(b"aab") == Done(b"b", [b"a", b"a"])


def test_fold_many_m_n_stall_below_minimum() -> None:
  res = fold_many_m_n(1, 3, succeed(0), fold_into_list, [])(b"abc")
  assert res.kind is OutcomeKind.ERROR
  assert res.cause.input == b"abc"
  assert [e.kind for e in res.cause.chain()] == [ErrorKind.OUT_OF_RANGE, ErrorKind.REPETITION_STALLED]


def test_fold_many_m_n_stall_at_minimum(a_or_nothing) -> None:
  assert fold_many_m_n(1, 3, a_or_nothing, fold_into_list, [])(b"ab") == Done(b"b", [b"a"])
  assert fold_many_m_n(2, 4, a_or_nothing, lambda acc, _: acc + 1, 0)(b"aab") == Done(b"b", 2)

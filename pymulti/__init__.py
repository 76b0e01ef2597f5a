from pymulti.errors import ErrorKind, NeedMoreInput, ParseError, ParseFailure
from pymulti.outcome import (
  Done,
  Error,
  Incomplete,
  Needed,
  NeededKind,
  Outcome,
  OutcomeKind,
  Parser,
  Size,
  Unknown,
)
from pymulti.progress import consumed_nothing, is_exhausted, relative_needed
from pymulti.repeat import UNBOUNDED, many0, many1, many_m_n
from pymulti.fold import fold_many0, fold_many1, fold_many_m_n
from pymulti.count import count, count_fixed, length_value
from pymulti.separated import separated_list, separated_nonempty_list
from pymulti.elements import be_u8, be_u16, be_u32, fail, le_u16, le_u32, satisfy, succeed, tag, take

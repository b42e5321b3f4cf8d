from typing import Iterator, List, Optional
from ..classes import (CARRIAGE_RETURN, LINE_FEED, DOUBLE_QUOTE, SINGLE_QUOTE, ZWJ_RUNE, ah_letter, hebrew, mid_letter, mid_num,
  mid_num_let_q, numeric, katakana, extend_num_let, e_base, e_base_gaz, e_modifier, extend_or_format, glue_after_zwj,
  line_break, regional_indicator)
from .reader import RuneReader, as_source

class SegmenterState:
  """
    lookback for the token being built
    last_rune_literal is the raw final code point of the buffer, only used to keep CRLF together
    last_rune/second_to_last_rune skip Extend & Format code points (ZWJ is kept)
    everything is scoped to the current buffer, so a fresh token starts with no history
  """
  def __init__(self):
    self.buf: List[str] = []
    self.last_rune_literal, self.last_rune, self.second_to_last_rune = None, None, None

  def keep(self, r: str):
    self.buf.append(r)
    self.last_rune_literal = r
    if not extend_or_format(r): self.second_to_last_rune, self.last_rune = self.last_rune, r

  def flush(self) -> str:
    word = "".join(self.buf)
    self.buf = []
    self.last_rune_literal, self.last_rune, self.second_to_last_rune = None, None, None
    return word

class WordReader:
  """
    splits a stream of code points into words using the boundary rules of
    <URL:http://unicode.org/reports/tr29/>; every code point ends up in exactly
    one token, so joining the tokens gives back the input
    eg: "don't go" -> ["don't", " ", "go"]
  """
  def __init__(self, source):
    self.source: RuneReader = as_source(source)
    self.state = SegmenterState()

  def _keep(self, r: str) -> bool:
    """decides whether r joins the current token (True) or starts a new one (False)"""
    s = self.state
    last, second = s.last_rune, s.second_to_last_rune
    peek = self.source.peek_rune

    # WB3, never split CRLF
    if s.last_rune_literal == CARRIAGE_RETURN and r == LINE_FEED: return True
    # WB3a & WB3b
    if line_break(last) or line_break(r): return False
    # WB3c
    if last == ZWJ_RUNE and (glue_after_zwj(r) or e_base_gaz(r)): return True
    # WB4
    if extend_or_format(r) or r == ZWJ_RUNE: return True
    # WB5 - WB7
    if ah_letter(last) and ah_letter(r): return True
    if ah_letter(last) and (mid_letter(r) or mid_num_let_q(r)) and ah_letter(peek()): return True
    if ah_letter(second) and (mid_letter(last) or mid_num_let_q(last)) and ah_letter(r): return True
    # WB7a - WB7c
    if hebrew(last) and r == SINGLE_QUOTE: return True
    if hebrew(last) and r == DOUBLE_QUOTE and hebrew(peek()): return True
    if hebrew(second) and last == DOUBLE_QUOTE and hebrew(r): return True
    # WB8 - WB10
    if numeric(last) and numeric(r): return True
    if (ah_letter(last) and numeric(r)) or (numeric(last) and ah_letter(r)): return True
    # WB11 & WB12, "3.2" or "3,456.789"
    if numeric(second) and (mid_num(last) or mid_num_let_q(last)) and numeric(r): return True
    if numeric(last) and (mid_num(r) or mid_num_let_q(r)) and numeric(peek()): return True
    # WB13
    if katakana(last) and katakana(r): return True
    # WB13a & WB13b
    if (ah_letter(last) or numeric(last) or katakana(last) or extend_num_let(last)) and extend_num_let(r): return True
    if extend_num_let(last) and (ah_letter(r) or numeric(r) or katakana(r)): return True
    # WB14
    if (e_base(last) or e_base_gaz(last)) and e_modifier(r): return True
    # WB15 & WB16, flags pair up left to right
    if regional_indicator(r) and regional_indicator(last) and not regional_indicator(second): return True
    # WB999
    return False

  def read_word(self) -> Optional[str]:
    """returns the next token, or None once the input is exhausted"""
    while True:
      r = self.source.read_rune()
      if r is None: return self.state.flush() if self.state.buf else None
      if not self.state.buf or self._keep(r):
        self.state.keep(r)
        continue
      word = self.state.flush()
      self.state.keep(r)
      return word

  def __iter__(self) -> Iterator[str]:
    while True:
      word = self.read_word()
      if word is None: return
      yield word

def split_words(text: str) -> List[str]:
  """eg: "foo, bar" -> ["foo", ",", " ", "bar"]"""
  return list(WordReader(text))

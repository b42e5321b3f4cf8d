import regex as re
from functools import lru_cache
from typing import Optional

CARRIAGE_RETURN, LINE_FEED, DOUBLE_QUOTE, SINGLE_QUOTE, ZWJ_RUNE = "\u000d", "\u000a", "\u0022", "\u0027", "\u200d"

class CodepointClass:
  """
    word-boundary categories from <URL:http://unicode.org/reports/tr29/>
    values are plain strings so they print nicely in test failures
  """
  AHLETTER, HEBREW_LETTER, NUMERIC, KATAKANA = "AHLetter", "HebrewLetter", "Numeric", "Katakana"
  EXTEND_NUM_LET, MID_LETTER, MID_NUM, MID_NUM_LET_Q = "ExtendNumLet", "MidLetter", "MidNum", "MidNumLetQ"
  EXTEND, FORMAT, NEWLINE, CR, LF, ZWJ = "Extend", "Format", "Newline", "CR", "LF", "ZWJ"
  REGIONAL_INDICATOR, E_BASE, E_BASE_GAZ, E_MODIFIER = "RegionalIndicator", "EBase", "EBaseGAZ", "EModifier"
  GLUE_AFTER_ZWJ, OTHER = "GlueAfterZWJ", "Other"

C = CodepointClass

## ordered (group name, class, pattern), the first alternative that matches wins
## current unicode dropped the E_Base/E_Modifier/Glue_After_Zwj word break values,
## so those are rebuilt from the emoji properties, and the man/woman/boy/girl
## bases keep their own EBG class for the zwj rule
_RULES = [
  ("cr", C.CR, r"\r"),
  ("lf", C.LF, r"\n"),
  ("zwj", C.ZWJ, "\u200d"),
  ("newline", C.NEWLINE, r"\p{Word_Break=Newline}"),
  ("ebg", C.E_BASE_GAZ, "[\U0001F466-\U0001F469]"),
  ("emod", C.E_MODIFIER, r"\p{Emoji_Modifier}"),
  ("ebase", C.E_BASE, r"\p{Emoji_Modifier_Base}"),
  ("extend", C.EXTEND, r"\p{Word_Break=Extend}"),
  ("format", C.FORMAT, r"\p{Word_Break=Format}"),
  ("ri", C.REGIONAL_INDICATOR, r"\p{Word_Break=Regional_Indicator}"),
  ("katakana", C.KATAKANA, r"\p{Word_Break=Katakana}"),
  ("hebrew", C.HEBREW_LETTER, r"\p{Word_Break=Hebrew_Letter}"),
  ("aletter", C.AHLETTER, r"\p{Word_Break=ALetter}"),
  ("squote", C.MID_NUM_LET_Q, r"'"),
  ("midletter", C.MID_LETTER, r"\p{Word_Break=MidLetter}"),
  ("midnum", C.MID_NUM, r"\p{Word_Break=MidNum}"),
  ("midnumlet", C.MID_NUM_LET_Q, r"\p{Word_Break=MidNumLet}"),
  ("numeric", C.NUMERIC, r"\p{Word_Break=Numeric}"),
  ("extendnumlet", C.EXTEND_NUM_LET, r"\p{Word_Break=ExtendNumLet}"),
  ("gaz", C.GLUE_AFTER_ZWJ, r"\p{Extended_Pictographic}"),
]

_pattern = re.compile("|".join(f"(?P<{name}>{expr})" for name, _, expr in _RULES))
_by_group = {name: cls for name, cls, _ in _RULES}

@lru_cache(maxsize=65536)
def classify(ch: Optional[str]) -> Optional[str]:
  """
    returns the CodepointClass of a single code point
    None (no code point, i.e. start or end of input) has no class and matches no rule
  """
  if ch is None: return None
  m = _pattern.match(ch)
  return _by_group[m.lastgroup] if m else C.OTHER

def ah_letter(ch): return classify(ch) in (C.AHLETTER, C.HEBREW_LETTER)
def hebrew(ch): return classify(ch) == C.HEBREW_LETTER
def mid_letter(ch): return classify(ch) == C.MID_LETTER
def mid_num(ch): return classify(ch) == C.MID_NUM
def mid_num_let_q(ch): return classify(ch) == C.MID_NUM_LET_Q
def numeric(ch): return classify(ch) == C.NUMERIC
def katakana(ch): return classify(ch) == C.KATAKANA
def extend_num_let(ch): return classify(ch) == C.EXTEND_NUM_LET
def e_base(ch): return classify(ch) == C.E_BASE
def e_base_gaz(ch): return classify(ch) == C.E_BASE_GAZ
def e_modifier(ch): return classify(ch) == C.E_MODIFIER
def extend_or_format(ch): return classify(ch) in (C.EXTEND, C.FORMAT)
def glue_after_zwj(ch): return classify(ch) == C.GLUE_AFTER_ZWJ
def line_break(ch): return classify(ch) in (C.NEWLINE, C.CR, C.LF)
def regional_indicator(ch): return classify(ch) == C.REGIONAL_INDICATOR

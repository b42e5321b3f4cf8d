import hashlib, unicodedata
from collections import deque
from typing import Dict, Iterable, Iterator, List, Optional
from ..errors import InvalidConfiguration

## a word holding NUL always starts with it (NUL is its own token, only Extend/Format/ZWJ can follow),
## so joined lists still split back one way
WORD_JOINER = "\x00"
_SPACES = {" ", "\t", "\n", "\v", "\f", "\r", "\u0085", "\u00a0", "\r\n", "\n\r"}

def is_space(token: str) -> bool:
  """like str.isspace() but only for a single whitespace token, CRLF & LFCR included"""
  return token in _SPACES

def _lower(ch: str) -> str:
  # simple case mapping, one code point in, one out (U+0130 -> "i", not "i\u0307")
  low = ch.lower()
  return low if len(low) == 1 else low[0]

def normalize_word(token: str) -> Optional[str]:
  """
    strips punctuation & lower-cases one code point at a time
    returns None for whitespace tokens and for anything left empty
    eg: "(C)" -> "c", "," -> None, " " -> None
  """
  if is_space(token): return None
  chars = [_lower(ch) for ch in token if not unicodedata.category(ch).startswith("P")]
  return "".join(chars) or None

class SlidingWindow:
  """
    holds the last `size` words and hands out a full window each time one completes
    eg: size=3, words a b c d -> [a, b, c], [b, c, d]
  """
  def __init__(self, size: int):
    if size < 1: raise InvalidConfiguration(f"sequence size must be at least 1, got {size}")
    self.size, self.words = size, deque()

  def push(self, word: str) -> Optional[List[str]]:
    self.words.append(word)
    if len(self.words) < self.size: return None
    seq = list(self.words)
    self.words.popleft()
    return seq

def iter_windows(words: Iterable[str], size: int) -> Iterator[List[str]]:
  window = SlidingWindow(size)
  for word in words:
    seq = window.push(word)
    if seq is not None: yield seq

def fingerprint(words: List[str]) -> bytes:
  """sha1 keeps the key size fixed no matter how long the words are"""
  return hashlib.sha1(WORD_JOINER.join(words).encode("utf-8")).digest()

class Sequence:
  """a run of words, how often it occurred, and its current slot in the heap (-1 when not in one)"""
  __slots__ = ("words", "count", "index")

  def __init__(self, words: List[str], count: int = 1):
    self.words, self.count, self.index = words, count, -1

  def __repr__(self): return f"Sequence(words={self.words!r}, count={self.count})"

def ranks_before(a: Sequence, b: Sequence) -> bool:
  """higher count first, equal counts ordered by the word lists ascending"""
  if a.count != b.count: return a.count > b.count
  return a.words < b.words

class SequenceHeap:
  """
    array backed max-heap of Sequences
    every swap writes the new slot back into Sequence.index, so after a count
    changes the entry can be re-fixed in place with fix(seq.index)
  """
  def __init__(self): self.heap: List[Sequence] = []

  def _swap(self, i: int, j: int):
    h = self.heap
    h[i], h[j] = h[j], h[i]
    h[i].index, h[j].index = i, j

  def _up(self, i: int) -> bool:
    moved = False
    while i > 0:
      parent = (i - 1) // 2
      if not ranks_before(self.heap[i], self.heap[parent]): break
      self._swap(i, parent)
      i, moved = parent, True
    return moved

  def _down(self, i: int):
    n = len(self.heap)
    while True:
      best, left, right = i, 2 * i + 1, 2 * i + 2
      if left < n and ranks_before(self.heap[left], self.heap[best]): best = left
      if right < n and ranks_before(self.heap[right], self.heap[best]): best = right
      if best == i: return
      self._swap(i, best)
      i = best

  def push(self, seq: Sequence):
    seq.index = len(self.heap)
    self.heap.append(seq)
    self._up(seq.index)

  def pop(self) -> Sequence:
    if not self.heap: raise IndexError("pop from empty heap")
    last = len(self.heap) - 1
    if last > 0: self._swap(0, last)
    seq = self.heap.pop()
    seq.index = -1
    if self.heap: self._down(0)
    return seq

  def fix(self, i: int):
    """restores heap order after the entry at slot i changed its count"""
    if not self._up(i): self._down(i)

  def __len__(self): return len(self.heap)
  def __contains__(self, seq: Sequence): return 0 <= seq.index < len(self.heap) and self.heap[seq.index] is seq

class SequenceIndex:
  """
    dedups sequences by content and keeps their counts ranked
    the dict only finds entries, the heap alone decides where they sit
  """
  def __init__(self):
    self.entries: Dict[bytes, Sequence] = {}
    self.heap = SequenceHeap()

  def register(self, words: List[str]) -> Sequence:
    key = fingerprint(words)
    seq = self.entries.get(key)
    if seq is not None:
      seq.count += 1
      self.heap.fix(seq.index)
      return seq
    seq = Sequence(list(words))
    self.entries[key] = seq
    self.heap.push(seq)
    return seq

  def extract_top(self, top_n: int) -> List[Sequence]:
    """pops at most top_n sequences, most frequent first"""
    if top_n < 1: raise InvalidConfiguration(f"top n must be at least 1, got {top_n}")
    ret = []
    while len(ret) < top_n and len(self.heap) > 0:
      seq = self.heap.pop()
      del self.entries[fingerprint(seq.words)]
      ret.append(seq)
    return ret

  def __len__(self): return len(self.entries)

import sys
from typing import List, Optional
from .errors import InvalidConfiguration
from .utils.reader import as_source, open_source
from .utils.segmenter import WordReader
from .utils.utils import Sequence, SequenceIndex, SlidingWindow, normalize_word

class SequenceCounter:
  """
    counts every run of `sequence_size` consecutive words in one pass over the
    input and returns the `top_n` most frequent, highest count first & ties in
    word order
  """
  def __init__(self, sequence_size: int = 3, top_n: int = 100, verbose: bool = False):
    if not isinstance(sequence_size, int) or sequence_size < 1: raise InvalidConfiguration(f"sequence size must be at least 1, got {sequence_size!r}")
    if not isinstance(top_n, int) or top_n < 1: raise InvalidConfiguration(f"top n must be at least 1, got {top_n!r}")
    self.sequence_size, self.top_n, self.verbose = sequence_size, top_n, verbose

  def count(self, source) -> List[Sequence]:
    """
      source may be a RuneReader, a text stream or a str
      an InputError aborts the pass, nothing counted so far is kept
    """
    index, window, n_words = SequenceIndex(), SlidingWindow(self.sequence_size), 0
    for token in WordReader(as_source(source)):
      word = normalize_word(token)
      if word is None: continue
      n_words += 1
      seq = window.push(word)
      if seq is not None: index.register(seq)
    if self.verbose: print(f"Counted {n_words} words, {len(index)} distinct sequences of {self.sequence_size}", file=sys.stderr)
    return index.extract_top(self.top_n)

  def count_text(self, text: str) -> List[Sequence]: return self.count(text)

  def count_file(self, path: str, encoding: Optional[str] = None) -> List[Sequence]:
    with open_source(path, encoding=encoding, verbose=self.verbose) as source: return self.count(source)

def process(stream, sequence_size: int = 3, top_n: int = 100) -> List[Sequence]:
  """builds the list of the top_n most frequent word sequences in stream"""
  return SequenceCounter(sequence_size, top_n).count(stream)

from .counter import SequenceCounter, process
from .errors import WordSeqError, InvalidConfiguration, InputError
from .utils.reader import RuneReader
from .utils.segmenter import WordReader, split_words
from .utils.utils import Sequence, SequenceIndex, normalize_word

__all__ = ["SequenceCounter", "process", "WordSeqError", "InvalidConfiguration", "InputError", "RuneReader", "WordReader",
  "split_words", "Sequence", "SequenceIndex", "normalize_word"]

class WordSeqError(Exception):
  """base class for everything wordseq raises on purpose"""

class InvalidConfiguration(WordSeqError, ValueError):
  """bad sequence size, top-n or encoding, raised before any input is read"""

class InputError(WordSeqError, IOError):
  """the code point source failed for a reason other than a clean end of stream"""

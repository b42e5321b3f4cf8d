import io, os, sys, codecs
from typing import IO, Optional, Tuple
from ..errors import InputError, InvalidConfiguration

CHUNK_SIZE, SNIFF_SIZE = 4096, 1024

## longest marks first so utf-32-le isn't mistaken for utf-16-le
_BOMS = [
  (codecs.BOM_UTF32_LE, "utf-32"), (codecs.BOM_UTF32_BE, "utf-32"),
  (codecs.BOM_UTF8, "utf-8-sig"),
  (codecs.BOM_UTF16_LE, "utf-16"), (codecs.BOM_UTF16_BE, "utf-16"),
]

class RuneReader:
  """
    pull-based source of decoded code points over any text stream
    reads in chunks, hands out one code point at a time and allows exactly one
    code point of lookahead through peek_rune()
    any failure of the underlying stream is raised as InputError
  """
  def __init__(self, stream: IO[str], chunk_size: int = CHUNK_SIZE, detach_on_close: bool = False):
    self.stream, self.chunk_size, self.detach_on_close = stream, chunk_size, detach_on_close
    self.buf, self.pos, self.eof = "", 0, False

  @classmethod
  def from_string(cls, text: str) -> "RuneReader": return cls(io.StringIO(text))

  def _fill(self) -> bool:
    if self.pos < len(self.buf): return True
    if self.eof: return False
    if self.stream is None: raise InputError("read from a closed source")
    try: chunk = self.stream.read(self.chunk_size)
    except (OSError, UnicodeError, ValueError) as exc: raise InputError(f"failed reading input: {exc}") from exc
    if not isinstance(chunk, str): raise InputError(f"expected text from input stream, got {type(chunk).__name__}")
    if not chunk:
      self.eof = True
      return False
    self.buf, self.pos = chunk, 0
    return True

  def read_rune(self) -> Optional[str]:
    """returns the next code point, or None at the end of the stream"""
    if not self._fill(): return None
    ch = self.buf[self.pos]
    self.pos += 1
    return ch

  def peek_rune(self) -> Optional[str]:
    """returns the next code point without consuming it, None at the end of the stream"""
    if not self._fill(): return None
    return self.buf[self.pos]

  def close(self):
    if getattr(self, "stream", None) is not None:
      # stdin stays usable for the rest of the process
      try: self.stream.detach() if self.detach_on_close else self.stream.close()
      finally: self.stream = None

  def __enter__(self): return self
  def __exit__(self, exc_type, exc, tb): self.close()

def as_source(obj) -> RuneReader:
  """accepts a RuneReader, a text stream or a plain string"""
  if isinstance(obj, RuneReader): return obj
  if isinstance(obj, str): return RuneReader.from_string(obj)
  if hasattr(obj, "read"): return RuneReader(obj)
  raise TypeError(f"cannot read code points from {type(obj).__name__}")

def detect_encoding(head: bytes) -> Tuple[Optional[str], bool]:
  """
    sniffs a byte order mark at the start of the content
    returns (codec name, certain); (None, False) means nothing conclusive was found
  """
  for bom, name in _BOMS:
    if head.startswith(bom): return name, True
  return None, False

def resolve_encoding(name: str) -> str:
  try: return codecs.lookup(name).name
  except LookupError as exc: raise InvalidConfiguration(f"unknown encoding: {name}") from exc

def open_source(path: Optional[str] = None, encoding: Optional[str] = None, verbose: bool = True) -> RuneReader:
  """
    opens a file (or stdin when path is None or '-') as a RuneReader
    an explicit encoding is validated before anything is read, otherwise the
    first bytes are sniffed for a byte order mark and utf-8 is presumed
  """
  if encoding: encoding = resolve_encoding(encoding)
  is_stdin = path in (None, "-")
  if is_stdin: raw = sys.stdin.buffer
  else:
    if not os.path.exists(path): raise InputError(f"Input file does not exist: {path}")
    try: raw = open(path, "rb")
    except OSError as exc: raise InputError(f"failed opening {path}: {exc}") from exc
  raw = io.BufferedReader(raw) if not hasattr(raw, "peek") else raw

  if not encoding:
    try: head = raw.peek(SNIFF_SIZE)[:SNIFF_SIZE]
    except OSError as exc:
      if not is_stdin: raw.close()
      raise InputError(f"failed reading input: {exc}") from exc
    encoding, certain = detect_encoding(head)
    if certain:
      if verbose: print(f"detected {encoding} encoding", file=sys.stderr)
    else:
      if verbose: print("could not determine encoding, presuming utf-8", file=sys.stderr)
      encoding = "utf-8"

  return RuneReader(io.TextIOWrapper(raw, encoding=encoding, newline=""), detach_on_close=is_stdin)

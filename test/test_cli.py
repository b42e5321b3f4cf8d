import codecs, io, sys
import pytest
from wordseq import InputError
from wordseq.utils import reader
from wordseq.cli import main, format_results
from wordseq.utils.reader import detect_encoding, open_source
from wordseq.utils.utils import Sequence

@pytest.fixture
def corpus(tmp_path):
  p = tmp_path / "corpus.txt"
  p.write_text("a b c a b c " * 5 + "x y z", encoding="utf-8")
  return str(p)

def test_format_results_right_aligns_counts():
  rows = format_results([Sequence(["a", "b", "c"], 12), Sequence(["b", "c", "a"], 3)])
  assert rows == [" 12 [a b c]", "  3 [b c a]"]
  assert format_results([]) == []

def test_main_prints_ranked_rows(corpus, capsys):
  assert main(["-n", "2", corpus]) == 0
  out, err = capsys.readouterr()
  assert out.splitlines() == [" 10 [a b c]", "  9 [b c a]"]
  assert "presuming utf-8" in err

def test_main_sequence_size(corpus, capsys):
  assert main(["--sequence-size", "1", "-n", "1", corpus]) == 0
  assert capsys.readouterr().out.splitlines() == [" 10 [a]"]

def test_main_reports_bom(tmp_path, capsys):
  p = tmp_path / "bom.txt"
  p.write_bytes(codecs.BOM_UTF8 + "one two three".encode("utf-8"))
  assert main([str(p)]) == 0
  out, err = capsys.readouterr()
  assert out.splitlines() == [" 1 [one two three]"]
  assert "detected utf-8-sig encoding" in err

def test_main_bad_config(corpus, capsys):
  assert main(["--sequence-size", "0", corpus]) == 2
  assert "sequence size" in capsys.readouterr().err

def test_main_bad_encoding(corpus, capsys):
  assert main(["--encoding", "klingon", corpus]) == 2
  assert "unknown encoding" in capsys.readouterr().err

def test_main_missing_file(tmp_path, capsys):
  assert main([str(tmp_path / "nope.txt")]) == 1
  out, err = capsys.readouterr()
  assert out == "" and "does not exist" in err

class _Stdin:
  def __init__(self, data): self.buffer = io.BufferedReader(io.BytesIO(data))

def test_stdin_survives_a_run(monkeypatch, capsys):
  stdin = _Stdin(b"a b c a b c")
  monkeypatch.setattr(sys, "stdin", stdin)
  assert main(["-n", "1", "-"]) == 0
  assert capsys.readouterr().out.splitlines() == [" 2 [a b c]"]
  assert not stdin.buffer.closed
  assert main(["-"]) == 0
  assert capsys.readouterr().out == ""

class _UnreadableFile:
  def __init__(self): self.closed = False
  def peek(self, n): raise OSError("bad sector")
  def close(self): self.closed = True

def test_failed_sniff_closes_file(corpus, monkeypatch):
  handle = _UnreadableFile()
  monkeypatch.setattr(reader, "open", lambda path, mode: handle, raising=False)
  with pytest.raises(InputError):
    open_source(corpus)
  assert handle.closed

@pytest.mark.parametrize("head, name", [
  (codecs.BOM_UTF8 + b"abc", "utf-8-sig"),
  (codecs.BOM_UTF16_LE + b"a\x00", "utf-16"),
  (codecs.BOM_UTF16_BE + b"\x00a", "utf-16"),
  (codecs.BOM_UTF32_LE + b"a\x00\x00\x00", "utf-32"),
  (codecs.BOM_UTF32_BE + b"\x00\x00\x00a", "utf-32"),
])
def test_detect_encoding(head, name):
  assert detect_encoding(head) == (name, True)

def test_detect_encoding_unknown():
  assert detect_encoding(b"plain ascii") == (None, False)
  assert detect_encoding(b"") == (None, False)

if __name__ == "__main__":
  pytest.main([__file__, "-v"])

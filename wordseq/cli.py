#!/usr/bin/env python3
"""
Count the most frequent word sequences in a text.

  wordseq file.txt
  cat file.txt | wordseq

A filename argument of '-' (or none at all) reads stdin.
"""

import argparse
import sys
from typing import List, Optional

from .counter import SequenceCounter
from .errors import InputError, InvalidConfiguration
from .utils.reader import open_source
from .utils.utils import Sequence

def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(prog="wordseq", description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
  parser.add_argument("path", nargs="?", default="-", help="file to read, '-' for stdin")
  parser.add_argument("--encoding", default=None, help="encoding of the input, any codec name python knows; sniffed from a byte order mark when omitted")
  parser.add_argument("--sequence-size", type=int, default=3, help="number of words per sequence")
  parser.add_argument("-n", "--top-n", type=int, default=100, help="only show the top n sequences with the highest frequency count")
  parser.add_argument("-v", "--verbose", action="store_true", help="report progress on stderr")
  return parser

def format_results(seqs: List[Sequence]) -> List[str]:
  """one row per sequence: count right-aligned to the widest count, then the words"""
  if not seqs: return []
  width = max(len(str(seq.count)) for seq in seqs) + 1
  return [f"{seq.count:>{width}} [{' '.join(seq.words)}]" for seq in seqs]

def run(args: argparse.Namespace) -> List[Sequence]:
  # validate everything before stdin or the file is touched
  counter = SequenceCounter(sequence_size=args.sequence_size, top_n=args.top_n, verbose=args.verbose)
  with open_source(args.path, encoding=args.encoding) as source: return counter.count(source)

def main(argv: Optional[List[str]] = None) -> int:
  args = build_parser().parse_args(argv)
  try: seqs = run(args)
  except InvalidConfiguration as exc:
    print(f"wordseq: {exc}", file=sys.stderr)
    return 2
  except InputError as exc:
    print(f"wordseq: {exc}", file=sys.stderr)
    return 1
  for line in format_results(seqs): print(line)
  return 0

if __name__ == "__main__":
  sys.exit(main())

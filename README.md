# strandkit

String algorithms for sequence data: suffix trees built in linear time,
compact tries over sets of strings, greedy shortest common superstring
assembly, and small helpers for reading FASTA files and character data.

Sequences are usually plain Python strings, but the tree and trie builders
accept any sequence of hashable characters. `trie_stats` and `to_dot` sort
characters, so they also need characters that can be ordered.

## Installation

```
pip install strandkit
```

For running the tests:

```
pip install "strandkit[test]"
pytest
```

## Suffix trees

`strandkit.suffix_trie` builds a suffix tree with McCreight's algorithm,
using suffix links, and answers substring queries against it. The tree is
built over the sequence as given, with no end marker added.

```python
from strandkit.suffix_trie import build_trie

trie = build_trie("ABAABABAA")

trie.indexes_substr("ABA")          # {0, 3, 5}
trie.indexes_substr("BAA")          # {1, 6}
trie.indexes_substr("AAA")          # set()

trie.index_substr_maximal("AAA")
# MaximalSubstrMatch(index=7, length=2, matched=<Matched.PARTIAL: 'partial'>)

trie.indexes_substr_maximal("AAA")
# {MaximalSubstrMatch(index=2, length=2, ...), MaximalSubstrMatch(index=7, length=2, ...)}
```

- `indexes_substr(t)` returns the set of start positions of `t`.
- `indexes_substr_maximal(t)` returns a `MaximalSubstrMatch` for every
  position where the longest prefix of `t` that occurs can be found.
- `index_substr_maximal(t)` returns one such match.

A `MaximalSubstrMatch` is a frozen dataclass with `index`, `length` and
`matched`, where `matched` is `Matched.FULL` when all of `t` was found and
`Matched.PARTIAL` when only a prefix was.

`trie_stats(trie)` prints the node and edge counts and edge-length and
branch-depth statistics, and returns the printed lines. `to_dot(trie)`
returns the tree, suffix links included, as Graphviz DOT text.

Two other constructions give the same answers:

- `strandkit.suffix_graph.build_trie` returns a `GraphSuffixTrie`, a
  McCreight build whose nodes are integers and whose edges, parents, suffix
  links and terminals live in per-node tables. It offers `indexes_substr`,
  `index_substr_maximal` and a `node_count` property.
- `strandkit.ukkonen.build_trie` returns an `UkkonenSuffixTrie`, built by
  extending every pending suffix one character at a time. It offers
  `indexes_substr`; the module also has `trie_stats` and `to_dot`. The tree
  of an empty sequence holds no suffixes, so every query on it returns an
  empty set.

## Compact tries

`strandkit.trie_compact.build_trie` stores a sequence of strings in a
path-compressed trie. `find` returns the position of a stored string, or
`None` when the query is not exactly one of the stored strings; `in` works
the same way. When a string is stored twice, the later position wins.

```python
from strandkit.trie_compact import build_trie, to_dot

trie = build_trie(["ABAA", "BABBA"])
trie.find("ABAA")   # 0
trie.find("BABBA")  # 1
trie.find("ABA")    # None
"ABAA" in trie      # True

print(to_dot(trie))  # Graphviz DOT text
```

## Shortest common superstring

`strandkit.superstring.scs` greedily merges the pair of strings with the
largest suffix/prefix overlap, as long as that overlap is at least
`min_overlap`, and returns the strings that are left: unmerged inputs first,
in input order, then merged strings in the order they were made.

```python
from strandkit.superstring import scs

scs(["uioefghabcd", "abcdefghijk", "ijklm"], 3)  # ["uioefghabcdefghijklm"]
scs(["uioefghabcd", "abcdefghijk"], 5)           # ["uioefghabcd", "abcdefghijk"]
```

## Reading data

`strandkit.util` holds the input helpers:

- `lines(s)` yields the trimmed, non-empty lines of a string;
  `lines_file(path)` yields a file's lines as they are, without line
  terminators.
- `words(s)` splits on whitespace.
- `chars(s, alphabet)` yields the characters of a trimmed string;
  `chars_file(path, alphabet)` yields every non-whitespace character of a
  file. Both raise `ValueError` on a character outside the alphabet.
- `fasta_polymers(data, alphabet)` and `fasta_polymers_file(path, alphabet)`
  parse FASTA records into `FastaEntry` objects carrying a `description` and
  a `polymer`. A sequence line before the first `>` header, or a character
  outside the alphabet, raises `ValueError`.
- `print_histogram(label, values)` prints the mean, the maximum and the
  0.05, 0.25, 0.50, 0.75 and 0.95 quantiles of non-negative integers, and
  returns the printed line.

```python
from strandkit.util import fasta_polymers

entries = list(fasta_polymers(">seq1\nACGT\nAC\n>seq2\nGG\n", "ACGT"))
entries[0].description  # "seq1"
entries[0].polymer      # "ACGTAC"
```

## What it does not do

strandkit is a library only: it installs no command-line tool. `to_dot`
returns DOT text and writes no files, and nothing in the package renders
graphs. FASTA data can be read but not written.
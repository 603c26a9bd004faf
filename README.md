# blaze

A small command-line fuzzy finder. It reads lines from a file or from standard
input, scores each line against a query, and prints the matching lines best
first, with the matched characters highlighted in bold green.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

```
blaze [--query <str>] [--limit N] [--file FILE] [--no-color]
```

The query can also be given as a bare argument; the first bare argument is
used when no query has been set yet, and a later `--query` replaces it.

```
ls | blaze main
blaze --file words.txt --limit 10 cfg
blaze --query fzm --no-color --file sources.txt
```

Options:

- `--query STR` – the text to search for.
- `--file FILE` – read lines from `FILE` (through a memory map) instead of
  standard input.
- `--limit N` – print at most `N` results. The leading integer of the value is
  used; a value of zero or below means no limit.
- `--no-color` – print lines without highlighting.

Unknown options starting with `-` are reported on standard error and
otherwise ignored. Results go to standard output, one line each.

The command exits with status 1, printing a message on standard error, when
no arguments are given, when no query is given, when the `--limit` value is
not an integer, or when the file cannot be read. Otherwise it exits with 0,
even if nothing matched.

Debug messages are sent through the standard `logging` module (loggers under
`blaze`); the command does not turn them on itself.

## Scoring

Query characters must appear in the line in order, compared
case-insensitively (ASCII letters only). Each line starts at a base score of
1000, and:

- the longest run of consecutive matched characters adds 20 per character;
- each matched character that starts a word (the start of the line, after a
  non-alphanumeric character, or at a lower-to-upper case change) adds 60;
- each unmatched character inside the matched span takes away 30;
- each character before the first match takes away 50.

Lines that do not match are dropped. Results are sorted by score, highest
first; lines with equal scores keep their input order.

## Library use

```python
from blaze.fuzzy_matcher import fuzzy_match, calculate_match
from blaze.highlighter import highlight_match

results = fuzzy_match("fm", ["fuzzy_matcher", "format", "main"])
for result in results:
    print(result.score, highlight_match(result.line, result.match_indices, True))
```

- `blaze.fuzzy_matcher.calculate_match(query, line)` returns a `MatchResult`
  with `line`, `score` and `match_indices`; a score of `-1` (and no indices)
  means the line did not match. An empty query raises `ValueError`.
- `blaze.fuzzy_matcher.fuzzy_match(query, entries)` returns the matching
  `MatchResult`s, best first.
- `blaze.fuzzy_matcher.is_word_boundary(s, i)` tells whether position `i` of
  `s` starts a word.
- `blaze.highlighter.highlight_match(line, indices, color=True)` wraps the
  characters at the given ascending indices in ANSI colour codes; with
  `color=False` or no indices the line comes back unchanged.
- `blaze.reader.read_lines_mmap(file_path)` and
  `blaze.reader.read_lines(file_path="", stream=None)` read a file (or a
  stream, standard input by default) into a list of lines without their
  newlines. Both raise `OSError` when the file cannot be opened.
- `blaze.config.parse_args(argv)` turns a list of arguments into a `Config`
  with `query`, `limit`, `no_color` and `file_path`.
- `blaze.cli.main(argv=None)` runs the command and returns its exit status.

## Limitations

blaze is a one-shot filter: it prints the ranked matches and exits. It has no
interactive screen for typing a query and picking a result.
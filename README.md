# chapterkit

A collection of small, self-contained programs and libraries: an arithmetic
expression evaluator with an SVG surface plotter, HTML outline, link and
title tools, a bit-vector integer set, plane geometry, a disk-usage counter,
an XML text selector, image thumbnails, and a handful of tiny TCP and HTTP
servers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library highlights

### Expressions (`chapterkit.eval`)

`parse` turns text into an expression tree made of `Var`, `Literal`,
`Unary`, `Binary` and `Call` nodes. Each node can `check` itself, which
adds the variables it uses to a set, and `eval` itself against a mapping of
variable names to numbers (missing variables count as 0). `format_expr`
writes a tree back out, fully parenthesised. Malformed input and bad calls
raise `ExprError`.

```python
import math
from chapterkit.eval import parse, format_expr

expr = parse("sqrt(A / pi)")
expr.check(set())
print(expr.eval({"A": 87616, "pi": math.pi}))   # about 167
print(format_expr(parse("5 / 9 * (F - 32)")))   # ((5 / 9) * (F - 32))
```

Supported functions are `pow`, `sin` and `sqrt`; operators are `+ - * /`
and unary `+ -`.

`chapterkit.surface` uses these expressions: `plot(text)` returns an SVG
drawing of the surface `z = f(x, y)`, where the expression may use `x`, `y`
and `r` (the distance from the origin).

### Integer sets (`chapterkit.intset`)

```python
from chapterkit.intset import IntSet

x = IntSet()
for n in (1, 144, 9):
    x.add(n)
print(x)                      # {1 9 144}

y = IntSet()
y.add(9)
y.add(42)
x.union_with(y)
print(x)                      # {1 9 42 144}
print(x.has(9), x.has(123))   # True False
```

Negative values raise `ValueError`.

### Other modules

- `chapterkit.geometry` – `Point`, `Path`, `RGBA`, `ColoredPoint` and `distance`.
- `chapterkit.toposort` – `topo_sort` orders a prerequisite table.
- `chapterkit.htmldoc` – `parse_html`, `for_each_node` and `visit` over a
  simple `Node` tree.
- `chapterkit.links` – `extract(url)` fetches a page and returns its links
  resolved against the page URL; failures raise `FetchError`.
- `chapterkit.outline` – `outline_paths` and `outline_tags` describe the
  element structure of a document.
- `chapterkit.title` – `titles`, `sole_title` and `title(url)`; problems
  raise `TitleError`.
- `chapterkit.fetch` – `fetch(url, directory)` saves a URL to a local file.
- `chapterkit.urlvalues` – `Values`, a dict of lists with `first` and `add`.
- `chapterkit.xmlselect` – `select(source, names)` yields the text inside
  nested elements.
- `chapterkit.du` – `disk_usage(roots, ...)` walks directory trees in
  parallel and returns the number of files and total bytes.
- `chapterkit.pipeline` – `run_pipeline(limit)` yields squares from a
  counter → squarer pipeline of threads.
- `chapterkit.countdown` – `countdown(...)` counts down and launches unless
  an abort event is set.
- `chapterkit.thumbnail` – `image`, `image_file` and friends scale images
  to at most 128×128 pixels and write JPEG thumbnails.

## Command-line tools

Each tool is installed as a console script:

| Command | What it does |
| --- | --- |
| `chapterkit-surface` | HTTP server that answers `/plot?expr=...` with an SVG surface (`--host`, `--port`) |
| `chapterkit-outline` | prints the element outline of HTML pages given as URLs, or of standard input |
| `chapterkit-title` | prints the title of HTML pages (`--all` prints every title) |
| `chapterkit-fetch` | saves the contents of URLs into local files |
| `chapterkit-toposort` | prints computer science courses in prerequisite order |
| `chapterkit-urlvalues` | demonstrates a multi-valued mapping |
| `chapterkit-xmlselect` | prints the text of XML elements on standard input nested within the named elements |
| `chapterkit-shop` | a small HTTP price list with `/list` and `/price?item=...` |
| `chapterkit-chat` | a TCP chat server |
| `chapterkit-reverb` | a TCP server that echoes each line (`--delay`, `--concurrent`) |
| `chapterkit-netcat` | a simple TCP client (`--read-only` to only print the server's output) |
| `chapterkit-du` | computes disk usage of directories (`-v` for progress, `--cancel-on-input`) |
| `chapterkit-pipeline` | prints squares through a pipeline (`--limit`, `--forever`) |
| `chapterkit-countdown` | a launch countdown aborted by pressing return (`--count`, `--interval`, `--no-abort`) |
| `chapterkit-thumbnail` | makes thumbnails of image files named on standard input |

Servers listen on `localhost:8000` by default. For example:

```
chapterkit-toposort
chapterkit-du -v .
```

## What the package does not do

- There is no command that prints or crawls the links of web pages;
  link extraction is available only as the `chapterkit.links.extract`
  function.
- There is no time-of-day server, no wait-for-server tool, and no
  memoization or bank-account helpers.
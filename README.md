# iniread

A small, forgiving INI reader. Load INI text into an `IniContext` and ask
it about sections, keys and values, or walk the text line by line with
`parse_stream` and a handler of your own.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Reading a document

```python
from iniread.parser import IniContext

ctx = IniContext(
    "[section1]\n"
    "  key1 = value1  \n"
    "[section2]\n"
    "emptyKey=\n"
)

ctx.has_section("section1")              # True
ctx.has_section("SECTION1")              # True: names compare without case
ctx.get_value("section1", "key1")        # 'value1'
ctx.get_value("section1", "key1", 4)     # 'val': at most max_len - 1 characters
ctx.get_value("section1", "missing")     # None
ctx.has_key("section2", "emptyKey")      # True
ctx.has_value("section2", "emptyKey")    # False: the value is empty
```

The parsed sections are kept in file order in `ctx.sections`, a list of
`Section` objects. Each has a `name` and a `key_values` list of `KeyValue`
objects with `key` and `value`.

Rules the reader follows:

- Lines end at `\n`; a trailing `\r` is dropped. Content after a NUL
  character is ignored.
- Each line is cut to 255 characters before it is parsed.
- Lines starting with `;` or `#` (after leading whitespace) are comments.
  Blank lines are skipped.
- `[name]` opens a section; whitespace inside the brackets is trimmed. A
  `[` with no closing `]` makes the line invalid.
- `key = value` and `key: value` both set a key; the first `=` or `:` is
  the separator. Whitespace around keys and values is trimmed. Empty values
  are allowed; an empty key makes the line invalid.
- Text after the value is kept as it is. An inline `; comment` becomes part
  of the value.
- Keys that come before the first section are ignored. Invalid lines are
  skipped.
- Section and key names compare without regard to case. Lookups use the
  first section with a matching name.
- If a key appears more than once in a section, `get_value` returns the
  last value.

Empty content raises `IniError` when you build an `IniContext`.
`get_value` raises `ValueError` when `max_len` is zero or negative.

`parse_line(line)` is also available on its own. It returns a tuple of
`(LineType, section, key, value)`, with the fields that do not apply left
as empty strings.

## Streaming

`parse_stream(content, handler)` calls the handler for each line that
means something. The handler gets the `EventType`, the current section,
the key and the value, and returns `True` to continue or `False` to stop.
`parse_stream` returns `False` if the handler stopped it, and `True`
otherwise.

```python
from iniread.parser import EventType, parse_stream

def handler(event, section, key, value):
    if event is EventType.ERROR:
        return False
    print(event.name, section, key, value)
    return True

parse_stream("; note\n[s]\na=1\n", handler)
```

What the handler receives:

- `SECTION`: the section name; key and value are `None`.
- `KEY_VALUE`: the current section (an empty string before any section),
  the key and the value.
- `COMMENT` and `ERROR`: section and key are `None`; the value is the line
  as read.

In streaming mode any run of `\r` and `\n` characters ends a line, and
blank lines produce no event.

## Demo

```
iniread-demo
```

The demo parses a built-in sample and prints whether two sections exist,
the value of one key, and whether an empty key has a value. It takes no
options beyond `--help`.

## What it does not do

The package reads INI text from a string only; open and read the file
yourself. It does not change or write INI documents, and it does not
convert values to numbers or booleans: every value is a string.
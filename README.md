# rustdrill

`rustdrill` is a library of worked lessons that go with a series of small
programming exercises, plus a few helpers for printing styled progress
messages in the terminal.

## Installation

```
pip install rustdrill
```

To run the tests:

```
pip install "rustdrill[test]"
pytest
```

## Terminal messages

`rustdrill.ui` prints coloured status lines with `rich`:

```python
from rustdrill import ui

ui.success("Successfully ran exercises/if/if1.rs")  # green, with a check mark
ui.warn("Ran exercises/if/if1.rs with errors")       # red, with a warning sign
ui.bold("I AM NOT DONE")  # "[bold]I AM NOT DONE[/bold]" console markup
ui.blue(3)                # "[blue]3[/blue]" console markup
```

Set the environment variable `NO_EMOJI` to any value to get the plain
markers `✓` and `!` instead of emoji; `ui.no_emoji()` reports whether it is set.

## Lessons

The `rustdrill.lessons` package has one module per topic:

- `variables`, `functions`, `conditionals`, `primitive_types`, `strings`
- `structs`, `enums`, `modules`, `move_semantics`, `collections`, `options`
- `error_handling`, `generics`, `traits`, `macros`, `lints`
- `workers` (threads sharing state), `cons_list`, `iterators`
- `quizzes`

Some examples:

```python
from rustdrill.lessons.conditionals import bigger, fizz_if_foo
from rustdrill.lessons.error_handling import parse_pos_nonzero, total_cost
from rustdrill.lessons.iterators import capitalize_words_string, divide, factorial
from rustdrill.lessons.traits import append_bar

bigger(32, 42)                                    # 42
fizz_if_foo("fuzz")                               # "bar"
total_cost("34")                                  # 171
capitalize_words_string(["hello", " ", "world"])  # "Hello World"
factorial(4)                                      # 24
append_bar("Foo")                                 # "FooBar"
append_bar(["Foo"])                               # ["Foo", "Bar"]

divide(81, 6)              # raises NotDivisibleError
parse_pos_nonzero("-555")  # raises ParsePosNonzeroError wrapping a CreationError
```

Failures are raised as exceptions: `generate_nametag_text("")` raises
`ValueError`, `Package` with a weight of zero or less raises `ValueError`, and
`divide(81, 0)` raises `DivideByZeroError`.

## What this package does not do

There is no command-line program. The package does not read an exercise list,
compile or run exercises, check whether an exercise is finished, watch files
for changes or show hints and progress; it offers only the lesson modules and
the message helpers above. There is no lesson module on type conversions.
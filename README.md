# rustcoach

rustcoach is a small library for people working through a set of short Rust
exercises. It has three parts:

- `rustcoach.ui` prints coloured one-line status messages.
- `rustcoach.project` writes a `rust-project.json` file so that rust-analyzer
  can treat every exercise file as its own crate.
- `rustcoach.lessons` holds worked solutions to many of the exercises,
  written in Python.

## Installing

```
pip install rustcoach
```

`rustcoach.project.RustAnalyzerProject.get_sysroot_src` runs `rustc` unless
`RUST_SRC_PATH` is set, so `rustc` must be on your `PATH` for that call.

## Status messages

```python
from rustcoach import ui

ui.warn("Compiling of exercises/intro/intro2.rs failed!")  # red
ui.success("Successfully ran exercises/intro/intro1.rs!")  # green
```

`format_warning` and `format_success` return the same text without printing
it. The marker is an emoji unless the `NO_EMOJI` environment variable is set,
in which case `!` and `✓` are used; `no_emoji()` reports which applies.

## rust-analyzer project file

```python
from rustcoach.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or ask `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk()            # ./rust-project.json, compact JSON
```

`exercises_to_json` walks every path below the given directory and passes it
to `add_path`, which adds a `Crate` (edition 2021, no dependencies, `cfg`
set to `["test"]`) when the text after the path's first dot is exactly `rs`.
`to_dict` gives the data that `write_to_disk` serialises.

## Lessons

| Module | What it covers |
| --- | --- |
| `rustcoach.lessons.basics` | `bigger`, `foo_if_fizz`, `maybe_icecream`, string helpers, `vec_loop` / `vec_map`, `sale_price`, `square`, `Wrapper` |
| `rustcoach.lessons.quizzes` | `calculate_price_of_apples`, `transformer` with `Command`, `ReportCard` |
| `rustcoach.lessons.errors` | `generate_nametag_text`, `total_cost`, `purchase`, `PositiveNonzeroInteger`, `parse_pos_nonzero` |
| `rustcoach.lessons.iterators` | capitalising words, `divide` and its errors, `factorial`, counting `Progress` values |
| `rustcoach.lessons.hashmaps` | fruit baskets and `build_scores_table` |
| `rustcoach.lessons.enums` | a `State` driven by `ChangeColor`, `Echo`, `Move` and `Quit` messages |
| `rustcoach.lessons.structs` | `Order` templates and `Package` shipping fees |
| `rustcoach.lessons.traits` | `append_bar`, `Licensed` software, `some_func` |
| `rustcoach.lessons.smart_pointers` | a `Cons` / `Nil` list and a clone-on-write `Cow` with `abs_all` |
| `rustcoach.lessons.threads` | timed workers, a shared `JobStatus`, two senders on one channel, per-offset sums |

```python
from rustcoach.lessons.iterators import divide, factorial
from rustcoach.lessons.errors import parse_pos_nonzero
from rustcoach.lessons.quizzes import calculate_price_of_apples

divide(81, 9)                   # 9
factorial(4)                    # 24
parse_pos_nonzero("42")         # PositiveNonzeroInteger(value=42)
calculate_price_of_apples(41)   # 41
```

Where the exercises report failure, the lessons raise: `divide(81, 0)` raises
`DivideByZeroError`, `parse_pos_nonzero("0")` raises `ParsePosNonzeroError`
and `Package("Spain", "Austria", -2210)` raises `ValueError`.

## What rustcoach does not do

rustcoach has no command-line program. It does not read an exercise list,
compile, run, test or lint exercise files, track which exercises are done,
watch files for changes, print hints, or reset exercises. It only provides
the library parts described above.
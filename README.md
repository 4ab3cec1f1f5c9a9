# rustdrill

Building blocks for working through small Rust exercises: reading an
exercise index, compiling and running each exercise with the Rust
toolchain, telling whether it is still marked as not done, and printing
styled progress messages. It also holds small Python counterparts of the
exercise topics.

It needs no third-party Python packages. Compiling exercises drives
`rustc` (and `cargo` for lint exercises), which must be on your `PATH`.

## Installing

```
pip install rustdrill
```

## Exercises

`rustdrill.exercise` describes exercises as listed in an `info.toml` index:

```python
from pathlib import Path
from rustdrill.exercise import parse_exercise_list, ExerciseFailed

exercises = parse_exercise_list(Path("info.toml").read_text())

for exercise in exercises:
    print(exercise.name, exercise.mode, exercise.looks_done())
```

- `parse_exercise_list(text)` returns the `Exercise` entries of the
  `[[exercises]]` tables in file order; `Exercise.from_dict(data)` builds
  one from a table with `name`, `path`, `mode` and `hint`.
- `Mode` is `COMPILE`, `TEST` or `CLIPPY` (`"compile"`, `"test"`,
  `"clippy"` in the index).
- `Exercise.state()` reads the source. If it no longer holds an
  `// I AM NOT DONE` comment the returned `State` has `done` set;
  otherwise its `context` is a tuple of `ContextLine` (`line`, `number`,
  `important`) covering two lines either side of the marker.
  `Exercise.looks_done()` is the shortcut.
- `Exercise.compile()` builds the exercise into a temporary binary named
  by `temp_file()` — `rustc` for `COMPILE`, `rustc --test` for `TEST`,
  and for `CLIPPY` a `Cargo.toml` written to `./exercises/clippy/` followed
  by `cargo clean` and `cargo clippy -- -D warnings`. On failure it raises
  `ExerciseFailed`, whose `output` is an `ExerciseOutput` with the
  compiler's `stdout` and `stderr`.
- The returned `CompiledExercise` runs the binary with `run()` (test
  binaries get `--show-output`) and raises `ExerciseFailed` if it exits
  unsuccessfully. Use it as a context manager, or call `close()`, to
  remove the temporary binary; `clean()` removes it directly.

```python
exercise = exercises[0]
try:
    with exercise.compile() as compiled:
        print(compiled.run().stdout)
except ExerciseFailed as failure:
    print(failure.output.stderr)
```

## Terminal output

`rustdrill.ui` has `red`, `green`, `blue` and `bold`, which add ANSI
styling only when standard output is a terminal (or `CLICOLOR_FORCE` is
set, and not when `CLICOLOR=0`), and `warn(message)` / `success(message)`,
which print a marked line in red or green. Setting the `NO_EMOJI`
environment variable makes `no_emoji()` true and `emoji(fancy, plain)`
return the plain symbol.

## Lessons in Python

`rustdrill.lessons` holds Python counterparts of the exercise topics:

- `basics` – variables, functions, conditionals and primitive types
- `strings` – string values and operations
- `collections` – dictionaries and lists
- `ownership` – copying lists and optional values
- `modules` – private helpers, re-exported names, the clock, `my_macro`
- `errors` – raising errors, strict integer parsing, `parse_pos_nonzero`
- `generics_traits` – `Wrapper`, `ReportCard`, `append_bar`
- `shared` – cons lists, per-thread sums, polling a worker thread
- `advanced_errors` – `Climate.from_str` and `ParseClimateError`
- `iterators` – capitalising, `divide`, `factorial`, counting progress

```python
from rustdrill.lessons.basics import calculate_apple_price
from rustdrill.lessons.iterators import factorial, divide, NotDivisibleError
from rustdrill.lessons.advanced_errors import Climate

calculate_apple_price(65)             # 65
factorial(4)                          # 24
Climate.from_str("Munich,2015,23.1")  # Climate(city='Munich', year=2015, temp=23.1)

try:
    divide(81, 6)
except NotDivisibleError as error:
    print(error)                      # 81 is not divisible by 6
```

## What it does not do

There is no command-line program: nothing here verifies all exercises in
order, watches the exercise directory for changes, lists exercises with
their status, prints hints or picks the next unfinished exercise. Those
steps have to be put together from `Exercise`, `CompiledExercise` and the
`ui` helpers by the caller.
"""Exercise descriptions, their compilation, running and completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"(?m)^\s*///?\s*I\s+AM\s+NOT\s+DONE")
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary file name unique to this process and thread."""
    return f"./temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring any error."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A line of source shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or an exercise binary."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _execute(args: Sequence[str], failure: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(list(args), capture_output=True)
    except OSError as error:
        raise RuntimeError(failure) from error


def _decode(data: bytes | str | None) -> str:
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(stdout=_decode(result.stdout), stderr=_decode(result.stderr))


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Exercise:
        missing = [key for key in ("name", "path", "mode", "hint") if key not in data]
        if missing:
            raise ValueError(f"exercise entry is missing field(s): {', '.join(missing)}")
        return cls(
            name=str(data["name"]),
            path=Path(data["path"]),
            mode=Mode(data["mode"]),
            hint=str(data["hint"]),
        )

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseFailed with the compiler output on failure."""
        source = str(self.path)
        if self.mode is Mode.COMPILE:
            result = _execute(
                ["rustc", source, "-o", temp_file(), *RUSTC_COLOR_ARGS],
                "Failed to run 'compile' command.",
            )
        elif self.mode is Mode.TEST:
            result = _execute(
                ["rustc", "--test", source, "-o", temp_file(), *RUSTC_COLOR_ARGS],
                "Failed to run 'compile' command.",
            )
        else:
            result = self._lint()
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output(result))

    def _lint(self) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        if os.environ.get("NO_EMOJI") is not None:
            message = "Failed to write Clippy Cargo.toml file."
        else:
            message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as error:
            raise OSError(message) from error
        # An executable is built too, so that clippy exercises can be run.
        _execute(
            ["rustc", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS],
            "Failed to compile!",
        )
        # A clean build is needed for clippy to report every lint.
        _execute(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            "Failed to run 'cargo clean'",
        )
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
            ],
            "Failed to run 'compile' command.",
        )

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        result = _execute(args, "Failed to run 'run' command")
        output = _output(result)
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> State:
        """Read the source and report whether the pending marker is still there."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        try:
            matched = next(i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line))
        except StopIteration:
            raise RuntimeError("pending marker matched but no single line holds it") from None
        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        context = tuple(
            ContextLine(line=line, number=index + 1, important=index == matched)
            for index, line in enumerate(lines[low : high + 1], start=low)
        )
        return State(context)

    def looks_done(self) -> bool:
        """True when the pending marker has been removed from the source."""
        return self.state().done

    def __str__(self) -> str:
        return str(self.path)


class CompiledExercise:
    """A built exercise; closing it removes the temporary binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed with its output when it fails."""
        if self._closed:
            raise RuntimeError("compiled exercise has already been closed")
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def parse_exercise_list(text: str) -> list[Exercise]:
    """Parse the contents of info.toml into exercises, in file order."""
    data = tomllib.loads(text)
    return [Exercise.from_dict(entry) for entry in data.get("exercises", [])]
"""Operation model: one recorded (command, output) pair.

The printed form follows this line-oriented grammar:

    # comment
    <command> \\
    <command wraps over onto the next line>
    ----
    <output>

Plain <output> ends at the first blank line, so it cannot contain one.
Outputs with blank lines use the escaped form:

    <command>
    ----
    ----
    <output>

    <more output>
    ----
    ----
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator, model_validator

SEPARATOR = "----"


def _is_blank(line: str) -> bool:
    return line.strip() == ""


class Operation(BaseModel):
    """The base unit of a recording: a command and its captured output.

    Commands are stored stripped. Outputs are newline-normalized: every
    line, including the last, ends with ``\\n``; the empty output stays
    empty.
    """

    model_config = {"extra": "forbid", "frozen": True}

    command: str
    output: str = ""

    @field_validator("command")
    @classmethod
    def _check_command(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("command must not be empty")
        if "\n" in value or "\r" in value:
            raise ValueError("command must fit on a single line")
        if value.startswith("#"):
            raise ValueError("command must not start with '#' (it would read back as a comment)")
        if value.endswith("\\"):
            raise ValueError("command must not end with '\\' (it would read back as a continuation)")
        return value

    @field_validator("output")
    @classmethod
    def _normalize_output(cls, value: str) -> str:
        if value and not value.endswith("\n"):
            value += "\n"
        return value.replace("\r\n", "\n")

    @model_validator(mode="after")
    def _check_representable(self) -> "Operation":
        if not self.needs_escape:
            return self
        lines = self.output[:-1].split("\n")
        for idx, line in enumerate(lines):
            if line != SEPARATOR:
                continue
            # A separator pair closes an escaped block; a trailing separator
            # would pair with the closing one.
            if idx + 1 == len(lines) or lines[idx + 1] == SEPARATOR:
                raise ValueError(
                    f"output line {idx + 1} ('{SEPARATOR}') cannot be represented "
                    "inside an escaped output block"
                )
        return self

    @property
    def needs_escape(self) -> bool:
        """Whether the output must be written in the double-separator form."""
        if not self.output:
            return False
        lines = self.output[:-1].split("\n")
        if lines[0] == SEPARATOR:
            return True
        return any(_is_blank(line) for line in lines)

    def serialize(self) -> str:
        """Printable form of the operation, including the trailing blank line."""
        parts = [self.command, "\n", SEPARATOR, "\n"]

        escaped = self.needs_escape
        if escaped:
            parts += [SEPARATOR, "\n"]

        parts.append(self.output)
        if self.output and not self.output.endswith("\n"):
            parts.append("\n")

        if escaped:
            parts += [SEPARATOR, "\n", SEPARATOR, "\n"]

        parts.append("\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.serialize()

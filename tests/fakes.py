# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(slots=True)
class ScriptedConsole:
    """
    Stand-in for input()/print() in console tests.

    - read() pops the next scripted answer; EOFError once the script runs out
    - write() records everything printed
    - prompts records what the loop asked for, in order
    """

    answers: list[str] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)
    output: list[str] = field(default_factory=list)

    @classmethod
    def of(cls, answers: Iterable[str]) -> ScriptedConsole:
        return cls(answers=list(answers))

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)

"""ordered text transformation stages."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Stage:
    """a named text-to-text transformation."""

    name: str
    apply: Callable[[str], str]


class Pipeline:
    """applies stages in declaration order, each receiving the previous output."""

    def __init__(self, stages: Iterable[Stage]) -> None:
        self._stages = tuple(stages)

    @property
    def names(self) -> tuple[str, ...]:
        """stage names in application order."""
        return tuple(stage.name for stage in self._stages)

    def __call__(self, text: str) -> str:
        for stage in self._stages:
            text = stage.apply(text)
        return text

"""Adapter protocol definitions for injectable dependencies."""
from __future__ import annotations

from types import TracebackType
from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class RenderedElement(Protocol):
    """One element of a rendered document, as read from the live DOM."""

    tag_name: str
    attributes: Sequence[tuple[str, str]]
    text_content: Optional[str]


@runtime_checkable
class RenderedDocument(Protocol):
    """A loaded document whose body elements can be enumerated in document order."""

    def elements(self) -> Sequence[RenderedElement]:
        ...


@runtime_checkable
class Renderer(Protocol):
    """Scoped rendering session that loads URLs one at a time."""

    def __enter__(self) -> "Renderer":
        ...

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        ...

    def load(self, url: str) -> RenderedDocument:
        ...


__all__ = ["RenderedElement", "RenderedDocument", "Renderer"]

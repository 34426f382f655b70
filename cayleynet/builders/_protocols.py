"""Capability interfaces of the builders.

Builders differ in what they let callers do: the unordered builders accept
stand-alone vertices, the breadth-first builders only accept vertices that
arrive through an edge. Each capability is its own protocol, so a
breadth-first builder simply has no ``add_vertex``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Finishable(Protocol):
    def finish(self): ...


@runtime_checkable
class JoinableGraph(Finishable, Protocol):
    def join(self, src, tgt) -> bool: ...


@runtime_checkable
class VertexAddable(Protocol):
    def add_vertex(self, vertex) -> bool: ...


@runtime_checkable
class ColorJoinable(Finishable, Protocol):
    def join(self, src, tgt, color) -> bool: ...

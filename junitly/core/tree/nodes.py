"""
Parser-independent view of a class declaration.

Every node exposes a ``kind`` so checks can dispatch on NodeKind without
knowing which parser produced the tree. Sequences keep source order.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class NodeKind(Enum):
    IDENT = "ident"
    DOT = "dot"
    ANNOTATION = "annotation"
    METHOD = "method"
    CLASS = "class"
    OTHER = "other"


@dataclass(frozen=True)
class Ident:
    text: str
    lineno: Optional[int] = None
    col_offset: Optional[int] = None
    end_col_offset: Optional[int] = None

    @property
    def kind(self) -> NodeKind:
        return NodeKind.IDENT


@dataclass(frozen=True)
class Dot:
    """`left.right`; chains lean left, so `a.b.C` is Dot(Dot(a, b), C)."""
    left: "NameNode"
    right: Ident

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DOT


NameNode = Union[Ident, Dot]


@dataclass(frozen=True)
class Annotation:
    name: NameNode

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ANNOTATION


@dataclass(frozen=True)
class Other:
    """A modifier or member no check looks into."""
    description: str = ""

    @property
    def kind(self) -> NodeKind:
        return NodeKind.OTHER


Modifier = Union[Annotation, Other]


@dataclass(frozen=True)
class MethodDecl:
    name: Ident
    modifiers: Tuple[Modifier, ...] = ()

    @property
    def kind(self) -> NodeKind:
        return NodeKind.METHOD


@dataclass(frozen=True)
class ClassDecl:
    identifier: NameNode
    modifiers: Tuple[Modifier, ...] = ()
    members: Tuple["Member", ...] = ()

    @property
    def kind(self) -> NodeKind:
        return NodeKind.CLASS


Member = Union[MethodDecl, ClassDecl, Other]

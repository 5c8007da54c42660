"""Shared type definitions for fishtail.

Enums used across parsers, the IR, and the viewer data builder.
"""

from __future__ import annotations

from enum import Enum, auto


class NodeShape(Enum):
    Cylinder = auto()  # id[(Label)]
    Circle = auto()  # id((Label))
    Subroutine = auto()  # id[[Label]]
    Hexagon = auto()  # id{{Label}}
    Parallelogram = auto()  # id[/Label/]
    ParallelogramAlt = auto()  # id[\Label\]
    Rectangle = auto()  # id[Label]
    Rounded = auto()  # id(Label)
    Diamond = auto()  # id{Label}
    Asymmetric = auto()  # id>Label]


class EdgeType(Enum):
    Arrow = auto()  # -->
    Line = auto()  # ---
    Open = auto()  # --
    DottedArrow = auto()  # -.->  -..->
    DottedLine = auto()  # -.-  -..-
    ThickArrow = auto()  # ==>

    @classmethod
    def default(cls) -> EdgeType:
        return cls.Arrow

    @property
    def dotted(self) -> bool:
        return self in (EdgeType.DottedArrow, EdgeType.DottedLine)

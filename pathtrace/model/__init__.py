"""Graph and step-snapshot data model."""

from __future__ import annotations

from pathtrace.model.graph import Edge, Node
from pathtrace.model.step import StepSnapshot

__all__ = ["Edge", "Node", "StepSnapshot"]

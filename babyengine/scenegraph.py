"""A tree of named transformables moved, rotated, scaled and split as subtrees."""

from __future__ import annotations

import numpy as np

from .glmath import Vector, rotation
from .transformable import Transformable


class SGNode:
    """A scene-graph node holding a transformable item and its child nodes."""

    def __init__(
        self,
        item: Transformable | None = None,
        name: str = "leaf",
        is_particle_system: bool = False,
    ) -> None:
        self.item = item
        self.name = name
        self.is_particle_system = is_particle_system
        self.do_rotate = True
        self.children: list[SGNode] = []
        self.node_model_matrix = np.identity(4)

    def __repr__(self) -> str:
        return f"SGNode({self.name!r}, children={len(self.children)})"

    def move_node(self, node_name: str, delta: Vector, found: bool = False) -> None:
        """Translate the node called ``node_name`` and everything below it.

        Particle-system nodes move by half of ``delta``.
        """
        delta = np.asarray(delta, dtype=float)
        hit = found or self.name == node_name
        if hit and self.item is not None:
            self.item.global_move(delta * 0.5 if self.is_particle_system else delta)
        for child in self.children:
            child.move_node(node_name, delta, hit)

    def rotate_node(
        self,
        node_name: str,
        axis: Vector,
        degrees: float,
        found: bool = False,
        parent_position: Vector = (0.0, 0.0, 0.0),
    ) -> None:
        """Rotate the named node in place and swing its descendants around it.

        A node whose ``do_rotate`` is off is skipped together with its subtree.
        """
        if not self.do_rotate:
            return
        parent = np.asarray(parent_position, dtype=float)

        if found:
            offset = self.item.position - parent
            matrix = rotation(degrees, axis)
            self.item.position = parent.copy()
            self.item.rotate(matrix)
            self.item.position = parent + (matrix @ np.append(offset, 1.0))[:3]
            for child in self.children:
                child.rotate_node(node_name, axis, degrees, True, parent)
        elif self.name == node_name:
            if self.item is not None:
                self.item.rotate(rotation(degrees, axis))
                pivot = self.item.position.copy()
            else:
                pivot = parent
            for child in self.children:
                child.rotate_node(node_name, axis, degrees, True, pivot)
        else:
            for child in self.children:
                child.rotate_node(node_name, axis, degrees, False, parent)

    def scale_node(
        self,
        node_name: str,
        factor: Vector,
        found: bool = False,
        parent_position: Vector = (0.0, 0.0, 0.0),
    ) -> None:
        """Set the scale of the named subtree, spreading descendants about its node."""
        factor = np.asarray(factor, dtype=float)
        parent = np.asarray(parent_position, dtype=float)

        if found:
            offset = self.item.position - parent
            self.item.scale = factor.copy()
            self.item.position = parent + offset * factor
            for child in self.children:
                child.scale_node(node_name, factor, True, parent)
        elif self.name == node_name:
            if self.item is not None:
                self.item.scale = factor.copy()
                pivot = self.item.position.copy()
            else:
                pivot = parent
            for child in self.children:
                child.scale_node(node_name, factor, True, pivot)
        else:
            for child in self.children:
                child.scale_node(node_name, factor, False, parent)

    def detach_node(
        self,
        node_name: str,
        found: bool = False,
        detached: list[SGNode] | None = None,
    ) -> list[SGNode]:
        """Break the named subtree apart, appending every descendant to ``detached``.

        Descendants are appended deepest first within each branch. Returns the list.
        """
        if detached is None:
            detached = []
        if found or self.name == node_name:
            for child in self.children:
                child.detach_node(node_name, True, detached)
                detached.append(child)
            self.children = []
        else:
            for child in self.children:
                child.detach_node(node_name, False, detached)
        return detached


class SceneGraph:
    """A scene graph rooted at a node named ``"root"``."""

    def __init__(self) -> None:
        self.root = SGNode(None, "root", False)
        self.detached_nodes: list[SGNode] = []

    def move_subtree(self, node_name: str, delta: Vector) -> None:
        """Translate a named subtree."""
        self.root.move_node(node_name, delta, False)

    def rotate_subtree(self, node_name: str, axis: Vector, degrees: float) -> None:
        """Rotate a named subtree about its top node."""
        self.root.rotate_node(node_name, axis, degrees, False, np.zeros(3))

    def scale_subtree(self, node_name: str, factor: Vector) -> None:
        """Scale a named subtree about its top node."""
        self.root.scale_node(node_name, factor, False, np.zeros(3))

    def destroy_subtree(self, node_name: str) -> None:
        """Detach every descendant of the named node into ``detached_nodes``."""
        self.root.detach_node(node_name, False, self.detached_nodes)
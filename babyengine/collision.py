"""Proximity collisions between scene-graph nodes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from .scenegraph import SceneGraph, SGNode

COLLISION_DISTANCE = 2.0


def check_for_collision(
    clustered: Iterable[SGNode], independent: Sequence[SGNode]
) -> str | None:
    """Return the name of the first clustered node closer than the collision distance
    to any independent node, or None when nothing collides."""
    for clustered_node in clustered:
        for independent_node in independent:
            distance = np.linalg.norm(
                clustered_node.item.position - independent_node.item.position
            )
            if distance < COLLISION_DISTANCE:
                return clustered_node.name
    return None


def handle_collision(
    nodes: Iterable[SGNode], colliding_name: str, scene_graph: SceneGraph
) -> None:
    """Unhook every child called ``colliding_name`` from ``nodes`` and hang it off the root."""
    for node in nodes:
        kept = []
        for child in node.children:
            if child.name == colliding_name:
                scene_graph.root.children.append(child)
            else:
                kept.append(child)
        node.children = kept
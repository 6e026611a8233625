"""Bodies with bounding volumes and a small physics engine that moves them."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Generic, Optional, Protocol, TypeVar

from rockfield.timer import Counter

Vector = tuple[float, ...]


def _vector(values: Sequence[float]) -> Vector:
    return tuple(float(value) for value in values)


class BoundingVolumeCircle:
    """A bounding sphere (a circle in two dimensions) around a centre."""

    def __init__(self, position: Sequence[float], radius: float):
        self.position = _vector(position)
        self.radius = float(radius)

    def collides(self, volume: BoundingVolumeCircle) -> bool:
        """Return True if the two spheres touch or overlap."""
        if len(volume.position) != len(self.position):
            raise ValueError("bounding volumes must have the same dimension")
        distance_squared = sum((a - b) ** 2 for a, b in zip(self.position, volume.position))
        reach = self.radius + volume.radius
        return distance_squared <= reach * reach

    def __repr__(self) -> str:
        return f"BoundingVolumeCircle({self.position!r}, {self.radius!r})"


class BoundingVolumeHyperRectangle:
    """An axis aligned box given by its centre and its edge lengths."""

    def __init__(self, position: Sequence[float], edge_lengths: Sequence[float]):
        self.position = _vector(position)
        self.edge_lengths = _vector(edge_lengths)
        if len(self.position) != len(self.edge_lengths):
            raise ValueError("position and edge lengths must have the same dimension")

    def collides(self, volume: BoundingVolumeHyperRectangle) -> bool:
        """Return True if the two boxes overlap on every axis."""
        if len(volume.position) != len(self.position):
            raise ValueError("bounding volumes must have the same dimension")
        return all(
            2.0 * abs(p1 - p2) <= e1 + e2
            for p1, p2, e1, e2 in zip(
                self.position, volume.position, self.edge_lengths, volume.edge_lengths
            )
        )

    def edge_length(self, edge: int) -> float:
        """Return the length of the box along the given axis."""
        return self.edge_lengths[edge]

    def __repr__(self) -> str:
        return f"BoundingVolumeHyperRectangle({self.position!r}, {self.edge_lengths!r})"


class BoundingVolume(Protocol):
    position: Vector

    def collides(self, volume) -> bool: ...


BV = TypeVar("BV", BoundingVolumeCircle, BoundingVolumeHyperRectangle)


class Body(Generic[BV]):
    """A moving body: a bounding volume with velocity, orientation and lifetime.

    ``fix``, if given, is called as ``fix(body, seconds)`` after every movement
    and may correct the body's values, for instance to wrap it around the screen.
    """

    def __init__(
        self,
        bounding_volume: BV,
        velocity: Sequence[float],
        max_velocity: float = 1.0,
        min_velocity: float = 0.0,
        angle: float = 0.0,
        fix: Optional[Callable[[Body, float], None]] = None,
    ):
        self.bounding_volume = bounding_volume
        self._velocity = _vector(velocity)
        if len(self._velocity) != len(bounding_volume.position):
            raise ValueError("velocity and position must have the same dimension")
        self.max_velocity = float(max_velocity)
        self.min_velocity = float(min_velocity)
        self.angle = float(angle)
        self.fix = fix
        self._delete_counter = Counter()
        self._deletable = False

    @property
    def position(self) -> Vector:
        return self.bounding_volume.position

    @position.setter
    def position(self, position: Sequence[float]) -> None:
        self.bounding_volume.position = _vector(position)

    @property
    def velocity(self) -> Vector:
        return self._velocity

    @velocity.setter
    def velocity(self, velocity: Sequence[float]) -> None:
        new_velocity = _vector(velocity)
        if len(new_velocity) != len(self._velocity):
            raise ValueError("velocity must keep its dimension")
        self._velocity = new_velocity

    def move(self, seconds: float = 1.0) -> None:
        """Move along the velocity, count down the lifetime, then apply ``fix``."""
        self.position = tuple(p + v * seconds for p, v in zip(self.position, self._velocity))
        if self._deletable:
            self._delete_counter.tick(seconds)
        if self.fix is not None:
            self.fix(self, seconds)

    def turn(self, angle: float, seconds: float = 1.0) -> None:
        """Turn in the x/y plane by ``angle`` radians per second."""
        self.angle += angle * seconds

    def _heading(self) -> Vector:
        heading = (math.cos(self.angle), math.sin(self.angle))
        return heading + (0.0,) * (len(self._velocity) - 2)

    def accelerate(self, acceleration: float, seconds: float = 1.0) -> None:
        """Speed up along the heading, keeping the speed within its limits."""
        heading = self._heading()
        velocity = [v + acceleration * seconds * h for v, h in zip(self._velocity, heading)]
        speed = math.hypot(*velocity)
        if speed > self.max_velocity:
            velocity = [v * self.max_velocity / speed for v in velocity]
        elif speed < self.min_velocity:
            if speed > 0.0:
                velocity = [v * self.min_velocity / speed for v in velocity]
            else:
                velocity = [h * self.min_velocity for h in heading]
        self._velocity = tuple(velocity)

    def bounce(self, coordinate: int) -> None:
        """Reverse the velocity along one axis."""
        velocity = list(self._velocity)
        velocity[coordinate] = -velocity[coordinate]
        self._velocity = tuple(velocity)

    def mark_for_deletion(self) -> None:
        """Have the body removed at the next physics tick."""
        self._deletable = True
        self._delete_counter.time = 0.0

    def is_marked_for_deletion(self) -> bool:
        """Return True once the body's lifetime has run out."""
        return self._deletable and self._delete_counter.time <= 0.0

    def set_time_to_delete(self, time_to_delete: float) -> None:
        """Give the body a lifetime in seconds, after which it is deleted."""
        self._deletable = True
        self._delete_counter.time = float(time_to_delete)

    def get_time_to_delete(self) -> float:
        """Return the lifetime left in seconds."""
        return self._delete_counter.time

    def __repr__(self) -> str:
        return f"Body({self.bounding_volume!r}, velocity={self._velocity!r}, angle={self.angle!r})"


def _not_marked(body: Body) -> bool:
    return not body.is_marked_for_deletion()


class Physics(Generic[BV]):
    """Moves bodies and reports their collisions to callbacks.

    Without ``check_collision`` every touching pair is resolved; without the
    resolving callbacks collisions and deletions need no further handling.
    """

    def __init__(
        self,
        check_collision: Optional[Callable[[Body, Body], bool]] = None,
        resolve_collision: Optional[Callable[[Body, Body], None]] = None,
        resolve_deleted_body: Optional[Callable[[Body], None]] = None,
    ):
        self.check_collision = check_collision
        self.resolve_collision = resolve_collision
        self.resolve_deleted_body = resolve_deleted_body
        self.tick_time = 1.0
        self._bodies: list[Body] = []
        self._bodies_to_add: list[Body] = []
        self._recently_added: list[Body] = []

    @property
    def bodies(self) -> tuple[Body, ...]:
        """All bodies managed by the engine, in the order they were added."""
        return tuple(self._bodies)

    @property
    def recently_added_bodies(self) -> tuple[Body, ...]:
        """The bodies that were added during the last tick."""
        return tuple(self._recently_added)

    def add_body(self, body: Body) -> None:
        """Queue a body; it joins the engine at the next tick."""
        self._bodies_to_add.append(body)

    def get_body(self, index: int) -> Body:
        return self._bodies[index]

    def _remove_deleted(self) -> None:
        kept = []
        for body in self._bodies:
            if body.is_marked_for_deletion():
                if self.resolve_deleted_body is not None:
                    self.resolve_deleted_body(body)
            else:
                kept.append(body)
        self._bodies = kept

    def _should_resolve(self, first: Body, second: Body) -> bool:
        if not first.bounding_volume.collides(second.bounding_volume):
            return False
        return self.check_collision is None or self.check_collision(first, second)

    def tick(self, tick_time: float | None = None) -> None:
        """Add queued bodies, drop deleted ones, move, resolve collisions, drop again."""
        if tick_time is not None:
            self.tick_time = float(tick_time)

        self._recently_added = self._bodies_to_add
        self._bodies.extend(self._bodies_to_add)
        self._bodies_to_add = []

        self._remove_deleted()

        for body in self._bodies:
            body.move(self.tick_time)

        for i, first in enumerate(self._bodies):
            for second in self._bodies[i + 1 :]:
                if first.is_marked_for_deletion() or second.is_marked_for_deletion():
                    continue
                if self._should_resolve(first, second) and self.resolve_collision is not None:
                    self.resolve_collision(first, second)

        self._remove_deleted()

    def is_area_free_of_bodies(
        self, area: BV, check_body: Callable[[Body], bool] = _not_marked
    ) -> bool:
        """Return True if no body accepted by ``check_body`` overlaps ``area``."""
        return not any(
            check_body(body) and body.bounding_volume.collides(area) for body in self._bodies
        )
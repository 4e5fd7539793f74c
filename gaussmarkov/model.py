"""The three-dimensional Gauss-Markov mobility model with its own clock."""

from __future__ import annotations

import math
from collections.abc import Callable

from gaussmarkov.geometry import Box, Vector
from gaussmarkov.randomvars import (
    BoundedNormalVariable,
    ConstantVariable,
    UniformVariable,
)

CourseChangeCallback = Callable[["GaussMarkovMobilityModel"], None]


class _ConstantVelocity:
    """Moves a position at a fixed velocity between updates."""

    def __init__(self, position: Vector) -> None:
        self.position = position
        self._velocity = Vector()
        self.last_update = 0.0
        self.paused = True

    @property
    def velocity(self) -> Vector:
        return Vector() if self.paused else self._velocity

    def set_position(self, position: Vector, now: float) -> None:
        self.position = position
        self._velocity = Vector()
        self.last_update = now

    def set_velocity(self, velocity: Vector, now: float) -> None:
        self._velocity = velocity
        self.last_update = now

    def update(self, now: float) -> None:
        elapsed = now - self.last_update
        self.last_update = now
        if not self.paused:
            self.position = self.position + self._velocity.scaled(elapsed)

    def update_within(self, bounds: Box, now: float) -> None:
        self.update(now)
        p = self.position
        self.position = Vector(
            min(bounds.x_max, max(bounds.x_min, p.x)),
            min(bounds.y_max, max(bounds.y_min, p.y)),
            min(bounds.z_max, max(bounds.z_min, p.z)),
        )


class GaussMarkovMobilityModel:
    """A node whose speed, heading and pitch follow a Gauss-Markov process.

    Every ``time_step`` seconds each quantity is redrawn as
    ``alpha * old + (1 - alpha) * mean + sqrt(1 - alpha**2) * noise``;
    the node then moves in a straight line and is turned back at the
    faces of ``bounds``.
    """

    def __init__(
        self,
        bounds: Box | None = None,
        time_step: float = 1.0,
        alpha: float = 1.0,
        mean_velocity=None,
        mean_direction=None,
        mean_pitch=None,
        normal_velocity=None,
        normal_direction=None,
        normal_pitch=None,
        position: Vector | None = None,
    ) -> None:
        if time_step == 0:
            raise ValueError("time_step must be non-zero")
        if abs(alpha) > 1:
            raise ValueError(f"alpha must lie in [-1, 1], got {alpha}")
        self.bounds = bounds if bounds is not None else Box()
        self.time_step = time_step
        self.alpha = alpha
        self._rnd_mean_velocity = mean_velocity or UniformVariable(0.0, 1.0)
        self._rnd_mean_direction = mean_direction or UniformVariable(0.0, 6.283185307)
        self._rnd_mean_pitch = mean_pitch or ConstantVariable(0.0)
        self._normal_velocity = normal_velocity or BoundedNormalVariable(0.0, 1.0, 10.0)
        self._normal_direction = normal_direction or BoundedNormalVariable(0.0, 1.0, 10.0)
        self._normal_pitch = normal_pitch or BoundedNormalVariable(0.0, 1.0, 10.0)

        self._now = 0.0
        self._mean_velocity = 0.0
        self._mean_direction = 0.0
        self._mean_pitch = 0.0
        self._velocity = 0.0
        self._direction = 0.0
        self._pitch = 0.0
        self._listeners: list[CourseChangeCallback] = []
        self._helper = _ConstantVelocity(position if position is not None else Vector())
        self._helper.paused = False
        self._next_start: float | None = self._now

    def now(self) -> float:
        """Current simulated time in seconds."""
        return self._now

    def position(self) -> Vector:
        """Current position."""
        self._helper.update(self._now)
        return self._helper.position

    def velocity(self) -> Vector:
        """Current velocity vector."""
        return self._helper.velocity

    def set_position(self, position: Vector) -> None:
        """Move the node and restart its walk at the current time."""
        self._helper.set_position(position, self._now)
        self._next_start = self._now

    def on_course_change(self, callback: CourseChangeCallback) -> CourseChangeCallback:
        """Register ``callback`` to be called with the model on every course change."""
        self._listeners.append(callback)
        return callback

    def assign_streams(self, stream: int) -> int:
        """Seed the six random variables from ``stream`` on; return how many were used."""
        self._rnd_mean_velocity.set_stream(stream)
        self._normal_velocity.set_stream(stream + 1)
        self._rnd_mean_direction.set_stream(stream + 2)
        self._normal_direction.set_stream(stream + 3)
        self._rnd_mean_pitch.set_stream(stream + 4)
        self._normal_pitch.set_stream(stream + 5)
        return 6

    def advance(self, duration: float) -> None:
        """Run the model for ``duration`` seconds, including steps due at the end."""
        if duration < 0:
            raise ValueError(f"cannot advance by a negative duration: {duration}")
        target = self._now + duration
        while self._next_start is not None and self._next_start <= target:
            self._now = self._next_start
            self._next_start = None
            self._start()
        self._now = target

    @staticmethod
    def _heading(speed: float, direction: float, pitch: float) -> Vector:
        cos_pitch = math.cos(pitch)
        return Vector(
            speed * math.cos(direction) * cos_pitch,
            speed * math.sin(direction) * cos_pitch,
            speed * math.sin(pitch),
        )

    def _start(self) -> None:
        if self._mean_velocity == 0.0:
            self._mean_velocity = self._rnd_mean_velocity()
            self._mean_direction = self._rnd_mean_direction()
            self._mean_pitch = self._rnd_mean_pitch()
            self._velocity = self._mean_velocity
            self._direction = self._mean_direction
            self._pitch = self._mean_pitch
            self._helper.set_velocity(
                self._heading(self._velocity, self._direction, self._pitch), self._now
            )
        self._helper.update(self._now)

        rv = self._normal_velocity()
        rd = self._normal_direction()
        rp = self._normal_pitch()

        keep = self.alpha
        pull = 1 - self.alpha
        noise = math.sqrt(1 - self.alpha * self.alpha)
        self._velocity = keep * self._velocity + pull * self._mean_velocity + noise * rv
        self._direction = keep * self._direction + pull * self._mean_direction + noise * rd
        self._pitch = keep * self._pitch + pull * self._mean_pitch + noise * rp

        self._helper.set_velocity(
            self._heading(self._velocity, self._direction, self._pitch), self._now
        )
        self._helper.paused = False
        self._walk(self.time_step)

    def _walk(self, delay: float) -> None:
        self._helper.update_within(self.bounds, self._now)
        position = self._helper.position
        speed = self._helper.velocity
        next_position = position + speed.scaled(delay)
        if delay < 0.0:
            delay = 1.0

        if not self.bounds.is_inside(next_position):
            vx, vy, vz = speed.x, speed.y, speed.z
            b = self.bounds
            if next_position.x > b.x_max or next_position.x < b.x_min:
                vx = -vx
                self._mean_direction = math.pi - self._mean_direction
            if next_position.y > b.y_max or next_position.y < b.y_min:
                vy = -vy
                self._mean_direction = -self._mean_direction
            if next_position.z > b.z_max or next_position.z < b.z_min:
                vz = -vz
                self._mean_pitch = -self._mean_pitch
            self._direction = self._mean_direction
            self._pitch = self._mean_pitch
            self._helper.set_velocity(Vector(vx, vy, vz), self._now)
            self._helper.paused = False

        self._next_start = self._now + delay
        for callback in list(self._listeners):
            callback(self)
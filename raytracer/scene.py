"""A bounded collection of objects that rays are traced against."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from raytracer.hittable import HitRecord, Sphere
from raytracer.vector import Interval, Ray


class SceneFullError(Exception):
    """Raised when adding an object to a scene at capacity."""


class Scene:
    """Objects in insertion order, at most ``CAPACITY`` of them."""

    CAPACITY = 1000

    def __init__(self) -> None:
        self._objects: list[Sphere] = []

    def add(self, obj: Sphere) -> None:
        if len(self._objects) >= self.CAPACITY:
            raise SceneFullError(f"scene holds at most {self.CAPACITY} objects")
        self._objects.append(obj)

    def hit(self, ray: Ray, interval: Interval) -> tuple[int, HitRecord] | None:
        """Index and record of the closest hit within ``interval``, or None."""
        closest: tuple[int, HitRecord] | None = None
        for index, obj in enumerate(self._objects):
            record = obj.hit(ray, interval)
            if record is not None and interval.surrounds(record.t):
                closest = (index, record)
                interval = replace(interval, maximum=record.t)
        return closest

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Sphere]:
        return iter(self._objects)

    def __getitem__(self, index: int) -> Sphere:
        return self._objects[index]
"""Small generic two- and three-component vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Vec2:
    """A two-component vector; components default to zero."""

    x: Any = 0
    y: Any = 0


@dataclass
class Vec3:
    """A three-component vector; components default to zero."""

    x: Any = 0
    y: Any = 0
    z: Any = 0
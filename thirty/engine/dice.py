"""
Thirty - Dice Sources

The engine never calls ``random`` directly. It asks a dice source for the
next face, so tests and replays can supply a fixed sequence.
"""

import random
from collections import deque
from typing import Iterable, Protocol, runtime_checkable

from thirty.engine.base import DIE_FACES


@runtime_checkable
class DiceSource(Protocol):
    """Anything that can produce die faces."""

    def next_face(self) -> int:
        """Return the next die face, 1-6."""


class RandomDiceSource:
    """Uniform D6 faces from a (optionally seeded) ``random.Random``."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def next_face(self) -> int:
        return self._rng.randint(1, DIE_FACES)


class ScriptedDiceSource:
    """
    Replays a fixed sequence of faces.

    Raises ValueError when a face is out of range or the script runs out.
    """

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces = deque()
        self.extend(faces)

    def extend(self, faces: Iterable[int]) -> None:
        """Queue more faces behind the current script."""
        for face in faces:
            if not (1 <= face <= DIE_FACES):
                raise ValueError(f"Scripted face {face} must be between 1 and {DIE_FACES}.")
            self._faces.append(face)

    @property
    def remaining(self) -> int:
        return len(self._faces)

    def next_face(self) -> int:
        if not self._faces:
            raise ValueError("Scripted dice source is exhausted.")
        return self._faces.popleft()

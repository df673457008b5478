# models/types.py

"""
Holds the record discriminator and the structural type shared by the classification rules.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class RecordKind(str, Enum):
    STUDENT = "student"
    GRADUATE = "graduate"


class Gradeable(Protocol):
    @property
    def gpa(self) -> float: ...

    @property
    def kind(self) -> RecordKind: ...

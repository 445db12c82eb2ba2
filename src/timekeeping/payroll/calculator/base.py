from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import RegularOvertimeSplit


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for the regular/overtime split)."""

    @abstractmethod
    def split(self, total_minutes: int, recorded_days: int) -> RegularOvertimeSplit:
        raise NotImplementedError

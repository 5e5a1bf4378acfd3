"""Base interface for pure-component property correlators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict


class PropertyCorrelator(ABC):
    """Abstract base class for temperature-dependent property packages."""

    @abstractmethod
    def properties_at(self, component_name: str, temperature: float) -> Dict[str, float]:
        """Return ``{property_name: value}`` for one component at ``temperature`` (K)."""
        pass

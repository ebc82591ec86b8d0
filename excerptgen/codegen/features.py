"""
Optional Capabilities of the Target Environment.

Excerpts never store environment state. Instead they query the source
buffer for a capability while rendering, and the buffer forwards the
query to a pluggable CapabilityLookup.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from ..utils.config import ExcerptgenConfig


class FeatureType(Enum):
    """Optional capabilities an environment may report."""

    # Value is the marker type name, e.g. "javax.annotation.Generated"
    GENERATED_ANNOTATION = "generated_annotation"


@dataclass(frozen=True)
class Capability:
    """Result of querying a feature: a value, or absence."""

    feature: FeatureType
    value: Optional[Any] = None

    @property
    def is_present(self) -> bool:
        return self.value is not None

    def if_present(self, consumer: Callable[[Any], None]) -> None:
        """Call ``consumer`` with the capability value if it is available."""
        if self.value is not None:
            consumer(self.value)

    def __bool__(self) -> bool:
        return self.is_present


class CapabilityLookup(Protocol):
    """Protocol for looking up optional capabilities."""

    def lookup(self, feature: FeatureType) -> Optional[Any]:
        """Return the capability value, or None if unavailable."""
        ...


class Environment:
    """Static, dictionary-backed capability lookup."""

    def __init__(self, features: Optional[Mapping[FeatureType, Any]] = None):
        self._features: Dict[FeatureType, Any] = {
            feature: value for feature, value in (features or {}).items() if value is not None
        }

    def lookup(self, feature: FeatureType) -> Optional[Any]:
        return self._features.get(feature)

    def with_feature(self, feature: FeatureType, value: Optional[Any]) -> 'Environment':
        """Return a copy of this environment with ``feature`` set (or removed if None)."""
        features = dict(self._features)
        features[feature] = value
        return Environment(features)

    @classmethod
    def from_config(cls, config: ExcerptgenConfig) -> 'Environment':
        """Build an environment from the ``features`` configuration section."""
        return cls({FeatureType.GENERATED_ANNOTATION: config.features.generated_annotation})

    def __repr__(self) -> str:
        features = ", ".join(f"{feature.value}={value!r}" for feature, value in self._features.items())
        return f"Environment({features})"

"""
Excerpt Base Class and Field Reporting Protocol.

An excerpt is an immutable fragment of generated source text that knows
how to render itself into a source buffer. Every excerpt reports the
state captured by its constructor through a FieldReceiver; equality,
hashing and the textual description are all derived from that report
here, once, so concrete excerpts only implement ``render`` and
``report_fields``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Protocol, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .source_builder import SourceBuilder


# Methods derived from report_fields that subclasses may not redefine
_DERIVED_METHODS = ("__eq__", "__hash__", "__repr__", "__str__")


class FieldReceiver(Protocol):
    """Protocol for sinks that accept an excerpt's reported fields."""

    def add(self, name: str, value: Any) -> None:
        """Receive one named field value."""
        ...


class FieldList:
    """FieldReceiver that records fields in the order they are reported."""

    def __init__(self):
        self._fields: List[Tuple[str, Any]] = []

    def add(self, name: str, value: Any) -> None:
        self._fields.append((name, value))

    @property
    def fields(self) -> List[Tuple[str, Any]]:
        return list(self._fields)

    @property
    def values(self) -> List[Any]:
        return [value for _, value in self._fields]


def _hashable(value: Any) -> Any:
    """Convert container values into a hashable equivalent."""
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_hashable(item) for item in value)
    if isinstance(value, dict):
        return frozenset((key, _hashable(item)) for key, item in value.items())
    if isinstance(value, bytearray):
        return bytes(value)
    return value


def _overridden_methods(cls: type) -> List[str]:
    """Return the derived methods that ``cls`` resolves away from Excerpt."""
    return [
        method for method in _DERIVED_METHODS
        if getattr(cls, method) is not getattr(Excerpt, method)
    ]


class Excerpt(ABC):
    """
    Abstract unit of generated source text.

    Two excerpts are equal when they are instances of the same concrete
    class and report equal field sequences. The description returned by
    ``repr`` (and ``str``) is the class name followed by each reported
    field, rendered recursively, so nested excerpts describe themselves too.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for method in _DERIVED_METHODS:
            if method in cls.__dict__:
                raise TypeError(
                    f"{cls.__name__} must not define {method}; "
                    f"it is derived from report_fields"
                )

    def __new__(cls, *args, **kwargs):
        # Class decorators such as @dataclass install methods after
        # __init_subclass__ has run, so resolve them again here
        overridden = _overridden_methods(cls)
        if overridden:
            raise TypeError(
                f"{cls.__name__} must not define {', '.join(overridden)}; "
                f"derived from report_fields (declare dataclass variants "
                f"with eq=False, repr=False)"
            )
        return super().__new__(cls)

    @abstractmethod
    def render(self, source: SourceBuilder) -> None:
        """Write this excerpt's contribution to the source buffer."""
        pass

    @abstractmethod
    def report_fields(self, fields: FieldReceiver) -> None:
        """Report constructor-captured state to ``fields`` in a fixed order."""
        pass

    def reported_fields(self) -> List[Tuple[str, Any]]:
        """Return the reported (name, value) pairs."""
        receiver = FieldList()
        self.report_fields(receiver)
        return receiver.fields

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Excerpt):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self.reported_fields() == other.reported_fields()

    def __hash__(self) -> int:
        fields = self.reported_fields()
        try:
            return hash((type(self), _hashable(fields)))
        except TypeError:
            # Unhashable field values; equal excerpts still share names
            return hash((type(self), tuple(name for name, _ in fields)))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.reported_fields())
        return f"{type(self).__name__}({fields})"

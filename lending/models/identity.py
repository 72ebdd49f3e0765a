from typing import Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """
    Anything that can report a stable unique key.
    People (and every role view of a person) and library items satisfy it.
    """

    @property
    def id(self) -> str:
        ...

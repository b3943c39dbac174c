"""Named handles that read and write a shared floating-point value."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ValueCell:
    """A mutable float that several handles can share."""

    value: float = 0.0


class HandleError(RuntimeError):
    """Raised when a handle that references no value is read or written."""


class ReadOnlyHandle:
    """A handle used to read a value on a given interface."""

    def __init__(self, name: str, interface_name: str, cell: ValueCell | None = None) -> None:
        self._name = name
        self._interface_name = interface_name
        self._cell = cell

    def __bool__(self) -> bool:
        """True if the handle references a value."""
        return self._cell is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, {self._interface_name!r}, {self._cell!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def interface_name(self) -> str:
        return self._interface_name

    @property
    def full_name(self) -> str:
        return f"{self._name}/{self._interface_name}"

    def _require_cell(self) -> ValueCell:
        if self._cell is None:
            raise HandleError(f"handle '{self.full_name}' does not reference a value")
        return self._cell

    def get_value(self) -> float:
        """Return the referenced value."""
        return self._require_cell().value


class ReadWriteHandle(ReadOnlyHandle):
    """A handle used to read and write a value on a given interface."""

    def set_value(self, value: float) -> None:
        """Write the referenced value."""
        self._require_cell().value = value


class StateInterface(ReadOnlyHandle):
    """Read-only access to a piece of hardware state."""


class CommandInterface(ReadWriteHandle):
    """Read-write access to a hardware command.

    Command interfaces have a unique owner: one that references a value
    cannot be copied, to avoid simultaneous writes to the same resource.
    """

    def _unowned_copy(self) -> CommandInterface:
        if self._cell is not None:
            raise TypeError(f"command interface '{self.full_name}' cannot be copied")
        return type(self)(self._name, self._interface_name)

    def __copy__(self) -> CommandInterface:
        return self._unowned_copy()

    def __deepcopy__(self, memo: dict) -> CommandInterface:
        duplicate = self._unowned_copy()
        memo[id(self)] = duplicate
        return duplicate
"""Host-side attribute slots holding delegate connections."""

from __future__ import annotations

from typing import Any, overload

from action_delegate.connection import DelegateConnection
from action_delegate.connector import connect
from action_delegate.errors import InvalidConnectorArguments


class DelegateSlot:
    """Descriptor declaring one delegated action on a host class.

    Example::

        class SelectField:
            options = DelegateSlot()

        field = SelectField()
        field.options = connect(repository, "list_colors")
        choices = field.options(field) if field.options else []

    The slot stores connections by reference and never invokes them.
    Plain callables are normalized through ``connect``. Hosts that declare
    ``__slots__`` must also declare the storage slot, ``_delegate_slot_<name>``.
    """

    def __init__(self, doc: str | None = None) -> None:
        self.name = ""
        self.storage_name = ""
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.storage_name = f"_delegate_slot_{name}"

    def _read(self, instance: object) -> DelegateConnection | None:
        storage = getattr(instance, "__dict__", None)
        if storage is not None:
            return storage.get(self.storage_name)
        # Hosts declaring __slots__ keep the connection in a declared storage slot.
        try:
            return object.__getattribute__(instance, self.storage_name)
        except AttributeError:
            return None

    def _write(self, instance: object, connection: DelegateConnection) -> None:
        storage = getattr(instance, "__dict__", None)
        if storage is not None:
            storage[self.storage_name] = connection
            return
        try:
            object.__setattr__(instance, self.storage_name, connection)
        except AttributeError as exc:
            raise InvalidConnectorArguments(
                f"{type(instance).__name__}.{self.name} cannot store a connection: "
                f"add '{self.storage_name}' to {type(instance).__name__}.__slots__"
            ) from exc

    def _clear(self, instance: object) -> None:
        storage = getattr(instance, "__dict__", None)
        if storage is not None:
            storage.pop(self.storage_name, None)
            return
        try:
            object.__delattr__(instance, self.storage_name)
        except AttributeError:
            pass

    @overload
    def __get__(self, instance: None, owner: type) -> DelegateSlot: ...

    @overload
    def __get__(self, instance: object, owner: type) -> DelegateConnection | None: ...

    def __get__(self, instance: object | None, owner: type) -> DelegateSlot | DelegateConnection | None:
        if instance is None:
            return self
        return self._read(instance)

    def __set__(self, instance: object, value: Any) -> None:
        if value is None:
            self._clear(instance)
            return
        if isinstance(value, DelegateConnection):
            connection = value
        elif callable(value):
            connection = connect(value)
        else:
            raise InvalidConnectorArguments(
                f"{type(instance).__name__}.{self.name} expects a DelegateConnection "
                f"or callable, got {type(value).__name__}"
            )
        self._write(instance, connection)

    def __delete__(self, instance: object) -> None:
        self._clear(instance)

    def is_bound(self, instance: object) -> bool:
        return self._read(instance) is not None


__all__ = ["DelegateSlot"]

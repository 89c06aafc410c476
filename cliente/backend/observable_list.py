"""Lista observable que notifica cambios a la tabla de forma sincrona."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

ChangeKind = Literal["append", "reset"]


@dataclass(frozen=True, slots=True)
class ListChange(Generic[T]):
    """Describe una mutacion: indice de inicio y elementos que quedaran."""

    kind: ChangeKind
    start: int
    items: tuple[T, ...]


Listener = Callable[[ListChange[T]], None]


class ObservableList(Generic[T]):
    """Contenedor con suscriptores notificados antes y despues de cada mutacion.

    Los listeners `before` ven la lista aun sin modificar; los listeners
    normales la ven ya modificada. Ambos reciben el mismo `ListChange`.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._before_listeners: list[Listener[T]] = []
        self._listeners: list[Listener[T]] = []

    def subscribe(
        self,
        listener: Listener[T],
        before: Listener[T] | None = None,
    ) -> Callable[[], None]:
        """Registra listeners y retorna la funcion para desuscribirlos."""
        self._listeners.append(listener)
        if before is not None:
            self._before_listeners.append(before)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
            if before is not None and before in self._before_listeners:
                self._before_listeners.remove(before)

        return unsubscribe

    def append(self, item: T) -> None:
        change = ListChange(kind="append", start=len(self._items), items=(item,))
        self._notify(self._before_listeners, change)
        self._items.append(item)
        self._notify(self._listeners, change)

    def set_all(self, items: Iterable[T]) -> None:
        """Reemplaza todo el contenido en una sola notificacion."""
        new_items = list(items)
        change = ListChange(kind="reset", start=0, items=tuple(new_items))
        self._notify(self._before_listeners, change)
        self._items = new_items
        self._notify(self._listeners, change)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    @staticmethod
    def _notify(listeners: list[Listener[T]], change: ListChange[T]) -> None:
        LOGGER.debug("Cambio en lista observable: %s desde %s", change.kind, change.start)
        for listener in list(listeners):
            listener(change)

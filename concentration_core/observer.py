from __future__ import annotations

import logging
import weakref
from typing import Any, List, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Non-null notification argument meaning "show the all-face-up reveal".
CHEAT = "cheat"


@runtime_checkable
class Observer(Protocol):
    def update(self, model: Any, arg: Optional[Any]) -> None: ...


class ObserverRegistry:
    """
    Ordered list of subscribers, held by weak reference.

    The registry never keeps an observer alive; whoever created the observer
    owns it. Observers that have been garbage collected are dropped on the
    next notify.
    """

    def __init__(self) -> None:
        self._refs: List[weakref.ref] = []

    def __len__(self) -> int:
        return len(self._live())

    def _live(self) -> List[Observer]:
        out: List[Observer] = []
        for ref in self._refs:
            obs = ref()
            if obs is not None:
                out.append(obs)
        return out

    def add(self, observer: Observer) -> None:
        if not isinstance(observer, Observer):
            raise TypeError(f"observer must define update(model, arg): {observer!r}")
        if any(obs is observer for obs in self._live()):
            return
        try:
            ref = weakref.ref(observer)
        except TypeError:
            raise TypeError(
                f"observer must support weak references (add '__weakref__' to __slots__): {observer!r}"
            ) from None
        self._refs.append(ref)

    def remove(self, observer: Observer) -> None:
        self._refs = [ref for ref in self._refs if ref() is not None and ref() is not observer]

    def notify(self, model: Any, arg: Optional[Any] = None) -> None:
        self._refs = [ref for ref in self._refs if ref() is not None]
        live = self._live()
        logger.debug("notifying %d observer(s), arg=%r", len(live), arg)
        for obs in live:
            obs.update(model, arg)

"""Server events and the bus that delivers them to handlers."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

_log = logging.getLogger(__name__)

Position = tuple


@dataclass(frozen=True, eq=False)
class DimensionCreateEvent:
    dimension: Any
    server: Any


@dataclass(frozen=True, eq=False)
class ChunkLoadEvent:
    dimension: Any
    pos: tuple[int, int]


@dataclass(frozen=True, eq=False)
class ServerTickEvent:
    server: Any


@dataclass(frozen=True, eq=False)
class PlayerMoveEvent:
    player: Any
    new_position: Position
    new_direction: Position


@dataclass(frozen=True, eq=False)
class PlayerCommandEvent:
    player: Any
    command: str


@dataclass(frozen=True, eq=False)
class StartBreakBlockEvent:
    player: Any
    position: Position


@dataclass(frozen=True, eq=False)
class StopBreakBlockEvent:
    player: Any
    position: Position


@dataclass(frozen=True, eq=False)
class BreakBlockEvent:
    player: Any
    position: Position
    old_block: Any


@dataclass(frozen=True, eq=False)
class PlaceBlockEvent:
    player: Any
    position: Position
    block: Any


@dataclass(frozen=True, eq=False)
class DropItemEvent:
    player: Any
    item: Any


@dataclass(frozen=True, eq=False)
class RightClickEvent:
    player: Any


@dataclass(frozen=True, eq=False)
class SwapHandsEvent:
    player: Any


@dataclass(frozen=True, eq=False)
class ChangeHeldSlotEvent:
    player: Any
    slot: int


@dataclass(frozen=True, eq=False)
class ServerStartEvent:
    server: Any


@dataclass(frozen=True, eq=False)
class ChatMessageEvent:
    player: Any
    message: str


@dataclass(frozen=True, eq=False)
class PlayerJoinEvent:
    player: Any
    new_dimension: Any


@dataclass(frozen=True, eq=False)
class PlayerAttackEntityEvent:
    attacker: Any
    victim: Any


@dataclass(frozen=True, eq=False)
class PlayerAttackPlayerEvent:
    attacker: Any
    victim: Any


@dataclass(frozen=True, eq=False)
class PlayerLeftClickEvent:
    player: Any


@dataclass(frozen=True, eq=False)
class PlayerLoadEvent:
    player: Any


@dataclass(frozen=True, eq=False)
class PlayerRespawnEvent:
    player: Any


_BUS_EVENTS = (
    PlayerJoinEvent,
    DimensionCreateEvent,
    ServerTickEvent,
    PlayerMoveEvent,
    ChunkLoadEvent,
    PlayerCommandEvent,
    ServerStartEvent,
    PlaceBlockEvent,
    StartBreakBlockEvent,
    ChangeHeldSlotEvent,
    SwapHandsEvent,
    DropItemEvent,
    BreakBlockEvent,
    ChatMessageEvent,
    RightClickEvent,
    PlayerAttackEntityEvent,
    PlayerAttackPlayerEvent,
    PlayerLeftClickEvent,
    PlayerLoadEvent,
    PlayerRespawnEvent,
)

Handler = Callable[[Any], Any]


class EventBus:
    """Handlers registered per event type, called in registration order."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Handler]] = {kind: [] for kind in _BUS_EVENTS}
        self._lock = threading.Lock()

    def _check_type(self, event_type: type) -> None:
        if event_type not in self._handlers:
            raise TypeError(f"{event_type!r} is not an event the bus carries")

    def add_handler(self, event_type: type, handler: Handler) -> None:
        """Register ``handler`` to be called with every event of ``event_type``."""
        self._check_type(event_type)
        if not callable(handler):
            raise TypeError("event handler must be callable")
        with self._lock:
            self._handlers[event_type].append(handler)

    def dispatch(self, event: Any) -> None:
        """Hand ``event`` to each handler of its type.

        A handler that fails is logged and does not keep the rest from running.
        """
        event_type = type(event)
        self._check_type(event_type)
        start = time.perf_counter()
        with self._lock:
            handlers = list(self._handlers[event_type])
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                _log.exception("handler for %s failed", event_type.__name__)
        _log.debug(
            "Event %s took %.6fs to execute", event_type.__name__, time.perf_counter() - start
        )

    def __repr__(self) -> str:
        return "EventBus(...)"
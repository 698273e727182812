"""Position-wise comparison of two sequences through a query/response exchange.

Two peers each hold a sequence of integers. The initiator asks, element by
element, whether the responder holds the same value at the same position.
Both sides record the values they find in common.

For example ``[1, 2, 3]`` and ``[1, 2, 3]`` share ``[1, 2, 3]``, while
``[1, 2, 3]`` and ``[3, 2, 1]`` share only ``[2]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True)
class HasQuery:
    """Ask the peer whether it holds ``value`` at ``location``."""

    location: int
    value: int


@dataclass(frozen=True)
class HasResponse:
    """Answer to a :class:`HasQuery` for ``location``."""

    location: int
    has: bool


@dataclass(frozen=True)
class End:
    """Either side has run out of elements or hung up."""


Message = Union[HasQuery, HasResponse, End]


class NodeState:
    """One peer of the exchange, holding its data and the values found in common."""

    def __init__(self, data: Sequence[int]) -> None:
        self._data = tuple(data)
        self._index = 0
        self.common: list[int] = []

    def _value_at(self, location: int) -> int | None:
        if 0 <= location < len(self._data):
            return self._data[location]
        return None

    def start(self) -> Message:
        """Produce the initiator's first message."""
        return self._next_query()

    def receive(self, message: Message) -> Message:
        """Handle a message from the peer and return the reply."""
        match message:
            case HasQuery(location=location, value=value):
                held = self._value_at(location)
                if held is None:
                    return End()
                if held == value:
                    self.common.append(value)
                    return HasResponse(location, True)
                return HasResponse(location, False)
            case HasResponse(location=location, has=True):
                held = self._value_at(location)
                if held is None:
                    return End()
                self.common.append(held)
                return self._next_query()
            case HasResponse(has=False):
                return self._next_query()
            case End():
                return End()
        raise TypeError(f"unsupported message: {message!r}")

    def _next_query(self) -> Message:
        if self._index < len(self._data):
            response: Message = HasQuery(self._index, self._data[self._index])
        else:
            response = End()
        self._index += 1
        return response


def run_protocol(initiator: NodeState, responder: NodeState) -> int:
    """Run the exchange between two local peers and return the number of rounds."""
    message = initiator.start()
    rounds = 0
    while True:
        rounds += 1
        response = responder.receive(message)
        if message == End():
            break
        message = initiator.receive(response)
    return rounds
"""Set intersection through a salted-hash challenge exchange.

A leader and a follower each hold a list of secret strings.

- The leader sends :class:`Start`.
- The follower picks a salt, hashes its data with it and answers
  :class:`Initialize` carrying the salt.
- The leader hashes its own data with the same salt and sends each hash in
  turn as a :class:`ChallengeQuery`.
- If the follower holds no matching hash it answers
  ``ChallengeResponse(None)``. Otherwise it notes the shared element and
  answers with a fresh salt and the element hashed with it, so the leader can
  check that the follower really holds the original value.
- The leader sends :class:`Done` when it runs out of elements.
- Either side stops on :class:`Done` or :class:`Fail`.
"""

from __future__ import annotations

import dataclasses
import enum
import hashlib
import secrets
import string
from dataclasses import dataclass
from typing import Optional, Sequence, Union

_SALT_ALPHABET = string.ascii_letters + string.digits
_SALT_LENGTH = 8


@dataclass(frozen=True)
class ChallengeResponsePair:
    """A fresh salt and the shared element hashed with it."""

    salt: str
    hash: bytes


@dataclass(frozen=True)
class Start:
    """Sent by the leader to open the exchange."""


@dataclass(frozen=True)
class Initialize:
    """The follower's agreement, carrying the shared salt."""

    salt: str


@dataclass(frozen=True)
class ChallengeQuery:
    """The salted hash of one of the leader's elements."""

    hash: bytes


@dataclass(frozen=True)
class ChallengeResponse:
    """``None`` if the element is unknown, otherwise a proof of holding it."""

    pair: Optional[ChallengeResponsePair] = None


@dataclass(frozen=True)
class Fail:
    """The exchange failed for ``reason``."""

    reason: str


@dataclass(frozen=True)
class Done:
    """The exchange is over."""


Message = Union[Start, Initialize, ChallengeQuery, ChallengeResponse, Fail, Done]


class NodeType(enum.Enum):
    """The role a node plays in the exchange."""

    LEADER = "leader"
    FOLLOWER = "follower"


def generate_salt() -> str:
    """Return a random alphanumeric salt of eight characters."""
    return "".join(secrets.choice(_SALT_ALPHABET) for _ in range(_SALT_LENGTH))


def hash_value(value: str, salt: str) -> bytes:
    """Return the SHA-256 digest of ``value`` followed by ``salt``."""
    return hashlib.sha256((value + salt).encode("utf-8")).digest()


def _describe(message: object) -> str:
    if dataclasses.is_dataclass(message) and not dataclasses.fields(message):
        return type(message).__name__
    return repr(message)


class Node:
    """One side of the exchange, recording the elements shared with its peer."""

    def __init__(self, data: Sequence[str], node_type: NodeType) -> None:
        self.node_type = node_type
        self._data = tuple(data)
        self._data_index = 0
        self._first_challenge = True
        self._salt: Optional[str] = None
        self._data_hashed: list[bytes] = []
        self.common: set[str] = set()

    def start(self) -> Message:
        """Produce the opening message; only a leader may start."""
        if self.node_type is NodeType.LEADER:
            return Start()
        return Fail("Cannot call start on follower node")

    def receive_message(self, message: Message) -> Message:
        """Handle a message from the peer and return the reply."""
        if self.node_type is NodeType.LEADER:
            return self._lead(message)
        return self._follow(message)

    def _lead(self, message: Message) -> Message:
        match message:
            case Initialize(salt=salt):
                if self._salt is not None:
                    return Fail("Node recieved initialize when already initialized")
                self._salt = salt
                self._hash_data()
                return self._next_challenge()
            case ChallengeResponse(pair=None):
                return self._next_challenge()
            case ChallengeResponse(pair=pair):
                if self._data_index >= len(self._data):
                    return Fail(
                        "Protocol responder gave bad new salt challenge for current data"
                    )
                original = self._data[self._data_index]
                if hash_value(original, pair.salt) == pair.hash:
                    self.common.add(original)
                return self._next_challenge()
            case Done():
                return Done()
            case Fail(reason=reason):
                return Fail(f"Protocol responder failed: {reason}")
        return Fail(f"Unsupported message for this node state: {_describe(message)}")

    def _follow(self, message: Message) -> Message:
        match message:
            case Start():
                if self._salt is not None:
                    return Fail("Recieved start when already initialized")
                salt = generate_salt()
                self._salt = salt
                self._hash_data()
                return Initialize(salt)
            case Initialize():
                return Fail("Node recieved initialize when already initialized")
            case ChallengeQuery(hash=query):
                index = next(
                    (i for i, hashed in enumerate(self._data_hashed) if hashed == query),
                    None,
                )
                if index is None:
                    return ChallengeResponse(None)
                original = self._data[index]
                new_salt = generate_salt()
                self.common.add(original)
                return ChallengeResponse(
                    ChallengeResponsePair(salt=new_salt, hash=hash_value(original, new_salt))
                )
            case Done():
                return Done()
            case Fail():
                return Fail("Protocol leader failed")
            case ChallengeResponse():
                return Fail("Received challenge response")
        return Fail(f"Unsupported message for this node state: {_describe(message)}")

    def _next_challenge(self) -> Message:
        if self._first_challenge:
            self._first_challenge = False
        else:
            self._data_index += 1
        if self._data_index < len(self._data_hashed):
            return ChallengeQuery(self._data_hashed[self._data_index])
        return Done()

    def _hash_data(self) -> None:
        if self._salt is not None:
            self._data_hashed = [hash_value(value, self._salt) for value in self._data]


def run_protocol(leader: Node, follower: Node) -> Message:
    """Run the exchange between two local nodes and return the final message."""
    message = leader.start()
    while True:
        reply = follower.receive_message(message)
        if isinstance(message, (Fail, Done)):
            break
        message = leader.receive_message(reply)
    return message
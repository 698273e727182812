# treehopper

treehopper contains two small experiments in private set intersection. Each experiment is a pair of nodes that exchange
messages. A node is a plain state machine: it takes the peer's message and returns its reply. Inside one
process, `run_protocol` passes the messages back and forth between two nodes for you.

## Installation

```
pip install .
```

To install pytest as well, add the `test` extra: `pip install .[test]`.

## `treehopper.simple`: position-wise comparison

Each node holds a sequence of integers. The initiator asks the responder about one position at a time: does it
hold the same value at that position? The two sides trust each other completely. The exchange stops as soon as
either side runs out of elements.

```python
from treehopper.simple import NodeState, run_protocol

initiator = NodeState([7, 9, 10, 11])
responder = NodeState([8, 9])

rounds = run_protocol(initiator, responder)
print(initiator.common, responder.common)  # [9] [9]
print(rounds)                              # 4
```

The module has three messages, all frozen dataclasses:

- `HasQuery(location, value)`
- `HasResponse(location, has)`
- `End()`

To drive an exchange yourself:

1. Call `NodeState.start()` on the initiator to get its first message.
2. Pass every message from the peer to `NodeState.receive()`. It returns the reply to send back.

`receive()` raises `TypeError` for anything that is not one of these messages. The values found in common
collect in the list `NodeState.common`, in the order they were found.

## `treehopper.challenge`: salted-hash challenges

Each node holds a sequence of strings and has a role, either `NodeType.LEADER` or `NodeType.FOLLOWER`. The
exchange runs as follows:

1. The leader sends `Start()`.
2. The follower picks a random salt and hashes its own data with it. It replies with `Initialize(salt)`.
3. The leader hashes its data with the same salt. It then sends one `ChallengeQuery(hash)` per element.
4. The follower answers each query with a `ChallengeResponse`:
   - If no hash matches, the response is `ChallengeResponse(None)`.
   - If a hash matches, the follower records the element. The response carries a `ChallengeResponsePair(salt, hash)`,
     which holds a fresh salt and the element hashed with that salt.
5. The leader checks each pair against its own element. It records the element only if the hashes agree.
6. The leader sends `Done()` when it has no more elements.

Either side ends the exchange with `Fail(reason)` if it receives a message it does not expect at that point, or
a `Fail` from its peer. Only a leader may open the exchange. Calling `start()` on a follower returns a `Fail`.

```python
from treehopper.challenge import Done, Node, NodeType, run_protocol

leader = Node(["1", "b", "c"], NodeType.LEADER)
follower = Node(["b", "c", "x"], NodeType.FOLLOWER)

final = run_protocol(leader, follower)
assert final == Done()
print(sorted(leader.common))    # ['b', 'c']
print(sorted(follower.common))  # ['b', 'c']
```

`Node.receive_message()` handles one message from the peer and returns the reply. `run_protocol` returns the
last message the leader produced, which is `Done()` on success or a `Fail` describing what went wrong. For
example, if two leaders are paired, the result is:

```
Fail("Protocol responder failed: Unsupported message for this node state: Start")
```

The module also provides two public helpers:

- `generate_salt()` returns eight random alphanumeric characters, drawn with `secrets`.
- `hash_value(value, salt)` returns the SHA-256 digest of `value + salt`, encoded as UTF-8, as bytes.

## What this package does not do

The package includes no network transport and no command-line tool. To run an exchange between separate
processes or machines, you must serialise the messages and carry them between the nodes yourself. These
protocols are exercises and are not meant to protect real data.

## Running the tests

```
pytest
```
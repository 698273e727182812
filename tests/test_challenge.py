from treehopper.challenge import (
    ChallengeQuery,
    ChallengeResponse,
    ChallengeResponsePair,
    Done,
    Fail,
    Initialize,
    Node,
    NodeType,
    Start,
    generate_salt,
    hash_value,
    run_protocol,
)


def test_initialization():
    node = Node(["a", "b", "c"], NodeType.FOLLOWER)
    response = node.receive_message(Start())
    assert isinstance(response, Initialize)
    assert len(response.salt) == 8


def test_protocol_basics():
    data = ["1", "b", "c"]
    n1 = Node(data, NodeType.LEADER)
    n2 = Node(data, NodeType.FOLLOWER)
    message = run_protocol(n1, n2)
    assert message == Done()
    assert n1.common == set(data)
    assert n2.common == set(data)


def test_protocol_order():
    data = ["1", "b", "c"]
    n1 = Node(data, NodeType.LEADER)
    n2 = Node(["b", "c", "1"], NodeType.FOLLOWER)
    run_protocol(n1, n2)
    assert n1.common == set(data)
    assert n2.common == set(data)


def test_protocol_no_common():
    n1 = Node(["1", "2", "3"], NodeType.LEADER)
    n2 = Node(["a", "b", "c"], NodeType.FOLLOWER)
    run_protocol(n1, n2)
    assert len(n1.common) == 0
    assert len(n2.common) == 0


def test_protocol_partial_overlap():
    n1 = Node(["x", "y", "z"], NodeType.LEADER)
    n2 = Node(["q", "z", "x"], NodeType.FOLLOWER)
    assert run_protocol(n1, n2) == Done()
    assert n1.common == {"x", "z"}
    assert n2.common == {"x", "z"}


def test_protocol_misconfigured_peer():
    data = ["1", "b", "c"]
    n1 = Node(data, NodeType.LEADER)
    n2 = Node(data, NodeType.LEADER)
    message = run_protocol(n1, n2)
    assert message == Fail(
        "Protocol responder failed: Unsupported message for this node state: Start"
    )


def test_follower_cannot_start():
    node = Node(["a"], NodeType.FOLLOWER)
    assert node.start() == Fail("Cannot call start on follower node")


def test_leader_starts():
    node = Node(["a"], NodeType.LEADER)
    assert node.start() == Start()


def test_follower_rejects_second_start():
    node = Node(["a"], NodeType.FOLLOWER)
    node.receive_message(Start())
    assert node.receive_message(Start()) == Fail("Recieved start when already initialized")


def test_leader_rejects_second_initialize():
    node = Node(["a"], NodeType.LEADER)
    first = node.receive_message(Initialize("saltsalt"))
    assert first == ChallengeQuery(hash_value("a", "saltsalt"))
    assert node.receive_message(Initialize("saltsalt")) == Fail(
        "Node recieved initialize when already initialized"
    )


def test_leader_with_no_data_is_done_after_initialize():
    node = Node([], NodeType.LEADER)
    assert node.receive_message(Initialize("abcdefgh")) == Done()


def test_follower_rejects_initialize_and_challenge_response():
    node = Node(["a"], NodeType.FOLLOWER)
    assert node.receive_message(Initialize("abcdefgh")) == Fail(
        "Node recieved initialize when already initialized"
    )
    assert node.receive_message(ChallengeResponse(None)) == Fail(
        "Received challenge response"
    )


def test_follower_reports_leader_failure():
    node = Node(["a"], NodeType.FOLLOWER)
    assert node.receive_message(Fail("anything")) == Fail("Protocol leader failed")


def test_done_is_echoed_by_both_roles():
    assert Node(["a"], NodeType.LEADER).receive_message(Done()) == Done()
    assert Node(["a"], NodeType.FOLLOWER).receive_message(Done()) == Done()


def test_follower_answers_unknown_hash_with_none():
    node = Node(["a", "b"], NodeType.FOLLOWER)
    node.receive_message(Start())
    reply = node.receive_message(ChallengeQuery(b"\x00" * 32))
    assert reply == ChallengeResponse(None)
    assert node.common == set()


def test_follower_answers_known_hash_with_proof():
    node = Node(["a", "b"], NodeType.FOLLOWER)
    init = node.receive_message(Start())
    reply = node.receive_message(ChallengeQuery(hash_value("b", init.salt)))
    assert isinstance(reply, ChallengeResponse)
    assert reply.pair.hash == hash_value("b", reply.pair.salt)
    assert node.common == {"b"}


def test_leader_ignores_forged_proof():
    node = Node(["a", "b"], NodeType.LEADER)
    node.receive_message(Initialize("abcdefgh"))
    forged = ChallengeResponsePair(salt="zzzzzzzz", hash=b"\x01" * 32)
    reply = node.receive_message(ChallengeResponse(forged))
    assert reply == ChallengeQuery(hash_value("b", "abcdefgh"))
    assert node.common == set()


def test_leader_rejects_proof_beyond_data():
    node = Node(["a"], NodeType.LEADER)
    node.receive_message(Initialize("abcdefgh"))
    assert node.receive_message(ChallengeResponse(None)) == Done()
    proof = ChallengeResponsePair(salt="abcdefgh", hash=hash_value("a", "abcdefgh"))
    assert node.receive_message(ChallengeResponse(proof)) == Fail(
        "Protocol responder gave bad new salt challenge for current data"
    )


def test_leader_rejects_challenge_query():
    node = Node(["a"], NodeType.LEADER)
    reply = node.receive_message(ChallengeQuery(b"\x02"))
    assert isinstance(reply, Fail)
    assert reply.reason.startswith("Unsupported message for this node state: ChallengeQuery")


def test_hash_value_is_sha256_of_concatenation():
    assert hash_value("ab", "c").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_generate_salt_shape():
    salt = generate_salt()
    assert len(salt) == 8
    assert salt.isascii() and salt.isalnum()
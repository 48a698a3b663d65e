import pytest

from sigprims.xof import ShakeState, g, h


def test_g_known_answer():
    state = g().absorb(b"hello world")
    assert state.squeeze(32) == bytes.fromhex(
        "3a9159f071e4dd1c8c4f968607c30942e120d8156b8b1e72e0d376e8871cb8b8"
    )
    assert state.squeeze(32) == bytes.fromhex(
        "99072665674f26cc494a4bcf027c58267e8ee2da60e942759de86d2670bba1aa"
    )


def test_h_known_answer():
    state = h().absorb(b"hello world")
    assert state.squeeze(32) == bytes.fromhex(
        "369771bb2cb9d2b04c1d54cca487e372d9f187f73f7ba3f65b95c8ee7798c527"
    )
    assert state.squeeze(32) == bytes.fromhex(
        "f4f3c2d55c2d46a29f2e945d469c3df27853a8735271f5cc2d9e889544357116"
    )


def test_split_absorb_matches_single_absorb():
    a = g().absorb(b"hello ").absorb(b"world").squeeze(64)
    b = g().absorb(b"hello world").squeeze(64)
    assert a == b


def test_piecewise_squeeze_matches_one_long_squeeze():
    pieces = h().absorb(b"abc")
    collected = b"".join(pieces.squeeze(n) for n in (1, 3, 200, 7, 500))
    whole = h().absorb(b"abc").squeeze(711)
    assert collected == whole
    assert len(collected) == 711


def test_absorb_after_squeeze_fails():
    state = g().absorb(b"x")
    state.squeeze(1)
    with pytest.raises(RuntimeError):
        state.absorb(b"y")


def test_invalid_level_rejected():
    with pytest.raises(ValueError):
        ShakeState(512)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        h().squeeze(-1)
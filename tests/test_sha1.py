import io

import pytest

from beauty.sha1 import Sha1

EMPTY_SHA1 = "da39a3ee5e6b4b0d3255bfef95601890afd80709"
ABC_SHA1 = "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_final_of_abc():
    hasher = Sha1()
    hasher.update("abc")
    assert hasher.final() == ABC_SHA1


def test_final_of_nothing():
    assert Sha1().final() == EMPTY_SHA1


def test_final_resets_the_hasher():
    hasher = Sha1()
    hasher.update("abc")
    assert hasher.final() == ABC_SHA1
    assert hasher.final() == EMPTY_SHA1


def test_digest_resets_the_hasher():
    hasher = Sha1()
    hasher.update("abc")
    hasher.digest()
    assert hasher.final() == EMPTY_SHA1


def test_digest_matches_final_hex():
    first = Sha1()
    second = Sha1()
    first.update("some message")
    second.update("some message")
    raw = first.digest()
    assert len(raw) == 20
    assert raw.hex() == second.final()


def test_incremental_equals_single_update():
    whole = Sha1()
    whole.update(b"a" * 1000)
    pieces = Sha1()
    for _ in range(10):
        pieces.update(b"a" * 100)
    assert pieces.final() == whole.final()


def test_str_and_bytes_agree():
    text = Sha1()
    text.update("héllo wörld")
    raw = Sha1()
    raw.update("héllo wörld".encode("utf-8"))
    assert text.final() == raw.final()


def test_stream_matches_bytes():
    data = bytes(range(256)) * 700
    from_stream = Sha1()
    from_stream.update(io.BytesIO(data))
    from_bytes = Sha1()
    from_bytes.update(data)
    assert from_stream.final() == from_bytes.final()


@pytest.mark.parametrize("size", [55, 56, 63, 64, 65, 119, 128])
def test_block_boundaries_consistent(size):
    data = b"x" * size
    once = Sha1()
    once.update(data)
    split = Sha1()
    split.update(data[: size // 2])
    split.update(data[size // 2:])
    result = once.final()
    assert result == split.final()
    assert len(result) == 40


def test_from_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    assert Sha1.from_file(path) == ABC_SHA1


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Sha1.from_file(tmp_path / "missing.bin")
from hypothesis import given
from hypothesis import strategies as st

from ecckit.rmd160 import RMD160, rmd160


def test_empty_message():
    assert rmd160(b"").hex() == "9c1185a5c5e9fc54612808977ee8f548b2258d31"


def test_abc():
    assert RMD160(b"abc").hexdigest() == "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"


def test_message_digest():
    assert rmd160(b"message digest").hex() == "5d0689ef49d2fae572b881b123a85ffa21595f36"


@given(st.binary(max_size=300), st.integers(min_value=0, max_value=300))
def test_incremental_matches_one_shot(data, cut):
    cut = min(cut, len(data))
    hasher = RMD160()
    hasher.update(data[:cut])
    hasher.update(data[cut:])
    assert hasher.digest() == rmd160(data)


@given(st.binary(max_size=200))
def test_digest_length_and_hex(data):
    hasher = RMD160(data)
    digest = hasher.digest()
    assert len(digest) == RMD160.digest_size
    assert hasher.hexdigest() == digest.hex()


def test_digest_does_not_consume_state():
    hasher = RMD160(b"x" * 70)
    first = hasher.digest()
    assert hasher.digest() == first


def test_copy_is_independent():
    hasher = RMD160(b"prefix")
    clone = hasher.copy()
    clone.update(b"suffix")
    assert hasher.digest() == rmd160(b"prefix")
    assert clone.digest() == rmd160(b"prefixsuffix")


def test_padding_boundaries_differ():
    digests = {rmd160(b"a" * n) for n in range(50, 70)}
    assert len(digests) == 20
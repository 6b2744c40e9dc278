import pytest
from hypothesis import given
from hypothesis import strategies as st

from ecckit.bigint import Int

FULL = 2**320
values = st.integers(min_value=0, max_value=FULL - 1)
small = st.integers(min_value=0, max_value=2**200)

SECP_P = int("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F", 16)


def test_negative_one_is_all_ones():
    m = Int(-1)
    assert int(m) == FULL - 1
    assert m.signed() == -1
    assert m.is_negative()
    assert m.to_bytes32() == b"\xff" * 32


def test_zero_and_one_predicates():
    assert Int(0).is_zero()
    assert Int(0).is_positive()
    assert not Int(0).is_strict_positive()
    assert Int(1).is_one()
    assert Int(1).is_strict_positive()
    assert Int(1).is_odd() and not Int(1).is_even()


@given(st.binary(min_size=32, max_size=32))
def test_bytes32_round_trip(data):
    assert Int.from_bytes32(data).to_bytes32() == data


def test_from_bytes32_rejects_wrong_length():
    with pytest.raises(ValueError):
        Int.from_bytes32(b"\x00" * 31)


def test_from_bytes32_is_big_endian():
    data = SECP_P.to_bytes(32, "big")
    assert int(Int.from_bytes32(data)) == SECP_P


@given(values, values)
def test_add_sub_round_trip(a, b):
    assert (Int(a) + Int(b)) - Int(b) == Int(a)


@given(values)
def test_negation_is_additive_inverse(a):
    assert (Int(a) + -Int(a)).is_zero()


@given(values, values, values)
def test_multiplication_distributes(a, b, c):
    x, y, z = Int(a), Int(b), Int(c)
    assert x * (y + z) == x * y + x * z


@given(values)
def test_multiply_by_one(a):
    assert Int(a) * 1 == Int(a)


@given(values, st.integers(min_value=1, max_value=FULL - 1))
def test_div_invariant(a, d):
    q, r = Int(a).div(Int(d))
    assert q * Int(d) + r == Int(a)
    assert r < Int(d)


def test_div_by_larger_returns_self_as_remainder():
    q, r = Int(SECP_P).div(Int(SECP_P + 1))
    assert q.is_zero()
    assert r == Int(SECP_P)


def test_div_by_equal_gives_one():
    q, r = Int(SECP_P).div(SECP_P)
    assert q.is_one()
    assert r.is_zero()


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Int(SECP_P).div(0)


@given(small, small, st.integers(min_value=1, max_value=2**256))
def test_mult_mod_n_matches_mod_of_product(a, b, n):
    assert Int(a).mult_mod_n(Int(b), Int(n)) == (Int(a) * Int(b)).mod(Int(n))
    assert Int(a).mult_mod_n(Int(b), Int(n)) < Int(n)


@given(st.integers(min_value=1, max_value=2**256), st.integers(min_value=1, max_value=2**256))
def test_gcd_divides_both(a, b):
    g = Int(a).gcd(Int(b))
    assert Int(a).mod(g).is_zero()
    assert Int(b).mod(g).is_zero()


def test_gcd_with_zero_returns_other():
    assert Int(0).gcd(Int(SECP_P)) == Int(SECP_P)
    assert Int(SECP_P).gcd(Int(0)) == Int(SECP_P)


@given(st.integers(min_value=1, max_value=2**256))
def test_gcd_ignores_sign(a):
    assert Int(-a).gcd(Int(a)) == Int(a)


@given(st.integers(min_value=-(2**300), max_value=2**300))
def test_abs_and_bit_length(a):
    x = Int(a)
    assert x.abs().signed() == abs(a)
    assert x.bit_length() == abs(a).bit_length()


@given(small, st.integers(min_value=0, max_value=100))
def test_shift_round_trip(a, n):
    assert (Int(a) << n) >> n == Int(a)


@given(st.integers(min_value=-(2**300), max_value=-1), st.integers(min_value=0, max_value=400))
def test_right_shift_keeps_sign(a, n):
    assert (Int(a) >> n).is_negative()


def test_right_shift_is_arithmetic():
    assert (Int(-8) >> 1).signed() == -4


def test_shift_rejects_negative_count():
    with pytest.raises(ValueError):
        Int(1) << -1


def test_size_counts_words():
    assert Int(0).size() == 1
    assert Int(1).size() == 1
    assert Int(1 << 32).size() == 2
    assert Int(-1).size() == 10


@given(values, st.integers(min_value=0, max_value=39), st.integers(min_value=0, max_value=255))
def test_with_byte_then_get_byte(a, n, b):
    x = Int(a).with_byte(n, b)
    assert x.get_byte(n) == b
    others = [i for i in range(40) if i != n]
    assert all(x.get_byte(i) == Int(a).get_byte(i) for i in others)


def test_get_byte_is_little_endian():
    x = Int(0x1234)
    assert x.get_byte(0) == 0x34
    assert x.get_byte(1) == 0x12


def test_index_errors():
    with pytest.raises(IndexError):
        Int(1).get_byte(40)
    with pytest.raises(IndexError):
        Int(1).get_bit(320)
    with pytest.raises(ValueError):
        Int(1).with_byte(0, 256)


@given(values)
def test_get_bit_matches_parity(a):
    x = Int(a)
    assert x.get_bit(0) == (1 if x.is_odd() else 0)


@given(values, st.integers(min_value=0, max_value=10))
def test_mask_byte_keeps_low_words(a, n):
    masked = Int(a).mask_byte(n)
    assert masked.size() <= max(n, 1)
    assert all(masked.get_byte(i) == Int(a).get_byte(i) for i in range(4 * n))


def test_comparisons_are_unsigned():
    assert Int(-1) > Int(1)
    assert Int(1) <= Int(1)
    assert Int(1) < Int(2)


def test_equality_and_hash():
    assert Int(SECP_P) == SECP_P
    assert hash(Int(SECP_P)) == hash(Int(SECP_P))
    assert len({Int(SECP_P), Int(SECP_P)}) == 1


def test_repr_contains_hex():
    assert "fffffc2f" in repr(Int(SECP_P))


@pytest.mark.parametrize("nbits", [0, 1, 31, 32, 64, 256, 319])
def test_rand_is_within_bits(nbits):
    assert int(Int.rand(nbits)) < 2**nbits


def test_rand_rejects_bad_width():
    with pytest.raises(ValueError):
        Int.rand(320)


def test_rand_range_is_within_bounds():
    low, high = Int(1000), Int(SECP_P)
    for _ in range(20):
        x = Int.rand_range(low, high)
        assert low <= x < high


def test_rand_range_empty_raises():
    with pytest.raises(ZeroDivisionError):
        Int.rand_range(Int(5), Int(5))
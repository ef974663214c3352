import pytest
from hypothesis import given, strategies as st

from limbzz import tuning
from limbzz.zz0 import SignedLimbs, add, mul, normalise, sub

_BOUND = 2 ** (64 * 10) - 1

ints = st.integers(min_value=-_BOUND, max_value=_BOUND)


@st.composite
def signed_limbs(draw):
    return SignedLimbs.from_int(draw(ints))


def test_from_int_pins_limb_layout():
    value = SignedLimbs.from_int(2**64 + 5)
    assert value.limbs == (5, 1)
    assert value.size == 2


def test_from_int_negative_and_zero():
    assert SignedLimbs.from_int(-1).limbs == (1,)
    assert SignedLimbs.from_int(-1).size == -1
    zero = SignedLimbs.from_int(0)
    assert zero.size == 0 and zero.limbs == ()
    assert zero.is_zero()
    assert not SignedLimbs.from_int(7).is_zero()


def test_constructor_normalises():
    value = SignedLimbs((3, 0, 0), -3)
    assert value.size == -1
    assert value.limbs == (3,)
    assert value.to_int() == -3


def test_constructor_rejects_bad_limb():
    with pytest.raises(ValueError):
        SignedLimbs((2**64,), 1)
    with pytest.raises(ValueError):
        SignedLimbs((-1,), 1)


def test_constructor_rejects_oversized_size():
    with pytest.raises(ValueError):
        SignedLimbs((1,), 2)


def test_normalise_values():
    assert normalise([1, 0, 0], 3) == 1
    assert normalise([1, 0, 0], -3) == -1
    assert normalise([0, 0], -2) == 0
    assert normalise([0, 9], 2) == 2
    with pytest.raises(ValueError):
        normalise([1], 4)


def test_add_carry_into_new_limb():
    a = SignedLimbs((2**64 - 1,), 1)
    result = add(a, SignedLimbs.from_int(1))
    assert result.limbs == (0, 1)
    assert result.size == 2


def test_sub_borrow_crosses_sign():
    result = sub(SignedLimbs.from_int(3), SignedLimbs.from_int(2**64))
    assert result.to_int() == 3 - 2**64
    assert result.size == -1


def test_mul_by_zero_is_zero():
    assert mul(SignedLimbs.from_int(12345), SignedLimbs()).is_zero()
    assert mul(SignedLimbs(), SignedLimbs.from_int(-9)).size == 0


def test_mul_sign_and_size():
    result = mul(SignedLimbs.from_int(-(2**64)), SignedLimbs.from_int(2**64))
    assert result.limbs == (0, 0, 1)
    assert result.size == -3


@pytest.mark.parametrize(
    "limb_count",
    [
        tuning.MUL_CLASSICAL_CUTOFF - 1,
        tuning.MUL_CLASSICAL_CUTOFF,
        tuning.MUL_CLASSICAL_CUTOFF + 1,
        tuning.MUL_KARA_CUTOFF,
    ],
)
def test_mul_around_tuning_cutoffs(limb_count):
    x = 2 ** (64 * limb_count) - 1
    y = -(3 ** (40 * limb_count) + 1)
    a, b = SignedLimbs.from_int(x), SignedLimbs.from_int(y)
    result = mul(a, b)
    assert result.to_int() == x * y
    assert result.size < 0
    assert abs(result.size) == len(result.limbs)


@given(ints)
def test_int_round_trip(value):
    assert SignedLimbs.from_int(value).to_int() == value
    assert int(SignedLimbs.from_int(value)) == value


@given(signed_limbs(), signed_limbs(), signed_limbs())
def test_add_associative(a, b, c):
    assert add(add(a, b), c) == add(add(b, c), a)


@given(signed_limbs(), signed_limbs(), signed_limbs())
def test_sub_order_independent(a, b, c):
    assert sub(sub(a, b), c) == sub(sub(a, c), b)


@given(signed_limbs(), signed_limbs())
def test_add_then_sub_restores(a, b):
    assert sub(add(a, b), b) == a


@given(signed_limbs(), signed_limbs(), signed_limbs())
def test_mul_distributes(a, b, c):
    assert mul(a, add(b, c)) == add(mul(a, b), mul(a, c))


@given(ints, ints)
def test_operations_match_integers(x, y):
    a, b = SignedLimbs.from_int(x), SignedLimbs.from_int(y)
    assert add(a, b).to_int() == x + y
    assert sub(a, b).to_int() == x - y
    assert mul(a, b).to_int() == x * y


@given(signed_limbs(), signed_limbs())
def test_results_are_normalised(a, b):
    for result in (add(a, b), sub(a, b), mul(a, b)):
        assert abs(result.size) == len(result.limbs)
        assert not result.limbs or result.limbs[-1] != 0


@given(signed_limbs())
def test_sub_self_is_zero(a):
    assert sub(a, a).is_zero()
# limbzz

Signed integers held as a sequence of unsigned 64-bit limbs, least
significant first, with the sign carried in a signed limb count.

A value's `size` has the number of significant limbs as its absolute value
and the sign of the integer as its sign. Zero has size 0.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install .[test]
pytest
```

## Usage

```python
from limbzz.zz0 import SignedLimbs, add, sub, mul, normalise

a = SignedLimbs.from_int(2**70 + 5)
b = SignedLimbs.from_int(-(2**64))

s = add(a, b)
d = sub(a, b)
p = mul(a, b)

print(s.to_int(), d.to_int(), p.to_int())
print(p.size)                              # signed limb count of the product
print(p.limbs)                             # tuple of limbs, least significant first
print(SignedLimbs.from_int(0).is_zero())   # True
print(int(a))                              # same as a.to_int()
```

### `SignedLimbs`

A frozen dataclass with two fields:

- `limbs`: a tuple of integers, each in the range `0` to `2**64 - 1`.
- `size`: the signed limb count. If left out, it is taken as `len(limbs)`.

On construction the value is put into canonical form: high zero limbs are
dropped, `limbs` is cut to `abs(size)` entries, and `size` is adjusted to
match. A limb outside the 64-bit range, or a size whose absolute value is
larger than the number of limbs given, raises `ValueError`.

`SignedLimbs.from_int(value)` builds the limb form of a Python integer;
`to_int()` (and `int()`) turns it back. `is_zero()` is true when the size is 0.

### Arithmetic

`add(a, b)`, `sub(a, b)` and `mul(a, b)` each take two `SignedLimbs` and
return a new, normalised `SignedLimbs`. Multiplication uses the schoolbook
method; a product with a zero factor is zero.

`normalise(limbs, size)` returns `size` with high zero limbs removed, keeping
its sign. It raises `ValueError` if `abs(size)` is larger than `len(limbs)`.

### `limbzz.tuning`

Named cut-off sizes, in limbs, for choosing between multiplication and
division methods (`MUL_CLASSICAL_CUTOFF`, `MUL_KARA_CUTOFF`,
`MULMID_CLASSICAL_CUTOFF`, `MULLOW_CLASSICAL_CUTOFF`,
`DIVAPPROX_CLASSICAL_CUTOFF`, `DIVREM_CLASSICAL_CUTOFF`, and the Toom
cut-offs, which are set to `sys.maxsize` to mean "never").

## What this package does not do

- It offers only addition, subtraction and multiplication. There is no
  division, remainder, powering, shifting, gcd, comparison helper or
  conversion to and from decimal strings.
- Nothing in the package reads the values in `limbzz.tuning`; `mul` always
  uses the schoolbook method whatever the operand sizes.
- There is no command-line program.
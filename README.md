# ecckit

A small, dependency-free Python library with message digests, a
fixed-width big-integer type and a few text helpers. Everything is plain
Python and needs nothing beyond the standard library.

Modules:

- `ecckit.rmd160`: RIPEMD-160 (`RMD160` class with a hashlib-style
  `update` / `digest` / `hexdigest` / `copy` interface, and `rmd160(data)`).
- `ecckit.sha3`: SHA3-224/256/384/512, SHAKE128/256, Keccak-256/384/512
  with the original `0x01` padding, the underlying `Sponge` class, and
  `selftest()`.
- `ecckit.keccak`: the raw Keccak-f[1600] permutation, `keccakf1600(state)`.
- `ecckit.bigint`: `Int`, an immutable 320-bit integer with wrap-around
  arithmetic, read as two's complement for signed operations.
- `ecckit.intcodec`: conversion of `Int` values to and from text in base 2,
  10, 16 or any custom charset.
- `ecckit.rng`: a `MersenneTwister` (MT19937) generator and module-level
  helpers `rseed`, `rndl` and `rnd`.
- `ecckit.util`: trimming, tokenizing and hexadecimal helpers.

## Hashing

```python
from ecckit.rmd160 import RMD160, rmd160
from ecckit.sha3 import keccak_256, sha3_256, shake128

rmd160(b"abc").hex()
# '8eb208f7e05d987a9b044a8e98c6b087f15a0bfc'

h = RMD160(b"a")
h.update(b"bc")
h.hexdigest()
# '8eb208f7e05d987a9b044a8e98c6b087f15a0bfc'

sha3_256(b"").hex()
# 'a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a'

shake128(b"", 41)      # 41 bytes of SHAKE128 output
keccak_256(b"")        # Keccak-256 with the original 0x01 padding
```

`Sponge(capacity_bytes)` gives direct access to the sponge: absorb with
`update`, then produce output once with either `finalize(length, padding)`
or `squeeze(length)`. A second output call raises `RuntimeError`.

`ecckit.sha3.selftest()` checks the hashes against the NIST empty-message
and 200 × `0xa3` vectors plus a composite digest over several message
lengths, and returns `True` or `False`.

`ecckit.keccak.keccakf1600(lanes)` takes 25 64-bit lanes and returns a new
list; the input is left unchanged.

## Big integers

```python
from ecckit.bigint import Int
from ecckit.intcodec import from_base16, to_base10, to_base16

Int(-1).signed()          # -1
Int(-1).is_negative()     # True
Int(7).div(2)             # (Int(0x3), Int(0x1))
to_base16(Int(255))       # 'ff'
to_base10(Int(-42))       # '-42'
int(from_base16("FF"))    # 255
```

`Int` supports `+`, `-`, `*`, unary `-`, `<<` and an arithmetic
(sign-extending) `>>`, all wrapping to 320 bits. Ordering comparisons are
unsigned. Other operations include `div`, `mod`, `mult_mod_n`, `gcd`,
`abs`, `bit_length`, `get_bit`, `get_byte`, `with_byte`, `mask_byte`,
`from_bytes32` / `to_bytes32`, and the random constructors `Int.rand(nbits)`
and `Int.rand_range(low, high)`. Division by zero raises
`ZeroDivisionError`.

`ecckit.intcodec` also offers `from_base10`, `from_base_n`, `to_base2`,
`to_base_n`, `block_str` and `c64_str`. Parsing a character outside the
charset raises `ValueError`.

## Random numbers

`MersenneTwister(seed)` produces 32-bit words (`next_uint32`) and 53-bit
floats in `[0, 1)` (`next_double`). `rndl()` returns 64 random bits from
the operating system, falling back to the module's seeded generator;
`rseed(seed)` seeds that generator and `rnd()` draws a float from it.

## Text helpers

```python
from ecckit.util import Tokenizer, hexs2bin, trim

trim("  hello\n")                       # 'hello'
list(Tokenizer("load: file.txt 3"))     # ['load', 'file.txt', '3']
hexs2bin("0aff")                        # b'\n\xff'
```

`hexs2bin` raises `ValueError` for an empty, odd-length or non-hex string.

## What this package does not do

There is no elliptic-curve code here: no point addition or doubling, no
public key computation, parsing or serialisation, no address hashing, and
no modular-field or Montgomery arithmetic beyond what `Int` offers. There
is also no command-line program; the package is a library only.

## Running the tests

The test suite uses pytest and hypothesis, listed under the `test` extra.
"""SHA-3, SHAKE and Keccak hashes built on a Keccak sponge (FIPS 202)."""

from __future__ import annotations

from ecckit.keccak import LANES, keccakf1600

STATE_BYTES = 8 * LANES
SHA3_PADDING = 0x06
KECCAK_PADDING = 0x01
SHAKE_PADDING = 0x1F

SHA3_224_DIGEST_LENGTH = 28
SHA3_256_DIGEST_LENGTH = 32
SHA3_384_DIGEST_LENGTH = 48
SHA3_512_DIGEST_LENGTH = 64


class Sponge:
    """A Keccak-f[1600] sponge with a given capacity in bytes.

    Data is absorbed with :meth:`update`; output is produced once, either by
    :meth:`finalize` (fixed-length digests) or :meth:`squeeze` (SHAKE output).
    """

    def __init__(self, capacity_bytes: int) -> None:
        if not 0 < capacity_bytes < STATE_BYTES or capacity_bytes % 8:
            raise ValueError(
                f"capacity must be a multiple of 8 in (0, {STATE_BYTES}), got {capacity_bytes}"
            )
        self.rate = STATE_BYTES - capacity_bytes
        self._state = [0] * LANES
        self._buffer = bytearray()
        self._finished = False

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError("sponge has already produced its output")

    def _absorb_block(self, block: bytes) -> None:
        for i in range(len(block) // 8):
            self._state[i] ^= int.from_bytes(block[8 * i:8 * i + 8], "little")

    def _state_bytes(self) -> bytes:
        return b"".join(lane.to_bytes(8, "little") for lane in self._state)

    def update(self, data: bytes) -> None:
        """Absorb more input bytes."""
        self._check_open()
        buffer = self._buffer
        buffer.extend(data)
        rate = self.rate
        full = len(buffer) - len(buffer) % rate
        for offset in range(0, full, rate):
            self._absorb_block(bytes(buffer[offset:offset + rate]))
            self._state = keccakf1600(self._state)
        del buffer[:full]

    def _pad(self, padding: int) -> None:
        self._check_open()
        if not 0 <= padding <= 0xFF:
            raise ValueError(f"padding must be a byte, got {padding}")
        block = bytearray(self.rate)
        block[:len(self._buffer)] = self._buffer
        block[len(self._buffer)] ^= padding
        block[-1] ^= 0x80
        self._absorb_block(bytes(block))
        self._buffer.clear()
        self._finished = True

    def _wipe(self) -> None:
        self._state = [0] * LANES

    def finalize(self, length: int, padding: int = SHA3_PADDING) -> bytes:
        """Pad with ``padding``, permute once and return the first ``length`` bytes."""
        if not 0 <= length <= STATE_BYTES:
            raise ValueError(f"length must be in [0, {STATE_BYTES}], got {length}")
        self._pad(padding)
        self._state = keccakf1600(self._state)
        out = self._state_bytes()[:length]
        self._wipe()
        return out

    def squeeze(self, length: int) -> bytes:
        """Pad for SHAKE and return ``length`` bytes of extendable output."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self._pad(SHAKE_PADDING)
        out = bytearray()
        while len(out) < length:
            self._state = keccakf1600(self._state)
            out += self._state_bytes()[:min(self.rate, length - len(out))]
        self._wipe()
        return bytes(out)


def _fixed(data: bytes, digest_size: int, padding: int) -> bytes:
    sponge = Sponge(2 * digest_size)
    sponge.update(data)
    return sponge.finalize(digest_size, padding)


def _shake(data: bytes, security_bytes: int, length: int) -> bytes:
    sponge = Sponge(2 * security_bytes)
    sponge.update(data)
    return sponge.squeeze(length)


def sha3_224(data: bytes) -> bytes:
    """Return the SHA3-224 digest of ``data``."""
    return _fixed(data, SHA3_224_DIGEST_LENGTH, SHA3_PADDING)


def sha3_256(data: bytes) -> bytes:
    """Return the SHA3-256 digest of ``data``."""
    return _fixed(data, SHA3_256_DIGEST_LENGTH, SHA3_PADDING)


def sha3_384(data: bytes) -> bytes:
    """Return the SHA3-384 digest of ``data``."""
    return _fixed(data, SHA3_384_DIGEST_LENGTH, SHA3_PADDING)


def sha3_512(data: bytes) -> bytes:
    """Return the SHA3-512 digest of ``data``."""
    return _fixed(data, SHA3_512_DIGEST_LENGTH, SHA3_PADDING)


def shake128(data: bytes, length: int) -> bytes:
    """Return ``length`` bytes of SHAKE128 output for ``data``."""
    return _shake(data, 128 // 8, length)


def shake256(data: bytes, length: int) -> bytes:
    """Return ``length`` bytes of SHAKE256 output for ``data``."""
    return _shake(data, 256 // 8, length)


def keccak_256(data: bytes) -> bytes:
    """Return the original Keccak-256 digest (pre-standard padding)."""
    return _fixed(data, SHA3_256_DIGEST_LENGTH, KECCAK_PADDING)


def keccak_384(data: bytes) -> bytes:
    """Return the original Keccak-384 digest (pre-standard padding)."""
    return _fixed(data, SHA3_384_DIGEST_LENGTH, KECCAK_PADDING)


def keccak_512(data: bytes) -> bytes:
    """Return the original Keccak-512 digest (pre-standard padding)."""
    return _fixed(data, SHA3_512_DIGEST_LENGTH, KECCAK_PADDING)


def _selftest_prng(length: int, seed: int) -> bytes:
    a = (0xDEAD4BAD * seed) & 0xFFFFFFFF
    b = 1
    out = bytearray()
    for _ in range(length):
        t = (a + b) & 0xFFFFFFFF
        out.append(t >> 24)
        a, b = b, t
    return bytes(out)


_EMPTY_VECTORS = (
    (sha3_224, "6b4e03423667dbb73b6e15454f0eb1abd4597f9a1b078e3f5b5a6bc7"),
    (sha3_256, "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"),
    (sha3_384, "0c63a75b845e4f7d01107d852e4c2485c51a50aaaa94fc61"
               "995e71bbee983a2ac3713831264adb47fb6bd1e058d5f004"),
    (sha3_512, "a69f73cca23a9ac5c8b567dc185a756e97c982164fe25859e0d1dcc1475c80a6"
               "15b2123af1f5f94c11e3e9402c3ac558f500199d95b6d3e301758586281dcd26"),
)
_A3_VECTORS = (
    (sha3_224, "9376816aba503f72f96ce7eb65ac095deee3be4bf9bbc2a1cb7e11e0"),
    (sha3_256, "79f38adec5c20307a98ef76e8324afbfd46cfd81b22e3973c65fa1bd9de31787"),
    (sha3_384, "1881de2ca7e41ef95dc4732b8f5f002b189cc1e42b74168e"
               "d1732649ce1dbcdd76197a31fd55ee989f2d7050dd473e8f"),
    (sha3_512, "e76dfad22084a8b1467fcf2ffa58361bec7628edf5f3fdc0e4805dc48caeeca8"
               "1b7c13c30adf52a3659584739a2df46be589c51ca1a4a8416df6545a1ce8ba00"),
)
_SHAKE_VECTORS = (
    (shake128, b"", 41, "7f9c2ba4e88f827d616045507605853ed73b8093f6efbc88"
                        "eb1a6eacfa66ef263cb1eea988004b9310"),
    (shake256, b"", 73, "46b9dd2b0ba88d13233b3feb743eeb243fcd52ea62b81b82"
                        "b50c27646ed5762fd75dc4ddd8c0f200cb05019d67b592f6"
                        "fc821c49479ab48640292eacb3b7c4be141e96616fb1395769"),
    (shake128, b"\xa3" * 200, 41, "131ab8d2b594946b9c81333f9bb6e0ce75c3b93104fa3469"
                                  "d3917457385da037cf232ef7164a6d1eb4"),
    (shake256, b"\xa3" * 200, 73, "cd8a920ed141aa0407a22d59288652e9d9f1a7ee0c1e7c1c"
                                  "a699424da84a904d2d700caae7396ece96604440577da4f3"
                                  "aa22aeb8857f961c4cd8e06f0ae6610b1048a7f64e1074cd62"),
)
_COMPOSITE_DIGEST = (
    "6c021ac665af80fb52e62d27e5028884ec1c0ce70b94558319f2bf0986eb1abb"
    "c30d1cef22fec54c45906614006ec879df1e02bd75e960d8603985c9c4ee33ab"
)
_MESSAGE_LENGTHS = (0, 3, 128, 129, 255, 1024)


def selftest() -> bool:
    """Check the implementation against known test vectors."""
    for hash_fn, expected in _EMPTY_VECTORS:
        if hash_fn(b"") != bytes.fromhex(expected):
            return False
    for hash_fn, expected in _A3_VECTORS:
        if hash_fn(b"\xa3" * 200) != bytes.fromhex(expected):
            return False
    for shake_fn, message, length, expected in _SHAKE_VECTORS:
        if shake_fn(message, length) != bytes.fromhex(expected):
            return False

    combined = Sponge(2 * SHA3_512_DIGEST_LENGTH)
    for hash_fn, digest_size in (
        (sha3_224, SHA3_224_DIGEST_LENGTH),
        (sha3_256, SHA3_256_DIGEST_LENGTH),
        (sha3_384, SHA3_384_DIGEST_LENGTH),
        (sha3_512, SHA3_512_DIGEST_LENGTH),
    ):
        for length in _MESSAGE_LENGTHS:
            combined.update(hash_fn(_selftest_prng(length, digest_size * length)))
    return combined.finalize(SHA3_512_DIGEST_LENGTH) == bytes.fromhex(_COMPOSITE_DIGEST)
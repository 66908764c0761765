"""Hash functions over 64-bit unsigned arithmetic, and binary formatting."""

_MASK64 = (1 << 64) - 1
_MAGIC = 0xDEADBEEF


def hash_generic(value, size):
    """Mix the bits of a 64-bit value and reduce it modulo ``size``."""
    bits = value & _MASK64
    bits ^= bits >> 4
    bits = ((bits + (bits << 5)) & _MASK64) ^ _MAGIC
    bits ^= bits >> 11
    return bits % size


def hash_int(key, size):
    """Hash an integer key by its 64-bit two's-complement bits."""
    return hash_generic(key, size)


def hash_string(key, size):
    """Polynomial hash (base 31) over the signed bytes of the UTF-8 text."""
    value = 0
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = (value * 31 + signed) & _MASK64
    return value % size


def hash_universal(key, a, b, p, size):
    """Universal hash ``((a * key + b) mod 2**64 mod p) mod size``."""
    return (((a * key + b) & _MASK64) % p) % size


def uint_to_string(n, bits):
    """The lowest ``bits`` bits of ``n`` as a string of 0s and 1s, most significant first."""
    if not 0 <= bits <= 64:
        raise ValueError(f"bit count out of range: {bits}")
    if bits == 0:
        return ""
    return format(n & _MASK64 & ((1 << bits) - 1), f"0{bits}b")
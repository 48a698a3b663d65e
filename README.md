# sigprims

Pure-Python primitives for building digital signature schemes:

- **ML-DSA (FIPS 204) building blocks**: arithmetic in Z_q with q = 8380417, polynomials,
  vectors and matrices in normal and NTT form, the decomposition helpers `power2round`,
  `decompose`, `high_bits` and `low_bits`, bit packing, SHAKE-based sampling, the byte
  layouts of keys and signatures for each parameter set, and hints.
- **RFC 6979** deterministic generation of the ephemeral scalar `k` for DSA and ECDSA,
  built on an HMAC-DRBG.

The package needs nothing beyond the Python standard library.

## Installation

```
pip install sigprims
```

## Modules

| Module | Contents |
| --- | --- |
| `sigprims.algebra` | `Elem`, `Polynomial`, `Vector`, `NttPolynomial`, `NttVector`, `NttMatrix`, `barrett_reduce`, and the constants `Q`, `N`, `D` |
| `sigprims.encoding` | `simple_bit_pack` / `simple_bit_unpack`, `bit_pack` / `bit_unpack` and their `_vector` forms, `range_encoding_bits`, `encoded_polynomial_size`, `flatten`, `unflatten`, `truncate` |
| `sigprims.ntt` | `ntt`, `ntt_inverse` (for a polynomial or a vector of polynomials) |
| `sigprims.xof` | `ShakeState`, with the shortcuts `g()` (SHAKE128) and `h()` (SHAKE256) |
| `sigprims.sampling` | `Eta`, `coeff_from_three_bytes`, `coeff_from_half_byte`, `sample_in_ball`, `rej_ntt_poly`, `rej_bounded_poly`, `expand_a`, `expand_s`, `expand_mask` |
| `sigprims.params` | `ParameterSet` and the instances `ML_DSA_44`, `ML_DSA_65`, `ML_DSA_87` |
| `sigprims.hint` | `Hint`, `make_hint`, `use_hint` |
| `sigprims.ct` | helpers for big-endian byte strings: `leading_zeros`, `rshift`, `is_zero`, `lt` |
| `sigprims.rfc6979` | `generate_k`, `HmacDrbg` |

Field elements are integers in `[0, q)`; signed values are stored as their residue mod q,
so `-x` is held as `q - x`. All value types are immutable. Malformed input (a coefficient
out of range for its encoding, a byte string of the wrong length, a non-canonical hint
encoding) raises `ValueError`.

## Examples

### RFC 6979 nonce

```python
import hashlib
from sigprims.rfc6979 import generate_k

q = bytes.fromhex("FFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551")
x = bytes.fromhex("C9AFA9D845BA75166B5C215767B1D6934E50C3DB36E89B127B8A622B120F6721")
h = hashlib.sha256(b"sample").digest()

k = generate_k(hashlib.sha256, x, q, h, b"")
assert k.hex().upper() == "A6E3C57DD01ABE90086538398355DD4C3B17AA873382B0F24D6129493D8AAD60"
```

`x`, `q` and `h` must have the same length, and `h` must already be reduced modulo `q`;
otherwise `ValueError` is raised. The digest may be a constructor such as
`hashlib.sha256` or a name such as `"sha256"`. `HmacDrbg(digest, entropy_input, nonce,
personalization_string)` is available directly; its `fill_bytes(length)` returns the
next `length` bytes of output.

### Polynomial arithmetic with the NTT

```python
from sigprims.algebra import Elem, Polynomial
from sigprims.ntt import ntt, ntt_inverse

f = Polynomial([Elem(i) for i in range(256)])
g = Polynomial([Elem(2 * i) for i in range(256)])

product = ntt_inverse(ntt(f) * ntt(g))   # f * g modulo X^256 + 1
assert ntt_inverse(ntt(f)) == f
```

### Sampling and hashing

```python
from sigprims.xof import h
from sigprims.sampling import sample_in_ball

digest = h().absorb(b"hello world").squeeze(32)
c = sample_in_ball(b"seed", 39)          # 39 coefficients of +-1, the rest 0
```

A `ShakeState` can be squeezed repeatedly for consecutive output; absorbing after the
first squeeze raises `RuntimeError`.

### Encodings for a parameter set

```python
from sigprims.params import ML_DSA_65

print(ML_DSA_65.signing_key_size, ML_DSA_65.verifying_key_size, ML_DSA_65.signature_size)
rho, t1 = ML_DSA_65.split_vk(bytes(ML_DSA_65.verifying_key_size))
t1_vector = ML_DSA_65.decode_t1(t1)
```

`ParameterSet` encodes and decodes `s1`, `s2`, `t0`, `t1`, `w1` and `z`, and joins and
splits signing keys, verifying keys, signatures and hints. `Hint.bit_pack()` and
`Hint.bit_unpack(params, data)` convert hints to and from their packed form.

## What the package does not do

It supplies the pieces from which ML-DSA is assembled, but has no key generation,
signing or verification functions of its own, and no PKCS#8 or other key-file formats.
It does not compute the signatures of DSA or ECDSA either: `generate_k` only derives the
nonce. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```
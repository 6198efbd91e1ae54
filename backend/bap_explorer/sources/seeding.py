"""BAP Explorer — Seeded value helpers for the synthetic chain.

Every synthetic record is drawn from its own `random.Random` seeded by
`<chain seed>:<kind>:<key>`. String seeds are hashed with SHA-512 by the
standard library, so output is stable across processes and PYTHONHASHSEED.
"""
import random


def rng_for(chain_seed: str, kind: str, key: object) -> random.Random:
    return random.Random(f"{chain_seed}:{kind}:{key}")


def hex_digits(rng: random.Random, count: int) -> str:
    return f"{rng.getrandbits(count * 4):0{count}x}"


def address(rng: random.Random) -> str:
    """20-byte account address."""
    return "0x" + hex_digits(rng, 40)


def tx_hash(rng: random.Random) -> str:
    """32-byte hash."""
    return "0x" + hex_digits(rng, 64)


def amount(rng: random.Random, low: float, high: float, places: int, unit: str = "BAP") -> str:
    return f"{rng.uniform(low, high):.{places}f} {unit}"

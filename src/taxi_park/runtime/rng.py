# runtime/rng.py
from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _crc32_u32(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


@dataclass(frozen=True)
class RNGKey:
    """Stream name plus optional sub-keys, all folded to u32."""

    stream: str
    parts: tuple[int, ...]

    @classmethod
    def from_parts(cls, stream: str, *parts: object) -> RNGKey:
        norm: list[int] = [_crc32_u32(stream)]
        for p in parts:
            if isinstance(p, (int, np.integer)):
                norm.append(_u32(int(p)))
            else:
                norm.append(_crc32_u32(p if isinstance(p, str) else repr(p)))
        return cls(stream=stream, parts=tuple(norm))


class RNGRegistry:
    """
    Named numpy Generators derived from [seed, scenario, *key.parts].
    Asking for the same key twice returns the same Generator.
    """

    def __init__(self, seed: int, *, scenario: str | int = 0):
        self.seed = _u32(seed)
        self.scenario_tag = _crc32_u32(str(scenario))

    @cache
    def generator(self, key: RNGKey) -> np.random.Generator:
        ss = np.random.SeedSequence(entropy=[self.seed, self.scenario_tag, *key.parts])
        return np.random.Generator(np.random.PCG64(ss))

    def stream(self, name: str) -> np.random.Generator:
        return self.generator(RNGKey.from_parts(name))

    def substream(self, name: str, *parts: object) -> np.random.Generator:
        return self.generator(RNGKey.from_parts(name, *parts))

import numpy as np
import pytest

import skmoebius as smb

SEED = 0xdeadbeef


class AlgebraSampler:
    """
    Seeded standard-normal source of algebra elements and transforms.
    """

    def __init__(self, seed: int = SEED) -> None:
        self.base = np.random.default_rng(seed)

    def sample(self) -> float:
        return float(self.base.standard_normal())

    def element(self, kind):
        if kind is float:
            return self.sample()
        if kind is complex:
            return complex(self.sample(), self.sample())
        return kind.from_components(self.base.standard_normal(kind.dim))

    def moebius(self, kind) -> smb.Moebius:
        return smb.Moebius(*(self.element(kind) for _ in range(4)))


@pytest.fixture()
def sampler() -> AlgebraSampler:
    return AlgebraSampler()

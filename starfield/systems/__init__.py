"""Generation systems: PRNG, seed derivation, names, world cells, markets."""

from starfield.systems.prng import SeedablePRNG
from starfield.systems.seeding import cell_seed, combine_seed
from starfield.systems.names import NameGenerator
from starfield.systems.world import WorldGenerator
from starfield.systems.market import MarketGenerator

__all__ = [
    "MarketGenerator",
    "NameGenerator",
    "SeedablePRNG",
    "WorldGenerator",
    "cell_seed",
    "combine_seed",
]

"""Grammar-driven station names.

Draw order is fixed: style, prefix, core name, designator, numeral. All
five draws happen regardless of the style picked, so a station's name
and everything rolled after it stay reproducible from the cell seed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from starfield.config import ConfigError

if TYPE_CHECKING:
    from starfield.config import WorldConfig
    from starfield.systems.prng import SeedablePRNG


_TEMPLATES: tuple[str, ...] = (
    "{prefix} {core}",
    "{core} {designator}",
    "{prefix} {numeral}",
    "{core} {numeral}",
    "{prefix} {core} {designator}",
)


class NameGenerator:
    """Fills one of five name templates from four word lists."""

    __slots__ = ("_prefixes", "_core_names", "_designators", "_numerals")

    def __init__(
        self,
        prefixes: Sequence[str],
        core_names: Sequence[str],
        designators: Sequence[str],
        numerals: Sequence[str],
    ) -> None:
        for label, words in (
            ("prefixes", prefixes), ("core_names", core_names),
            ("designators", designators), ("numerals", numerals),
        ):
            if not words:
                raise ConfigError(f"NameGenerator: {label} must not be empty")
        self._prefixes = tuple(prefixes)
        self._core_names = tuple(core_names)
        self._designators = tuple(designators)
        self._numerals = tuple(numerals)

    @classmethod
    def from_config(cls, config: WorldConfig) -> NameGenerator:
        return cls(
            config.station_prefixes,
            config.station_core_names,
            config.station_designators,
            config.station_numerals,
        )

    def generate(self, rng: SeedablePRNG) -> str:
        style = rng.random_int(0, len(_TEMPLATES))
        words = {
            "prefix": rng.pick(self._prefixes),
            "core": rng.pick(self._core_names),
            "designator": rng.pick(self._designators),
            "numeral": rng.pick(self._numerals),
        }
        return _TEMPLATES[style].format(**words)

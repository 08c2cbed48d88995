"""Word lists for procedural station names."""

from __future__ import annotations

PREFIXES: tuple[str, ...] = (
    "Deep Space", "Orbital", "Star Command", "Sector", "Outpost",
    "System Control", "Starport", "Gateway", "Relay", "Research",
    "Mining", "Trade", "Waypoint", "Observation Post", "Security Hub",
)

CORE_NAMES: tuple[str, ...] = (
    "Alpha", "Beta", "Gamma", "Delta", "Omega", "Epsilon", "Zeta", "Sigma",
    "Tau", "Orion", "Cygnus", "Lyra", "Andromeda", "Centauri", "Proxima",
    "Kepler", "Nova", "Helios", "Sol", "Terra", "Prometheus", "Olympus",
    "Asgard", "Valhalla", "Hades", "Terminus", "Citadel", "Hub", "Spire",
    "Beacon", "Reach", "Vantage", "Horizon", "Zenith", "Apex", "Nebula",
    "Quasar", "Pulsar", "Aegis", "Nexus", "Crucible", "Bastion", "Odyssey",
    "Voyager", "Pioneer", "Discovery",
)

DESIGNATORS: tuple[str, ...] = (
    "Prime", "Secundus", "Tertius", "Command", "Major", "Minor", "Deep",
    "High Orbit", "Low Orbit", "Lagrange",
)

NUMERALS: tuple[str, ...] = (
    "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X",
    "XI", "XII", "XIII", "XIV", "XV", "XVI", "XVII", "XVIII", "XIX", "XX",
)

"""
Place atoms of a structure string in 3D for the molecule viewer.

This is not a geometry optimisation: atoms follow a zig-zag chain in token
order and get a little seeded jitter so different molecules look different
while the same molecule always looks the same.
"""

from typing import NamedTuple, Optional

from rxnsim.seeded import SeededRandom
from rxnsim.smiles_tokens import tokenize

BOND_SPACING = 1.4   # Å along x
ZIGZAG_OFFSET = 0.6  # Å above/below the chain axis
JITTER = 0.4         # max displacement per axis

# CPK / Jmol palette
ELEMENT_COLORS = {
    "H":  "#FFFFFF",
    "C":  "#909090",
    "N":  "#3050F8",
    "O":  "#FF0D0D",
    "F":  "#90E050",
    "Na": "#AB5CF2",
    "Mg": "#8AFF00",
    "P":  "#FF8000",
    "S":  "#FFFF30",
    "Cl": "#1FF01F",
    "K":  "#8F40D4",
    "Ca": "#3DFF00",
    "Fe": "#E06633",
    "Br": "#A62929",
    "I":  "#940094",
}
DEFAULT_ATOM_COLOR = "#FF1493"


class AtomSite(NamedTuple):
    symbol: str
    color: str
    x: float
    y: float
    z: float


def atom_color(symbol: str) -> str:
    return ELEMENT_COLORS.get(symbol, DEFAULT_ATOM_COLOR)


def layout_atoms(structure: str, seed: Optional[str] = None) -> list[AtomSite]:
    symbols = tokenize(structure)
    rng = SeededRandom(structure if seed is None else seed)
    center = (len(symbols) - 1) / 2
    sites = []
    for i, symbol in enumerate(symbols):
        x = (i - center) * BOND_SPACING + rng.uniform(-JITTER, JITTER)
        y = (ZIGZAG_OFFSET if i % 2 else -ZIGZAG_OFFSET) + rng.uniform(-JITTER, JITTER)
        z = rng.uniform(-JITTER, JITTER)
        sites.append(AtomSite(symbol, atom_color(symbol), x, y, z))
    return sites


def bond_pairs(atom_count: int) -> list[tuple[int, int]]:
    # chain bonds between neighbours in token order
    return [(i, i + 1) for i in range(atom_count - 1)]

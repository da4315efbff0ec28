"""
Reaction conditions: solvent tables, default libraries and the reaction-time heuristic.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType

DEFAULT_SOLVENT = "water"
DEFAULT_SOLVENT_SMILES = "O"
DEFAULT_SOLVENT_FACTOR = 1.0

DEFAULT_TEMPERATURE_K = 298.0
DEFAULT_PRESSURE_ATM = 1.0

# ── SOLVENTS ───────────────────────────────────────────
SOLVENT_OPTIONS = (
    ("water", "Water"),
    ("ethanol", "Ethanol"),
    ("methanol", "Methanol"),
    ("acetone", "Acetone"),
    ("acetonitrile", "Acetonitrile"),
    ("dmso", "DMSO"),
    ("thf", "THF"),
    ("dcm", "Dichloromethane"),
    ("toluene", "Toluene"),
    ("hexane", "Hexane"),
)

SOLVENT_SMILES = MappingProxyType({
    "water":        "O",
    "ethanol":      "CCO",
    "methanol":     "CO",
    "acetone":      "CC(C)=O",
    "acetonitrile": "CC#N",
    "dmso":         "CS(=O)C",
    "thf":          "C1CCOC1",
    "dcm":          "ClCCl",
    "toluene":      "CC1=CC=CC=C1",
    "hexane":       "CCCCCC",
})

# < 1.0 speeds a reaction up, > 1.0 slows it down
SOLVENT_FACTORS = MappingProxyType({
    "water":        1.0,
    "ethanol":      0.9,
    "methanol":     0.9,
    "acetone":      0.85,
    "acetonitrile": 0.85,
    "dmso":         0.8,
    "thf":          0.95,
    "dcm":          1.05,
    "toluene":      1.1,
    "hexane":       1.2,
})

# ── QUICK-PICK LIBRARIES (label, SMILES) ───────────────
COMMON_REACTANTS = (
    ("Ethanol", "CCO"),
    ("Methanol", "CO"),
    ("Acetic acid", "CC(=O)O"),
    ("Acetone", "CC(C)=O"),
    ("Benzene", "C1=CC=CC=C1"),
    ("Bromoethane", "CCBr"),
    ("Chloroform", "ClC(Cl)Cl"),
    ("Ethylene", "C=C"),
)

COMMON_SOLUTES = (
    ("Sodium chloride", "[Na+].[Cl-]"),
    ("Sodium hydroxide", "[Na+].[OH-]"),
    ("Sulfuric acid", "OS(=O)(=O)O"),
    ("Potassium bromide", "[K+].[Br-]"),
    ("Glucose", "OCC1OC(O)C(O)C(O)C1O"),
)


@dataclass(frozen=True)
class ReactionConditions:
    temperature: float = DEFAULT_TEMPERATURE_K  # K
    pressure: float = DEFAULT_PRESSURE_ATM      # atm
    solvent: str = DEFAULT_SOLVENT


def solvent_smiles(solvent_key: str) -> str:
    return SOLVENT_SMILES.get(solvent_key, DEFAULT_SOLVENT_SMILES)


def solvent_factor(solvent_key: str) -> float:
    return SOLVENT_FACTORS.get(solvent_key, DEFAULT_SOLVENT_FACTOR)


def temperature_factor(temperature_k: float) -> float:
    return max(0.4, 1.6 - (temperature_k - 273) / 300)


def pressure_factor(pressure_atm: float) -> float:
    return max(0.7, 1.2 - (pressure_atm - 1) * 0.05)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_reaction_time_minutes(reactants_count: int,
                                   solutes_count: int,
                                   solvent_key: str,
                                   temperature_k: float,
                                   pressure_atm: float) -> int:
    """
    Illustrative completion time in minutes, never below 5.

    More species take longer, heat and pressure speed things up until their
    factors bottom out at 0.4 and 0.7. Not a kinetic model.
    """
    base = 30 + 20 * reactants_count + 10 * solutes_count
    base *= solvent_factor(solvent_key)
    minutes = base * temperature_factor(temperature_k) * pressure_factor(pressure_atm)
    return max(5, round_half_up(minutes))


def estimate_for_conditions(reactants_count, solutes_count, conditions: ReactionConditions) -> int:
    return estimate_reaction_time_minutes(
        reactants_count, solutes_count,
        conditions.solvent, conditions.temperature, conditions.pressure,
    )


def format_duration(minutes: int) -> str:
    if minutes >= 60:
        hours, rest = divmod(minutes, 60)
        return f"{hours}h {rest}m"
    return f"{minutes} min"

"""
Placeholder safety, environmental and regulatory indicators for a simulated reaction.

Every value is derived from the product/solvent strings through
score_from_seed, so it is stable for a given reaction but carries no
scientific meaning.
"""

from typing import NamedTuple

from rxnsim.seeded import score_from_seed

# (label, salt)
SAFETY_METRICS = (
    ("Acute Toxicity", "tox"),
    ("Flammability", "flamm"),
    ("Reactivity", "react"),
    ("Environmental Hazard", "env"),
    ("Exposure Risk", "exp"),
    ("Corrosivity", "corr"),
)

# (agency, salt, status above threshold, status otherwise)
REGULATORY_CHECKS = (
    ("FDA", "fda", "Permissible", "Restricted"),
    ("REACH", "reach", "Compliant", "Review Needed"),
    ("OSHA", "osha", "Precautions Required", "Standard"),
)
REGULATORY_THRESHOLD = 50

POTENTIAL_APPLICATIONS = (
    "Solvent-based synthesis workflows and purification steps",
    "Process development and scale-up feasibility studies",
    "Analytical reference for QC/QA in manufacturing",
    "Intermediate for downstream functionalization",
    "Formulation trials for coatings or pharma excipients",
)

DISCLAIMER = "Results are simulated and indicative. Validate with lab data prior to industrial deployment."


class SafetyMetric(NamedTuple):
    label: str
    key: str
    score: int


class RegulatoryFlag(NamedTuple):
    agency: str
    status: str
    above_threshold: bool


def products_seed(products) -> str:
    return ".".join(products)


def safety_metrics(products, solvent_smiles: str) -> list[SafetyMetric]:
    if not products:
        return []
    seed = f"{products_seed(products)}|{solvent_smiles}"
    return [SafetyMetric(label, key, score_from_seed(seed, key)) for label, key in SAFETY_METRICS]


def regulatory_snapshot(products) -> list[RegulatoryFlag]:
    if not products:
        return []
    seed = products_seed(products)
    flags = []
    for agency, key, above, below in REGULATORY_CHECKS:
        passed = score_from_seed(seed, key) > REGULATORY_THRESHOLD
        flags.append(RegulatoryFlag(agency, above if passed else below, passed))
    return flags

"""
Mocked reaction run: clean the inputs, pick products, and collect what the
results screen shows (solvent, solution previews, estimated time).
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from rxnsim.cheminfo import ChemServiceClient, ChemServiceError
from rxnsim.conditions import ReactionConditions, estimate_for_conditions, solvent_smiles
from rxnsim.smiles_tokens import sanitize_smiles

logger = logging.getLogger(__name__)

MOCK_PRODUCTS = ("CCO", "O")


@dataclass
class SimulationResult:
    reactants: list[str]
    solutes: list[str]
    conditions: ReactionConditions
    products: list[str] = field(default_factory=list)
    source: str = "mock"  # "mock" or "service"
    estimated_minutes: int = 0

    @property
    def byproducts(self) -> list[str]:
        return self.products[1:]

    @property
    def solvent_smiles(self) -> str:
        return solvent_smiles(self.conditions.solvent)

    @property
    def solution_seed_before(self) -> str:
        first = self.reactants[0] if self.reactants else ""
        return f"{first}+{self.solvent_smiles}"

    @property
    def solution_seed_after(self) -> str:
        if not self.products:
            return self.solution_seed_before
        return f"{'.'.join(self.products)}+{self.solvent_smiles}"


def clean_inputs(values) -> list[str]:
    cleaned = (sanitize_smiles(v) for v in values or [])
    return [v for v in cleaned if v]


def predict_products(reactants, solutes, conditions: ReactionConditions,
                     client: Optional[ChemServiceClient] = None):
    """Products from the cheminformatics service when it is configured, mock products otherwise."""
    if client is not None and client.config.configured and reactants:
        try:
            products = clean_inputs(client.predict_products(
                reactants,
                reagents=solutes,
                conditions={
                    "temperature": conditions.temperature,
                    "pressure": conditions.pressure,
                    "solvent": conditions.solvent,
                },
            ))
        except ChemServiceError as e:
            logger.warning("Product prediction failed, using mock products: %s", e)
        else:
            if products:
                return products, "service"
            logger.info("Service predicted no products for %s, using mock products", reactants)
    return list(MOCK_PRODUCTS), "mock"


def run_simulation(reactants, solutes=None, conditions: Optional[ReactionConditions] = None,
                   client: Optional[ChemServiceClient] = None) -> SimulationResult:
    conditions = conditions or ReactionConditions()
    reactants = clean_inputs(reactants)
    solutes = clean_inputs(solutes)

    products, source = predict_products(reactants, solutes, conditions, client)
    minutes = estimate_for_conditions(len(reactants), len(solutes), conditions)
    logger.info("Simulated %d reactant(s) in %s -> %s (%s)",
                len(reactants), conditions.solvent, ".".join(products), source)
    return SimulationResult(
        reactants=reactants,
        solutes=solutes,
        conditions=conditions,
        products=products,
        source=source,
        estimated_minutes=minutes,
    )

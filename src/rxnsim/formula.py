## molecular formulas from SMILES tokens (Hill system)

from collections import Counter

from rdkit import Chem, RDLogger
from rdkit.Chem import rdMolDescriptors

from rxnsim.smiles_tokens import tokenize

FORMULA_PLACEHOLDER = "—"

# RDKit prints a parse error for every bad SMILES typed in the app
RDLogger.DisableLog("rdApp.error")


def count_elements(tokens) -> dict[str, int]:
    return dict(Counter(tokens))


def hill_order(counts: dict[str, int]) -> list[str]:
    """Symbols in Hill order: C, H, then alphabetical; alphabetical if no carbon."""
    if "C" not in counts:
        return sorted(counts)
    rest = sorted(sym for sym in counts if sym not in ("C", "H"))
    head = ["C", "H"] if "H" in counts else ["C"]
    return head + rest


def format_formula(tokens) -> str:
    """
    Hill-system formula for a sequence of element tokens.

    ["C","C","O","H","H","H","H","H","H"] -> "C2H6O"
    ["Na","Cl"] -> "ClNa"
    [] -> ""
    """
    counts = count_elements(tokens)
    parts = []
    for symbol in hill_order(counts):
        n = counts[symbol]
        parts.append(f"{symbol}{n}" if n > 1 else symbol)
    return "".join(parts)


def formula_from_smiles(smiles: str) -> str:
    return format_formula(tokenize(smiles))


def display_formula(smiles: str) -> str:
    return formula_from_smiles(smiles) or FORMULA_PLACEHOLDER


def rdkit_formula(smiles):
    """Convert SMILES to a molecular formula (Hill system, implicit H included) using RDKit."""
    if not smiles:
        return None
    mol = Chem.MolFromSmiles(smiles)
    if not mol:
        return None
    return rdMolDescriptors.CalcMolFormula(mol)

'''Tokenizer, sanitizer and Hill formulas.'''

from rxnsim.formula import count_elements, display_formula, format_formula, formula_from_smiles, rdkit_formula
from rxnsim.smiles_tokens import MAX_SMILES_LENGTH, sanitize_smiles, tokenize


def test_tokenize_simple():
    assert tokenize("CCO") == ["C", "C", "O"]
    assert tokenize("ClCCl") == ["Cl", "C", "Cl"]
    # ionic species in brackets
    assert tokenize("[Na+].[Cl-]") == ["Na", "Cl"]
    assert tokenize("OS(=O)(=O)O") == ["O", "S", "O", "O", "O"]


def test_tokenize_halogen_priority():
    assert tokenize("Br") == ["Br"]
    assert tokenize("CCBr") == ["C", "C", "Br"]


def test_tokenize_skips_non_symbols():
    assert tokenize("") == []
    assert tokenize("123()=") == []
    # aromatic lowercase atoms are dropped
    assert tokenize("c1ccccc1") == []
    assert tokenize("n1cc[nH]c1") == ["H"]


def test_tokenize_keeps_symbol_shaped_junk():
    assert tokenize("CXx") == ["C", "Xx"]


def test_tokenize_is_idempotent():
    assert tokenize("CC(=O)OCC") == tokenize("CC(=O)OCC")


def test_sanitize_smiles():
    assert sanitize_smiles("C C O!") == "CCO"
    assert sanitize_smiles("[NH4+].[Cl-]") == "[NH4+].[Cl-]"
    assert sanitize_smiles("C/C=C\\C") == "C/C=C\\C"
    assert sanitize_smiles("[C:1]*") == "[C:1]*"
    assert sanitize_smiles(None) == ""
    assert len(sanitize_smiles("C" * 500)) == MAX_SMILES_LENGTH


def test_format_formula_hill_order():
    # Ethanol with explicit hydrogens, out of order
    assert format_formula(["C", "C", "O", "H", "H", "H", "H", "H", "H"]) == "C2H6O"
    assert format_formula(["O"]) == "O"
    assert format_formula([]) == ""
    # no carbon: plain alphabetical
    assert format_formula(["Na", "Cl"]) == "ClNa"
    assert format_formula(["O", "H", "H"]) == "H2O"


def test_format_formula_carbon_without_hydrogen():
    assert format_formula(["Cl", "C", "Cl", "Cl", "Cl"]) == "CCl4"
    assert format_formula(["O", "C", "O"]) == "CO2"


def test_format_formula_order_independent():
    assert format_formula(["O", "C", "H", "N"]) == format_formula(["N", "H", "C", "O"]) == "CHNO"


def test_count_elements():
    assert count_elements(["C", "C", "O"]) == {"C": 2, "O": 1}
    assert count_elements([]) == {}


def test_formula_from_smiles():
    assert formula_from_smiles("ClC(Cl)Cl") == "CCl3"
    assert formula_from_smiles("[Na+].[OH-]") == "HNaO"
    assert display_formula("") == "—"
    assert display_formula("CCO") == "C2O"


def test_rdkit_formula():
    # implicit hydrogens are counted by RDKit
    assert rdkit_formula("CO") == "CH4O"
    assert rdkit_formula("O") == "H2O"
    assert rdkit_formula("CCO") == "C2H6O"
    assert rdkit_formula("C1CC") is None
    assert rdkit_formula("") is None

"""
Lex element symbols out of SMILES-like strings and clean raw form input.
"""

import re

MAX_SMILES_LENGTH = 200

# Cl/Br first so they are never split into C+l / B+r
ELEMENT_TOKEN = re.compile(r"Cl|Br|[A-Z][a-z]?")
ALLOWED_SMILES_CHARS = re.compile(r"[A-Za-z0-9@+\-\[\]()=#\\/.*:]")


def tokenize(structure: str) -> list[str]:
    """Element symbols in order of appearance, e.g. "ClCCl" -> ["Cl", "C", "Cl"].

    Digits, brackets, bond symbols and lowercase (aromatic) atoms are skipped.
    Symbol-shaped text that is not a real element is still returned.
    """
    if not structure:
        return []
    return ELEMENT_TOKEN.findall(structure)


def sanitize_smiles(text, max_length: int = MAX_SMILES_LENGTH) -> str:
    # keep SMILES characters only, then cap the length
    if not text:
        return ""
    cleaned = "".join(ALLOWED_SMILES_CHARS.findall(text))
    return cleaned[:max_length]

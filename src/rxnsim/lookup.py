"""
Look up compounds on PubChem: CID, name/SMILES/formula/weight and structure images.
"""

import logging
from typing import Optional
from urllib.parse import quote, urlencode

import pubchempy as pcp
import requests
import streamlit as st

logger = logging.getLogger(__name__)

PUBCHEM_BASE = "https://pubchem.ncbi.nlm.nih.gov/rest/pug"
PUBCHEM_PROPERTIES = "IUPACName,CanonicalSMILES,MolecularFormula,MolecularWeight"
NAMESPACES = ("name", "smiles", "cid")
REQUEST_TIMEOUT = 10


def build_image_url(identifier: str, namespace: str,
                    record_type: Optional[str] = None,
                    image_size: Optional[str] = None) -> str:
    """PNG endpoint for a compound, e.g. .../compound/name/ethanol/PNG?record_type=3d"""
    url = f"{PUBCHEM_BASE}/compound/{namespace}/{quote(str(identifier), safe='')}/PNG"
    params = {}
    if record_type:
        params["record_type"] = record_type
    if image_size:
        params["image_size"] = image_size
    if params:
        url += "?" + urlencode(params)
    return url


@st.cache_data(ttl=3600)
def get_cid(query: str, namespace: str = "smiles") -> Optional[int]:
    # PubChem is organised around compound IDs, so every lookup starts here
    cid_url = f"{PUBCHEM_BASE}/compound/{namespace}/{quote(query, safe='')}/cids/JSON"
    try:
        cid_response = requests.get(cid_url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.warning("PubChem CID lookup failed for %r: %s", query, e)
        return None

    if cid_response.status_code != 200:
        # 404 means "not found", anything else is logged
        if cid_response.status_code != 404:
            logger.warning("PubChem returned %s for %r", cid_response.status_code, query)
        return None

    cids = cid_response.json().get("IdentifierList", {}).get("CID", [])
    if not cids:
        return None
    return int(cids[0])


def _first_property_row(data: dict) -> dict:
    rows = data.get("PropertyTable", {}).get("Properties", [])
    return rows[0] if rows else {}


def _smiles_field(row: dict) -> Optional[str]:
    # PubChem now labels the canonical form "ConnectivitySMILES"
    return row.get("CanonicalSMILES") or row.get("ConnectivitySMILES")


@st.cache_data(ttl=3600)
def resolve_compound(query: str, namespace: str = "name") -> dict:
    """
    Resolve a compound by name or SMILES.

    Returns a dict with ``cid`` (None when not found) and, when the property
    request succeeds, ``iupac_name``, ``canonical_smiles``, ``molecular_formula``
    and ``molecular_weight``. Missing values are None.
    """
    record = {
        "cid": None,
        "iupac_name": None,
        "canonical_smiles": None,
        "molecular_formula": None,
        "molecular_weight": None,
    }
    cid = get_cid(query, namespace)
    if cid is None:
        return record
    record["cid"] = cid

    prop_url = f"{PUBCHEM_BASE}/compound/cid/{cid}/property/{PUBCHEM_PROPERTIES}/JSON"
    try:
        prop_response = requests.get(prop_url, headers={"Accept": "application/json"},
                                     timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.warning("PubChem property lookup failed for CID %s: %s", cid, e)
        return record
    if prop_response.status_code != 200:
        logger.warning("PubChem returned %s for CID %s properties", prop_response.status_code, cid)
        return record

    row = _first_property_row(prop_response.json())
    weight = row.get("MolecularWeight")
    record.update(
        iupac_name=row.get("IUPACName"),
        canonical_smiles=_smiles_field(row),
        molecular_formula=row.get("MolecularFormula"),
        molecular_weight=float(weight) if weight is not None else None,
    )
    return record


@st.cache_data(ttl=3600)
def name_to_smiles(chemical_name: str) -> Optional[str]:
    if not chemical_name:
        return None

    try:
        # Try with PubChemPy
        compounds = pcp.get_compounds(chemical_name, "name")
        if compounds:
            smiles = compounds[0].canonical_smiles
            if smiles:
                return smiles
    except (pcp.PubChemPyError, requests.RequestException, OSError) as e:
        logger.warning("PubChemPy lookup failed for %r: %s", chemical_name, e)

    # Backup method using PubChem API directly
    url = f"{PUBCHEM_BASE}/compound/name/{quote(chemical_name, safe='')}/property/CanonicalSMILES/JSON"
    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.warning("PubChem name lookup failed for %r: %s", chemical_name, e)
        return None
    if response.status_code != 200:
        return None
    return _smiles_field(_first_property_row(response.json()))

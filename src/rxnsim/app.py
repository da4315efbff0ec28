import logging
import os

import streamlit as st
from streamlit_ketcher import st_ketcher

from rxnsim.cheminfo import ChemServiceClient, ChemServiceError
from rxnsim.conditions import (
    COMMON_REACTANTS,
    COMMON_SOLUTES,
    DEFAULT_PRESSURE_ATM,
    DEFAULT_TEMPERATURE_K,
    SOLVENT_OPTIONS,
    ReactionConditions,
    estimate_for_conditions,
    format_duration,
)
from rxnsim.formula import display_formula, rdkit_formula
from rxnsim.lookup import build_image_url, name_to_smiles, resolve_compound
from rxnsim.safety import DISCLAIMER, POTENTIAL_APPLICATIONS, regulatory_snapshot, safety_metrics
from rxnsim.simulator import clean_inputs, run_simulation
from rxnsim.smiles_tokens import sanitize_smiles
from rxnsim.viewer import molecule_figure

logging.basicConfig(level=os.environ.get("RXNSIM_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Reaction Simulator", layout="wide")

SOLVENT_LABELS = dict(SOLVENT_OPTIONS)

# ── "SUBMITTED" FLAG + RESET ──────────────────────────
if "submitted" not in st.session_state:
    st.session_state.submitted = False
if "reactants_count" not in st.session_state:
    st.session_state.reactants_count = 1
if "solutes_count" not in st.session_state:
    st.session_state.solutes_count = 0


def do_reset():
    st.session_state.submitted = False
    st.session_state.pop("result", None)


def add_component(component_type):
    st.session_state[f"{component_type}s_count"] += 1


def remove_component(component_type):
    floor = 1 if component_type == "reactant" else 0
    if st.session_state[f"{component_type}s_count"] > floor:
        st.session_state[f"{component_type}s_count"] -= 1


# Unified input: type SMILES, pick from the library, enter a name, or draw
def get_smiles_input(label, key, index, library):
    unique_key = f"{key}_{index}"
    st.markdown(f"**{label} {index}**")
    tab1, tab2, tab3, tab4 = st.tabs(["Enter SMILES", "Library", "Chemical Name", "Draw Structure"])

    with tab1:
        typed = st.text_input(f"{label} SMILES", key=f"{unique_key}_typed")
    with tab2:
        picked = st.selectbox(
            f"Common {label.lower()}s", [""] + [name for name, _ in library],
            key=f"{unique_key}_lib",
        )
    with tab3:
        chem_name = st.text_input(f"{label} chemical name", key=f"{unique_key}_name")
    with tab4:
        drawn = st_ketcher(value="", key=f"{unique_key}_draw")

    # priority: SMILES > library > name > drawing
    if typed:
        return sanitize_smiles(typed)
    if picked:
        return dict(library)[picked]
    if chem_name:
        converted = name_to_smiles(chem_name.strip())
        if not converted:
            st.error(f"Could not find SMILES for '{chem_name}'")
        return sanitize_smiles(converted)
    return sanitize_smiles(drawn)


def show_molecule(title, smiles, seed=None, height=260):
    st.markdown(f"**{title}** · {display_formula(smiles)}")
    if smiles:
        st.plotly_chart(molecule_figure(smiles, seed, height=height), width="stretch")
        st.caption(smiles)
    else:
        st.info("Nothing to show yet.")


# ── 1) INPUT SCREEN ───────────────────────────────────────────────────
if not st.session_state.submitted:
    st.title("Reaction Setup")

    col_r, col_c = st.columns([3, 2])
    with col_r:
        st.header("🧪 Reactants")
        reactants = []
        for i in range(1, st.session_state.reactants_count + 1):
            reactants.append(get_smiles_input("Reactant", "reactant", i, COMMON_REACTANTS))
        c1, c2 = st.columns(2)
        c1.button("Add Reactant ➕", on_click=add_component, args=("reactant",))
        c2.button("Remove Reactant ➖", on_click=remove_component, args=("reactant",),
                  disabled=st.session_state.reactants_count <= 1)

        st.header("🧂 Solutes (optional)")
        solutes = []
        for i in range(1, st.session_state.solutes_count + 1):
            solutes.append(get_smiles_input("Solute", "solute", i, COMMON_SOLUTES))
        c1, c2 = st.columns(2)
        c1.button("Add Solute ➕", on_click=add_component, args=("solute",))
        c2.button("Remove Solute ➖", on_click=remove_component, args=("solute",),
                  disabled=st.session_state.solutes_count <= 0)

    with col_c:
        st.header("🌡️ Conditions")
        solvent = st.selectbox("Solvent", [k for k, _ in SOLVENT_OPTIONS],
                               format_func=SOLVENT_LABELS.get)
        temperature = st.slider("Temperature (K)", 200.0, 800.0, DEFAULT_TEMPERATURE_K, 1.0)
        pressure = st.slider("Pressure (atm)", 0.5, 20.0, DEFAULT_PRESSURE_ATM, 0.5)
        conditions = ReactionConditions(temperature=temperature, pressure=pressure, solvent=solvent)

        minutes = estimate_for_conditions(len(clean_inputs(reactants)), len(clean_inputs(solutes)), conditions)
        st.markdown(f"Estimated real-world completion time: **{format_duration(minutes)}**")

        first = next((r for r in reactants if r), "")
        show_molecule("Reactant preview", first)

    if st.button("✅ Run simulation", type="primary"):
        if not clean_inputs(reactants):
            st.error("Enter at least one reactant.")
        else:
            with st.spinner("Simulating reaction..."):
                result = run_simulation(reactants, solutes, conditions, ChemServiceClient())
            st.session_state.result = result
            st.session_state.submitted = True
            st.rerun()

# ── 2) RESULTS SCREEN ─────────────────────────────────────────────────
else:
    result = st.session_state.result
    st.title("Reaction Results")
    st.button("🔄 Start Over", on_click=do_reset)

    if result.source == "mock":
        st.caption("Products are illustrative. Configure the cheminformatics service for predictions.")

    reactants_txt = " + ".join(display_formula(r) for r in result.reactants)
    products_txt = " + ".join(display_formula(p) for p in result.products)
    st.subheader(f"{reactants_txt} → {products_txt}")
    st.markdown(
        f"**Solvent:** {SOLVENT_LABELS.get(result.conditions.solvent, result.conditions.solvent)}"
        f" | **T:** {result.conditions.temperature:.0f} K"
        f" | **P:** {result.conditions.pressure:.1f} atm"
        f" | **Estimated time:** {format_duration(result.estimated_minutes)}"
    )

    col_r, col_p = st.columns(2)
    with col_r:
        st.header("Reactants")
        for i, smi in enumerate(result.reactants, 1):
            show_molecule(f"Reactant {i}", smi)
    with col_p:
        st.header("Products")
        show_molecule("Main product", result.products[0] if result.products else "")
        for i, smi in enumerate(result.byproducts, 1):
            show_molecule(f"Byproduct {i}", smi, height=200)

    col_s, col_sol = st.columns(2)
    with col_s:
        show_molecule("Solvent", result.solvent_smiles)
    with col_sol:
        show_molecule("Solution", result.solution_seed_after)

    # ── SAFETY, ENVIRONMENT & APPLICATIONS ────────────────────────────
    st.header("Safety, Environmental Impact & Applications")
    metrics = safety_metrics(result.products, result.solvent_smiles)
    cols = st.columns(3)
    for i, metric in enumerate(metrics):
        with cols[i % 3]:
            st.markdown(f"**{metric.label}** · {metric.score}%")
            st.progress(metric.score)

    st.subheader("Regulatory Compliance Snapshot")
    cols = st.columns(3)
    for col, flag in zip(cols, regulatory_snapshot(result.products)):
        col.metric(f"{flag.agency} Status", flag.status)

    st.subheader("Potential Applications")
    st.markdown("\n".join(f"- {line}" for line in POTENTIAL_APPLICATIONS))
    st.caption(f"Note: {DISCLAIMER}")

    # ── DETAILS ───────────────────────────────────────────────────────
    client = ChemServiceClient()
    with st.expander("Compound details", expanded=False):
        for smi in dict.fromkeys(result.reactants + result.products):
            st.markdown(f"### {smi}")
            col1, col2 = st.columns([1, 2])
            with col1:
                st.image(build_image_url(smi, "smiles", "2d", "200x200"), width=150)
            with col2:
                st.markdown(f"**Token formula:** {display_formula(smi)}")
                st.markdown(f"**RDKit formula:** {rdkit_formula(smi) or 'invalid SMILES'}")
                record = resolve_compound(smi, "smiles")
                if record["cid"] is not None:
                    st.markdown(f"**PubChem CID:** {record['cid']}")
                    st.markdown(f"**IUPAC name:** {record['iupac_name'] or '—'}")
                    if record["molecular_weight"] is not None:
                        st.markdown(f"**Molecular weight:** {record['molecular_weight']:.2f} g/mol")
                else:
                    st.write("_Not found on PubChem_")
                if client.config.configured:
                    try:
                        check = client.validate_structure(smi)
                    except ChemServiceError as e:
                        st.warning(str(e))
                    else:
                        verdict = "valid" if check.get("isValid") else "invalid"
                        st.markdown(f"**Service check:** {verdict} {check.get('message') or ''}")

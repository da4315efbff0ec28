import pytest

from rxnsim.conditions import (
    SOLVENT_FACTORS,
    SOLVENT_OPTIONS,
    SOLVENT_SMILES,
    ReactionConditions,
    estimate_for_conditions,
    estimate_reaction_time_minutes,
    format_duration,
    pressure_factor,
    solvent_factor,
    solvent_smiles,
    temperature_factor,
)


def test_estimate_room_conditions():
    # base 50, temp factor 1.5167, pressure factor 1.2
    assert estimate_reaction_time_minutes(1, 0, "water", 298, 1) == 91


def test_estimate_uses_solvent_factor():
    assert estimate_reaction_time_minutes(1, 0, "ethanol", 298, 1) == 82
    # unknown solvents count as 1.0
    assert estimate_reaction_time_minutes(1, 0, "unobtainium", 298, 1) == 91


def test_estimate_counts_species():
    assert estimate_reaction_time_minutes(2, 1, "water", 298, 1) == 146


def test_temperature_factor_clamp():
    assert temperature_factor(273) == pytest.approx(1.6)
    assert temperature_factor(573) == pytest.approx(0.6)
    assert temperature_factor(633) == pytest.approx(0.4)
    assert temperature_factor(1000) == 0.4


def test_pressure_factor_clamp():
    assert pressure_factor(1) == pytest.approx(1.2)
    assert pressure_factor(10) == pytest.approx(0.75)
    assert pressure_factor(11) == pytest.approx(0.7)
    assert pressure_factor(20) == 0.7


def test_estimate_at_both_floors():
    # 50 * 0.4 * 0.7
    assert estimate_reaction_time_minutes(1, 0, "water", 1000, 20) == 14
    assert estimate_reaction_time_minutes(0, 0, "dmso", 2000, 50) == 7


def test_estimate_is_idempotent():
    args = (3, 2, "toluene", 350, 2.5)
    assert estimate_reaction_time_minutes(*args) == estimate_reaction_time_minutes(*args)


def test_estimate_for_conditions_defaults():
    assert estimate_for_conditions(1, 0, ReactionConditions()) == 91


def test_format_duration():
    assert format_duration(5) == "5 min"
    assert format_duration(59) == "59 min"
    assert format_duration(60) == "1h 0m"
    assert format_duration(146) == "2h 26m"


def test_solvent_tables_consistent():
    keys = [k for k, _ in SOLVENT_OPTIONS]
    assert set(keys) == set(SOLVENT_SMILES) == set(SOLVENT_FACTORS)
    assert solvent_smiles("water") == "O"
    assert solvent_smiles("dmso") == "CS(=O)C"
    assert solvent_smiles("nope") == "O"
    assert solvent_factor("nope") == 1.0


def test_solvent_tables_are_read_only():
    with pytest.raises(TypeError):
        SOLVENT_FACTORS["water"] = 2.0

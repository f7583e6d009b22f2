import pytest

from glycoseq import mass
from glycoseq.glycan import Glycan, Monosaccharide
from glycoseq.mass import (
    IonType,
    amino_acid_mass,
    glycan_mass,
    ion_mass,
    peptide_mass,
    ppm,
    spectrum_mass,
    spectrum_mz,
)


def test_single_hexnac_mass():
    assert glycan_mass({Monosaccharide.GLCNAC: 1}) == pytest.approx(203.0794)


def test_gal_and_man_share_hex_mass():
    assert glycan_mass({Monosaccharide.GAL: 2}) == pytest.approx(
        glycan_mass({Monosaccharide.MAN: 2})
    )
    assert glycan_mass({Monosaccharide.MAN: 1}) == pytest.approx(162.0528)


def test_glycan_mass_is_additive():
    a = {Monosaccharide.GLCNAC: 2, Monosaccharide.MAN: 3}
    b = {Monosaccharide.FUC: 1, Monosaccharide.NEUAC: 2}
    merged = {**a, **b}
    assert glycan_mass(merged) == pytest.approx(glycan_mass(a) + glycan_mass(b))


def test_glycan_mass_accepts_glycan_object():
    composition = {Monosaccharide.GLCNAC: 4, Monosaccharide.NEUGC: 1}
    assert glycan_mass(Glycan(composition=composition)) == pytest.approx(
        glycan_mass(composition)
    )


def test_empty_glycan_mass_is_zero():
    assert glycan_mass({}) == 0


@pytest.mark.parametrize(
    "residue, expected",
    [("A", 71.0371), ("K", 128.09496), ("W", 186.07931), ("X", 118.9)],
)
def test_amino_acid_masses(residue, expected):
    assert amino_acid_mass(residue) == pytest.approx(expected)


def test_amino_acid_mass_is_case_insensitive():
    assert amino_acid_mass("m") == amino_acid_mass("M")


def test_modified_residues_are_heavier():
    assert amino_acid_mass("$") > amino_acid_mass("M")
    assert amino_acid_mass("@") == amino_acid_mass("#")
    assert amino_acid_mass("@") > amino_acid_mass("N")


def test_empty_peptide_is_water():
    assert peptide_mass("") == pytest.approx(18.0105)


def test_peptide_mass_adds_residues():
    assert peptide_mass("AG") - peptide_mass("A") == pytest.approx(amino_acid_mass("G"))


def test_cysteine_is_carbamidomethylated():
    assert peptide_mass("C") - peptide_mass("") == pytest.approx(
        amino_acid_mass("C") + 57.02146
    )


def test_y_ion_equals_peptide_mass():
    assert ion_mass("PEPTIDE", IonType.Y) == pytest.approx(peptide_mass("PEPTIDE"))


@pytest.mark.parametrize("ion", list(IonType))
def test_ion_mass_from_sequence_matches_from_mass(ion):
    assert ion_mass("NLFLNHSENATAK", ion) == pytest.approx(
        ion_mass(peptide_mass("NLFLNHSENATAK"), ion)
    )


def test_b_ion_loses_water():
    assert ion_mass(1000.0, IonType.Y) - ion_mass(1000.0, IonType.B) == pytest.approx(
        mass.OXYGEN + 2 * mass.HYDROGEN
    )


def test_ion_series_order():
    base = 1500.0
    assert ion_mass(base, IonType.A) < ion_mass(base, IonType.B) < ion_mass(base, IonType.C)
    assert ion_mass(base, IonType.Z) < ion_mass(base, IonType.Y) < ion_mass(base, IonType.X)


def test_singly_charged_mass_subtracts_proton():
    assert spectrum_mass(1.007825, 1) == pytest.approx(0.0)


@pytest.mark.parametrize("charge", [1, 2, 3, 4])
def test_mz_round_trip(charge):
    assert spectrum_mz(spectrum_mass(716.1069, charge), charge) == pytest.approx(716.1069)


def test_ppm_of_identical_values_is_zero():
    assert ppm(662.0826, 662.0826) == 0


def test_ppm_value():
    assert ppm(100.0, 100.0001) == pytest.approx(1.0)


def test_ppm_ignores_direction():
    assert ppm(500.0, 500.01) == pytest.approx(ppm(500.0, 499.99))
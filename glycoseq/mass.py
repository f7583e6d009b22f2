"""Monoisotopic masses of glycans, peptides, fragment ions and charged species."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from .glycan import Glycan, Monosaccharide

HEXNAC = 203.0794
HEX = 162.0528
FUC = 146.0579
NEUAC = 291.0954
NEUGC = 307.0903
WATER = 18.0105

CARBON = 12.0
NITROGEN = 14.003074
OXYGEN = 15.99491463
HYDROGEN = 1.007825

PROTON = 1.007825

CARBAMIDOMETHYL = 57.02146
AVERAGE_RESIDUE = 118.9

_SUGAR_MASS = {
    Monosaccharide.GLCNAC: HEXNAC,
    Monosaccharide.GAL: HEX,
    Monosaccharide.MAN: HEX,
    Monosaccharide.FUC: FUC,
    Monosaccharide.NEUAC: NEUAC,
    Monosaccharide.NEUGC: NEUGC,
}

_RESIDUE_MASS = {
    "A": 71.0371,
    "C": 103.00919,
    "D": 115.02694,
    "E": 129.04259,
    "F": 147.06841,
    "G": 57.02146,
    "H": 137.05891,
    "I": 113.08406,
    "K": 128.09496,
    "L": 113.08406,
    "M": 131.04049,
    "N": 114.04293,
    "P": 97.05276,
    "Q": 128.05858,
    "R": 156.10111,
    "S": 87.03203,
    "T": 101.04768,
    "V": 99.06841,
    "W": 186.07931,
    "Y": 163.06333,
    # oxidised methionine
    "$": 131.04049 + 15.994915,
    # deamidated asparagine / glutamine
    "@": 114.04293 + 0.984016,
    "#": 114.04293 + 0.984016,
}


class IonType(Enum):
    """Peptide fragment ion series."""

    A = "a"
    B = "b"
    C = "c"
    X = "x"
    Y = "y"
    Z = "z"


_ION_SHIFT = {
    IonType.A: -OXYGEN * 2 - HYDROGEN * 2 - CARBON,
    IonType.B: -OXYGEN - HYDROGEN * 2,
    IonType.C: -OXYGEN + HYDROGEN + NITROGEN,
    IonType.X: CARBON + OXYGEN - HYDROGEN * 2,
    IonType.Y: 0.0,
    IonType.Z: -NITROGEN - HYDROGEN * 3,
}


def glycan_mass(composition: Mapping[Monosaccharide, int] | Glycan) -> float:
    """Mass of a glycan given as a composition mapping or a ``Glycan``."""
    if isinstance(composition, Glycan):
        composition = composition.composition
    return sum(_SUGAR_MASS[sugar] * count for sugar, count in composition.items())


def amino_acid_mass(residue: str) -> float:
    """Residue mass of one amino acid letter; unknown letters get an average mass."""
    return _RESIDUE_MASS.get(residue.upper(), AVERAGE_RESIDUE)


def peptide_mass(sequence: str) -> float:
    """Peptide mass including water, with carbamidomethylated cysteines."""
    mass = WATER
    for residue in sequence:
        if residue.upper() == "C":
            mass += CARBAMIDOMETHYL
        mass += amino_acid_mass(residue)
    return mass


def ion_mass(value: str | float, ion: IonType) -> float:
    """Fragment ion mass from a peptide sequence or from a peptide mass."""
    mass = peptide_mass(value) if isinstance(value, str) else float(value)
    return mass + _ION_SHIFT[ion]


def spectrum_mass(mz: float, charge: int) -> float:
    """Neutral mass of an ion observed at ``mz`` with ``charge``."""
    return (mz - PROTON) * charge


def spectrum_mz(mass: float, charge: int) -> float:
    """m/z of a neutral ``mass`` carrying ``charge`` protons."""
    return (mass + PROTON * charge) / charge


def ppm(expected: float, observed: float) -> float:
    """Absolute deviation of ``observed`` from ``expected`` in parts per million."""
    return abs(expected - observed) / expected * 1_000_000.0
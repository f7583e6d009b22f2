"""Glycosylation sites and proteolytic digestion of protein sequences."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class Protease(Enum):
    """Digestion enzymes."""

    TRYPSIN = "trypsin"
    PEPSIN = "pepsin"
    CHYMOTRYPSIN = "chymotrypsin"
    GLUC = "gluc"


def find_n_glycan_sites(sequence: str) -> list[int]:
    """Positions of N in N-X-S/T sequons."""
    return [
        i
        for i, (residue, third) in enumerate(zip(sequence, sequence[2:]))
        if residue == "N" and third in "ST"
    ]


def contains_n_glycan_site(sequence: str) -> bool:
    """Whether ``sequence`` holds an N-X-S/T sequon."""
    return any(
        residue == "N" and third in "ST" for residue, third in zip(sequence, sequence[2:])
    )


def find_o_glycan_sites(sequence: str) -> list[int]:
    """Positions of serine and threonine residues."""
    return [i for i, residue in enumerate(sequence) if residue in "ST"]


def contains_o_glycan_site(sequence: str) -> bool:
    """Whether ``sequence`` holds a serine or threonine."""
    return any(residue in "ST" for residue in sequence)


def reverse_n_glycopeptide(sequence: str) -> str:
    """Decoy peptide: reversed except the last residue, keeping an N-X-S/T sequon.

    Raises ValueError when the sequence has no usable N-glycan site.
    """
    sites = find_n_glycan_sites(sequence)
    if not sites:
        raise ValueError(f"no N-glycan site in {sequence!r}")
    residues = list(sequence[-2::-1] + sequence[-1])
    pos = sites[0]
    first, second = len(residues) - 2 - pos, len(residues) - 4 - pos
    if second < 0:
        raise ValueError(f"N-glycan site too close to the end of {sequence!r}")
    residues[first], residues[second] = residues[second], residues[first]
    return "".join(residues)


@dataclass
class Digestion:
    """In-silico digestion with one protease, allowing missed cleavages."""

    enzyme: Protease = Protease.TRYPSIN
    miss_cleavage: int = 2
    min_length: int = 5

    def is_cleavable(self, sequence: str, index: int) -> bool:
        """Whether the enzyme cuts on the C-terminal side of ``sequence[index]``."""
        residue = sequence[index]
        before_proline = index < len(sequence) - 1 and sequence[index + 1] == "P"
        if self.enzyme is Protease.TRYPSIN:
            return not before_proline and residue in "KR"
        if self.enzyme is Protease.PEPSIN:
            return residue in "WFY"
        if self.enzyme is Protease.CHYMOTRYPSIN:
            return not before_proline and residue in "WFY"
        if self.enzyme is Protease.GLUC:
            return not before_proline and residue in "ED"
        return False

    def cut_positions(self, sequence: str) -> list[int]:
        """Cut positions, starting with -1 and always ending at the last residue."""
        positions = [-1]
        if not sequence:
            return positions
        positions.extend(
            i for i in range(len(sequence)) if self.is_cleavable(sequence, i)
        )
        if positions[-1] != len(sequence) - 1:
            positions.append(len(sequence) - 1)
        return positions

    def sequences(
        self, sequence: str, keep: Callable[[str], bool] | None = None
    ) -> set[str]:
        """Distinct peptides of at least ``min_length`` that satisfy ``keep``."""
        cuts = self.cut_positions(sequence)
        peptides: set[str] = set()
        for missed in range(self.miss_cleavage + 1):
            for before, end in zip(cuts, cuts[missed + 1 :]):
                start = before + 1
                if end - start + 1 < self.min_length:
                    continue
                peptide = sequence[start : end + 1]
                if keep is None or keep(peptide):
                    peptides.add(peptide)
        return peptides
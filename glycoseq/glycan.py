"""Glycan composition model shared by the builder and the mass calculators."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class Monosaccharide(Enum):
    """Monosaccharide residues, in the order used for naming."""

    GLCNAC = "GlcNAc"
    MAN = "Man"
    GAL = "Gal"
    FUC = "Fuc"
    NEUAC = "NeuAc"
    NEUGC = "NeuGc"


_RANK = {sugar: rank for rank, sugar in enumerate(Monosaccharide)}

GrowthRule = Callable[["Glycan"], list["Glycan"]]


@dataclass(eq=False)
class Glycan:
    """A glycan described by its structure table and monosaccharide counts.

    ``table`` encodes the structure and serves as the identity of the glycan;
    ``composition`` counts each monosaccharide; ``children`` holds glycans
    that extend this one by a single residue.  Glycan families define how
    they grow through ``growth_rules``, which maps a monosaccharide to the
    rules that extend a glycan by that residue.
    """

    growth_rules: ClassVar[Mapping[Monosaccharide, tuple[GrowthRule, ...]]] = {}

    table: list[int] = field(default_factory=list)
    composition: dict[Monosaccharide, int] = field(default_factory=dict)
    mass: float = -1.0
    children: list[Glycan] = field(default_factory=list)

    def add(self, glycan: Glycan) -> None:
        """Record ``glycan`` as a child of this glycan."""
        self.children.append(glycan)

    def set_table_entry(self, index: int, value: int) -> None:
        """Set one table slot; indexes outside the table are ignored."""
        if 0 <= index < len(self.table):
            self.table[index] = value

    def name(self) -> str:
        """Readable composition such as ``'GlcNAc-2 Man-3 '``."""
        ordered = sorted(self.composition.items(), key=lambda item: _RANK[item[0]])
        return "".join(f"{sugar.value}-{count} " for sugar, count in ordered)

    def key(self) -> str:
        """Identifier built from the structure table, each entry followed by a space."""
        return "".join(f"{entry} " for entry in self.table)

    def grow(self, sugar: Monosaccharide) -> list[Glycan]:
        """Glycans obtained by adding ``sugar`` under this family's growth rules.

        A plain glycan has no rules, so it yields no glycans.
        """
        return [
            grown
            for rule in self.growth_rules.get(sugar, ())
            for grown in rule(self)
        ]
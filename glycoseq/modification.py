"""Dynamic modifications: methionine oxidation and asparagine/glutamine deamidation.

Modified residues are written with placeholder letters: ``$`` for oxidised
methionine, ``@`` for deamidated asparagine and ``#`` for deamidated glutamine.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

OXIDIZED_M = "$"
DEAMIDATED_N = "@"
DEAMIDATED_Q = "#"


def _subsets(positions: list[int]) -> Iterator[list[int]]:
    if not positions:
        yield []
        return
    head, rest = positions[0], positions[1:]
    for tail in _subsets(rest):
        yield [head, *tail]
    yield from _subsets(rest)


def combinations(positions: Iterable[int]) -> list[list[int]]:
    """All subsets of ``positions``, each kept in order, subsets containing the first item first."""
    return list(_subsets(list(positions)))


def modify(sequence: str, origin: str, replacement: str) -> set[str]:
    """Every variant of ``sequence`` with any subset of ``origin`` residues replaced."""
    sites = [i for i, residue in enumerate(sequence) if residue == origin]
    variants = set()
    for chosen in combinations(sites):
        residues = list(sequence)
        for i in chosen:
            residues[i] = replacement
        variants.add("".join(residues))
    return variants


def oxidize(sequence: str) -> set[str]:
    """Variants of one sequence with methionines optionally oxidised."""
    return modify(sequence, "M", OXIDIZED_M)


def deamidate(sequence: str) -> set[str]:
    """Variants of one sequence with either asparagines or glutamines deamidated."""
    return modify(sequence, "N", DEAMIDATED_N) | modify(sequence, "Q", DEAMIDATED_Q)


def _oxidize_all(peptides: Iterable[str]) -> set[str]:
    return {variant for peptide in peptides for variant in oxidize(peptide)}


def _deamidate_all(peptides: Iterable[str]) -> set[str]:
    return {variant for peptide in peptides for variant in deamidate(peptide)}


def oxidation(peptides: Iterable[str]) -> set[str]:
    """Oxidation variants of every peptide."""
    return _oxidize_all(peptides)


def deamidation(peptides: Iterable[str]) -> set[str]:
    """Deamidation variants of every peptide."""
    return _deamidate_all(peptides)


def dynamic_modification(
    peptides: Iterable[str],
    keep: Callable[[str], bool] | None = None,
    oxidation: bool = True,
    deamidation: bool = True,
) -> set[str]:
    """Apply oxidation, then deamidation, and keep the variants accepted by ``keep``."""
    variants = set(peptides)
    if oxidation:
        variants = _oxidize_all(variants)
    if deamidation:
        variants = _deamidate_all(variants)
    if keep is None:
        return variants
    return {variant for variant in variants if keep(variant)}


def interpret(sequence: str) -> str:
    """Replace placeholder letters by residue plus modification mark."""
    return (
        sequence.replace(OXIDIZED_M, "M*")
        .replace(DEAMIDATED_N, "N^")
        .replace(DEAMIDATED_Q, "Q^")
    )
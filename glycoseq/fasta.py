"""Reading protein sequences from FASTA files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

_WHITESPACE = " \t\n\r\f\v"


@dataclass
class Protein:
    """A protein with its FASTA header line and sequence."""

    id: str = ""
    sequence: str = ""


def _trim(line: str) -> str:
    trimmed = line.strip(_WHITESPACE)
    return trimmed if trimmed else line


def _parse(lines: Iterable[str]) -> list[Protein]:
    proteins: list[Protein] = []
    protein = Protein()
    sequence = ""
    for raw in lines:
        line = raw.rstrip("\n")
        if line.startswith(";"):
            continue
        if line.startswith(">"):
            if sequence:
                protein.sequence = sequence
                proteins.append(protein)
                sequence = ""
            protein = Protein(id=line)
        else:
            sequence += _trim(line)
    if sequence:
        protein.sequence = sequence
        proteins.append(protein)
    return proteins


class FastaReader:
    """Reader of FASTA files; comment lines starting with ';' are skipped."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = path

    def read(self) -> list[Protein]:
        """Proteins in file order; the id is the whole header line."""
        with open(self.path, encoding="utf-8") as handle:
            return _parse(handle)


def read_fasta(path: str | PathLike[str]) -> list[Protein]:
    """Read all proteins of the FASTA file at ``path``."""
    return FastaReader(path).read()
"""MGF spectrum parsing and access to spectra by scan number."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

_PEAK = re.compile(r"(\d+\.?\d*)\s+(\d+\.?\d*)", re.ASCII)
_PEPMASS = re.compile(r"PEPMASS=(\d+\.?\d*)", re.ASCII)
_CHARGE = re.compile(r"CHARGE=(\d+)", re.ASCII)
_RT_SECONDS = re.compile(r"RTINSECONDS=(\d+\.?\d*)", re.ASCII)
_SCANS = re.compile(r"SCANS=(\d+)", re.ASCII)

NOT_EXIST = "Not Exist!"


@dataclass
class Peak:
    """One centroided peak."""

    mz: float
    intensity: float


@dataclass
class Spectrum:
    """An MS/MS spectrum with its precursor information."""

    peaks: list[Peak] = field(default_factory=list)
    scan: int = 0
    retention: float = 0.0
    parent_mz: float = 0.0
    parent_charge: int = 0


@dataclass
class _ScanRecord:
    peaks: list[Peak] = field(default_factory=list)
    pep_mass: float = 0.0
    charge: int = 0
    rt_seconds: float = 0.0
    scans: int = 0
    title: str = ""


class MGFParser:
    """Parser of Mascot Generic Format files, indexed by scan number."""

    def __init__(self) -> None:
        self._records: dict[int, _ScanRecord] = {}

    def load(self, path: str | PathLike[str]) -> None:
        """Parse the MGF file at ``path``."""
        with open(path, encoding="utf-8") as handle:
            self.parse(handle)

    def parse(self, lines: Iterable[str]) -> None:
        """Parse MGF text given line by line.

        A block is numbered by its SCANS entry, or else by counting blocks from
        zero; a scan number already seen keeps its first block.
        """
        record = _ScanRecord()
        scan = -1
        for raw in lines:
            line = raw.rstrip("\r\n")
            peak = _PEAK.match(line)
            if peak:
                record.peaks.append(Peak(float(peak[1]), float(peak[2])))
            elif line.startswith("BEGIN IONS"):
                record = _ScanRecord()
                scan += 1
            elif line.startswith("END IONS"):
                self._records.setdefault(scan, record)
            elif line.startswith("TITLE="):
                record.title = line[6:]
            elif found := _PEPMASS.search(line):
                record.pep_mass = float(found[1])
            elif found := _CHARGE.search(line):
                record.charge = int(found[1])
            elif found := _SCANS.search(line):
                scan = int(found[1])
                record.scans = scan
            elif found := _RT_SECONDS.search(line):
                record.rt_seconds = float(found[1])

    def exists(self, scan: int) -> bool:
        """Whether a spectrum was read for ``scan``."""
        return scan in self._records

    def parent_mz(self, scan: int) -> float:
        """Precursor m/z of ``scan``, or 0 when unknown."""
        record = self._records.get(scan)
        return record.pep_mass if record else 0.0

    def parent_charge(self, scan: int) -> int:
        """Precursor charge of ``scan``, or 0 when unknown."""
        record = self._records.get(scan)
        return record.charge if record else 0

    def first_scan(self) -> int:
        """Lowest scan number read, or -1 when nothing was read."""
        return min(self._records, default=-1)

    def last_scan(self) -> int:
        """Highest scan number read, or -1 when nothing was read."""
        return max(self._records, default=-1)

    def peaks(self, scan: int) -> list[Peak]:
        """Peaks of ``scan``, empty when unknown."""
        record = self._records.get(scan)
        return list(record.peaks) if record else []

    def retention_time(self, scan: int) -> float:
        """Retention time in seconds of ``scan``, or -1 when unknown."""
        record = self._records.get(scan)
        return record.rt_seconds if record else -1.0

    def scan_info(self, scan: int) -> str:
        """Title line of ``scan``, empty when unknown."""
        record = self._records.get(scan)
        return record.title if record else ""


class SpectrumReader:
    """Reads a spectrum file through a parser and hands out spectra."""

    def __init__(self, path: str | PathLike[str], parser: MGFParser | None = None) -> None:
        self.path = path
        self.parser = parser if parser is not None else MGFParser()
        self.parser.load(path)

    def first_scan(self) -> int:
        """Lowest scan number available."""
        return self.parser.first_scan()

    def last_scan(self) -> int:
        """Highest scan number available."""
        return self.parser.last_scan()

    def scan_info(self, scan: int) -> str:
        """Title of ``scan``, or ``'Not Exist!'`` when there is no such scan."""
        if not self.parser.exists(scan):
            return NOT_EXIST
        return self.parser.scan_info(scan)

    def retention_time(self, scan: int) -> float:
        """Retention time of ``scan``, or -1 when there is no such scan."""
        if not self.parser.exists(scan):
            return -1.0
        return self.parser.retention_time(scan)

    def spectrum(self, scan: int) -> Spectrum:
        """The spectrum of ``scan``; an empty spectrum when there is no such scan."""
        if not self.parser.exists(scan):
            return Spectrum()
        return Spectrum(
            peaks=self.parser.peaks(scan),
            scan=scan,
            retention=self.parser.retention_time(scan),
            parent_mz=self.parser.parent_mz(scan),
            parent_charge=self.parser.parent_charge(scan),
        )

    def spectra(self, start: int | None = None, last: int | None = None) -> list[Spectrum]:
        """Existing spectra from ``start`` to ``last`` inclusive, all by default."""
        if start is None:
            start = self.first_scan()
        if last is None:
            last = self.last_scan()
        return [
            self.spectrum(scan)
            for scan in range(start, last + 1)
            if self.parser.exists(scan)
        ]
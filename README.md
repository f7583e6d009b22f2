# glycoseq

Building blocks for identifying glycopeptides in LC-MS/MS data: a glycan
model, protein digestion, dynamic modifications, mass calculation,
tolerance search over masses, and readers for MGF spectra and FASTA
proteins. The package has no dependencies beyond the standard library.

## Modules

- `glycoseq.glycan`: the `Monosaccharide` enumeration and the `Glycan`
  dataclass with its structure `table`, `composition`, `mass` and
  `children`. `name()` gives a readable composition such as
  `"GlcNAc-2 Man-3 "`, `key()` an identifier built from the table,
  `set_table_entry()` sets one table slot (ignoring indexes out of range),
  and `grow(sugar)` applies the class's `growth_rules`. A plain `Glycan` has
  no growth rules, so `grow` returns an empty list; glycan families are
  defined by subclassing and filling `growth_rules`.
- `glycoseq.mass`: monoisotopic masses. `glycan_mass` takes a composition
  mapping or a `Glycan`; `amino_acid_mass` gives a residue mass (unknown
  letters get an average of 118.9); `peptide_mass` includes water and
  carbamidomethylated cysteines and understands the modification letters
  `$`, `@` and `#`; `ion_mass` gives a fragment ion mass for an `IonType`
  from a sequence or a mass; `spectrum_mass`, `spectrum_mz` and `ppm`
  convert between m/z, neutral mass and parts per million.
- `glycoseq.protein`: N-glycan sequon (N-X-S/T) and O-glycan (S/T) site
  functions, `reverse_n_glycopeptide` for decoy peptides (raises
  `ValueError` when no usable site exists), and `Digestion` with a
  `Protease` (trypsin, pepsin, chymotrypsin, Glu-C), a number of missed
  cleavages (default 2) and a minimum peptide length (default 5).
- `glycoseq.modification`: enumeration of methionine oxidation (`$`) and
  asparagine/glutamine deamidation (`@`, `#`) variants: `modify`,
  `oxidize`, `deamidate`, `oxidation`, `deamidation`,
  `dynamic_modification`, `combinations`, and `interpret`, which writes
  the variants as `M*`, `N^` and `Q^`.
- `glycoseq.search`: lookup of `Point` values within a tolerance given in
  ppm or Dalton (`ToleranceBy`). `BinarySearch` sorts the points;
  `BucketSearch` puts them into buckets one tolerance wide (logarithmic in
  ppm mode) and accepts extra points with `add`. Both offer `search`, which
  returns the contents of matching points, and `match`. `BucketSearch`
  raises `ValueError` for a tolerance that is not positive, and in ppm mode
  for values of 1 or below.
- `glycoseq.lsh`: `LSH`, random Gaussian projections whose signs form an
  integer `key` for an embedding that maps bin indexes to peaks or
  intensities. A `seed` makes the projections reproducible.
- `glycoseq.spectra`: `MGFParser` (`load` a file or `parse` lines) and
  `SpectrumReader`, which hands out `Spectrum` and `Peak` objects by scan
  number. Blocks are numbered by their `SCANS=` entry, or by counting blocks
  from zero.
- `glycoseq.fasta`: `FastaReader` and `read_fasta`, returning `Protein`
  objects whose `id` is the whole header line; lines starting with `;` are
  skipped.

## Installation

```
pip install .
```

Install the test dependencies with `pip install .[test]` and run `pytest`.

## Example

```python
from glycoseq.fasta import read_fasta
from glycoseq.mass import peptide_mass
from glycoseq.modification import dynamic_modification, interpret
from glycoseq.protein import Digestion, Protease, contains_n_glycan_site

proteins = read_fasta("proteins.fasta")
digest = Digestion(Protease.TRYPSIN)
peptides = digest.sequences(proteins[0].sequence, contains_n_glycan_site)
for peptide in sorted(dynamic_modification(peptides, contains_n_glycan_site)):
    print(interpret(peptide), peptide_mass(peptide))
```

Looking peaks up within a tolerance:

```python
from glycoseq.search import BucketSearch, Point, ToleranceBy
from glycoseq.spectra import SpectrumReader

reader = SpectrumReader("spectra.mgf")
spectrum = reader.spectrum(reader.first_scan())

searcher = BucketSearch(ToleranceBy.PPM, 200)
searcher.init([Point(peak.mz, peak) for peak in spectrum.peaks])
print(searcher.search(662.0826))
```

## What the package does not do

It provides the pieces, not a finished search program. There is no
command-line tool, no concrete glycan families (complex, hybrid or
high-mannose) and no enumeration of glycans from them, no matching of
precursors or fragment spectra to glycopeptides, no scoring, and no
false-discovery-rate filtering or result reporting.
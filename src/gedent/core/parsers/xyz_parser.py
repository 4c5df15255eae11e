"""
XYZ Parser Module

Parses (multi-frame) XYZ geometry text into Molecule records.

Each frame is laid out as:
  - First line: number of atoms (bare non-negative integer)
  - Second line: free-text annotation
  - Subsequent lines: exactly that many atom lines (element and coordinates)

Frames may be concatenated. The first frame is named after the source stem,
every later frame gets the 0-based frame index appended ("<stem>_1",
"<stem>_2", ...).
"""

import enum
import logging
import re
from pathlib import Path
from typing import List, Optional, Union
from gedent.core.errors import GeometryFormatError
from gedent.core.molecule import Molecule
from gedent.core.utils.file_utils import read_text

_COUNT_LINE = re.compile(r"\d+", re.ASCII)


class _State(enum.Enum):
    SCANNING_HEADER = "scanning_header"
    ACCUMULATING_ATOMS = "accumulating_atoms"


class _Frame:
    """Frame under construction: declared count, annotation and atom buffer."""

    def __init__(self, index: int, declared_count: int, annotations: str, line_number: int) -> None:
        self.index = index
        self.declared_count = declared_count
        self.annotations = annotations
        self.line_number = line_number
        self.atoms: List[str] = []

    def finalize(self, stem: str, at_eof: bool = False) -> Molecule:
        if at_eof:
            # Trailing blank lines are an editor artifact, not atoms of the last frame.
            trailing = 0
            while len(self.atoms) > self.declared_count and not self.atoms[-1].strip():
                self.atoms.pop()
                trailing += 1
            if trailing:
                logging.warning(f"Ignoring {trailing} trailing blank line(s) in '{stem}'")
        if len(self.atoms) != self.declared_count:
            raise GeometryFormatError(
                f"Frame {self.index} of '{stem}' (line {self.line_number}): "
                f"expected {self.declared_count} atoms, found {len(self.atoms)}")
        filename = stem if self.index == 0 else f"{stem}_{self.index}"
        return Molecule(filename=filename, annotations=self.annotations, atoms=self.atoms)


def _is_count_line(line: str) -> bool:
    return _COUNT_LINE.fullmatch(line.strip()) is not None


def source_stem(source: Union[str, Path]) -> str:
    """Returns the file name of a geometry path with its extension stripped."""
    return Path(source).stem


def parse_geometry(xyz_text: str, source: Union[str, Path] = "geometry",
                   strict: bool = False) -> List[Molecule]:
    """
    Parse XYZ text into an ordered list of molecules, one per frame.

    Args:
        xyz_text: Raw geometry text, possibly holding several frames
        source: Path (or name) of the geometry file, used to derive the filenames
        strict: If True, every atom line is also parsed into element and coordinates

    Returns:
        List of Molecule records in source order

    Raises:
        GeometryFormatError: on empty input, a missing count or annotation line,
            or a frame whose atom count differs from its declared count.
            No partial results are returned.
    """
    stem = source_stem(source)
    lines = xyz_text.splitlines()
    if not lines:
        raise GeometryFormatError(f"Geometry input '{stem}' is empty")

    molecules: List[Molecule] = []
    state = _State.SCANNING_HEADER
    frame: Optional[_Frame] = None
    line_iter = iter(enumerate(lines, start=1))

    for line_number, line in line_iter:
        if state is _State.ACCUMULATING_ATOMS:
            if not _is_count_line(line):
                frame.atoms.append(line)
                continue
            molecules.append(frame.finalize(stem))
            state = _State.SCANNING_HEADER

        # SCANNING_HEADER: the line must open a new frame.
        if not _is_count_line(line):
            raise GeometryFormatError(
                f"Expected an atom count at line {line_number} of '{stem}', got {line!r}")
        annotation = next(line_iter, None)
        if annotation is None:
            raise GeometryFormatError(
                f"Missing annotation line after atom count at line {line_number} of '{stem}'")
        frame = _Frame(len(molecules), int(line.strip()), annotation[1], line_number)
        state = _State.ACCUMULATING_ATOMS

    molecules.append(frame.finalize(stem, at_eof=True))

    if strict:
        for molecule in molecules:
            molecule.parsed_atoms()

    logging.debug(f"Parsed {len(molecules)} frame(s) from '{stem}'")
    return molecules


def read_geometry(xyz_path: Path, strict: bool = False) -> List[Molecule]:
    """
    Reads a geometry file and parses every frame it holds.
    I/O errors propagate unchanged.
    """
    xyz_path = Path(xyz_path)
    return parse_geometry(read_text(xyz_path), source=xyz_path, strict=strict)

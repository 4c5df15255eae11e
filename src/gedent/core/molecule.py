"""
Molecule Module

Defines the Molecule record produced by the geometry parser and the
structural operations available on it.

A molecule keeps its atom lines exactly as they appear in the source file,
so rendered inputs preserve the original formatting. A parsed view
(element plus floating point coordinates) is available on demand for
callers that need to validate the coordinates.
"""

from dataclasses import dataclass, field, replace
from typing import NamedTuple, Tuple
from gedent.core.errors import GeometryFormatError, IndexOutOfRange


class Atom(NamedTuple):
    element: str
    coordinates: Tuple[float, ...]


def parse_atom_line(line: str) -> Atom:
    """
    Parses a raw geometry line of the form "<element> <x> <y> <z> ...".

    At least three coordinates are required; any extra columns must also be
    numeric.
    """
    parts = line.split()
    if len(parts) < 4:
        raise GeometryFormatError(
            f"Atom line needs an element and at least 3 coordinates: {line!r}")
    try:
        coordinates = tuple(float(value) for value in parts[1:])
    except ValueError:
        raise GeometryFormatError(f"Non-numeric coordinate in atom line: {line!r}") from None
    return Atom(parts[0], coordinates)


@dataclass(frozen=True)
class Molecule:
    filename: str
    annotations: str = ""
    atoms: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Lists handed in by callers are frozen so the record stays immutable.
        object.__setattr__(self, "atoms", tuple(self.atoms))

    def parsed_atoms(self) -> Tuple[Atom, ...]:
        """Returns the atom lines parsed into (element, coordinates) pairs."""
        return tuple(parse_atom_line(line) for line in self.atoms)

    def split(self, index: int) -> Tuple["Molecule", "Molecule"]:
        """
        Splits the molecule in two at the given atom index.

        The first half holds atoms [0, index), the second [index, len).
        Filenames get the suffixes "_split_1" and "_split_2"; annotations are
        copied to both halves.

        Raises:
            IndexOutOfRange: if index is negative or not smaller than the number of atoms.
        """
        if index < 0 or index >= len(self.atoms):
            raise IndexOutOfRange(
                f"Split index {index} out of range for '{self.filename}' "
                f"with {len(self.atoms)} atoms")
        first = replace(self, filename=f"{self.filename}_split_1", atoms=self.atoms[:index])
        second = replace(self, filename=f"{self.filename}_split_2", atoms=self.atoms[index:])
        return first, second

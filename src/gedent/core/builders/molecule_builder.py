"""
Molecule Builder Module

Helper functions exposed to template bodies. They operate on Molecule
records placed in the render context by the input generator.

Arguments are checked at the call boundary: a molecule argument is either a
Molecule or a mapping carrying exactly its fields (filename, annotations,
atoms); an index argument must be an int. Anything else raises
InvalidArgumentError.
"""

from typing import Any, List, Mapping
from gedent.core.errors import InvalidArgumentError
from gedent.core.molecule import Molecule

_MOLECULE_FIELDS = frozenset({"filename", "annotations", "atoms"})


def _as_molecule(value: Any, function: str) -> Molecule:
    if isinstance(value, Molecule):
        return value
    if isinstance(value, Mapping) and set(value) == _MOLECULE_FIELDS:
        atoms = value["atoms"]
        if (isinstance(value["filename"], str) and isinstance(value["annotations"], str)
                and isinstance(atoms, (list, tuple))
                and all(isinstance(atom, str) for atom in atoms)):
            return Molecule(filename=value["filename"], annotations=value["annotations"], atoms=atoms)
    raise InvalidArgumentError(
        f"{function}: expected a molecule, got {type(value).__name__}")


def _as_index(value: Any, function: str) -> int:
    # bool is an int subclass but never a meaningful atom index
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{function}: expected an integer index, got {type(value).__name__}")
    return value


def print_molecule(molecule: Any) -> str:
    """Returns the atom lines of a molecule joined by newlines."""
    return "\n".join(_as_molecule(molecule, "print_molecule").atoms)


def split_molecule(molecule: Any, index: Any) -> List[Molecule]:
    """
    Splits a molecule at the given atom index and returns both halves.

    IndexOutOfRange from Molecule.split propagates unchanged.
    """
    molecule = _as_molecule(molecule, "split_molecule")
    index = _as_index(index, "split_molecule")
    return list(molecule.split(index))


TEMPLATE_HELPERS = {
    "print_molecule": print_molecule,
    "split_molecule": split_molecule,
}

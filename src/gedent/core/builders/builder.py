"""
File Builder Module

Assembles complete input files from a compiled template, the configuration
parameters and zero or more geometry frames.

Without geometry the template is rendered once and named after the template.
With geometry it is rendered once per frame, each frame inserted into its own
copy of the context under the "molecule" key, and named after the frame.

All inputs are rendered before anything is written, so a failing frame
never leaves a partial set of files behind.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence
from gedent.core.constants import Constants
from gedent.core.molecule import Molecule
from gedent.core.parsers.template_parser import Template
from gedent.core.parsers.xyz_parser import read_geometry
from gedent.core.utils.file_utils import write_text


@dataclass(frozen=True)
class Input:
    filename: Path
    content: str

    def write(self, directory: Optional[Path] = None) -> Path:
        path = Path(directory) / self.filename if directory else self.filename
        write_text(path, self.content)
        return path


def build_context(parameters: Mapping[str, Any],
                  overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Builds the base render context.

    Configuration parameters come first; overrides replace them. Overrides
    whose value is None were not given and are skipped, so nothing gets an
    implicit default.
    """
    context = dict(parameters)
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key in context:
            logging.debug(f"Overriding '{key}': {context[key]!r} -> {value!r}")
        context[key] = value
    return context


def resolve_extension(template: Template, default_extension: str) -> str:
    """Template-declared extension wins over the configured default."""
    extension = template.options.extension
    if extension is None:
        extension = default_extension
    return extension.lstrip(".")


def _output_name(stem: str, extension: str) -> Path:
    # with_suffix would eat dots already in the stem ("mol.opt" -> "mol.inp")
    return Path(f"{stem}.{extension}") if extension else Path(stem)


def generate_inputs(template: Template, molecules: Sequence[Molecule],
                    parameters: Mapping[str, Any],
                    default_extension: str = Constants.DEFAULT_EXTENSION,
                    overrides: Optional[Mapping[str, Any]] = None) -> List[Input]:
    """
    Render the template once, or once per molecule.

    Args:
        template: Compiled template
        molecules: Geometry frames, possibly empty
        parameters: Configuration parameters
        default_extension: Extension used when the template declares none
        overrides: Scalar overrides (method, basis_set, charge, ...); None values are skipped

    Returns:
        List of Input (filename, content) in frame order

    Raises:
        RenderError: from the first frame that fails; no inputs are returned.
    """
    context = build_context(parameters, overrides)
    extension = resolve_extension(template, default_extension)

    if not molecules:
        logging.debug(f"No geometry given, rendering '{template.name}' once")
        stem = Path(template.name).name
        return [Input(filename=_output_name(stem, extension), content=template.render(context))]

    results: List[Input] = []
    for molecule in molecules:
        mol_context = dict(context)
        mol_context[Constants.MOLECULE_KEY] = molecule
        logging.debug(f"Rendering '{template.name}' for '{molecule.filename}'")
        results.append(Input(filename=_output_name(molecule.filename, extension),
                             content=template.render(mol_context)))
    return results


def load_molecules(xyz_files: Iterable[Path], strict: bool = False) -> List[Molecule]:
    """Reads every geometry file and concatenates their frames in order."""
    molecules: List[Molecule] = []
    for xyz_file in xyz_files:
        molecules.extend(read_geometry(Path(xyz_file), strict=strict))
    return molecules


def write_inputs(inputs: Sequence[Input], directory: Optional[Path] = None) -> List[Path]:
    """Writes already rendered inputs and returns their paths."""
    return [item.write(directory) for item in inputs]

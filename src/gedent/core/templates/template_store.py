"""
Template Store Module

Looks up, lists and creates templates below the gedent home directory:

    <home>/templates/<name>        templates, nested folders allowed
    <home>/presets/<software>      boilerplate copied by "template new"

A template name is its path relative to the templates folder.
"""

import logging
import shutil
from pathlib import Path
from typing import List
from gedent.core.parsers.template_parser import Template
from gedent.core.utils.file_utils import read_text
from gedent.core.utils.path_utils import presets_dir, templates_dir


class TemplateStore:
    def __init__(self, home: Path) -> None:
        self.templates_dir = templates_dir(home)
        self.presets_dir = presets_dir(home)

    def path(self, name: str) -> Path:
        return self.templates_dir / name

    def read(self, name: str) -> str:
        template_path = self.path(name)
        if not template_path.is_file():
            raise FileNotFoundError(f"Cannot find template {template_path}")
        return read_text(template_path)

    def load(self, name: str, strict: bool = False) -> Template:
        """Reads and compiles the named template."""
        return Template.from_text(name, self.read(name), strict=strict)

    def list_templates(self) -> List[str]:
        """Returns the names of all templates, sorted."""
        if not self.templates_dir.is_dir():
            logging.warning(f"Template folder {self.templates_dir} does not exist")
            return []
        return sorted(
            path.relative_to(self.templates_dir).as_posix()
            for path in self.templates_dir.rglob("*") if path.is_file()
        )

    def new(self, software: str, name: str) -> Path:
        """Creates a template from the preset for the given software."""
        preset = self.presets_dir / software
        if not preset.is_file():
            raise FileNotFoundError(f"No preset for '{software}' in {self.presets_dir}")
        target = self.path(name)
        if target.exists():
            raise FileExistsError(f"Template {target} already exists")
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(preset, target)
        logging.info(f"Created template '{name}' from preset '{software}'")
        return target

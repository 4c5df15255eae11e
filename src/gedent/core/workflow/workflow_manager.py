"""
WorkflowManager

Orchestrates the gedent commands: input generation, configuration and
template management, and project initialisation.
"""

import logging
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional
from gedent.core.config.config_manager import ConfigManager
from gedent.core.constants import Constants
from gedent.core.templates.template_store import TemplateStore
from gedent.core.utils.argument_parser import OVERRIDE_OPTIONS
from gedent.core.utils.file_utils import open_in_editor
from gedent.core.utils.path_utils import find_config


class WorkflowManager:
    def __init__(self, home: Path, cwd: Optional[Path] = None, args=None) -> None:
        self.home = Path(home)
        self.cwd = Path(cwd) if cwd else Path.cwd()
        self.args = args
        self.templates = TemplateStore(self.home)

    def config_path(self) -> Path:
        return find_config(self.cwd, self.home)

    def load_config(self) -> ConfigManager:
        return ConfigManager(self.config_path())

    def run(self) -> None:
        """Dispatches the parsed command-line arguments."""
        command = self.args.command
        if command == "gen":
            self.generate_inputs()
        elif command == "config":
            self.config_command(self.args.action)
        elif command == "template":
            self.template_command(self.args.action)
        elif command == "init":
            self.init(self.args.config)
        else:
            raise ValueError(f"Unknown command: {command}")

    def overrides(self) -> Dict[str, Any]:
        """Collects the scalar overrides given on the command line."""
        keys = [dest for _, dest, _, _ in OVERRIDE_OPTIONS] + ["solvation"]
        return {key: getattr(self.args, key) for key in keys
                if getattr(self.args, key, None) is not None}

    def generate_inputs(self) -> List[Any]:
        """
        Renders every input, then prints or writes them.
        Nothing is written unless all renders succeeded.
        """
        from gedent.core.builders import builder

        config = self.load_config()
        template = self.templates.load(self.args.template_name,
                                       strict=config.strict_template_options)
        xyz_files = [path if path.is_absolute() else self.cwd / path
                     for path in (self.args.xyz_files or [])]
        molecules = builder.load_molecules(xyz_files)

        inputs = builder.generate_inputs(
            template, molecules, config.get_parameters(),
            default_extension=config.default_extension,
            overrides=self.overrides(),
        )

        if self.args.print:
            for item in inputs:
                print(item.content)
            return inputs

        output_dir = self.args.output_dir
        if output_dir is None:
            output_dir = self.cwd
        elif not output_dir.is_absolute():
            output_dir = self.cwd / output_dir
        paths = builder.write_inputs(inputs, output_dir)
        logging.info(f"Generated {len(paths)} input file(s) from '{template.name}'")
        return inputs

    def config_command(self, action: str) -> None:
        if action == "edit":
            open_in_editor(self.config_path())
            return

        config = self.load_config()
        if action == "print":
            if self.args.location:
                print(f"Printing config from {config.config_path}")
            print(config.dump(), end="")
            return

        if action == "set":
            config.set(self.args.key, self.args.value)
        elif action == "add":
            config.add(self.args.key, self.args.value, self.args.arg_type)
        elif action == "del":
            config.delete(self.args.key)
        else:
            raise ValueError(f"Unknown config action: {action}")
        config.write()

    def template_command(self, action: str) -> None:
        if action == "print":
            print(self.templates.read(self.args.template), end="")
        elif action == "list":
            for name in self.templates.list_templates():
                print(name)
        elif action == "new":
            self.templates.new(self.args.software, self.args.template_name)
        elif action == "edit":
            open_in_editor(self.templates.path(self.args.template))
        else:
            raise ValueError(f"Unknown template action: {action}")

    def init(self, config: Optional[Path] = None) -> Path:
        """Copies the given (or currently used) config into the current folder."""
        target = self.cwd / Constants.CONFIG_NAME
        if target.exists():
            raise FileExistsError(f"{target} already exists")
        source = config if config is not None else self.config_path()
        if not source.is_file():
            raise FileNotFoundError(f"Configuration file not found: {source}")
        shutil.copyfile(source, target)
        logging.info(f"Copied {source} to {target}")
        return target

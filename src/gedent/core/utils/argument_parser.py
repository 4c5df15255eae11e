"""
Argument Parser Module

Parses command-line arguments for gedent.
"""

import argparse
from pathlib import Path
from typing import List, Optional
from gedent import __version__
from gedent.core.constants import Constants

# Scalar overrides of "gen": (flag, context key, type, help)
OVERRIDE_OPTIONS = (
    ("--method", "method", str, "Level of theory"),
    ("--basis-set", "basis_set", str, "Basis set"),
    ("--charge", "charge", int, "Total charge"),
    ("--mult", "mult", int, "Spin multiplicity"),
    ("--nprocs", "nprocs", int, "Number of processors"),
    ("--mem", "mem", int, "Memory (MB)"),
    ("--solvent", "solvent", str, "Solvent name"),
    ("--solvation-model", "solvation_model", str, "Solvation model"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gedent",
        description="gedent: generate quantum-chemistry inputs from templates and xyz files",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-l", "--log", type=str, default="warning",
                        choices=["debug", "info", "warning", "error", "critical"],
                        help="Logging level")
    modes = parser.add_subparsers(dest="mode", required=True)

    gen = modes.add_parser("gen", aliases=["g"],
                           help="Generate inputs from a template and optional xyz files")
    gen.set_defaults(command="gen")
    gen.add_argument("template_name", type=str,
                     help=f"Template to look for in <gedent home>/{Constants.TEMPLATES_DIR}")
    gen.add_argument("xyz_files", type=Path, nargs="*", metavar="XYZ",
                     help="xyz files, each possibly holding several frames")
    gen.add_argument("-p", "--print", action="store_true",
                     help="Print the inputs instead of writing them")
    gen.add_argument("-o", "--output-dir", type=Path, default=None,
                     help="Folder the inputs are written to (default: current folder)")
    for flag, dest, arg_type, help_text in OVERRIDE_OPTIONS:
        gen.add_argument(flag, dest=dest, type=arg_type, default=None, help=help_text)
    gen.add_argument("--solvation", action="store_true", default=None,
                     help="Enable solvation")

    config = modes.add_parser("config", aliases=["c"], help="Access gedent configuration")
    config.set_defaults(command="config")
    config_modes = config.add_subparsers(dest="config_mode", required=True)
    config_print = config_modes.add_parser("print", aliases=["p"],
                                           help="Print the currently used configuration")
    config_print.set_defaults(action="print")
    config_print.add_argument("-l", "--location", action="store_true",
                              help="Print the path of the printed config")
    config_set = config_modes.add_parser("set", help="Set key to value, keeping the current type")
    config_set.set_defaults(action="set")
    config_set.add_argument("key", type=str)
    config_set.add_argument("value", type=str)
    config_add = config_modes.add_parser("add", help="Add a key, value to the config file")
    config_add.set_defaults(action="add")
    config_add.add_argument("key", type=str)
    config_add.add_argument("value", type=str)
    config_add.add_argument("-t", "--type", dest="arg_type", default="string",
                            choices=Constants.ARG_TYPES, help="Type of the value")
    config_del = config_modes.add_parser("del", help="Delete a key from the configuration")
    config_del.set_defaults(action="del")
    config_del.add_argument("key", type=str)
    config_edit = config_modes.add_parser("edit", aliases=["e"], help="Open the config file in your editor")
    config_edit.set_defaults(action="edit")

    template = modes.add_parser("template", aliases=["t"], help="Access template functionality")
    template.set_defaults(command="template")
    template_modes = template.add_subparsers(dest="template_mode", required=True)
    template_print = template_modes.add_parser("print", aliases=["p"],
                                               help="Print the unformatted template")
    template_print.set_defaults(action="print")
    template_print.add_argument("template", type=str)
    template_new = template_modes.add_parser(
        "new", help=f"Create a template from a preset in <gedent home>/{Constants.PRESETS_DIR}")
    template_new.set_defaults(action="new")
    template_new.add_argument("software", type=str)
    template_new.add_argument("template_name", type=str)
    template_list = template_modes.add_parser("list", aliases=["l"], help="List available templates")
    template_list.set_defaults(action="list")
    template_edit = template_modes.add_parser("edit", help="Open a template in your editor")
    template_edit.set_defaults(action="edit")
    template_edit.add_argument("template", type=str)

    init = modes.add_parser("init", help="Copy a config into the current folder")
    init.set_defaults(command="init")
    init.add_argument("config", type=Path, nargs="?", default=None,
                      help="Config to copy (default: the currently used one)")
    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)

"""
gedent package

Generates quantum-chemistry input files from parameterized templates.
It includes modules for configuration, geometry parsing, template compilation
and rendering, input file generation, and utilities.
"""

__version__ = "0.1.0"

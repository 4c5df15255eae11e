"""
Constants Module

Defines file names, directory names and fixed keys shared across gedent.
"""


class Constants:
    """Fixed names used by gedent.

    Details:
        CONFIG_NAME: name of the configuration file searched for git-like
        HOME_ENV: environment variable overriding the gedent home directory
        HOME_SUBDIR: default home directory, relative to the user's home
        TEMPLATES_DIR: folder below the gedent home holding the templates
        PRESETS_DIR: folder below the gedent home holding the template presets
        HEADER_MARKER: token delimiting the header of a template
        MOLECULE_KEY: context key under which each geometry frame is rendered
        DEFAULT_EXTENSION: output extension used when neither the template
            nor the configuration declares one
    """
    CONFIG_NAME = "gedent.yaml"
    HOME_ENV = "GEDENT_HOME"
    HOME_SUBDIR = ".config/gedent"
    TEMPLATES_DIR = "templates"
    PRESETS_DIR = "presets"

    HEADER_MARKER = "--@"
    MOLECULE_KEY = "molecule"
    DEFAULT_EXTENSION = "inp"

    ARG_TYPES = ("string", "float", "int", "bool")

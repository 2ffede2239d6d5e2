"""
CLI command implementations.
"""

from structify.cli.commands.config import cmd_config
from structify.cli.commands.convert import cmd_convert
from structify.cli.commands.detect import cmd_detect
from structify.cli.commands.inspect import cmd_inspect

__all__ = ["cmd_convert", "cmd_detect", "cmd_inspect", "cmd_config"]

# -*- Mode:Python; indent-tabs-mode:nil; tab-width:4 -*-
#
# Copyright 2024 Canonical Ltd.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""Command-line application entry point."""

import contextlib
import os
import sys
from dataclasses import dataclass

import craft_cli
from craft_application.util import strtobool
from craft_cli import ArgumentParsingError, EmitterMode, ProvideHelpException, emit

from autosnap import __version__, errors, utils

from . import commands


@dataclass
class CommandGroup:
    """Dataclass to hold a command group."""

    name: str
    commands: list


COMMAND_GROUPS = [
    CommandGroup("Basic", [commands.GenerateCommand]),
    CommandGroup("Other", [commands.VersionCommand]),
]

GLOBAL_ARGS = [
    craft_cli.GlobalArgument(
        "version", "flag", "-V", "--version", "Show the application version and exit"
    ),
]


def get_verbosity() -> EmitterMode:
    """Return the verbosity level to use.

    If AUTOSNAP_ENABLE_DEVELOPER_DEBUG is set, the
    default verbosity will be set to EmitterMode.DEBUG.

    If stdin is closed, the default verbosity will be
    set to EmitterMode.VERBOSE.
    """
    verbosity = EmitterMode.BRIEF

    if not sys.stdin.isatty():
        verbosity = EmitterMode.VERBOSE

    with contextlib.suppress(ValueError):
        if strtobool(os.getenv("AUTOSNAP_ENABLE_DEVELOPER_DEBUG", "n").strip()):
            verbosity = EmitterMode.DEBUG

    # if defined, use environmental variable AUTOSNAP_VERBOSITY_LEVEL
    verbosity_env = os.getenv("AUTOSNAP_VERBOSITY_LEVEL")
    if verbosity_env:
        try:
            verbosity = EmitterMode[verbosity_env.strip().upper()]
        except KeyError:
            values = utils.humanize_list(
                [e.name.lower() for e in EmitterMode], "and", sort=False
            )
            raise ArgumentParsingError(
                f"cannot parse verbosity level {verbosity_env!r} from environment "
                f"variable AUTOSNAP_VERBOSITY_LEVEL (valid values are {values})"
            ) from KeyError

    return verbosity


def get_dispatcher() -> craft_cli.Dispatcher:
    """Return an instance of Dispatcher."""
    craft_cli_command_groups = [
        craft_cli.CommandGroup(group.name, group.commands) for group in COMMAND_GROUPS
    ]

    return craft_cli.Dispatcher(
        "autosnap",
        craft_cli_command_groups,
        summary="Generate snapcraft.yaml files for existing projects",
        extra_global_args=GLOBAL_ARGS,
    )


def _emit_error(error, cause=None):
    """Emit the error in a centralized way so we can alter it consistently."""
    # set the cause, if any
    if cause is not None:
        error.__cause__ = cause

    emit.error(error)


def run():
    """Run the CLI."""
    emit.init(
        mode=EmitterMode.BRIEF,
        appname="autosnap",
        greeting=f"Starting autosnap, version {__version__}",
    )
    dispatcher = get_dispatcher()
    retcode = 1

    try:
        emit.set_mode(get_verbosity())
        global_args = dispatcher.pre_parse_args(sys.argv[1:])
        if global_args.get("version"):
            emit.message(f"autosnap {__version__}")
        else:
            dispatcher.load_command(None)
            dispatcher.run()
        emit.ended_ok()
        retcode = 0
    except ArgumentParsingError as err:
        print(err, file=sys.stderr)  # to stderr, as argparse normally does
        emit.ended_ok()
        retcode = 1
    except ProvideHelpException as err:
        print(err, file=sys.stderr)  # to stderr, as argparse normally does
        emit.ended_ok()
        retcode = 0
    except KeyboardInterrupt as err:
        _emit_error(craft_cli.errors.CraftError("Interrupted."), cause=err)
        retcode = 1
    except errors.AutosnapError as err:
        _emit_error(err)
        retcode = 1
    except OSError as err:
        message = err.strerror or str(err)
        if err.filename:
            message = f"{message}: {str(err.filename)!r}"
        _emit_error(craft_cli.errors.CraftError(message), cause=err)
        retcode = 1

    return retcode

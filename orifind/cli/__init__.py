# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
ORIFIND command line dispatcher. Each command is a submodule of this package with its own usage description.

Usage:
  orifind-cli  (--help | --version)
  orifind-cli  <command> [<args>...]

  -h, --help      Show this screen
  -v, --version   Show version

Commands:
  count         Count occurrences of a pattern
  frequent      Most frequent k-mers or the full k-mer frequency table
  revcomp       Reverse complement of a sequence
  match         Start positions of a pattern
  clumps        k-mers forming (k, L, t)-clumps
  probability   Chance of a k-mer appearing t times in a random sequence
"""

import sys
from contextlib import contextmanager
from importlib import import_module

from .. import common, __version__

__author__ = "code@fungs.de"

commands = ("count", "frequent", "revcomp", "match", "clumps", "probability")


@contextmanager
def session(name, logfile=None):
    """Route log output and turn input errors into an error message and exit status 1"""
    try:
        common.set_logfile(logfile)
        yield
    except (common.OrifindError, OSError) as e:
        common.error(name, e)
        sys.exit(1)
    finally:
        common.set_logfile(None)


def read_sequence(filename):
    if filename:
        return common.load_sequence_file(filename)
    return common.load_sequence(sys.stdin)


def to_int(argument, option):
    value = argument[option]
    try:
        return int(value)
    except ValueError:
        raise common.OrifindError("option %s expects an integer, got %r" % (option, value))


def main(argv=None):
    from docopt import docopt
    argument = docopt(__doc__, argv=argv, version=__version__, options_first=True)

    command = argument["<command>"]
    if command not in commands:
        common.error("orifind-cli", "unknown command %r, choose from %s" % (command, ", ".join(commands)))
        sys.exit(1)

    module = import_module("." + command, __name__)
    module.main(argument["<args>"])

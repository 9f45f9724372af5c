# auto-import submodules for convenience
from . import common, types, kmers, clumps, stats
from .kmers import count_occurrences, frequency_table, most_frequent_kmers, reverse_complement, find_positions
from .clumps import find_clumps
from .common import OrifindError, InvalidLengthError, EmptyInputError, InvalidAlphabetError, SequenceFormatError

from importlib.metadata import version as _dist_version, PackageNotFoundError  # set global version dynamically
try:
    __version__ = version = _dist_version('orifind')  # read version from installation catalog
except PackageNotFoundError:
    try:
        from os.path import dirname, join
        from setuptools_scm import get_version
        __version__ = version = get_version(join(dirname(__file__), "../"))  # read version from git source
    except (ImportError, LookupError):
        from sys import stderr
        stderr.write("Cannot determine ORIFIND package version, install properly "
                     "or install \'setuptools_scm\' when running in GIT project dir.\n")
        __version__ = version = "UNKNOWN_VERSION"

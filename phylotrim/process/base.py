#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#  Copyright 2012 Unknown <diogo@arch>
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; either version 2 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program; if not, write to the Free Software
#  Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston,
#  MA 02110-1301, USA.

"""
The `base` module includes the `Base` class, which is inherited by `Alignment`
and `AlignmentList` classes and provides several methods of general use,
the closed sets of input and output formats, the character alphabets and
the helpers that map input files to output files.

It also defines the `CleanUp` decorator used by the PhyloTrim command line
program to clock its execution and handle keyboard interruptions and
unexpected errors.
"""

import os
import sys
import time
import logging
import traceback
from enum import Enum
from glob import glob
from os.path import basename, splitext, join

from phylotrim.process.error_handling import InputError

# Unambiguous nucleotide states. Only these are counted when evaluating
# parsimony informative sites in DNA alignments.
dna_chars = ["a", "t", "g", "c"]

# Full IUPAC nucleotide alphabet, plus missing, gap and match symbols
dna_alphabet = frozenset("?-ACGTRYSWKMBDHVNacgtryswkmbdhvn.")

# Amino acid alphabet, including ambiguity codes and stop/missing symbols
aa_alphabet = frozenset("?-ARNDCQEGHILKMFPSTWYVXBZJU*.~"
                        "arndcqeghilkmfpstwyvxbzju")

# Amino acid symbols that are never counted as informative states
aa_ambiguous = frozenset("xbzju?-.~*")

datatypes = ["dna", "aa", "ignore"]


class InputFormat(Enum):
    """Closed set of supported input alignment formats.

    The format is either chosen explicitly or inferred once from the file
    extension with :meth:`InputFormat.from_path`.
    """

    FASTA = "fasta"
    NEXUS = "nexus"
    PHYLIP = "phylip"

    @classmethod
    def from_path(cls, path):
        """Infers the input format from the extension of `path`.

        Parameters
        ----------
        path : str
            Path to alignment file.

        Returns
        -------
        fmt : InputFormat

        Raises
        ------
        InputError
            When the extension is not associated with any format.
        """

        ext = splitext(path)[1].lower().lstrip(".")

        for fmt, extensions in input_extensions.items():
            if ext in extensions:
                return fmt

        raise InputError("Unable to infer the input format from extension"
                         " '{}'".format(ext), path=path)

    @property
    def patterns(self):
        return finder_patterns[self]


input_extensions = {
    InputFormat.FASTA: ["fas", "fa", "fasta", "fna", "faa", "afa"],
    InputFormat.NEXUS: ["nex", "nexus", "nxs"],
    InputFormat.PHYLIP: ["phy", "phylip"]
}

# Glob patterns used to search a directory for files of each format
finder_patterns = dict((fmt, ["*." + x for x in exts])
                       for fmt, exts in input_extensions.items())


class OutputFormat(Enum):
    """Closed set of supported output formats.

    Each format exists in a sequential and an interleaved flavour.
    """

    FASTA = "fasta"
    FASTA_INT = "fasta-int"
    NEXUS = "nexus"
    NEXUS_INT = "nexus-int"
    PHYLIP = "phylip"
    PHYLIP_INT = "phylip-int"

    @property
    def base(self):
        """Name of the format without the interleave suffix."""
        return self.value.split("-")[0]

    @property
    def ext(self):
        return format_ext[self.base]

    @property
    def interleave(self):
        return self.value.endswith("-int")

    @property
    def aligned(self):
        """Whether the format requires sequences of equal length."""
        return self.base != "fasta"


format_ext = {"fasta": ".fas", "nexus": ".nex", "phylip": ".phy"}


def find_alignment_files(input_dir, input_format):
    """Finds the alignment files of a given format inside a directory.

    Parameters
    ----------
    input_dir : str
        Directory that will be searched (not recursively).
    input_format : InputFormat
        Format of the files. Selects the glob patterns used.

    Returns
    -------
    files : list
        Sorted list of matching file paths.
    """

    files = set()
    for pattern in input_format.patterns:
        files.update(glob(join(input_dir, pattern)))

    return sorted(x for x in files if os.path.isfile(x))


def create_output_fname(output_dir, path, output_format):
    """Returns the output file path for `path`.

    The mapping is pure and deterministic: the extension of the input file
    is replaced by the extension of `output_format` and the file is placed
    in `output_dir`.

    Parameters
    ----------
    output_dir : str
    path : str
        Path to the input alignment file.
    output_format : OutputFormat

    Returns
    -------
    output_file : str
    """

    sname = splitext(basename(path))[0]

    return join(output_dir, sname + output_format.ext)


def create_output_dir(output_dir):
    """Creates `output_dir`. Safe to call concurrently."""

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)


class CleanUp(object):
    """Decorator class that wraps the main function of PhyloTrim.

    The __init__ requires only the function reference. The only requirement
    of `func` is that its first argument is the argparser namespace (that
    is, the arguments must be parsed before calling the main function).

    Parameters
    ----------
    func : function
        Main function of PhyloTrim

    Attributes
    ----------
    func : function
        Main function of PhyloTrim

    See Also
    --------
    print_col
    """

    def __init__(self, func):
        self.func = func

    def __call__(self, *args):
        """Wraps the call of `func`.

        Clocks the duration of the execution and reports interruptions and
        unexpected errors. Unexpected errors are printed along with their
        traceback and written to the log, and the program terminates with
        a non-zero exit status.

        Parameters
        ----------
        args : list
            Arbitrary list of positional arguments of `func`. The only
            requirement is that the first element is the argparse namespace
            object.
        """

        quiet = args[0].quiet

        try:
            # Set starting time for clocking execution duration
            start_time = time.time()

            res = self.func(*args)

            print_col("Program execution successfully completed in %s "
                      "seconds" % (round(time.time() - start_time, 2)),
                      GREEN, quiet=quiet)

            return res

        except KeyboardInterrupt:
            print_col("Interrupting, by your command", RED)

        except Exception:
            logging.exception("Unexpected exit in %s", self.func.__name__)
            if not quiet:
                traceback.print_exc()

            print_col("Program exited with errors!", RED, quiet=quiet)


def has_colours(stream):
    if not hasattr(stream, "isatty"):
        return False
    if not stream.isatty():
        return False  # auto color only on TTYs
    try:
        import curses
        curses.setupterm()
        return curses.tigetnum("colors") > 2
    except Exception:
        # guess false in case of error
        return False

# Support for terminal colors
BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)
has_colours = has_colours(sys.stdout)


def print_col(text, color, quiet=False):
    """Custom print function for terminal updates of PhyloTrim.

    The colors in use are green for normal logging, yellow for warnings
    and red for errors. The final formatting of the message is something
    like:

    [PhyloTrim[-Error/Warning]] <message>

    Every message is also forwarded to the `logging` module, so that a
    log file configured with `-log` records the full run.

    Parameters
    ----------
    text : str
        The message that will appear in the terminal
    color : variable reference
        Reference to the terminal colors defined in process.base. The
        options are: {GREEN, YELLOW, RED}
    quiet : bool
        Determines whether the message is printed. If True, no messages are
        printed to the terminal. Errors still terminate the program.

    Raises
    ------
    SystemExit
        When `color` is RED.
    """

    levels = {GREEN: logging.INFO, YELLOW: logging.WARNING,
              RED: logging.ERROR}
    logging.log(levels[color], text)

    if not quiet:
        suf = {GREEN: "[PhyloTrim] ", YELLOW: "[PhyloTrim-Warning] ",
               RED: "[PhyloTrim-Error] "}
        if has_colours:
            seq = "\x1b[1;%dm" % (30 + color) + suf[color] + "\x1b[0m" + text
            print(seq)
        else:
            print(suf[color] + text)

    if color is RED:
        raise SystemExit(1)


class Base(object):

    @staticmethod
    def read_basic_csv(file_handle):
        """
        Reads a basic CSV into a list.

        Parses a simple CSV file with only one column and one or more lines
        while stripping whitespace. Empty lines are ignored.

        Parameters
        ----------
        file_handle : file object
            File object of the CSV file

        Returns
        -------
        result : list
            Contents of the CSV file with each line in a different entry
        """

        result = []

        for line in file_handle:
            if line.strip():
                result.append(line.strip())

        return result

    @staticmethod
    def _set_pipes(pbar=None, total=None):
        """Setup of the progress bar of a CLI task execution.

        At the beginning of any given task, the ProgressBar object (`pbar`)
        is reset and its maximum value set to the expected `total` of the
        task.

        Parameters
        ----------
        pbar : ProgressBar
            A ProgressBar object used to log the progress of the execution.
        total : int
            Expected total of the task's progress.

        See Also
        --------
        _reset_pipes
        _update_pipes
        """

        if pbar:
            pbar.max_value = total
            pbar.update(0)

    @staticmethod
    def _update_pipes(pbar=None, value=None):
        """Update the progress bar of a CLI task execution.

        Parameters
        ----------
        pbar : ProgressBar
            A ProgressBar object used to log the progress of the execution.
        value : int
            Value of the current progress index

        See Also
        --------
        _set_pipes
        _reset_pipes
        """

        if pbar:
            pbar.update(value)

    @staticmethod
    def _reset_pipes(pbar=None):
        if pbar:
            pbar.finish()


__author__ = "Diogo N. Silva"

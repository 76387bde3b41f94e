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

from argparse import ArgumentTypeError
import os

from phylotrim.process.base import print_col, RED, YELLOW, OutputFormat


def phylotrim_arg_check(arg):

    if arg.generate_cfg:
        return 0

    if arg.command is None:
        print_col("A command must be provided. Choose from: trim, "
                  "filter-seq, filter-aln, unalign, convert, summarize", RED)

    if not arg.infile and not arg.input_dir:
        print_col("Input files must be provided with the '-in' or '-dir' "
                  "options", RED)

    if arg.infile and arg.input_dir:
        print_col("The '-in' and '-dir' options are mutually exclusive",
                  RED)

    if arg.input_dir and not arg.input_format:
        print_col("The input format must be provided with the '-if' option"
                  " when searching a directory with '-dir'", RED)

    if arg.command == "trim":

        if arg.missing_data is None and not arg.informative_sites:
            print_col("Provide one trimming parameter: --missing-data or "
                      "--informative-sites", RED)

        if arg.missing_data is not None and arg.informative_sites:
            print_col("Only one trimming parameter can be provided: "
                      "--missing-data or --informative-sites", RED)

        if arg.limit is not None and not arg.informative_sites:
            print_col("Ignoring the --limit option, which only applies to "
                      "--informative-sites", YELLOW, quiet=arg.quiet)

    if arg.command == "filter-seq" and arg.min_length is None and \
            arg.max_length is None and arg.max_gap is None:
        print_col("Provide at least one sequence filter: --min-length, "
                  "--max-length or --max-gap", RED)

    if arg.command == "filter-aln" and not any(
            [x is not None for x in [arg.min_taxa, arg.aln_length,
                                     arg.min_informative,
                                     arg.percent_informative,
                                     arg.max_missing, arg.contain_taxa]]):
        print_col("Provide at least one alignment filter", RED)

    if arg.command == "unalign" and arg.output_format and \
            OutputFormat(arg.output_format).aligned:
        print_col("Unaligned sequences can only be written in fasta "
                  "format. No output will be generated with '{}'".format(
                      arg.output_format), YELLOW, quiet=arg.quiet)

    return 0


def proportion(filt):
    """
    Checks the type of the threshold options. Assures that the values
    are within the accepted boundaries of [0-100]. If the provided value
    is greater than 1, it is taken as a percentage and converted to a
    proportion automatically
    :param filt: (string) The value provided with the threshold option
    :return: (float) proportion between 0 and 1
    """

    # Check if filt is convertable to float
    try:
        filt = float(filt)
    except ValueError:
        raise ArgumentTypeError("The value '{}' is not a "
                                "number between 0 and 100.".format(filt))

    # Check if filt is within acceptable range
    if not (0 <= filt <= 100):
        raise ArgumentTypeError("The value '{}' must be a number between "
                                "0 and 100.".format(filt))

    # Values above 1 are percentages
    if filt > 1:
        filt = filt / 100.

    return filt


def positive_int(value):

    try:
        value = int(value)
    except ValueError:
        raise ArgumentTypeError("The value '{}' is not an "
                                "integer.".format(value))

    if value < 0:
        raise ArgumentTypeError("The value '{}' must not be "
                                "negative.".format(value))

    return value


def check_infile_list(infiles):

    dirs = []
    lost = []
    good_files = []

    for fpath in infiles:

        if not os.path.exists(fpath):
            lost.append(fpath)

        elif os.path.isdir(fpath):
            dirs.append(fpath)

        else:
            good_files.append(fpath)

    return good_files, dirs, lost


__author__ = "Diogo N. Silva"

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

import os
import sys
import time
import logging
import argparse
import configparser
from glob import glob

from progressbar import ProgressBar, Timer, Bar, Percentage, \
    SimpleProgress

from phylotrim.process.base import print_col, RED, GREEN, YELLOW, CleanUp, \
    Base, InputFormat, OutputFormat, datatypes, find_alignment_files
from phylotrim.process.batch import AlignmentList
from phylotrim.process.data import write_summary, KEPT, SKIPPED, RETAINED,\
    EMPTY, UNALIGNED, FAILED
from phylotrim.process.error_handling import AlignmentError
from phylotrim.base.sanity import phylotrim_arg_check, proportion, \
    positive_int, check_infile_list

# Maps the options of the configuration file to the argument names.
# Values are (section, option, type)
config_options = {
    "input_format": ("general", "input_format", str),
    "datatype": ("general", "datatype", str),
    "output_format": ("general", "output_format", str),
    "workers": ("general", "workers", int),
    "on_error": ("general", "on_error", str),
    "missing_data": ("trim", "missing_data", proportion),
    "informative_sites": ("trim", "informative_sites", "boolean"),
    "limit": ("trim", "limit", int),
    "min_length": ("filter", "min_length", int),
    "max_length": ("filter", "max_length", int),
    "max_gap": ("filter", "max_gap", proportion)
}

# Default values of arguments that can also be set in the configuration file
arg_defaults = {
    "datatype": "dna",
    "workers": None,
    "on_error": "abort",
    "informative_sites": False,
}

default_output_format = {
    "unalign": "fasta",
}


def gen_wgt():

    bar_wdg = [
        "( ", SimpleProgress(), " ) ",
        Bar(),
        Percentage(),
        " [", Timer(), "] ",
    ]

    return bar_wdg


def generate_cfg_template(template_file="phylotrim_template.ini"):

    with open(template_file, "w") as template_fh:
        template_fh.write("""
# Configuration template file for PhyloTrim that can be passed using the
# -cfg option. Options provided in the command line override the values
# in this file. Remove or comment out the options you do not need.

[general]
# Options available: fasta nexus phylip
input_format: nexus
# Options available: dna aa ignore
datatype: dna
# Options available: fasta fasta-int nexus nexus-int phylip phylip-int
output_format: nexus
# Number of parallel processes. Defaults to the number of CPUs
workers: 4
# Options available: abort skip
on_error: abort

[trim]
# Maximum proportion of missing data per site (0 to 1)
missing_data: 0.5
# Keep only parsimony informative sites: yes no
informative_sites: no
# Maximum number of informative sites that are kept
# limit: 100

[filter]
# Minimum and maximum number of characters (excluding gaps) per sequence
min_length: 100
# max_length: 5000
# Maximum proportion of gaps per sequence (0 to 1)
max_gap: 0.5
""")

    return template_file


def apply_config(arg):
    """Fills the arguments that were not provided with the values of the
    configuration file and then with the default values."""

    if getattr(arg, "config_file", None):

        if not os.path.exists(arg.config_file):
            print_col("Configuration file '{}' does not exist".format(
                arg.config_file), RED)

        settings = configparser.ConfigParser()
        settings.read(arg.config_file)

        # A trimming parameter in the command line replaces both trimming
        # parameters of the file
        skip = []
        if getattr(arg, "missing_data", None) is not None or \
                getattr(arg, "informative_sites", None):
            skip = ["missing_data", "informative_sites"]

        for name, (section, option, opt_type) in config_options.items():

            if getattr(arg, name, None) is not None or name in skip:
                continue
            if not settings.has_option(section, option):
                continue

            try:
                if opt_type == "boolean":
                    value = settings.getboolean(section, option)
                else:
                    value = opt_type(settings.get(section, option))
            except (ValueError, argparse.ArgumentTypeError):
                print_col("Invalid value for option '{}' in section [{}] of"
                          " the configuration file".format(option, section),
                          RED)

            setattr(arg, name, value)

    for name, value in arg_defaults.items():
        if getattr(arg, name, None) is None:
            setattr(arg, name, value)

    if getattr(arg, "output_format", None) is None:
        arg.output_format = default_output_format.get(arg.command, "nexus")

    return arg


def get_input_files(arg):

    if arg.input_dir:
        return find_alignment_files(arg.input_dir,
                                    InputFormat(arg.input_format))

    alignment_list = arg.infile

    # Support wildcards as arguments for windows
    if sys.platform in ["win32", "cygwin"]:
        fl = []
        for p in alignment_list:
            fl += glob(p)
        alignment_list = fl

    # Check input files for directories
    alignment_list, dirs, lost = check_infile_list(alignment_list)

    if dirs:
        print_col("Ignoring input files pointing to a directory: {}".format(
            " ".join(dirs)), YELLOW, quiet=arg.quiet)
    if lost:
        print_col("Ignoring input files that do not exist: {}".format(
            " ".join(lost)), YELLOW, quiet=arg.quiet)

    return alignment_list


def report_summaries(arg, summaries):

    n = dict((x, len([y for y in summaries if y.status == x]))
             for x in [RETAINED, SKIPPED, EMPTY, UNALIGNED, FAILED])

    if n[RETAINED]:
        print_col("{} file(s) had no site passing the threshold and were "
                  "kept untouched".format(n[RETAINED]), YELLOW,
                  quiet=arg.quiet)
    if n[SKIPPED]:
        print_col("{} file(s) had no informative sites and were not "
                  "written".format(n[SKIPPED]), YELLOW, quiet=arg.quiet)
    if n[EMPTY]:
        print_col("{} file(s) had all sequences removed and were not "
                  "written".format(n[EMPTY]), YELLOW, quiet=arg.quiet)
    if n[UNALIGNED]:
        print_col("{} file(s) were skipped because they are not "
                  "aligned".format(n[UNALIGNED]), YELLOW, quiet=arg.quiet)
    if n[FAILED]:
        print_col("{} file(s) could not be read and were skipped".format(
            n[FAILED]), YELLOW, quiet=arg.quiet)


@CleanUp
def main_parser(arg):
    """ Function with the main operations of PhyloTrim """

    if arg.log_file:
        logging.basicConfig(filename=arg.log_file, level=logging.DEBUG,)

    print_col("Executing PhyloTrim module at %s %s" % (
        time.strftime("%d/%m/%Y"), time.strftime("%I:%M:%S")), GREEN,
              quiet=arg.quiet)

    if arg.generate_cfg:
        print_col("Generating configuration template file", GREEN,
                  quiet=arg.quiet)
        return generate_cfg_template()

    alignment_list = get_input_files(arg)

    if not alignment_list:
        print_col("No valid input files have been provided. "
                  "Terminating...", RED)

    if not arg.quiet:
        pbar = ProgressBar(max_value=len(alignment_list), widgets=gen_wgt())
    else:
        pbar = None

    alignments = AlignmentList(alignment_list,
                               input_format=arg.input_format,
                               datatype=arg.datatype,
                               workers=arg.workers,
                               on_error=arg.on_error,
                               skip_unaligned=arg.skip_unaligned)

    output_dir = arg.output_dir
    output_format = arg.output_format

    print_col("Processing %s alignments" % len(alignment_list), GREEN,
              quiet=arg.quiet)

    try:
        if arg.command == "summarize":
            table, stats = alignments.get_summary_stats(pbar=pbar)
            if not os.path.exists(output_dir):
                os.makedirs(output_dir)
            table.to_csv(os.path.join(output_dir, "summary_stats.csv"),
                         index=False)
            for k, v in stats.items():
                print_col("{}: {}".format(k, v), GREEN, quiet=arg.quiet)
            return stats

        if arg.command == "trim":
            if arg.missing_data is not None:
                print_col("Trimming by missing data", GREEN,
                          quiet=arg.quiet)
                summaries = alignments.trim_missing_data(
                    arg.missing_data, output_dir, output_format, pbar=pbar)
            else:
                print_col("Trimming by informative sites", GREEN,
                          quiet=arg.quiet)
                summaries = alignments.trim_informative_sites(
                    arg.limit, output_dir, output_format, pbar=pbar)

        elif arg.command == "filter-seq":
            print_col("Filtering sequences", GREEN, quiet=arg.quiet)
            summaries = alignments.filter_sequences(
                output_dir, output_format, min_length=arg.min_length,
                max_length=arg.max_length, max_gap=arg.max_gap, pbar=pbar)

        elif arg.command == "filter-aln":
            print_col("Filtering alignments", GREEN, quiet=arg.quiet)
            contain_taxa = arg.contain_taxa
            # Taxa can be provided in a file with one taxon per line
            if contain_taxa and len(contain_taxa) == 1 and \
                    os.path.isfile(contain_taxa[0]):
                with open(contain_taxa[0]) as fh:
                    contain_taxa = Base.read_basic_csv(fh)
            summaries = alignments.filter_alignments(
                output_dir, min_taxa=arg.min_taxa,
                min_length=arg.aln_length,
                min_informative=arg.min_informative,
                percent_informative=arg.percent_informative,
                max_missing=arg.max_missing, contains_taxa=contain_taxa,
                pbar=pbar)
            print_col("{} of {} alignments passed the filters".format(
                len([x for x in summaries if x.status == KEPT]),
                len(summaries)), GREEN, quiet=arg.quiet)

        elif arg.command == "unalign":
            print_col("Removing gaps and missing data", GREEN,
                      quiet=arg.quiet)
            summaries = alignments.unalign(output_dir, output_format,
                                           pbar=pbar)

        else:
            print_col("Converting to %s" % output_format, GREEN,
                      quiet=arg.quiet)
            summaries = alignments.convert(output_dir, output_format,
                                           pbar=pbar)

    except AlignmentError as e:
        print_col(str(e), RED)

    if not summaries:
        return summaries

    report_summaries(arg, summaries)

    summary_file = os.path.join(output_dir, "summary.csv")
    print_col("Writing summary to %s" % summary_file, GREEN, quiet=arg.quiet)
    write_summary(summaries, summary_file)

    return summaries


def get_args(arg_list=None, unittest=False):

    # The inclusion of the argument definition in main, makes it possible to
    # import this file as a module and not triggering argparse. The
    # alternative of using a if __name__ == "__main__" statement does not
    # work well with the entry_points parameter of setup.py, since they call
    # the main function but do nothing inside said statement.
    parser = argparse.ArgumentParser(description="Command line interface for "
                                                 "PhyloTrim")

    parser.add_argument("-cfg", dest="config_file",
                        help="Configuration file with the settings of the "
                        "execution. Options provided in the command line "
                        "override the values in this file")
    parser.add_argument("--generate-cfg", dest="generate_cfg",
                        action="store_const", const=True, default=False,
                        help="Generates a configuration template file")

    # Arguments shared by all commands
    common = argparse.ArgumentParser(add_help=False)

    main_exec = common.add_argument_group("Main execution")
    main_exec.add_argument("-in", dest="infile", nargs="+", help="Provide the "
                           "input file name. If multiple files are provided"
                           ", please separated the names with spaces")
    main_exec.add_argument("-dir", dest="input_dir", help="Process all "
                           "alignment files of the input format found in "
                           "this directory")
    main_exec.add_argument("-if", dest="input_format",
                           choices=[x.value for x in InputFormat],
                           help="Format of the input files. If not "
                           "provided, it is inferred from the extension of "
                           "each file")
    main_exec.add_argument("-dt", dest="datatype", choices=datatypes,
                           help="Sequence data type (default is 'dna')")
    main_exec.add_argument("-of", dest="output_format",
                           choices=[x.value for x in OutputFormat],
                           help="Format of the output file(s) (default is "
                           "'nexus', or 'fasta' for the unalign command)")
    main_exec.add_argument("-o", dest="output_dir", default="phylotrim_out",
                           help="Name of the output directory (default is "
                           "'%(default)s')")

    execution = common.add_argument_group("Execution")
    execution.add_argument("-t", dest="workers", type=positive_int,
                           help="Number of parallel processes (default is "
                           "the number of CPUs)")
    execution.add_argument("--skip-errors", dest="on_error",
                           action="store_const", const="skip",
                           help="Skip files with structural errors instead "
                           "of terminating")
    execution.add_argument("--skip-unaligned", dest="skip_unaligned",
                           action="store_const", const=True, default=False,
                           help="Skip files with sequences of unequal "
                           "length instead of terminating")

    miscellaneous = common.add_argument_group("Miscellaneous")
    miscellaneous.add_argument("-log", dest="log_file",
                               help="Write a log of the execution to this "
                               "file")
    miscellaneous.add_argument("-quiet", dest="quiet", action="store_const",
                               const=True, default=False, help="Removes all "
                               "terminal output")

    subparsers = parser.add_subparsers(dest="command")

    trim = subparsers.add_parser("trim", parents=[common],
                                 help="Remove sites from the alignments")
    trim.add_argument("--missing-data", dest="missing_data",
                      type=proportion, help="Maximum proportion (or "
                      "percentage) of gaps and missing data allowed in a "
                      "site")
    trim.add_argument("--informative-sites", dest="informative_sites",
                      action="store_const", const=True, help="Keep only "
                      "parsimony informative sites")
    trim.add_argument("--limit", dest="limit", type=positive_int,
                      help="Maximum number of informative sites that are "
                      "kept in each alignment")

    filter_seq = subparsers.add_parser("filter-seq", parents=[common],
                                       help="Remove sequences from the "
                                       "alignments")
    filter_seq.add_argument("--min-length", dest="min_length",
                            type=positive_int, help="Minimum number of "
                            "characters (excluding gaps and missing data) "
                            "of a sequence")
    filter_seq.add_argument("--max-length", dest="max_length",
                            type=positive_int, help="Maximum number of "
                            "characters (excluding gaps and missing data) "
                            "of a sequence")
    filter_seq.add_argument("--max-gap", dest="max_gap", type=proportion,
                            help="Maximum proportion (or percentage) of gaps"
                            " and missing data of a sequence")

    filter_aln = subparsers.add_parser("filter-aln", parents=[common],
                                       help="Select alignment files")
    filter_aln.add_argument("--min-taxa", dest="min_taxa", type=positive_int,
                            help="Minimum number of taxa")
    filter_aln.add_argument("--aln-length", dest="aln_length",
                            type=positive_int, help="Minimum alignment "
                            "length")
    filter_aln.add_argument("--min-informative", dest="min_informative",
                            type=positive_int, help="Minimum number of "
                            "parsimony informative sites")
    filter_aln.add_argument("--percent-informative",
                            dest="percent_informative", type=proportion,
                            help="Minimum number of informative sites, as "
                            "a proportion (or percentage) of the highest "
                            "number found in the input alignments")
    filter_aln.add_argument("--max-missing", dest="max_missing",
                            type=proportion, help="Maximum proportion (or "
                            "percentage) of gaps and missing data in the "
                            "alignment")
    filter_aln.add_argument("--contain-taxa", dest="contain_taxa",
                            nargs="+", help="Only select alignments that "
                            "contain all the specified taxa. Taxa may be "
                            "provided in a file with one taxon per line")

    subparsers.add_parser("unalign", parents=[common],
                          help="Remove gaps and missing data from the "
                          "sequences")
    subparsers.add_parser("convert", parents=[common],
                          help="Convert the alignments to another format")
    subparsers.add_parser("summarize", parents=[common],
                          help="Write summary statistics of the alignments")

    args = parser.parse_args(arg_list)

    # Print help when no arguments are provided
    if len(sys.argv) == 1 and not unittest:
        parser.print_help()
        sys.exit(1)

    # Global options are accepted without a command
    for name, value in [("quiet", False), ("log_file", None),
                        ("infile", None), ("input_dir", None),
                        ("input_format", None), ("skip_unaligned", False),
                        ("output_dir", "phylotrim_out")]:
        if not hasattr(args, name):
            setattr(args, name, value)

    return args


def main(arguments=None):

    if arguments is None:
        arguments = get_args()
    apply_config(arguments)
    phylotrim_arg_check(arguments)
    return main_parser(arguments)


if __name__ == "__main__":

    main()


__author__ = "Diogo N. Silva"

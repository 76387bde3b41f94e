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
The `batch` module defines the :class:`.AlignmentList` class, which applies
the operations of :class:`~phylotrim.process.sequence.Alignment` to a set of
alignment files.

Every file is processed by an independent task that parses the file,
applies one transformation, writes the output and returns a
:class:`~phylotrim.process.data.SummaryRecord`. Tasks share no state and
are distributed over a `multiprocessing.Pool`. Summaries are gathered in
completion order and sorted by source path before being returned.

Structural errors in any file abort the whole batch by default. The
``on_error="skip"`` policy logs the error, records the file as failed and
moves on to the next file.
"""

import shutil
import logging
import multiprocessing
from collections import OrderedDict
from os.path import join, basename

import psutil
import pandas as pd

from phylotrim.process.base import Base, OutputFormat, create_output_dir
from phylotrim.process.sequence import Alignment
from phylotrim.process.data import SummaryRecord, UNALIGNED, FAILED, \
    KEPT, REMOVED
from phylotrim.process.error_handling import AlignmentError, \
    AlignmentUnequalLength

# Operations of Alignment that can be applied by a batch task
operations = {
    "trim_missing_data": Alignment.trim_missing_data,
    "trim_informative_sites": Alignment.trim_informative_sites,
    "filter_sequences": Alignment.filter_sequences,
    "unalign": Alignment.unalign,
    "convert": Alignment.convert
}


def _failed(path, error):
    logging.error("Skipping %s: %s", path, error)
    return SummaryRecord.build(path, 0, 0, FAILED)


def process_file(task):
    """Processes a single alignment file. Used by the multiprocessing pool.

    Parameters
    ----------
    task : dict
        Contains the keys `path`, `input_format`, `datatype`, `operation`,
        `params`, `output_dir`, `output_format`, `skip_unaligned` and
        `on_error`.

    Returns
    -------
    summary : SummaryRecord
    """

    path = task["path"]

    try:
        aln = Alignment(path, task["input_format"], task["datatype"])

        try:
            summary = operations[task["operation"]](aln, **task["params"])
        except AlignmentUnequalLength:
            if not task["skip_unaligned"]:
                raise
            logging.warning("Skipping %s. Sequences have unequal length",
                            path)
            return SummaryRecord.build(path, aln.nchar, aln.nchar,
                                       UNALIGNED)

        # Sequences of unequal length cannot be written in columnar formats
        if task["operation"] == "convert" and not aln.is_alignment and \
                task["output_format"].aligned:
            logging.warning("Skipping %s. Sequences have unequal length "
                            "and cannot be written in the %s format", path,
                            task["output_format"].value)
            return SummaryRecord.build(path, aln.nchar, aln.nchar,
                                       UNALIGNED)

        if summary.written:
            aln.write_to_file(task["output_format"], task["output_dir"])

    except AlignmentError as e:
        if task["on_error"] != "skip":
            raise
        return _failed(path, e)

    return summary


def alignment_stats(task):
    """Computes the statistics of a single alignment file.

    Returns
    -------
    stats : dict
        Contains the keys `path`, `taxa`, `ntax`, `nchar`, `var`, `inf`,
        `gap`, `missing` and `prop_missing`. The site counts `var` and
        `inf` are None when the file is not aligned. When the file cannot
        be read and the `on_error` policy is "skip", only the `path` and
        a True `failed` key are returned.
    """

    path = task["path"]

    try:
        aln = Alignment(path, task["input_format"], task["datatype"])
    except AlignmentError as e:
        if task["on_error"] != "skip":
            raise
        logging.error("Skipping %s: %s", path, e)
        return {"path": path, "failed": True}

    seqs = "".join(aln.matrix.values())

    stats = {
        "path": path,
        "taxa": aln.taxa_list,
        "ntax": aln.ntax,
        "nchar": aln.nchar,
        "var": None,
        "inf": None,
        "gap": seqs.count(aln.header.gap),
        "missing": seqs.count(aln.header.missing),
        "prop_missing": aln.missing_data_proportion(),
        "failed": False
    }

    if aln.is_alignment:
        stats["var"] = aln.count_variable_sites()
        stats["inf"] = aln.count_informative_sites()
    else:
        logging.warning("Sequences of %s have unequal length. Site "
                        "statistics are not available", path)

    return stats


class AlignmentList(Base):
    """Interface for a batch of alignment files.

    Parameters
    ----------
    alignment_list : list
        List with paths to alignment files.
    input_format : InputFormat or str, optional
        Format of all alignment files. When not provided, the format of
        each file is inferred from its extension.
    datatype : str, optional
        One of {"dna", "aa", "ignore"} (default is "dna").
    workers : int, optional
        Number of worker processes. Defaults to the number of CPUs. With
        a single worker, files are processed in the current process.
    on_error : str, optional
        Policy for files with structural errors. With "abort" (default)
        the first error is raised and the batch stops. With "skip" the
        error is logged and the file recorded as failed.
    skip_unaligned : bool, optional
        If True, files whose sequences have unequal length are skipped by
        operations that require aligned data. Otherwise they raise
        `AlignmentUnequalLength`.

    Attributes
    ----------
    files : list
        Paths to the alignment files.
    """

    def __init__(self, alignment_list, input_format=None, datatype="dna",
                 workers=None, on_error="abort", skip_unaligned=False):

        self.files = list(alignment_list)
        self.input_format = input_format
        self.datatype = datatype
        self.workers = workers or psutil.cpu_count() or 1
        self.on_error = on_error
        self.skip_unaligned = skip_unaligned

    def __len__(self):
        return len(self.files)

    def _map(self, func, tasks, pbar=None):
        """Applies `func` to every task and gathers the results.

        Results are gathered in completion order. When a task raises, the
        pool is terminated and the exception propagated.
        """

        self._set_pipes(pbar, total=len(tasks))

        results = []

        if self.workers == 1 or len(tasks) < 2:
            for p, task in enumerate(tasks):
                results.append(func(task))
                self._update_pipes(pbar, value=p + 1)
        else:
            processes = min(self.workers, len(tasks))
            with multiprocessing.Pool(processes=processes) as pool:
                for p, res in enumerate(pool.imap_unordered(func, tasks)):
                    results.append(res)
                    self._update_pipes(pbar, value=p + 1)

        self._reset_pipes(pbar)

        return results

    def _run(self, operation, params, output_dir, output_format, pbar=None):

        output_format = OutputFormat(output_format)
        create_output_dir(output_dir)

        tasks = [{"path": path,
                  "input_format": self.input_format,
                  "datatype": self.datatype,
                  "operation": operation,
                  "params": params,
                  "output_dir": output_dir,
                  "output_format": output_format,
                  "skip_unaligned": self.skip_unaligned,
                  "on_error": self.on_error} for path in self.files]

        summaries = self._map(process_file, tasks, pbar)

        return sorted(summaries, key=lambda x: x.path)

    def trim_missing_data(self, threshold, output_dir, output_format,
                          pbar=None):
        """Removes sites with missing data above `threshold` in all files.

        Parameters
        ----------
        threshold : float
            Maximum fraction (0 to 1) of gaps and missing data in a site.
        output_dir : str
            Directory where the trimmed alignments are written.
        output_format : OutputFormat or str
        pbar : ProgressBar, optional

        Returns
        -------
        summaries : list
            One `SummaryRecord` per file, sorted by path.

        See Also
        --------
        Alignment.trim_missing_data
        """

        return self._run("trim_missing_data", {"threshold": threshold},
                         output_dir, output_format, pbar)

    def trim_informative_sites(self, limit, output_dir, output_format,
                               pbar=None):
        """Keeps only the (first `limit`) informative sites of all files.

        Files without informative sites are not written.

        See Also
        --------
        Alignment.trim_informative_sites
        """

        return self._run("trim_informative_sites", {"limit": limit},
                         output_dir, output_format, pbar)

    def filter_sequences(self, output_dir, output_format, min_length=None,
                         max_length=None, max_gap=None, pbar=None):
        """Removes sequences from all files.

        See Also
        --------
        Alignment.filter_sequences
        """

        params = {"min_length": min_length, "max_length": max_length,
                  "max_gap": max_gap}

        return self._run("filter_sequences", params, output_dir,
                         output_format, pbar)

    def unalign(self, output_dir, output_format=OutputFormat.FASTA,
                pbar=None):
        """Removes gaps and missing data from the sequences of all files.

        Unaligned sequences can only be written in an unaligned format.
        If `output_format` requires aligned sequences, nothing is done and
        an empty list is returned.

        See Also
        --------
        Alignment.unalign
        """

        output_format = OutputFormat(output_format)

        if output_format.aligned:
            logging.warning("Unaligned sequences cannot be written in the "
                            "%s format. Nothing was done",
                            output_format.value)
            return []

        return self._run("unalign", {}, output_dir, output_format, pbar)

    def convert(self, output_dir, output_format, pbar=None):
        """Writes all files into `output_format`."""

        return self._run("convert", {}, output_dir, output_format, pbar)

    def _stats(self, pbar=None):

        tasks = [{"path": path,
                  "input_format": self.input_format,
                  "datatype": self.datatype,
                  "on_error": self.on_error} for path in self.files]

        stats = self._map(alignment_stats, tasks, pbar)

        return sorted(stats, key=lambda x: x["path"])

    def filter_alignments(self, output_dir, min_taxa=None, min_length=None,
                          min_informative=None, percent_informative=None,
                          max_missing=None, contains_taxa=None, pbar=None):
        """Selects whole alignment files and copies them to `output_dir`.

        A file is kept only if it meets all the provided criteria.

        Parameters
        ----------
        output_dir : str
            Directory where the selected files are copied.
        min_taxa : int, optional
            Minimum number of taxa.
        min_length : int, optional
            Minimum alignment length.
        min_informative : int, optional
            Minimum number of parsimony informative sites.
        percent_informative : float, optional
            Fraction (0 to 1) of the highest number of informative sites
            found in the batch. A file is kept when its number of
            informative sites is at least ``floor(max_inf * fraction)``.
        max_missing : float, optional
            Maximum proportion (0 to 1) of gaps and missing data in the
            whole alignment.
        contains_taxa : list, optional
            Taxa that must all be present in the alignment.
        pbar : ProgressBar, optional

        Returns
        -------
        summaries : list
            One `SummaryRecord` per file, sorted by path, counting the file
            itself: `before` is 1, and `after` is 1 when kept or 0 when
            removed. Files that could not be read are recorded as failed.
        """

        stats = self._stats(pbar)
        valid = [x for x in stats if not x["failed"]]

        min_inf = None
        if percent_informative is not None:
            max_inf = max([x["inf"] or 0 for x in valid] or [0])
            min_inf = int(max_inf * percent_informative)

        create_output_dir(output_dir)

        summaries = []
        for st in stats:

            if st["failed"]:
                summaries.append(SummaryRecord.build(st["path"], 1, 0,
                                                     FAILED))
                continue

            keep = True

            if min_taxa is not None and st["ntax"] < min_taxa:
                keep = False
            if min_length is not None and st["nchar"] < min_length:
                keep = False
            if min_informative is not None and \
                    (st["inf"] or 0) < min_informative:
                keep = False
            if min_inf is not None and (st["inf"] or 0) < min_inf:
                keep = False
            if max_missing is not None and st["prop_missing"] > max_missing:
                keep = False
            if contains_taxa and not set(contains_taxa).issubset(st["taxa"]):
                keep = False

            if keep:
                shutil.copy(st["path"], join(output_dir,
                                             basename(st["path"])))

            summaries.append(SummaryRecord.build(
                st["path"], 1, int(keep), KEPT if keep else REMOVED))

        logging.info("%s of %s alignments passed the filters",
                     len([x for x in summaries if x.status == KEPT]),
                     len(summaries))

        return summaries

    def get_summary_stats(self, pbar=None):
        """Calculates summary statistics for each alignment.

        Returns
        -------
        summary_gene_table : pandas.DataFrame
            DataFrame with one row per alignment and the columns {genes,
            nsites, taxa, var, inf, gap, missing}, sorted by gene.
        summary_stats : dict
            Overall statistics of the batch: number of genes, total and
            average alignment length, number of distinct taxa and the total
            number of variable and informative sites.
        """

        stats = self._stats(pbar)
        # Files that could not be read have no statistics
        stats = [x for x in stats if not x["failed"]]

        columns = ["genes", "nsites", "taxa", "var", "inf", "gap", "missing"]
        rows = [[basename(x["path"]), x["nchar"], x["ntax"], x["var"],
                 x["inf"], x["gap"], x["missing"]] for x in stats]

        summary_gene_table = pd.DataFrame(rows, columns=columns)
        summary_gene_table.sort_values(["genes"], inplace=True)
        summary_gene_table.reset_index(drop=True, inplace=True)

        taxa = set()
        for x in stats:
            taxa.update(x["taxa"])

        summary_stats = OrderedDict([
            ("genes", len(stats)),
            ("taxa", len(taxa)),
            ("seq_len", int(summary_gene_table["nsites"].sum())),
            ("avg_seq_len", round(summary_gene_table["nsites"].mean())
             if stats else 0),
            ("var", int(summary_gene_table["var"].fillna(0).sum())),
            ("inf", int(summary_gene_table["inf"].fillna(0).sum()))
        ])

        return summary_gene_table, summary_stats


__author__ = "Diogo N. Silva"

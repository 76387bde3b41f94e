#!/usr/bin/env python3

import os
import shutil
import unittest
from os.path import join

import pandas as pd

from phylotrim.tests.data_files import *
from phylotrim.process.batch import AlignmentList
from phylotrim.process.sequence import Alignment
from phylotrim.process.data import write_summary, TRIMMED, RETAINED, \
    SKIPPED, FAILED, UNALIGNED, KEPT, REMOVED, CONVERTED
from phylotrim.process.error_handling import *

output_dir = "phylotrim_batch_test"


class AlignmentListTest(unittest.TestCase):

    def setUp(self):

        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

        self.aln_obj = AlignmentList(trim_data, workers=1)

    def tearDown(self):

        shutil.rmtree(output_dir)

    def test_trim_missing_data(self):

        summaries = self.aln_obj.trim_missing_data(.4, output_dir, "fasta")

        self.assertEqual([x.path for x in summaries], sorted(trim_data))

        res = dict((os.path.basename(x.path), x) for x in summaries)
        self.assertEqual((res["missing.fas"].before,
                          res["missing.fas"].after), (8, 7))
        self.assertEqual(res["all_missing.fas"].status, RETAINED)

        # Retained files are still written
        self.assertTrue(os.path.exists(join(output_dir, "all_missing.fas")))

        aln = Alignment(join(output_dir, "missing.fas"))
        self.assertEqual(aln.nchar, 7)

    def test_trim_informative(self):

        summaries = self.aln_obj.trim_informative_sites(None, output_dir,
                                                        "phylip")

        res = dict((os.path.basename(x.path), x.status) for x in summaries)

        self.assertEqual(res["informative.fas"], TRIMMED)
        self.assertEqual(res["not_informative.fas"], SKIPPED)
        self.assertTrue(os.path.exists(join(output_dir, "informative.phy")))
        self.assertFalse(os.path.exists(
            join(output_dir, "not_informative.phy")))

    def test_parallel(self):

        aln_obj = AlignmentList(trim_data, workers=2)

        summaries = aln_obj.trim_missing_data(.4, output_dir, "nexus")

        self.assertEqual([x.path for x in summaries], sorted(trim_data))
        self.assertEqual(len(os.listdir(output_dir)), 4)

    def test_abort_on_error(self):

        aln_obj = AlignmentList([missing_fasta, duplicate_fasta], workers=1)

        self.assertRaises(DuplicateTaxa, aln_obj.convert, output_dir,
                          "nexus")

    def test_abort_on_error_parallel(self):

        aln_obj = AlignmentList([missing_fasta, duplicate_fasta], workers=2)

        self.assertRaises(DuplicateTaxa, aln_obj.convert, output_dir,
                          "nexus")

    def test_skip_on_error(self):

        aln_obj = AlignmentList([missing_fasta, duplicate_fasta], workers=1,
                                on_error="skip")

        summaries = aln_obj.convert(output_dir, "nexus")

        self.assertEqual([x.status for x in summaries], [FAILED, CONVERTED])

    def test_unaligned_fatal(self):

        aln_obj = AlignmentList([unaligned_fasta], workers=1)

        self.assertRaises(AlignmentUnequalLength, aln_obj.trim_missing_data,
                          .5, output_dir, "fasta")

    def test_unaligned_skip(self):

        aln_obj = AlignmentList([unaligned_fasta, missing_fasta], workers=1,
                                skip_unaligned=True)

        summaries = aln_obj.trim_missing_data(.4, output_dir, "fasta")

        self.assertEqual(summaries[1].status, UNALIGNED)
        self.assertEqual(os.listdir(output_dir), ["missing.fas"])

    def test_unalign(self):

        aln_obj = AlignmentList([unaligned_fasta], workers=1)

        aln_obj.unalign(output_dir)

        aln = Alignment(join(output_dir, "unaligned.fas"))
        self.assertEqual(aln.matrix["ABCD"], "ATGC")

    def test_convert_unaligned_columnar_format(self):

        aln_obj = AlignmentList([unaligned_fasta, simple_fasta], workers=1)

        summaries = aln_obj.convert(output_dir, "phylip")

        self.assertEqual([x.status for x in summaries],
                         [CONVERTED, UNALIGNED])
        self.assertEqual(os.listdir(output_dir), ["simple.phy"])

    def test_convert_unaligned_fasta(self):

        aln_obj = AlignmentList([unaligned_fasta], workers=1)

        summaries = aln_obj.convert(output_dir, "fasta")

        self.assertEqual(summaries[0].status, CONVERTED)
        self.assertTrue(os.path.exists(join(output_dir, "unaligned.fas")))

    def test_unalign_columnar_format(self):

        aln_obj = AlignmentList([unaligned_fasta], workers=1)

        summaries = aln_obj.unalign(output_dir, "phylip")

        self.assertEqual(summaries, [])
        self.assertEqual(os.listdir(output_dir), [])

    def test_filter_sequences(self):

        aln_obj = AlignmentList([seq_filter_fasta], workers=1)

        summaries = aln_obj.filter_sequences(output_dir, "fasta",
                                             min_length=5)

        self.assertEqual(summaries[0].removed, 2)
        aln = Alignment(join(output_dir, "seq_filter.fas"))
        self.assertEqual(aln.taxa_list, ["s1", "s4"])

    def test_filter_sequences_empty(self):

        aln_obj = AlignmentList([seq_filter_fasta], workers=1)

        aln_obj.filter_sequences(output_dir, "fasta", min_length=10)

        self.assertEqual(os.listdir(output_dir), [])

    def test_summary_table(self):

        summaries = self.aln_obj.trim_missing_data(.4, output_dir, "fasta")

        summary_file = join(output_dir, "summary.csv")
        write_summary(summaries, summary_file)

        table = pd.read_csv(summary_file)

        self.assertEqual(list(table.columns),
                         ["parent", "file", "before", "after", "removed",
                          "status"])
        self.assertEqual(list(table["file"]),
                         sorted(os.path.basename(x) for x in trim_data))


class AlignmentFilterTest(unittest.TestCase):

    def setUp(self):

        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

        self.aln_obj = AlignmentList([missing_fasta, informative_fasta,
                                      seq_filter_fasta, simple_nexus],
                                     workers=1)

    def tearDown(self):

        shutil.rmtree(output_dir)

    def _kept(self, summaries):
        return sorted(os.path.basename(x.path) for x in summaries
                      if x.status == KEPT)

    def test_min_informative(self):

        summaries = self.aln_obj.filter_alignments(output_dir,
                                                   min_informative=2)

        self.assertEqual(self._kept(summaries), ["informative.fas"])
        self.assertEqual(os.listdir(output_dir), ["informative.fas"])

    def test_percent_informative(self):

        summaries = self.aln_obj.filter_alignments(output_dir,
                                                   percent_informative=.5)

        self.assertEqual(self._kept(summaries), ["informative.fas",
                                                 "simple.nex"])

    def test_contains_taxa(self):

        summaries = self.aln_obj.filter_alignments(
            output_dir, contains_taxa=["ABCD", "ABCG"])

        self.assertEqual(self._kept(summaries), ["simple.nex"])
        self.assertEqual(len([x for x in summaries if x.status == REMOVED]),
                         3)

    def test_max_missing(self):

        summaries = self.aln_obj.filter_alignments(output_dir,
                                                   max_missing=.1)

        self.assertEqual(self._kept(summaries), ["informative.fas",
                                                 "missing.fas",
                                                 "simple.nex"])

    def test_failed_files_recorded(self):

        aln_obj = AlignmentList([missing_fasta, duplicate_fasta], workers=1,
                                on_error="skip")

        summaries = aln_obj.filter_alignments(output_dir, min_taxa=1)

        self.assertEqual([(os.path.basename(x.path), x.status)
                          for x in summaries],
                         [("duplicate.fas", FAILED), ("missing.fas", KEPT)])
        self.assertEqual((summaries[0].before, summaries[0].after), (1, 0))
        self.assertEqual(os.listdir(output_dir), ["missing.fas"])

    def test_failed_files_summary_stats(self):

        aln_obj = AlignmentList([missing_fasta, duplicate_fasta], workers=1,
                                on_error="skip")

        table, stats = aln_obj.get_summary_stats()

        self.assertEqual(list(table["genes"]), ["missing.fas"])
        self.assertEqual(stats["genes"], 1)

    def test_summary_stats(self):

        table, stats = self.aln_obj.get_summary_stats()

        self.assertEqual(list(table["genes"]),
                         ["informative.fas", "missing.fas",
                          "seq_filter.fas", "simple.nex"])
        self.assertEqual(stats["genes"], 4)
        self.assertEqual(int(table[table["genes"] ==
                                   "informative.fas"]["inf"].iloc[0]), 2)


if __name__ == "__main__":
    unittest.main()

#!/usr/bin/env python3

import os
import shutil
import unittest
from os.path import join
from collections import OrderedDict

from phylotrim.tests.data_files import *
from phylotrim.process.base import OutputFormat, create_output_fname, \
    find_alignment_files, InputFormat
from phylotrim.process.sequence import Alignment

output_dir = "phylotrim_write_test"


class AlignmentWriteTest(unittest.TestCase):

    def setUp(self):

        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

    def tearDown(self):

        shutil.rmtree(output_dir)

    def test_write_fasta(self):

        aln = Alignment(simple_nexus)

        output_file = aln.write_to_file("fasta", output_dir)

        self.assertEqual(output_file, join(output_dir, "simple.fas"))

        with open(output_file) as fh:
            self.assertEqual(fh.read(), ">ABCD\nATGCATGC\n>ABCE\nATGCAT-?\n"
                                        ">ABCF\nATGGATGC\n>ABCG\nATGGATGC\n")

    def test_write_phylip(self):

        aln = Alignment(simple_fasta)

        output_file = aln.write_to_file(OutputFormat.PHYLIP, output_dir)

        with open(output_file) as fh:
            self.assertEqual(fh.read(), "4 8\nABCD ATGCATGC\nABCE ATGCAT-?\n"
                                        "ABCF ATGGATGC\nABCG ATGGATGC\n")

    def test_write_nexus(self):

        aln = Alignment(simple_fasta)

        output_file = aln.write_to_file("nexus", output_dir)

        with open(output_file) as fh:
            data = fh.read()

        self.assertTrue(data.startswith(
            "#NEXUS\nbegin data;\ndimensions ntax=4 nchar=8;\n"
            "format datatype=dna missing=? gap=-;\nmatrix\n"))
        self.assertTrue(data.endswith(";\nend;\n"))

    def test_padding(self):

        aln = Alignment("gene.fas", matrix=OrderedDict([("a", "AT"),
                                                         ("long_id", "GC")]))

        output_file = aln.write_to_file("phylip", output_dir)

        with open(output_file) as fh:
            self.assertEqual(fh.read(), "2 2\na       AT\nlong_id GC\n")

    def test_interleave_width(self):

        matrix = OrderedDict([("a", "A" * 100), ("b", "C" * 100)])
        aln = Alignment("gene.fas", matrix=matrix)

        output_file = aln.write_to_file("fasta-int", output_dir)

        with open(output_file) as fh:
            lines = fh.read().splitlines()

        self.assertEqual([len(x) for x in lines], [2, 80, 20, 2, 80, 20])


class RoundTripTest(unittest.TestCase):

    def setUp(self):

        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

    def tearDown(self):

        shutil.rmtree(output_dir)

    def _round_trip(self, input_file, output_format):

        aln = Alignment(input_file)
        output_file = aln.write_to_file(output_format, output_dir)
        aln2 = Alignment(output_file)

        self.assertEqual(aln.matrix, aln2.matrix)
        self.assertEqual(aln.header, aln2.header)

    def test_fasta(self):
        self._round_trip(simple_fasta, OutputFormat.FASTA)

    def test_fasta_interleave(self):
        self._round_trip(interleave_nexus, OutputFormat.FASTA_INT)

    def test_nexus(self):
        self._round_trip(simple_nexus, OutputFormat.NEXUS)

    def test_nexus_interleave(self):

        matrix = OrderedDict([("ABCD", "ACGT" * 60), ("ABCE", "TGCA" * 60)])
        aln = Alignment("long.fas", matrix=matrix)
        output_file = aln.write_to_file("nexus-int", output_dir)

        aln2 = Alignment(output_file)

        self.assertEqual(aln2.matrix, matrix)

    def test_phylip(self):
        self._round_trip(simple_phylip, OutputFormat.PHYLIP)

    def test_phylip_interleave(self):

        matrix = OrderedDict([("ABCD", "acgt" * 60), ("ABCE", "tgca" * 60)])
        aln = Alignment("long.fas", matrix=matrix)
        output_file = aln.write_to_file("phylip-int", output_dir)

        aln2 = Alignment(output_file)

        self.assertEqual(aln2.matrix, matrix)


class OutputNamesTest(unittest.TestCase):

    def test_output_names(self):

        self.assertEqual(create_output_fname("out", "data/gene.nexus",
                                             OutputFormat.FASTA),
                         join("out", "gene.fas"))
        self.assertEqual(create_output_fname("out", "gene.fa",
                                             OutputFormat.PHYLIP_INT),
                         join("out", "gene.phy"))

    def test_output_format(self):

        self.assertTrue(OutputFormat("nexus-int").interleave)
        self.assertEqual(OutputFormat.NEXUS_INT.ext, ".nex")
        self.assertFalse(OutputFormat.FASTA.aligned)

    def test_find_files(self):

        files = find_alignment_files(data_path, InputFormat.PHYLIP)

        self.assertEqual([os.path.basename(x) for x in files],
                         ["bad_header.phy", "duplicate.phy",
                          "interleave.phy", "invalid.phy",
                          "malformed_row.phy", "simple.phy"])


if __name__ == "__main__":
    unittest.main()

"""The `sequence` module of PhyloTrim contains the classes that handle
single alignment files. These are :class:`.Header`, :class:`.SeqCheck`
and :class:`.Alignment`. Batches of alignment files are handled by
:class:`phylotrim.process.batch.AlignmentList`, which creates one
:class:`.Alignment` object per file.

`Alignment` class
-----------------

The :class:`.Alignment` class is the main interface with single alignment
files. It parses the file into a sequence matrix, an `OrderedDict` that
maps each taxon name to its sequence in file order, and derives a
:class:`.Header` from that matrix. It contains the methods that compute
site statistics, modify the matrix and write it back to disk.

The main types of methods defined in this class are:

Parsers
~~~~~~~

Parsing methods are defined for each format with `_read_<format>`:

    - :meth:`~.Alignment._read_phylip`: Parses phylip format.
    - :meth:`~.Alignment._read_fasta`: Parses fasta format.
    - :meth:`~.Alignment._read_nexus`: Parses nexus format.

They are always called from the :meth:`~.Alignment.read_alignment` method,
and not directly. The format of the file is either provided when the
:class:`.Alignment` is created or inferred once from the extension of the
file (see :meth:`~phylotrim.process.base.InputFormat.from_path`). The
:meth:`~.Alignment.read_alignment` method then calls the parsing method
corresponding to that format. That information is stored in a
dictionary::

    parsing_methods = {
        InputFormat.PHYLIP: self._read_phylip,
        InputFormat.FASTA: self._read_fasta,
        InputFormat.NEXUS: self._read_nexus
    }

    # Call the appropriate method
    header = parsing_methods[self.input_format]()

Each parser fills the :attr:`~.Alignment.matrix` attribute and returns a
dictionary with the values declared in the file (if any). Structural
problems are raised as the exceptions defined in
:mod:`phylotrim.process.error_handling`. After parsing, every sequence is
checked against the alphabet of the data type and the declared header is
cross-checked against the matrix.

Transformations
~~~~~~~~~~~~~~~

    - :meth:`~.Alignment.trim_missing_data`: Removes sites with too much
      missing data.
    - :meth:`~.Alignment.trim_informative_sites`: Keeps only parsimony
      informative sites.
    - :meth:`~.Alignment.unalign`: Removes gaps and missing data from
      every sequence.
    - :meth:`~.Alignment.filter_sequences`: Removes whole sequences
      according to their length or amount of gaps.

Each transformation replaces the matrix with a new one, recomputes the
:class:`.Header` and returns a
:class:`~phylotrim.process.data.SummaryRecord` with the counts before and
after the operation.

Writers
~~~~~~~

The matrix can be written in fasta, phylip and nexus formats, sequential
or interleaved, with :meth:`~.Alignment.write_to_file`.
"""

import re
import logging
from collections import OrderedDict, namedtuple
from os.path import basename, splitext

from phylotrim.process.base import Base, InputFormat, OutputFormat, \
    dna_alphabet, aa_alphabet, create_output_fname, create_output_dir
from phylotrim.process import sites
from phylotrim.process.data import SummaryRecord, TRIMMED, RETAINED, \
    SKIPPED, FILTERED, EMPTY, STRIPPED, CONVERTED
from phylotrim.process.error_handling import InputError, DuplicateTaxa, \
    HeaderMismatch, InvalidSequence, EmptyAlignment, AlignmentUnequalLength


class SeqCheck(object):
    """Computes the shortest and longest sequence lengths of a matrix.

    Attributes
    ----------
    shortest : int
    longest : int
    is_alignment : bool
        True when all sequences have the same length.
    """

    def __init__(self):
        self.shortest = 0
        self.longest = 0
        self.is_alignment = True

    def check(self, matrix):
        """Updates the attributes from `matrix` in a single pass.

        Parameters
        ----------
        matrix : OrderedDict
            Maps taxon names to sequences.

        Returns
        -------
        self : SeqCheck
        """

        shortest = None
        longest = 0

        for seq in matrix.values():
            size = len(seq)
            if shortest is None or size < shortest:
                shortest = size
            if size > longest:
                longest = size

        self.shortest = shortest or 0
        self.longest = longest
        self.is_alignment = self.shortest == self.longest

        return self


class Header(namedtuple("Header", ["ntax", "nchar", "datatype", "missing",
                                   "gap", "aligned"])):
    """Metadata of a sequence matrix.

    Headers are immutable. Every time a matrix is modified, a new header is
    created from the modified matrix with :meth:`Header.from_matrix`.

    Attributes
    ----------
    ntax : int
        Number of sequences.
    nchar : int
        Length of the longest sequence. When the matrix is aligned, this is
        the length of every sequence.
    datatype : str
        One of {"dna", "aa", "ignore"}.
    missing : str
        Missing data symbol.
    gap : str
        Gap symbol.
    aligned : bool
        Whether all sequences have the same length.
    """

    __slots__ = ()

    @classmethod
    def from_matrix(cls, matrix, datatype="dna", missing="?", gap="-"):
        check = SeqCheck().check(matrix)
        return cls(len(matrix), check.longest, datatype, missing, gap,
                   check.is_alignment)


class Alignment(Base):
    """Main interface for single alignment files.

    When an `Alignment` object is instantiated with a path, the format of
    the file is set (either from `input_format` or from the extension of
    the file) and the file is parsed straight away. Any structural problem
    with the file is raised during instantiation.

    Parameters
    ----------
    input_alignment : str
        Path to the alignment file.
    input_format : InputFormat or str, optional
        Format of `input_alignment`. When not provided, it is inferred from
        the file extension.
    datatype : str, optional
        One of {"dna", "aa", "ignore"} (default is "dna"). Selects the
        alphabet used to validate the sequences and the character states
        counted as informative.
    matrix : OrderedDict, optional
        If provided, the file is not parsed and this matrix is used
        instead. `input_alignment` is then only used as the name of the
        alignment.

    Attributes
    ----------
    path : str
        Path to alignment file.
    name : str
        Basename of the alignment file with the extension.
    sname : str
        Basename of the alignment file without the extension.
    input_format : InputFormat
        Format of the input alignment file.
    datatype : str
        Sequence data type.
    matrix : OrderedDict
        Maps taxon names to their sequences, in file order.
    header : Header
        Metadata derived from `matrix`.

    See Also
    --------
    phylotrim.process.batch.AlignmentList
    """

    def __init__(self, input_alignment, input_format=None, datatype="dna",
                 matrix=None):

        self.path = input_alignment
        self.name = basename(input_alignment)
        self.sname = splitext(self.name)[0]
        self.datatype = datatype

        if matrix is not None:
            self.input_format = None
            self.matrix = OrderedDict(matrix)
            self.header = Header.from_matrix(self.matrix, datatype)
            return

        self.input_format = self._set_format(input_format)

        self.matrix = OrderedDict()
        self.header = None

        self.read_alignment()

    def __iter__(self):
        """Iterates over (taxon, sequence) tuples of the matrix."""
        return iter(self.matrix.items())

    def __len__(self):
        return len(self.matrix)

    def _set_format(self, input_format):

        if input_format is None:
            return InputFormat.from_path(self.path)

        try:
            return InputFormat(input_format)
        except ValueError:
            raise InputError("Unsupported input format '{}'".format(
                input_format), path=self.path)

    @property
    def ntax(self):
        return self.header.ntax

    @property
    def nchar(self):
        return self.header.nchar

    @property
    def is_alignment(self):
        return self.header.aligned

    @property
    def taxa_list(self):
        return list(self.matrix)

    def _update_matrix(self, matrix):
        """Replaces the matrix and recomputes the header from it."""

        self.matrix = matrix
        self.header = Header.from_matrix(matrix, self.datatype,
                                         self.header.missing,
                                         self.header.gap)

    def _add_sequence(self, taxon, seq, concatenate=False):
        """Adds a sequence to the matrix while parsing.

        Parameters
        ----------
        taxon : str
        seq : str
        concatenate : bool
            If True, a taxon that already exists in the matrix has `seq`
            appended to its sequence (interleaved data). Otherwise, an
            existing taxon raises `DuplicateTaxa`.
        """

        if taxon in self.matrix:
            if not concatenate:
                raise DuplicateTaxa("Taxon '{}' is duplicated in the "
                                    "alignment".format(taxon),
                                    path=self.path, taxon=taxon)
            self.matrix[taxon] += seq
        else:
            self.matrix[taxon] = seq

    def _parse_row(self, line):
        """Splits a data row into taxon name and sequence.

        Rows must have exactly two whitespace separated fields, since
        taxon names with whitespace cannot be told apart from the sequence.
        """

        fields = line.split()

        if len(fields) != 2:
            raise InputError("Unsupported format. Data rows must contain "
                             "exactly two fields (taxon name and sequence)."
                             " Offending row: '{}'".format(line.strip()),
                             path=self.path, taxon=line.strip())

        return fields[0], fields[1]

    def _read_phylip(self):
        """Alignment parser for phylip format.

        Parses a sequential or interleaved phylip alignment file. The
        first `ntax` data rows contain the taxon name and the first chunk
        of the sequence. Any further rows belong to interleaved blocks,
        which contain only sequence data, in the same taxon order.

        Returns
        -------
        declared : dict
            The ntax and nchar values of the phylip header.

        See Also
        --------
        read_alignment
        """

        declared = None
        # Stores the order of the taxa for interleave processing
        taxa_order = []
        # Counter that makes the correspondence between the current line
        # and the appropriate taxon
        c = 0

        with open(self.path) as fh:

            for line in fh:

                # Ignore empty lines
                if line.strip() == "":
                    continue

                # Get the number of taxa and sequence length from the file
                # header
                if declared is None:
                    header = re.match(r"\s*(\d+)\s+(\d+)", line)
                    if not header:
                        raise InputError("Could not recognize the number of"
                                         " taxa and sites from phylip "
                                         "header: '{}'".format(line.strip()),
                                         path=self.path)
                    declared = {"ntax": int(header.group(1)),
                                "nchar": int(header.group(2))}
                    continue

                if c < declared["ntax"]:
                    taxon, seq = self._parse_row(line)
                    self._add_sequence(taxon, seq.lower())
                    taxa_order.append(taxon)

                elif not taxa_order:
                    raise HeaderMismatch("Phylip header declares no taxa "
                                         "but the file contains data",
                                         path=self.path)

                else:
                    # Oh boy, this seems like an interleave phylip file.
                    taxon = taxa_order[(c - declared["ntax"]) %
                                       len(taxa_order)]
                    self._add_sequence(taxon, "".join(line.split()).lower(),
                                       concatenate=True)

                c += 1

        if declared is None:
            raise EmptyAlignment("The alignment file is empty",
                                 path=self.path)

        return declared

    def _read_fasta(self):
        """Alignment parser for fasta format.

        Lines before the first record are ignored. Header values are
        derived from the matrix, since fasta declares none.

        See Also
        --------
        read_alignment
        """

        sequence = []
        taxa = None

        with open(self.path) as fh:
            for line in fh:
                if line.strip().startswith(">"):

                    if taxa is not None:
                        self._add_sequence(taxa, "".join(sequence))
                        sequence = []

                    taxa = line.strip()[1:].strip()

                elif line.strip() != "" and taxa is not None:
                    sequence.append("".join(line.split()))

        if taxa is not None:
            self._add_sequence(taxa, "".join(sequence))

        return {}

    @staticmethod
    def _nexus_tokens(block):
        """Returns the lower case `key=value` tokens of a nexus command."""

        block = block.strip().rstrip(";")
        # Remove whitespace surrounding the equal signs
        block = re.sub(r"\s*=\s*", "=", block)

        return block.split()[1:]

    def _parse_nexus_dimensions(self, block, declared):

        for token in self._nexus_tokens(block):
            key, _, value = token.partition("=")
            key = key.lower()
            if key in ("ntax", "nchar"):
                try:
                    declared[key] = int(value)
                except ValueError:
                    raise InputError("Could not recognize {} from nexus "
                                     "header: '{}'".format(key, token),
                                     path=self.path)

    def _parse_nexus_format(self, block, declared):

        for token in self._nexus_tokens(block):
            key, sep, value = token.partition("=")
            key = key.lower()

            if key == "datatype":
                declared["datatype"] = value.lower()
            elif key == "missing" and value:
                declared["missing"] = value
            elif key == "gap" and value:
                declared["gap"] = value
            elif key == "interleave":
                declared["interleave"] = not sep or \
                    value.lower() in ("yes", "true")

    def _parse_nexus_matrix(self, block, interleave):

        lines = block.splitlines()
        # The data rows may start in the same line of the matrix command
        lines[0] = lines[0].strip()[len("matrix"):]

        for line in lines:
            line = line.strip()

            # The terminating semicolon may be attached to the last row
            if line.endswith(";"):
                line = line[:-1].strip()

            if not line:
                continue

            taxon, seq = self._parse_row(line)
            self._add_sequence(taxon, seq, concatenate=interleave)

    def _read_nexus(self):
        """Alignment parser for nexus format.

        The file is read as a sequence of commands terminated by a
        semicolon. Only the `dimensions`, `format` and `matrix` commands
        are used; every other command is ignored. When the `format` command
        sets the interleave flag, repeated taxa in the matrix are
        concatenated in the order they appear.

        Returns
        -------
        declared : dict
            Values declared in the `dimensions` and `format` commands.

        See Also
        --------
        read_alignment
        """

        declared = {}
        block = []
        magic = False

        with open(self.path) as fh:

            for line in fh:

                if not magic:
                    if not line.strip():
                        continue
                    if not line.strip().lower().startswith("#nexus"):
                        raise InputError("Invalid nexus file. The file "
                                         "must start with #NEXUS",
                                         path=self.path)
                    magic = True
                    continue

                # Skip comments and blank lines outside of blocks
                if line.strip().startswith("[") or \
                        (not block and not line.strip()):
                    continue

                block.append(line)

                if not line.strip().endswith(";"):
                    continue

                # A command is complete
                command = "".join(block)
                block = []
                kind = command.strip().lower()

                if kind.startswith("dimensions"):
                    self._parse_nexus_dimensions(command, declared)
                elif kind.startswith("format"):
                    self._parse_nexus_format(command, declared)
                elif kind.startswith("matrix"):
                    self._parse_nexus_matrix(
                        command, declared.get("interleave", False))

        if not magic:
            raise EmptyAlignment("The alignment file is empty",
                                 path=self.path)

        if "ntax" not in declared or "nchar" not in declared:
            raise InputError("Could not recognize ntax or nchar parameters "
                             "from nexus header", path=self.path)

        return declared

    def _validate_sequences(self, missing="?", gap="-"):
        """Checks that all sequences use only characters of the alphabet.

        Raises
        ------
        InvalidSequence
            Names the first taxon with invalid characters.
        """

        if self.datatype == "dna":
            alphabet = dna_alphabet
        elif self.datatype == "aa":
            alphabet = aa_alphabet
        else:
            return

        alphabet = alphabet.union([missing, gap])

        for taxon, seq in self.matrix.items():
            invalid = set(seq).difference(alphabet)
            if invalid:
                raise InvalidSequence(
                    "Invalid character(s) '{}' in the sequence of taxon "
                    "'{}'".format("".join(sorted(invalid)), taxon),
                    path=self.path, taxon=taxon)

    def read_alignment(self):
        """Main alignment parser method.

        This is the main alignment parsing method that is called when the
        `Alignment` object is instantiated with a file path as the
        argument. It calls the specific method that parses the alignment
        format, validates the sequences and builds the header. The values
        declared by the file, if any, must match the parsed matrix.

        Raises
        ------
        InputError
        DuplicateTaxa
        InvalidSequence
        EmptyAlignment
        HeaderMismatch
        """

        parsing_methods = {
            InputFormat.PHYLIP: self._read_phylip,
            InputFormat.FASTA: self._read_fasta,
            InputFormat.NEXUS: self._read_nexus
        }

        declared = parsing_methods[self.input_format]()

        if not self.matrix:
            raise EmptyAlignment("The alignment file contains no "
                                 "sequences", path=self.path)

        missing = declared.get("missing", "?")
        gap = declared.get("gap", "-")

        self._validate_sequences(missing, gap)

        self.header = Header.from_matrix(self.matrix, self.datatype,
                                         missing, gap)

        if "ntax" in declared and declared["ntax"] != self.header.ntax:
            raise HeaderMismatch(
                "Declared number of taxa ({}) does not match the number of "
                "sequences ({})".format(declared["ntax"], self.header.ntax),
                path=self.path)

        if "nchar" in declared and declared["nchar"] != self.header.nchar:
            raise HeaderMismatch(
                "Declared number of sites ({}) does not match the length of "
                "the longest sequence ({})".format(declared["nchar"],
                                                   self.header.nchar),
                path=self.path)

    def check_alignment(self):
        """Raises `AlignmentUnequalLength` if the matrix is not aligned."""

        if not self.header.aligned:
            raise AlignmentUnequalLength("Sequences have unequal length",
                                         path=self.path)

    def missing_data_per_site(self):
        """Returns the fraction of missing data of each site.

        See Also
        --------
        phylotrim.process.sites.missing_data_per_site
        """

        self.check_alignment()

        return sites.missing_data_per_site(self.matrix, self.header.missing,
                                           self.header.gap)

    def informative_sites(self, limit=None):
        """Returns the ascending indices of parsimony informative sites.

        Parameters
        ----------
        limit : int, optional
            Return at most the first `limit` informative sites.
        """

        self.check_alignment()

        return sites.informative_sites(self.matrix, self.datatype, limit,
                                       self.header.missing, self.header.gap)

    def count_informative_sites(self):
        self.check_alignment()
        return sites.count_informative_sites(self.matrix, self.datatype,
                                             self.header.missing,
                                             self.header.gap)

    def count_variable_sites(self):
        self.check_alignment()
        return sites.count_variable_sites(self.matrix, self.datatype,
                                          self.header.missing,
                                          self.header.gap)

    def missing_data_proportion(self):
        return sites.missing_data_proportion(self.matrix,
                                             self.header.missing,
                                             self.header.gap)

    def trim_missing_data(self, threshold):
        """Removes the sites with more missing data than `threshold`.

        If no site passes the threshold, the alignment is left untouched
        and flagged as retained.

        Parameters
        ----------
        threshold : float
            Maximum fraction (0 to 1) of gaps and missing data allowed in
            a site.

        Returns
        -------
        summary : SummaryRecord
            Number of sites before and after trimming.

        Raises
        ------
        AlignmentUnequalLength
            If the alignment is not aligned.
        """

        self.check_alignment()

        before = self.nchar
        passing = sites.sites_below_missing(self.matrix, threshold,
                                            self.header.missing,
                                            self.header.gap)

        if not passing:
            logging.warning("No site of %s passes the missing data "
                            "threshold of %s. Retaining all sites",
                            self.path, threshold)
            return SummaryRecord.build(self.path, before, before, RETAINED)

        self._update_matrix(sites.rebuild_columns(self.matrix, passing))

        return SummaryRecord.build(self.path, before, self.nchar, TRIMMED)

    def trim_informative_sites(self, limit=None):
        """Keeps only the parsimony informative sites.

        If the alignment has no informative sites, the matrix is left
        untouched and the summary is flagged as skipped, meaning that no
        output should be written for this alignment.

        Parameters
        ----------
        limit : int, optional
            Maximum number of informative sites to keep. Only the first
            `limit` informative sites are kept. If None, all informative
            sites are kept.

        Returns
        -------
        summary : SummaryRecord
        """

        before = self.nchar
        passing = self.informative_sites(limit)

        if not passing:
            logging.warning("No informative sites were found in %s. "
                            "Skipping", self.path)
            return SummaryRecord.build(self.path, before, 0, SKIPPED)

        self._update_matrix(sites.rebuild_columns(self.matrix, passing))

        return SummaryRecord.build(self.path, before, self.nchar, TRIMMED)

    def unalign(self):
        """Removes every gap and missing data symbol from all sequences.

        The alignment does not need to be aligned. The resulting sequences
        will, in general, have different lengths.

        Returns
        -------
        summary : SummaryRecord
            Length of the longest sequence before and after.
        """

        before = self.nchar
        symbols = set([self.header.missing, self.header.gap, "?", "-"])

        unaligned = OrderedDict()
        for taxon, seq in self.matrix.items():
            unaligned[taxon] = "".join(x for x in seq if x not in symbols)

        self._update_matrix(unaligned)

        return SummaryRecord.build(self.path, before, self.nchar, STRIPPED)

    def _count_missing(self, seq):
        symbols = (self.header.missing, self.header.gap)
        return sum(1 for x in seq if x in symbols)

    def filter_sequences(self, min_length=None, max_length=None,
                         max_gap=None):
        """Removes sequences according to their size or amount of gaps.

        The size of a sequence is the number of characters that are
        neither gaps nor missing data. All provided criteria must be met
        for a sequence to be kept.

        Parameters
        ----------
        min_length : int, optional
            Minimum size of the sequence.
        max_length : int, optional
            Maximum size of the sequence.
        max_gap : float, optional
            Maximum fraction (0 to 1) of gaps and missing data. A sequence
            is kept if its number of gaps and missing data is not greater
            than ``floor(nchar * max_gap)``.

        Returns
        -------
        summary : SummaryRecord
            Number of sequences before and after the filter. When no
            sequence is kept, the status is `empty` and no output should be
            written.
        """

        before = self.ntax
        nchar = self.nchar

        if max_gap is not None:
            max_missing = int(nchar * max_gap)

        filtered = OrderedDict()
        for taxon, seq in self.matrix.items():

            missing = self._count_missing(seq)
            size = len(seq) - missing

            if min_length is not None and size < min_length:
                continue
            if max_length is not None and size > max_length:
                continue
            if max_gap is not None and missing > max_missing:
                continue

            filtered[taxon] = seq

        self._update_matrix(filtered)

        if not filtered:
            logging.warning("All sequences of %s were removed by the "
                            "filter", self.path)
            return SummaryRecord.build(self.path, before, 0, EMPTY)

        return SummaryRecord.build(self.path, before, self.ntax, FILTERED)

    def convert(self):
        """Returns the summary of a plain format conversion."""
        return SummaryRecord.build(self.path, self.nchar, self.nchar,
                                   CONVERTED)

    def _interleave_len(self):
        return 80 if self.nchar < 2000 else 500

    def _chunks(self, seq):
        n = self._interleave_len()
        return [seq[i:i + n] for i in range(0, len(seq), n)] or [""]

    def _padded_rows(self, rows):
        """Pads taxon names to the longest name plus one space."""

        pad = max(len(x) for x in self.matrix) + 1

        return ["{}{}\n".format(taxon.ljust(pad), seq) for taxon, seq in rows]

    def _interleave_blocks(self):
        """Returns the matrix split in blocks of equal width.

        Each block is a list of (taxon, sequence chunk) tuples.
        """

        chunks = OrderedDict((taxon, self._chunks(seq))
                             for taxon, seq in self.matrix.items())
        nblocks = max(len(x) for x in chunks.values())

        return [[(taxon, seqs[i]) for taxon, seqs in chunks.items()
                 if i < len(seqs)] for i in range(nblocks)]

    def _write_fasta(self, fh, interleave):

        for taxon, seq in self.matrix.items():
            fh.write(">{}\n".format(taxon))
            if interleave:
                for chunk in self._chunks(seq):
                    fh.write("{}\n".format(chunk))
            else:
                fh.write("{}\n".format(seq))

    def _write_phylip(self, fh, interleave):

        fh.write("{} {}\n".format(self.ntax, self.nchar))

        if not interleave:
            fh.writelines(self._padded_rows(self.matrix.items()))
            return

        for i, block in enumerate(self._interleave_blocks()):
            # Taxon names are only written in the first block
            if i == 0:
                fh.writelines(self._padded_rows(block))
            else:
                fh.write("\n")
                fh.writelines("{}\n".format(seq) for _, seq in block)

    def _write_nexus(self, fh, interleave):

        nexus_datatype = {"dna": "dna", "aa": "protein"}

        fh.write("#NEXUS\nbegin data;\n")
        fh.write("dimensions ntax={} nchar={};\n".format(self.ntax,
                                                         self.nchar))
        fh.write("format datatype={} missing={} gap={}{};\n".format(
            nexus_datatype.get(self.datatype, "standard"),
            self.header.missing, self.header.gap,
            " interleave" if interleave else ""))
        fh.write("matrix\n")

        if not interleave:
            fh.writelines(self._padded_rows(self.matrix.items()))
        else:
            for i, block in enumerate(self._interleave_blocks()):
                if i:
                    fh.write("\n")
                fh.writelines(self._padded_rows(block))

        fh.write(";\nend;\n")

    def write_to_file(self, output_format, output_dir="", output_file=None):
        """Writes the alignment to a file.

        Parameters
        ----------
        output_format : OutputFormat or str
            Output format. Interleaved formats split the sequences in
            blocks of 80 characters, or 500 when the alignment has 2000 or
            more sites.
        output_dir : str, optional
            Directory where the file will be written. It is created if it
            does not exist.
        output_file : str, optional
            Full path of the output file. If not provided, the name is
            created from the name of the input file and the extension of
            `output_format`.

        Returns
        -------
        output_file : str
            Path of the written file.
        """

        output_format = OutputFormat(output_format)

        writing_methods = {
            "fasta": self._write_fasta,
            "phylip": self._write_phylip,
            "nexus": self._write_nexus
        }

        if not output_file:
            create_output_dir(output_dir)
            output_file = create_output_fname(output_dir, self.path,
                                              output_format)

        with open(output_file, "w") as fh:
            writing_methods[output_format.base](fh, output_format.interleave)

        return output_file


__author__ = "Diogo N. Silva"

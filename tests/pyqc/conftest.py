import pytest

from pyqc.config import QcConfig

# pylint: disable=redefined-outer-name

TRIMMOMATIC_STUB = """
import shutil
import sys

args = sys.argv[1:]
print('trimmomatic', ' '.join(args))

if args[0] == 'PE':
    in1, in2, base = args[3], args[4], args[6]
    shutil.copy(in1, base + '_1P')
    shutil.copy(in2, base + '_2P')
    open(base + '_1U', 'w').close()
    open(base + '_2U', 'w').close()
else:
    shutil.copy(args[3], args[4])
"""

FLASH_STUB = """
import argparse
import shutil
from pathlib import Path

parser = argparse.ArgumentParser()
parser.add_argument('--threads')
parser.add_argument('--output-prefix')
parser.add_argument('--max-overlap')
parser.add_argument('--output-directory')
parser.add_argument('in1')
parser.add_argument('in2')
args = parser.parse_args()

print('flash combining', args.in1, args.in2)

prefix = str(Path(args.output_directory) / args.output_prefix)
shutil.copy(args.in1, prefix + '.extendedFrags.fastq')
open(prefix + '.notCombined_1.fastq', 'w').close()
open(prefix + '.notCombined_2.fastq', 'w').close()

with open(prefix + '.hist', 'w') as hist_file:
    hist_file.write('10\\t4\\n')
"""

BOWTIE2_STUB = """
import argparse

parser = argparse.ArgumentParser()
parser.add_argument('--al')
parser.add_argument('--un')
parser.add_argument('--end-to-end', action='store_true')
parser.add_argument('--sensitive', action='store_true')
parser.add_argument('--threads')
parser.add_argument('-S')
parser.add_argument('-U')
parser.add_argument('-x')
args = parser.parse_args()

print('bowtie2 screening', args.U, 'against', args.x)

with open(args.U) as in_file:
    lines = in_file.readlines()

with open(args.al, 'w') as al_file, open(args.un, 'w') as un_file:
    for i in range(0, len(lines), 4):
        record = ''.join(lines[i:i + 4])
        if lines[i].startswith('@hit'):
            al_file.write(record)
        else:
            un_file.write(record)
"""

FIX_PAIRS_STUB = """
import shutil
import sys

in1, in2, base = sys.argv[1:4]
print('fixing pairs', in1, in2)

shutil.copy(in1, base + '.1.fq')
shutil.copy(in2, base + '.2.fq')
open(base + '.U.fq', 'w').close()
"""

FQ2FA_STUB = """
import sys

args = [arg for arg in sys.argv[1:] if not arg.startswith('--')]
print('fq2fa', ' '.join(sys.argv[1:]))

with open(args[-1], 'w') as out_file:
    for in_path in args[:-1]:
        with open(in_path) as in_file:
            lines = in_file.readlines()
        for i in range(0, len(lines), 4):
            out_file.write('>' + lines[i][1:] + lines[i + 1])
"""

GZIP_STUB = """
import gzip
import os
import shutil
import sys

for path in sys.argv[1:]:
    if path.startswith('--'):
        continue
    with open(path, 'rb') as in_file, gzip.open(path + '.gz', 'wb') as out:
        shutil.copyfileobj(in_file, out)
    os.remove(path)
"""


@pytest.fixture
def stub_tools(tmp_path):
    """Executable stand-ins for the external tools."""

    bin_dir = tmp_path / 'bin'
    bin_dir.mkdir()

    stubs = {
        'trimmomatic': TRIMMOMATIC_STUB,
        'flash': FLASH_STUB,
        'bowtie2': BOWTIE2_STUB,
        'FixPairs': FIX_PAIRS_STUB,
        'fq2fa': FQ2FA_STUB,
        'gzip': GZIP_STUB
    }

    return {
        name: pytest.helpers.write_executable(bin_dir / name, source)
        for name, source in stubs.items()
    }


@pytest.fixture
def adapters_path(tmp_path):
    """Example adapter fasta."""
    path = tmp_path / 'TruSeq3-PE-both.fa'
    path.write_text('>PrefixPE/1\nTACACTCTTTCCCTACACGACGCTCTTCCGATCT\n')
    return path


@pytest.fixture
def stub_config(stub_tools, adapters_path):
    """Configuration running the stub tools, without screening."""

    return QcConfig(
        trimmomatic=(str(stub_tools['trimmomatic']), ),
        adapters_path=adapters_path,
        flash=str(stub_tools['flash']),
        bowtie2=str(stub_tools['bowtie2']),
        fix_pairs=str(stub_tools['FixPairs']),
        fq2fa=str(stub_tools['fq2fa']),
        compressor=None,
        threads=2)


@pytest.fixture
def read_pair(tmp_path):
    """Pair of fastq files with four records each."""

    input_dir = tmp_path / 'input'
    input_dir.mkdir()

    names = ['read0', 'read1', 'hit2', 'read3']

    return (pytest.helpers.write_fastq(input_dir / 'reads.R1.fq', names),
            pytest.helpers.write_fastq(input_dir / 'reads.R2.fq', names))

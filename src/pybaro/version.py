# pybaro - Python software for BMP280 barometric pressure sensors
# Copyright (C) 2025  pybaro contributors

# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.

"""Display pybaro version information.

This script can also be run with the ``pybaro-version`` command. ::
%s

"""

__docformat__ = "restructuredtext en"
__usage__ = """
 usage: %s [options]
 options are:
  -h      or --help      display this help
  -v      or --verbose   show verbose version information
"""
__doc__ %= __usage__ % ('python -m pybaro.version')

import getopt
import sys

from pybaro import __version__, _release, _commit
from pybaro.calculator import DATASHEET_SAMPLE, calibrate

# data sheet section 3.11.3 sample readings and results
_SAMPLE_RAW = (519888, 415148)
_SAMPLE_RESULT = (25.08, 100653.27)


def main(argv=None):
    if argv is None:
        argv = sys.argv
    usage = (__usage__ % (argv[0])).strip()
    try:
        opts, args = getopt.getopt(argv[1:], "hv", ['help', 'verbose'])
    except getopt.error as msg:
        print('Error: %s\n' % msg, file=sys.stderr)
        print(usage, file=sys.stderr)
        return 1
    # process options
    verbose = False
    for o, a in opts:
        if o in ('-h', '--help'):
            print(__doc__.split('\n\n')[0])
            print(usage)
            return 0
        elif o in ('-v', '--verbose'):
            verbose = True
    # check arguments
    if len(args) != 0:
        print('Error: no arguments permitted\n', file=sys.stderr)
        print(usage, file=sys.stderr)
        return 2
    print(__version__)
    if verbose:
        print('build:', _release)
        print('commit:', _commit)
        print('Python:', sys.version)
        result = calibrate(*_SAMPLE_RAW, DATASHEET_SAMPLE)
        print('self check:', result, end=' ')
        if result == _SAMPLE_RESULT:
            print('OK')
        else:
            print('FAILED, expected', _SAMPLE_RESULT)
            return 3
    return 0


if __name__ == '__main__':
    sys.exit(main())

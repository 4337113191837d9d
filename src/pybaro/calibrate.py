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

"""Convert raw sensor readings to temperature and pressure.

This module can also be run with the ``pybaro-calibrate`` command. ::
%s
The sensor's trim coefficients are read from the ``[calibration]``
section of ``barometer.ini`` in ``data_dir`` (see
:py:mod:`pybaro.storage`). The ``-d`` option uses the sample
coefficients from the BMP280 data sheet instead, which is useful for
checking an installation. Add ``-s`` to store them in ``barometer.ini``
as a starting point for your own file.

A single reading is given as two integers on the command line. Many
readings can be converted at once with the ``-f`` option. The file
has one ``raw_temperature,raw_pressure`` pair per line; blank lines and
lines starting with ``#`` are ignored. The output is one
``temperature,pressure`` line per reading.

"""

__docformat__ = "restructuredtext en"
__usage__ = """
 usage: %s [options] data_dir [raw_temperature raw_pressure]
 options are:
  -h      | --help       display this help
  -d      | --datasheet  use data sheet sample coefficients
  -f name | --file name  read raw readings from CSV file name ('-' for stdin)
  -i      | --imperial   show Fahrenheit and inches of mercury
  -l file | --log file   write log information to file
  -s      | --save       save coefficients used to barometer.ini
  -v      | --verbose    increase number of informative messages
 data_dir is the directory holding barometer.ini
"""
__doc__ %= __usage__ % ('python -m pybaro.calibrate')

import csv
import getopt
import logging
import sys

from pybaro.calculator import DATASHEET_SAMPLE, calibrate
import pybaro.conversions
import pybaro.logger
import pybaro.storage

logger = logging.getLogger(__name__)


def read_raw(stream):
    """Generate ``(raw_temperature, raw_pressure)`` pairs from a CSV
    stream.

    """
    for line_no, row in enumerate(csv.reader(stream), 1):
        if not row or not row[0].strip() or row[0].lstrip().startswith('#'):
            continue
        if len(row) != 2:
            raise ValueError('line %d: expected 2 values, got %d' % (
                line_no, len(row)))
        try:
            yield int(row[0]), int(row[1])
        except ValueError:
            raise ValueError('line %d: invalid reading %s' % (
                line_no, ','.join(row)))


def read_config(params):
    """Get ``(pressure_offset, sea_level)`` from the ``[config]``
    section, in hPa.

    """
    values = []
    for key, default in (('pressure offset', 0.0),
                         ('sea level pressure',
                          pybaro.conversions.SEA_LEVEL_PRESSURE)):
        value = params.get('config', key, str(default))
        try:
            values.append(float(value))
        except ValueError:
            raise ValueError('[config] %s value "%s" is not a number' % (
                key, value))
    if values[1] <= 0.0:
        raise ValueError('[config] sea level pressure must be positive')
    return tuple(values)


def show_reading(temperature, pressure, pressure_offset, sea_level, imperial):
    abs_pressure = pybaro.conversions.pressure_hpa(pressure)
    rel_pressure = abs_pressure + pressure_offset
    alt = pybaro.conversions.altitude(abs_pressure, sea_level)
    if imperial:
        print('temperature %.2f F' % pybaro.conversions.temp_f(temperature))
        print('pressure %.3f inHg' % pybaro.conversions.pressure_inhg(
            abs_pressure))
        print('rel_pressure %.3f inHg' % pybaro.conversions.pressure_inhg(
            rel_pressure))
    else:
        print('temperature %.2f C' % temperature)
        print('pressure %.2f Pa' % pressure)
        print('abs_pressure %.2f hPa' % abs_pressure)
        print('rel_pressure %.2f hPa' % rel_pressure)
    print('altitude %.1f m' % alt)


def calibrate_file(name, calibration):
    if name == '-':
        readings = list(read_raw(sys.stdin))
    else:
        with open(name, newline='') as f:
            readings = list(read_raw(f))
    logger.info('converting %d readings from %s', len(readings), name)
    writer = csv.writer(sys.stdout, lineterminator='\n')
    for raw_temperature, raw_pressure in readings:
        writer.writerow(calibrate(raw_temperature, raw_pressure, calibration))
    return 0


def main(argv=None):
    if argv is None:
        argv = sys.argv
    usage = (__usage__ % (argv[0])).strip()
    try:
        opts, args = getopt.getopt(
            argv[1:], "hdf:il:sv",
            ['help', 'datasheet', 'file=', 'imperial', 'log=', 'save',
             'verbose'])
    except getopt.error as msg:
        print('Error: %s\n' % msg, file=sys.stderr)
        print(usage, file=sys.stderr)
        return 1
    # process options
    datasheet = False
    file_name = None
    imperial = False
    logfile = None
    save = False
    verbose = 0
    for o, a in opts:
        if o in ('-h', '--help'):
            print(__doc__.split('\n\n')[0])
            print(usage)
            return 0
        elif o in ('-d', '--datasheet'):
            datasheet = True
        elif o in ('-f', '--file'):
            file_name = a
        elif o in ('-i', '--imperial'):
            imperial = True
        elif o in ('-l', '--log'):
            logfile = a
        elif o in ('-s', '--save'):
            save = True
        elif o in ('-v', '--verbose'):
            verbose += 1
    # check arguments
    if file_name:
        if len(args) != 1:
            print('Error: 1 argument required with --file\n', file=sys.stderr)
            print(usage, file=sys.stderr)
            return 2
    elif len(args) != 3:
        print('Error: 3 arguments required\n', file=sys.stderr)
        print(usage, file=sys.stderr)
        return 2
    if save and not datasheet:
        print('Error: --save requires --datasheet\n', file=sys.stderr)
        print(usage, file=sys.stderr)
        return 2
    pybaro.logger.setup_handler(verbose, logfile)
    # get coefficients
    try:
        params = pybaro.storage.ParamStore(args[0], 'barometer.ini')
        if datasheet:
            calibration = DATASHEET_SAMPLE
            if save:
                logger.warning('Saving data sheet coefficients')
                pybaro.storage.write_calibration(params, calibration)
                params.flush()
        else:
            calibration = pybaro.storage.read_calibration(params)
        pressure_offset, sea_level = read_config(params)
    except (RuntimeError, KeyError, ValueError) as ex:
        logger.error(str(ex))
        return 3
    # do it!
    try:
        if file_name:
            return calibrate_file(file_name, calibration)
        temperature, pressure = calibrate(
            int(args[1]), int(args[2]), calibration)
    except (OSError, ValueError) as ex:
        logger.error(str(ex))
        return 3
    except ZeroDivisionError:
        logger.error('Degenerate calibration: pressure scale factor is zero')
        return 4
    show_reading(temperature, pressure, pressure_offset, sea_level, imperial)
    return 0


if __name__ == "__main__":
    sys.exit(main())

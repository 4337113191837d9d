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

"""Store parameters and sensor calibration in easy to access files.

Introduction
------------

pybaro keeps its configuration in a ``barometer.ini`` file in a data
directory. The file has a ``[calibration]`` section holding the trim
coefficients of one sensor, as read from its non-volatile memory by
whatever program talks to the hardware, and a ``[config]`` section with
a few site specific values::

  [calibration]
  dig_t1 = 27504
  dig_t2 = 26435
  dig_t3 = -1000
  dig_p1 = 36477
  ...

  [config]
  pressure offset = 0.0
  sea level pressure = 1013.25

The ``pressure offset`` (in hPa) is added to absolute pressure to give
relative pressure. ``sea level pressure`` is the reference used when
estimating altitude.

For example, to calibrate a reading with coefficients stored in
``/home/pi/barometer``::

  import pybaro.calculator
  import pybaro.storage
  params = pybaro.storage.ParamStore('/home/pi/barometer', 'barometer.ini')
  calibration = pybaro.storage.read_calibration(params)
  print(pybaro.calculator.calibrate(519888, 415148, calibration))

Detailed API
------------

"""

__docformat__ = "restructuredtext en"

from configparser import RawConfigParser
import logging
import os
import threading

from pybaro.calculator import CalibrationData

logger = logging.getLogger(__name__)

_ranges = {
    'us': (0, 0xFFFF),
    'ss': (-0x8000, 0x7FFF),
    }


class ParamStore(object):
    def __init__(self, root_dir, file_name):
        self._lock = threading.Lock()
        with self._lock:
            if not os.path.isdir(root_dir):
                raise RuntimeError(
                    'Directory "' + root_dir + '" does not exist.')
            self._path = os.path.join(root_dir, file_name)
            self._dirty = False
            # open config file
            self._config = RawConfigParser()
            self._config.read(self._path)

    def flush(self):
        if not self._dirty:
            return
        with self._lock:
            self._dirty = False
            with open(self._path, 'w') as of:
                self._config.write(of)

    def get(self, section, option, default=None):
        """Get a parameter value and return a string.

        If default is specified and section or option are not defined
        in the file, they are created and set to default, which is
        then the return value.

        """
        with self._lock:
            if not self._config.has_option(section, option):
                if default is not None:
                    self._set(section, option, default)
                return default
            return self._config.get(section, option)

    def set(self, section, option, value):
        """Set option in section to string value."""
        with self._lock:
            self._set(section, option, value)

    def _set(self, section, option, value):
        if not self._config.has_section(section):
            self._config.add_section(section)
        elif (self._config.has_option(section, option) and
              self._config.get(section, option) == value):
            return
        self._config.set(section, option, value)
        self._dirty = True


def _check_range(key, value):
    lo, hi = _ranges[CalibrationData.formats[key]]
    if not lo <= value <= hi:
        raise ValueError('%s value %d outside range %d..%d' % (
            key, value, lo, hi))
    return value


def read_calibration(params, section='calibration'):
    """Read a set of trim coefficients from a :py:class:`ParamStore`.

    Raises :py:class:`KeyError` if a coefficient is missing and
    :py:class:`ValueError` if one is not an integer or does not fit
    its field's width and signedness.

    """
    values = {}
    for key in CalibrationData._fields:
        value = params.get(section, key)
        if value is None:
            raise KeyError('[%s] %s not set' % (section, key))
        try:
            value = int(value, 0)
        except ValueError:
            raise ValueError('%s value "%s" is not an integer' % (key, value))
        values[key] = _check_range(key, value)
    logger.debug('read calibration %s', values)
    return CalibrationData(**values)


def write_calibration(params, calibration, section='calibration'):
    """Store a set of trim coefficients in a :py:class:`ParamStore`.

    The caller is responsible for calling the store's ``flush``
    method.

    """
    for key, value in calibration._asdict().items():
        params.set(section, key, str(_check_range(key, value)))
    logger.debug('wrote calibration %s', calibration)

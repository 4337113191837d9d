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

"""Transform raw sensor data into temperature and pressure readings.

These are the calculations used to convert the raw temperature and
pressure data from the Bosch BMP280 digital pressure sensor into
usable values, as specified in the data sheet (BST-BMP280-DS001,
section 3.11.3 "Compensation formula in double precision floating
point").

Each sensor is trimmed in the factory. Its 12 trim coefficients are
read from the sensor's non-volatile memory and passed in as a
:py:class:`CalibrationData` record::

  from pybaro.calculator import CalibrationData, calibrate
  calibration = CalibrationData(
      dig_T1=27504, dig_T2=26435, dig_T3=-1000,
      dig_P1=36477, dig_P2=-10685, dig_P3=3024, dig_P4=2855,
      dig_P5=140, dig_P6=-7, dig_P7=15500, dig_P8=-14600, dig_P9=6000)
  temperature, pressure = calibrate(519888, 415148, calibration)
  # (25.08, 100653.27)

The arithmetic is evaluated in exactly the order the data sheet gives
it. Rearranging the expressions, even into algebraically equivalent
forms, changes the floating point rounding of the result.

A coefficient set that makes the pressure scale factor zero (e.g.
``dig_P1 == 0``) causes a division by zero. This is not trapped:
Python raises :py:class:`ZeroDivisionError`, which is passed on to the
caller.

"""

__docformat__ = "restructuredtext en"

from collections import namedtuple


class CalibrationData(namedtuple('CalibrationData', (
        'dig_T1', 'dig_T2', 'dig_T3',
        'dig_P1', 'dig_P2', 'dig_P3', 'dig_P4', 'dig_P5',
        'dig_P6', 'dig_P7', 'dig_P8', 'dig_P9'))):
    """Factory trim coefficients of one sensor.

    ``dig_T1`` and ``dig_P1`` are unsigned shorts, all the others are
    signed shorts. The ``formats`` dictionary records this, using
    ``'us'`` for unsigned and ``'ss'`` for signed 16-bit values.

    """
    __slots__ = ()

    formats = {
        'dig_T1': 'us', 'dig_T2': 'ss', 'dig_T3': 'ss',
        'dig_P1': 'us', 'dig_P2': 'ss', 'dig_P3': 'ss',
        'dig_P4': 'ss', 'dig_P5': 'ss', 'dig_P6': 'ss',
        'dig_P7': 'ss', 'dig_P8': 'ss', 'dig_P9': 'ss',
        }


# sample trim values from the data sheet, section 3.11.3
DATASHEET_SAMPLE = CalibrationData(
    dig_T1=27504, dig_T2=26435, dig_T3=-1000,
    dig_P1=36477, dig_P2=-10685, dig_P3=3024, dig_P4=2855,
    dig_P5=140, dig_P6=-7, dig_P7=15500, dig_P8=-14600, dig_P9=6000)


def calibrate(raw_temperature, raw_pressure, calibration_data):
    """Calculate temperature (Celsius) and pressure (Pascal).

    Inputs are raw ADC values and calibration data retrieved from the
    sensor. Returns a ``(temperature, pressure)`` tuple, each value
    rounded to 0.01.

    """
    temperature = _calibrate_temperature(raw_temperature, calibration_data)
    # pressure uses the unrounded temperature
    pressure = _calibrate_pressure(temperature, raw_pressure, calibration_data)
    return round(temperature, 2), round(pressure, 2)


def _calibrate_temperature(raw_temperature, calibration_data):
    var1 = (raw_temperature / 16384 -
            calibration_data.dig_T1 / 1024) * calibration_data.dig_T2
    var2 = ((raw_temperature / 131072 - calibration_data.dig_T1 / 8192) *
            (raw_temperature / 131072 - calibration_data.dig_T1 / 8192) *
            calibration_data.dig_T3)
    return (var1 + var2) / 5120


def _calibrate_pressure(temperature, raw_pressure, calibration_data):
    fine_temperature = temperature * 5120
    var1 = fine_temperature / 2 - 64000
    var2 = var1 * var1 * calibration_data.dig_P6 / 32768
    var2 = var2 + var1 * calibration_data.dig_P5 * 2
    var2 = var2 / 4 + calibration_data.dig_P4 * 65536
    var1 = (calibration_data.dig_P3 * var1 * var1 / 524288 +
            calibration_data.dig_P2 * var1) / 524288
    var1 = (1 + var1 / 32768) * calibration_data.dig_P1
    p = 1048576 - raw_pressure
    # raises ZeroDivisionError if var1 is zero
    p = (p - (var2 / 4096)) * 6250 / var1
    var1 = calibration_data.dig_P9 * p * p / 2147483648
    var2 = p * calibration_data.dig_P8 / 32768
    return p + (var1 + var2 + calibration_data.dig_P7) / 16

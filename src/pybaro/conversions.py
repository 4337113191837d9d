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

"""conversions.py - a set of functions to convert pybaro native units
(Centigrade, Pa) to other popular units

"""

__docformat__ = "restructuredtext en"

# International standard atmosphere at sea level
SEA_LEVEL_PRESSURE = 1013.25


def scale(value, factor):
    """Multiply value by factor, allowing for None values."""
    if value is None:
        return None
    return value * factor

def pressure_hpa(pa):
    "Convert pressure from pascals to hectopascals/millibar"
    return scale(pa, 0.01)

def pressure_inhg(hPa):
    "Convert pressure from hectopascals/millibar to inches of mercury"
    return scale(hPa, 1 / 33.86389)

def temp_f(c):
    "Convert temperature from Celsius to Fahrenheit"
    if c is None:
        return None
    return (c * 9.0 / 5.0) + 32.0

def altitude(hPa, sea_level=SEA_LEVEL_PRESSURE):
    """Estimate altitude in metres from absolute pressure, using the
    international barometric formula.

    """
    if hPa is None:
        return None
    return 44330.0 * (1.0 - (float(hPa) / sea_level) ** (1 / 5.255))


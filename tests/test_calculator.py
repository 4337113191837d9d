"""Tests for the BMP280 compensation formulae."""

import pytest

from pybaro.calculator import CalibrationData, DATASHEET_SAMPLE, calibrate


def test_datasheet_sample_values():
    assert calibrate(519888, 415148, DATASHEET_SAMPLE) == (25.08, 100653.27)


def test_keyword_construction_matches_sample():
    calibration = CalibrationData(
        dig_T1=27504, dig_T2=26435, dig_T3=-1000,
        dig_P1=36477, dig_P2=-10685, dig_P3=3024, dig_P4=2855,
        dig_P5=140, dig_P6=-7, dig_P7=15500, dig_P8=-14600, dig_P9=6000)

    assert calibration == DATASHEET_SAMPLE
    assert calibrate(519888, 415148, calibration) == (25.08, 100653.27)


def test_repeated_calls_are_identical():
    results = {calibrate(519888, 415148, DATASHEET_SAMPLE) for _ in range(10)}

    assert len(results) == 1


def test_results_are_floats_with_two_decimals():
    for raw_t, raw_p in ((519888, 415148), (500000, 400000),
                         (540000, 300000), (480123, 450321)):
        temperature, pressure = calibrate(raw_t, raw_p, DATASHEET_SAMPLE)
        assert isinstance(temperature, float)
        assert isinstance(pressure, float)
        assert temperature == round(temperature, 2)
        assert pressure == round(pressure, 2)
        assert len(repr(temperature).split('.')[1]) <= 2
        assert len(repr(pressure).split('.')[1]) <= 2


@pytest.mark.parametrize('field', [
    'dig_P1', 'dig_P2', 'dig_P3', 'dig_P4', 'dig_P5',
    'dig_P6', 'dig_P7', 'dig_P8', 'dig_P9'])
def test_pressure_coefficients_do_not_affect_temperature(field):
    changed = DATASHEET_SAMPLE._replace(
        **{field: getattr(DATASHEET_SAMPLE, field) + 100})

    temperature = calibrate(519888, 415148, changed)[0]

    assert temperature == 25.08


@pytest.mark.parametrize('field', ['dig_P1', 'dig_P4', 'dig_P7', 'dig_P8', 'dig_P9'])
def test_pressure_coefficients_affect_pressure(field):
    changed = DATASHEET_SAMPLE._replace(
        **{field: getattr(DATASHEET_SAMPLE, field) + 100})

    assert calibrate(519888, 415148, changed)[1] != 100653.27


@pytest.mark.parametrize('field', ['dig_T1', 'dig_T2', 'dig_T3'])
def test_temperature_coefficients_affect_both_outputs(field):
    changed = DATASHEET_SAMPLE._replace(
        **{field: getattr(DATASHEET_SAMPLE, field) + 1000})

    temperature, pressure = calibrate(519888, 415148, changed)

    assert temperature != 25.08
    assert pressure != 100653.27


def test_temperature_rises_with_raw_temperature():
    temperatures = [calibrate(raw_t, 415148, DATASHEET_SAMPLE)[0]
                    for raw_t in range(440000, 600000, 20000)]

    assert temperatures == sorted(temperatures)


def test_pressure_falls_with_raw_pressure():
    pressures = [calibrate(519888, raw_p, DATASHEET_SAMPLE)[1]
                 for raw_p in range(300000, 500000, 20000)]

    assert pressures == sorted(pressures, reverse=True)


def test_out_of_range_readings_are_computed_through():
    temperature, pressure = calibrate(-1, 2 ** 24, DATASHEET_SAMPLE)

    assert isinstance(temperature, float)
    assert isinstance(pressure, float)


def test_zero_pressure_scale_raises():
    degenerate = DATASHEET_SAMPLE._replace(dig_P1=0)

    with pytest.raises(ZeroDivisionError):
        calibrate(519888, 415148, degenerate)


def test_calibration_data_is_immutable():
    with pytest.raises(AttributeError):
        DATASHEET_SAMPLE.dig_T1 = 0


def test_formats_cover_every_field():
    assert set(CalibrationData.formats) == set(CalibrationData._fields)
    unsigned = [k for k, v in CalibrationData.formats.items() if v == 'us']
    assert sorted(unsigned) == ['dig_P1', 'dig_T1']

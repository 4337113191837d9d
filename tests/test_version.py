"""Tests for the pybaro-version command and logging set up."""

import logging

import pybaro
import pybaro.logger
import pybaro.version


def test_version(capsys):
    assert pybaro.version.main(['pybaro-version']) == 0

    assert capsys.readouterr().out == pybaro.__version__ + '\n'


def test_verbose_version(capsys):
    assert pybaro.version.main(['pybaro-version', '-v']) == 0

    out = capsys.readouterr().out
    assert 'build: ' + pybaro._release in out
    assert 'commit: ' + pybaro._commit in out


def test_arguments_rejected(capsys):
    assert pybaro.version.main(['pybaro-version', 'extra']) == 2


def test_verbosity_sets_level():
    pybaro.logger.setup_handler(1)

    assert logging.getLogger('').level == logging.INFO


def test_log_file(tmp_path):
    logfile = tmp_path / 'pybaro.log'
    handler = pybaro.logger.setup_handler(0, str(logfile))
    handler.flush()

    assert logging.getLogger('').level == logging.ERROR
    assert 'pybaro version' not in logfile.read_text()


def test_systemd_formatter():
    formatter = pybaro.logger.SystemdFormatter('%(name)s:%(message)s')
    record = logging.LogRecord(
        'pybaro', logging.ERROR, __file__, 1, 'oops', None, None)

    assert formatter.format(record) == '<3>pybaro:oops'


def test_verbose_version_self_check(capsys):
    assert pybaro.version.main(['pybaro-version', '-v']) == 0

    out = capsys.readouterr().out
    assert 'self check: (25.08, 100653.27) OK' in out


def test_self_check_failure(monkeypatch, capsys):
    monkeypatch.setattr(pybaro.version, 'calibrate', lambda *args: (0.0, 0.0))

    assert pybaro.version.main(['pybaro-version', '--verbose']) == 3

    assert 'FAILED' in capsys.readouterr().out

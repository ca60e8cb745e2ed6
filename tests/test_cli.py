"""Tests for the ``fars`` command-line entry point."""

import pytest

from fars import cli


def test_summarize_prints_table(data_dir, capsys):
    cli.main(['summarize', '--years', '2013', '2014', '--data-dir', str(data_dir)])

    out = capsys.readouterr().out
    assert '2013' in out
    assert '2014' in out
    assert 'MONTH' in out


def test_summarize_writes_reports(data_dir, tmp_path):
    out_dir = tmp_path / 'out'

    cli.main([
        'summarize', '--years', '2013', '9999',
        '--data-dir', str(data_dir), '--output-dir', str(out_dir),
    ])

    assert (out_dir / 'summary_2013-9999.csv').exists()


def test_summarize_nothing_loaded_exits(data_dir, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(['summarize', '--years', '9999', '--data-dir', str(data_dir)])

    assert exc_info.value.code == 1
    assert 'could be loaded' in capsys.readouterr().err


def test_map_writes_html(data_dir, tmp_path):
    out_dir = tmp_path / 'out'

    cli.main([
        'map', '--state', '6', '--year', '2014',
        '--data-dir', str(data_dir), '--output-dir', str(out_dir),
    ])

    assert (out_dir / 'state_6_2014.html').exists()


def test_map_invalid_state_exits(data_dir, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([
            'map', '--state', '48', '--year', '2013',
            '--data-dir', str(data_dir), '--output-dir', str(tmp_path),
        ])

    assert exc_info.value.code == 1
    assert 'invalid STATE number: 48' in capsys.readouterr().err


def test_map_missing_file_exits(data_dir, capsys):
    with pytest.raises(SystemExit):
        cli.main(['map', '--state', '1', '--year', '1990', '--data-dir', str(data_dir)])

    assert 'does not exist' in capsys.readouterr().err


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.main([])


def test_summarize_fractional_year_truncates(data_dir, capsys):
    cli.main(['summarize', '--years', '2013.0', '2014.7', '--data-dir', str(data_dir)])

    captured = capsys.readouterr()
    assert '2013' in captured.out
    assert '2014' in captured.out
    assert 'invalid year' not in captured.err


def test_map_fractional_year_truncates(data_dir, tmp_path):
    out_dir = tmp_path / 'out'

    cli.main([
        'map', '--state', '1', '--year', '2013.5',
        '--data-dir', str(data_dir), '--output-dir', str(out_dir),
    ])

    assert (out_dir / 'state_1_2013.html').exists()


def test_map_missing_column_exits(tmp_path, writer, accidents_2013, capsys):
    writer(tmp_path, 2013, accidents_2013.drop(columns=['LATITUDE']))

    with pytest.raises(SystemExit) as exc_info:
        cli.main(['map', '--state', '1', '--year', '2013', '--data-dir', str(tmp_path)])

    assert exc_info.value.code == 1
    assert 'LATITUDE' in capsys.readouterr().err

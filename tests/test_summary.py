"""Tests for fars.analysis.summary and the summarize_years pipeline."""

import pandas as pd
import pytest

from fars.analysis.summary import YearResult, summarize_months, successful_tables
from fars.reports.generators import summarize_years


def _result(year, months):
    data = pd.DataFrame({'MONTH': months, 'year': year})
    return YearResult(year=year, filename=f'accident_{year}.csv.bz2', data=data)


def _failed(year):
    return YearResult(year=year, filename=f'accident_{year}.csv.bz2', error='missing')


def test_year_result_ok_flag():
    assert _result(2013, [1]).ok
    assert not _failed(2013).ok


def test_successful_tables_skips_failures():
    tables = successful_tables([_failed(2012), _result(2013, [1, 2]), _failed(2014)])

    assert len(tables) == 1
    assert tables[0]['year'].unique().tolist() == [2013]


def test_summarize_months_counts_and_shape():
    summary = summarize_months([
        _result(2014, [3, 1, 1]),
        _result(2013, [1, 2, 2, 2]),
    ])

    assert summary.index.name == 'MONTH'
    assert summary.index.tolist() == [1, 2, 3]
    assert summary.columns.tolist() == [2013, 2014]

    assert summary.loc[1, 2013] == 1
    assert summary.loc[2, 2013] == 3
    assert summary.loc[1, 2014] == 2
    assert summary.loc[3, 2014] == 1


def test_summarize_months_missing_cells_are_na_not_zero():
    summary = summarize_months([_result(2013, [1, 2]), _result(2014, [2, 3])])

    assert pd.isna(summary.loc[3, 2013])
    assert pd.isna(summary.loc[1, 2014])
    assert not (summary.fillna(-1) == 0).any().any()


def test_summarize_months_omits_failed_years():
    summary = summarize_months([_result(2013, [1]), _failed(2014)])

    assert summary.columns.tolist() == [2013]


def test_summarize_months_all_failed():
    summary = summarize_months([_failed(2013), _failed(2014)])

    assert summary.empty
    assert summary.index.name == 'MONTH'


# ---------------------------------------------------------------------------
# summarize_years (shell pipeline over real files)
# ---------------------------------------------------------------------------

def test_summarize_years_two_years(data_dir):
    summary = summarize_years([2013, 2014], data_dir=data_dir)

    # Union of months across both files
    assert summary.index.tolist() == [1, 2, 3, 5]
    assert summary.columns.tolist() == [2013, 2014]

    assert summary[2013].tolist()[:3] == [2, 1, 1]
    assert pd.isna(summary.loc[5, 2013])
    assert summary.loc[2, 2014] == 2
    assert pd.isna(summary.loc[3, 2014])
    assert summary.loc[5, 2014] == 1


def test_summarize_years_skips_missing_year(data_dir):
    summary = summarize_years([2013, 9999, 2014], data_dir=data_dir)

    assert summary.columns.tolist() == [2013, 2014]


@pytest.mark.parametrize('years', [[], [9998, 9999]])
def test_summarize_years_nothing_loaded(data_dir, years):
    summary = summarize_years(years, data_dir=data_dir)

    assert summary.empty


def test_summarize_years_blank_month_keeps_year(tmp_path, writer, accidents_2013):
    # MONTH 1 row loses its month; the rest of 2013 is still counted
    accidents_2013.loc[0, 'MONTH'] = float('nan')
    writer(tmp_path, 2013, accidents_2013)

    summary = summarize_years([2013], data_dir=tmp_path)

    assert summary.columns.tolist() == [2013]
    assert summary.index.tolist() == [1, 2, 3]
    assert summary[2013].tolist() == [1, 1, 1]

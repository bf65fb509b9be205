import json
from unittest.mock import MagicMock, patch

import requests

from translation_audit import audit_source, main, parse_args


COVERED = '<html><body><h1 data-i18n-key="hero.title">Welcome home</h1></body></html>'
PARTIAL = ('<html><body><h1 data-i18n-key="hero.title">Welcome home</h1>'
           '<p class="lead">Forgotten text</p></body></html>')


def write_page(tmp_path, name, markup):
    path = tmp_path / name
    path.write_text(markup, encoding='utf-8')
    return str(path)


def test_parse_args_defaults():
    args = parse_args(['page.html'])
    assert args.sources == ['page.html']
    assert args.min_coverage == 100
    assert args.output == ''


def test_fully_covered_page_passes(tmp_path, capsys):
    page = write_page(tmp_path, 'covered.html', COVERED)

    assert main([page]) == 0
    assert '[OK]' in capsys.readouterr().out


def test_partial_coverage_fails_and_writes_report(tmp_path, capsys):
    page = write_page(tmp_path, 'partial.html', PARTIAL)
    report = tmp_path / 'report.json'

    assert main([page, '--output', str(report)]) == 1

    out = capsys.readouterr().out
    assert '[FAIL]' in out
    assert '"Forgotten text" <P>' in out

    data = json.loads(report.read_text(encoding='utf-8'))
    assert data[0]['source'] == page
    assert data[0]['coveragePercentage'] == 50
    assert data[0]['missingKeys'][0]['className'] == 'lead'


def test_min_coverage_threshold(tmp_path):
    page = write_page(tmp_path, 'partial.html', PARTIAL)
    assert main([page, '--min-coverage', '50']) == 0


def test_missing_file_is_an_error(tmp_path, capsys):
    assert main([str(tmp_path / 'nope.html')]) == 1
    assert '[ERR]' in capsys.readouterr().out


def test_url_source_is_fetched():
    response = MagicMock()
    response.text = COVERED
    with patch('translation_audit.requests.get', return_value=response) as get:
        report = audit_source('http://localhost:8007/?lang=hy', timeout=3)

    get.assert_called_once_with('http://localhost:8007/?lang=hy', timeout=3)
    response.raise_for_status.assert_called_once_with()
    assert report.result.coverage_percentage == 100


def test_unreachable_url_is_an_error(capsys):
    with patch('translation_audit.requests.get', side_effect=requests.ConnectionError('refused')):
        assert main(['http://localhost:1/']) == 1
    assert '[ERR] http://localhost:1/' in capsys.readouterr().out


def test_directory_source_is_an_error(tmp_path, capsys):
    page = write_page(tmp_path, 'covered.html', COVERED)

    assert main([str(tmp_path), page]) == 1

    out = capsys.readouterr().out
    assert f'[ERR] {tmp_path}' in out
    assert '[OK]' in out

"""
TEST FILE: REFERENCE-SITE BENCHMARK AND COMMAND LINE
"""

import json

import pandas as pd
import pytest

from jaldhara_core.__main__ import main
from jaldhara_core.config.settings import BENCHMARK_SITES
from jaldhara_core.utils.core import DataValidator
from jaldhara_core.utils.validation_tracker import AquiferBenchmark

KNOWN_SITES = {
    'Chennai City': (13.09, 80.27, 'AL', 'Coastal alluvium'),
    'Amravati': (20.93, 77.75, 'BS', 'Deccan basalt'),
    'Shimla': (31.10, 77.17, 'HR', 'Himalayan rocks'),
}


def test_benchmark_covers_every_reference_site():
    results = AquiferBenchmark().run()

    assert isinstance(results, pd.DataFrame)
    assert list(results.columns) == AquiferBenchmark.COLUMNS
    assert len(results) == len(BENCHMARK_SITES)
    assert results['match_confidence'].between(0, 1).all()


def test_benchmark_accuracy_on_known_sites():
    benchmark = AquiferBenchmark(sites=KNOWN_SITES)
    metrics = benchmark.get_accuracy_metrics(benchmark.run())

    assert metrics['total_sites'] == 3
    assert metrics['accuracy_percent'] == 100.0
    assert metrics['misclassified_sites'] == []
    assert metrics['by_expected_code']['AL'] == {'correct': 1, 'sites': 1}


def test_benchmark_reports_misses():
    sites = dict(KNOWN_SITES, Wrong=(13.09, 80.27, 'DS', 'Deliberately wrong'))
    benchmark = AquiferBenchmark(sites=sites)
    metrics = benchmark.get_accuracy_metrics(benchmark.run())

    assert metrics['accuracy_percent'] == 75.0
    assert metrics['misclassified_sites'] == ['Wrong']


def test_benchmark_without_sites():
    benchmark = AquiferBenchmark(sites={})
    results = benchmark.run()
    assert results.empty
    assert benchmark.get_accuracy_metrics(results) == {'status': 'insufficient_data', 'samples': 0}


def test_benchmark_csv_export(tmp_path):
    output_path = tmp_path / "benchmark.csv"
    AquiferBenchmark(sites=KNOWN_SITES).export_report(output_path)

    exported = pd.read_csv(output_path)
    assert list(exported['resolved_code']) == ['AL', 'BS', 'HR']


@pytest.mark.parametrize("lat, lon, strict, valid", [
    (13.09, 80.27, True, True),
    ("13.09", "80.27", True, True),
    (0.0, 0.0, True, False),
    (0.0, 0.0, False, True),
    (95.0, 80.0, False, False),
    ("north", 80.0, False, False),
    (float('nan'), 80.0, False, False),
])
def test_validate_coordinates(lat, lon, strict, valid):
    assert DataValidator.validate_coordinates(lat, lon, strict=strict)[0] is valid


def test_cli_resolves_coordinate(capsys, tmp_path):
    json_path = tmp_path / "chennai.json"
    assert main(["13.09", "80.27", "--json", str(json_path)]) == 0

    output = capsys.readouterr().out
    assert "[AL]" in output
    assert "Coastal Alluvium Aquifer" in output
    assert json.loads(json_path.read_text(encoding="utf-8"))['key_findings']['code'] == "AL"


def test_cli_requires_coordinates():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_cli_rejects_impossible_latitude():
    with pytest.raises(SystemExit) as excinfo:
        main(["120", "80"])
    assert excinfo.value.code == 2


def test_cli_benchmark(capsys, tmp_path):
    csv_path = tmp_path / "benchmark.csv"
    assert main(["--benchmark", "--csv", str(csv_path)]) == 0
    assert csv_path.exists()
    assert "Accuracy:" in capsys.readouterr().out


def test_cli_benchmark_threshold(tmp_path):
    csv_path = tmp_path / "benchmark.csv"
    assert main(["--benchmark", "--csv", str(csv_path), "--min-accuracy", "100.1"]) == 1

"""
JALDHARA MAIN ORCHESTRATOR
Principal aquifer lookup for a site in India

Usage:
    jaldhara 13.09 80.27
    jaldhara 20.93 77.75 --json reports/amravati.json
    jaldhara --benchmark --csv reports/benchmark.csv --min-accuracy 80
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

from jaldhara_core.config.settings import OUTPUT_DIR
from jaldhara_core.models.principal_aquifer import PrincipalAquiferModel
from jaldhara_core.utils.core import AnalysisResult, DataValidator, ReportExporter
from jaldhara_core.utils.validation_tracker import AquiferBenchmark


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='jaldhara',
        description='Resolve the CGWB principal aquifer beneath a coordinate in India',
    )
    parser.add_argument('latitude', type=float, nargs='?', help='Latitude in degrees')
    parser.add_argument('longitude', type=float, nargs='?', help='Longitude in degrees')
    parser.add_argument('--json', type=Path, dest='json_path',
                        help='Export the analysis result as JSON to this path')
    parser.add_argument('--benchmark', action='store_true',
                        help='Resolve the reference sites and report accuracy')
    parser.add_argument('--csv', type=Path, dest='csv_path',
                        help=f'Benchmark CSV path (default: {OUTPUT_DIR / "benchmark.csv"})')
    parser.add_argument('--min-accuracy', type=float, default=None,
                        help='Exit with status 1 if benchmark accuracy (%%) is below this')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def print_summary(result: AnalysisResult) -> None:
    findings = result.key_findings

    print("\n" + "=" * 70)
    print(f"PRINCIPAL AQUIFER: {findings['name']} [{findings['code']}]")
    print("=" * 70)
    print(f"  Formation: {findings['type']}")
    print(f"  Match: {findings['match_type']} ({findings['matched_zone'] or 'no zone'})")
    print(f"  Confidence: {result.confidence_score * 100:.0f}% ({findings['confidence']} label)")
    print(f"  Severity: {result.severity_level}")
    print(f"  Yield: {findings['yield_range']}")
    print(f"  Depth to water: {findings['dtw_range']}")
    print(f"  Water quality (EC): {findings['quality_ec_range']}")
    print(f"\n  {findings['description']}")
    print("\nRECOMMENDATIONS")
    for recommendation in result.recommendations:
        print(f"  - {recommendation}")
    print()


def run_benchmark(args: argparse.Namespace) -> int:
    benchmark = AquiferBenchmark()
    csv_path = args.csv_path or OUTPUT_DIR / 'benchmark.csv'
    results = benchmark.export_report(csv_path)
    metrics = benchmark.get_accuracy_metrics(results)

    print("\n" + "=" * 70)
    print("REFERENCE SITE BENCHMARK")
    print("=" * 70)
    print(results[['site', 'expected_code', 'resolved_code', 'match_type',
                   'match_confidence']].to_string(index=False))
    print(f"\nAccuracy: {metrics['accuracy_percent']}% "
          f"({metrics['correct_predictions']}/{metrics['total_sites']})")
    if metrics['misclassified_sites']:
        print(f"Misclassified: {', '.join(metrics['misclassified_sites'])}")
    print()

    if args.min_accuracy is not None and metrics['accuracy_percent'] < args.min_accuracy:
        logger.error(f"Benchmark accuracy {metrics['accuracy_percent']}% "
                     f"below required {args.min_accuracy}%")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.benchmark:
        return run_benchmark(args)

    if args.latitude is None or args.longitude is None:
        parser.error("latitude and longitude are required unless --benchmark is given")

    valid, message = DataValidator.validate_coordinates(args.latitude, args.longitude, strict=False)
    if not valid:
        parser.error(message)

    result = PrincipalAquiferModel().analyze_aquifer(args.latitude, args.longitude)
    print_summary(result)

    if args.json_path:
        ReportExporter.to_json(result, args.json_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())

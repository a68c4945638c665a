#!/usr/bin/env python3
"""Benchmark script for imagefilter performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of imagefilter package."""
    start = time.perf_counter()
    import imagefilter  # noqa: F401

    return time.perf_counter() - start


def _images(count: int) -> list:
    from imagefilter.domain.model.enums import ImageClass
    from imagefilter.domain.model.machine_image import MachineImage

    classes = list(ImageClass)
    return [
        MachineImage(
            image_id=f"ami-{i}",
            name=f"{'prod' if i % 2 else 'dev'}-web-{i}",
            image_class=classes[i % len(classes)],
            provider_owner_id=f"acct{i % 3}",
            description="benchmark image",
            tags={"env": "prod" if i % 4 == 0 else "dev", "team": "web"},
        )
        for i in range(count)
    ]


def benchmark_matches(count: int) -> float:
    """Measure FilterSpec.matches over count images (all stages configured)."""
    from imagefilter.domain.model.enums import ImageClass
    from imagefilter.domain.model.filter_spec import FilterSpec

    images = _images(count)
    spec = (
        FilterSpec.instance(ImageClass.MACHINE, match_any=True, regex="^prod-.*")
        .with_account_number("acct1")
        .with_tags({"env": "prod"})
    )

    start = time.perf_counter()
    for image in images:
        spec.matches(image)
    return time.perf_counter() - start


def benchmark_selector(count: int) -> float:
    """Measure ImageSelector.select over an in-memory listing."""
    from imagefilter.application.services import ImageSelector
    from imagefilter.domain.model.filter_spec import FilterSpec
    from imagefilter.infrastructure.adapters import InMemoryImageSource

    selector = ImageSelector(InMemoryImageSource(_images(count)))
    spec = FilterSpec.instance(regex="^prod-.*").with_tags({"team": "web"})

    start = time.perf_counter()
    selector.select(spec)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run imagefilter benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--images",
        type=int,
        default=10000,
        help="Number of synthetic images to filter",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": f"FilterSpec.matches ({args.images} images)",
            "unit": "seconds",
            "value": benchmark_matches(args.images),
        },
        {
            "name": f"ImageSelector.select ({args.images} images)",
            "unit": "seconds",
            "value": benchmark_selector(args.images),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()

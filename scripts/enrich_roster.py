#!/usr/bin/env python3
"""
Roster enrichment script.

Reads every player from the roster database, resolves each name to a
rating profile and prints the outcome plus summary statistics. The roster
itself is never modified.

Usage:
    # Dataset only (no network)
    python scripts/enrich_roster.py

    # Allow live enhancement of dataset hits
    python scripts/enrich_roster.py --live

    # Also search the remote site for names missing from the dataset
    python scripts/enrich_roster.py --live --search

    # Check that at least one fetch strategy currently works
    python scripts/enrich_roster.py --check

    # Audit reference URLs in the dataset
    python scripts/enrich_roster.py --validate-references
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from squadrate.db import SqlRosterSource
from squadrate.enrich import BatchResolver, EnrichmentOrchestrator, processing_statistics
from squadrate.logging_setup import configure_logging

logger = logging.getLogger(__name__)


async def run_enrichment(live: bool, search: bool, as_json: bool):
    """Enrich the stored roster and report."""
    async with EnrichmentOrchestrator() as orchestrator:
        resolver = BatchResolver(orchestrator)
        players = await resolver.enrich_roster(
            SqlRosterSource(),
            allow_network=live,
            search_remote=search,
        )

    if as_json:
        print(json.dumps([p.to_dict() for p in players], indent=2))
        return

    for p in players:
        if p.found:
            profile = p.profile
            logger.info(f"  {p.record.name}: {profile.name} {profile.overall} ({p.source})")
        else:
            reason = p.error or (p.result.failure_reason if p.result else None) or "no match"
            logger.info(f"  {p.record.name}: not found ({reason})")

    stats = processing_statistics(players)
    logger.info(
        f"\nDone. Resolved: {stats['enhanced']}/{stats['total']} ({stats['success_rate']}), "
        f"live: {stats['live']}, sources: {stats['sources']}"
    )


async def run_check():
    async with EnrichmentOrchestrator() as orchestrator:
        outcome = await orchestrator.check_connectivity()
    print(json.dumps(outcome, indent=2))


async def run_reference_audit():
    orchestrator = EnrichmentOrchestrator()
    await orchestrator.dataset.ensure_loaded()
    report = orchestrator.dataset.validate_references()
    for entry in report["invalid"]:
        logger.warning(f"  {entry['name']}: {entry['url']} ({entry['error']})")
    for name in report["missing"]:
        logger.info(f"  {name}: no reference URL")
    logger.info(f"Coverage: {orchestrator.dataset.coverage()}")


def main():
    parser = argparse.ArgumentParser(description="Resolve roster players to rating profiles")
    parser.add_argument("--live", action="store_true",
                        help="Allow live enhancement from the remote site")
    parser.add_argument("--search", action="store_true",
                        help="Search the remote site for names missing from the dataset")
    parser.add_argument("--json", action="store_true",
                        help="Print enriched players as JSON")
    parser.add_argument("--check", action="store_true",
                        help="Only test remote connectivity")
    parser.add_argument("--validate-references", action="store_true",
                        help="Only audit dataset reference URLs")
    parser.add_argument("--log-level", default=None,
                        help="Override SQUADRATE_LOG_LEVEL")
    args = parser.parse_args()

    configure_logging(level=args.log_level)

    if args.check:
        asyncio.run(run_check())
    elif args.validate_references:
        asyncio.run(run_reference_audit())
    else:
        asyncio.run(run_enrichment(args.live, args.search, args.json))


if __name__ == "__main__":
    main()

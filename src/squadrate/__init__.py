"""
squadrate - Player rating resolution and enrichment.

Resolves free-text player names to canonical rating profiles (overall,
potential, core attributes, detailed skills) and enriches a whole squad
roster with them.

Main components:
- players: Name normalization, fuzzy matching and the local rating dataset
- enrich: Resolution orchestrator, result cache, rate limiter, batch waves
- scrape: Opportunistic remote fetch strategies and markup extraction
- db: Read-only access to the stored squad roster
"""

__version__ = "1.0.0"

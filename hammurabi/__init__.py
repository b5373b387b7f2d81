"""
Hammurabi - Rule ancient Samaria for a term of years.

A turn-based resource game. The engine provides:
- Immutable per-year game state
- Validation of the player's yearly allocation
- Deterministic land trade, feeding and harvest
- Randomized plague, rats, immigration and market prices
"""

__version__ = "0.1.0"

"""
pocketbot: Rule-based heads-up Hold'em bot

Classifies hand strength from hole and board cards, looks up
starting-hand odds, and picks call/raise/check actions under a
per-round spending budget.
"""

__version__ = "0.1.0"

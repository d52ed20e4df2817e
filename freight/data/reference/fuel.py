"""
Fuel Surcharge

Published monthly with the diesel price revision.

Applied as a percentage of basic freight only (after the minimum freight
floor), never of weight or other surcharges.
"""

PERCENT = 25                  # 25% of basic freight

APPLICATION = "FREIGHT"       # Applied to basic freight, not to surcharges

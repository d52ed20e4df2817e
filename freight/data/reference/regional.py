"""
Regional Surcharge Configuration

Per-kg surcharge for hard-to-reach destinations:
  1. Destination state is Jammu & Kashmir or Himachal Pradesh
  2. Destination state sits in the north-east zone

Guwahati is exempt from rule 2. It is matched loosely, on the city name
containing "guwahati" or the pincode starting with 781, because the
serviceability data rarely spells the city consistently.
"""

PER_KG = 5

REGIONAL_STATES = [
    "jammu & kashmir",
    "jammu and kashmir",
    "himachal pradesh",
]

NORTH_EAST_ZONE = "NE"

EXEMPT_CITY = "guwahati"
EXEMPT_PINCODE_PREFIX = "781"

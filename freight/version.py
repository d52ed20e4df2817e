"""Calculator version, stamped on every calculated row."""

VERSION = "2026.10.1"

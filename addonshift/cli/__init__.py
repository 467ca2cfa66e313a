"""Command-line frontend for the AddonShift core engine."""

"""FastAPI server adapter for the AddonShift core engine."""

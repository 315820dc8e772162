"""Services Layer — orchestration around the pure core (reports, demo runs)."""

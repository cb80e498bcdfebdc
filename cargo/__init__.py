"""Cargo shipping: voyages, their schedules and the locations they call at."""

"""State layer.

This package holds the per-session state owners: the driver board that
reconciles position sightings, and the ride action state machine.  Only
these components mutate their state; collaborators read snapshots and
descriptors.
"""

"""Shared constants for the simulator.

Centralized definitions of the accepted parameter domains and output
defaults.
"""

# Goal rate (lambda) domain, inclusive
MIN_GOAL_RATE = 0.0
MAX_GOAL_RATE = 20.0

# Simulation count domain, inclusive
MIN_SIMULATIONS = 1
MAX_SIMULATIONS = 1_000_000

# Counts at or above this run across parallel workers
PARALLEL_THRESHOLD = 10_000

DEFAULT_SIMULATION_COUNT = 1000

# Report files
RESULTS_FOLDER = "results"
DEFAULT_OUTPUT_PREFIX = "result"
RESULT_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"  # UTC

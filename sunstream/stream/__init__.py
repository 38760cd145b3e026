"""Event stream simulation and rolling metrics."""

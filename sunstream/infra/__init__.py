"""Runtime infrastructure: timers and logging."""

"""Alternative path-finding backends."""

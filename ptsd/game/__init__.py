"""A sample phase-based game built on the framework."""
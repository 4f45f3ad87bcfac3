"""Simulation systems: swarm AI, collisions, encounter flow and timed effects."""

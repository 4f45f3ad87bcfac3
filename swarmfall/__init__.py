"""
swarmfall
---------
Arcade shooter simulation engine: a player ship against waves of a
leader/follower enemy swarm.

Run ``python -m swarmfall`` for the window or ``--headless N`` for a
windowless simulation.
"""

__version__ = "0.1.0"

from .swarm_controller import SwarmController

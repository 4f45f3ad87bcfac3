from .particle_manager import ParticleSystem, Particle, ParticleKind

from plasmafuel.reactor.decomposition import (
    SimulationResult,
    cycle_efficiency,
    simulate_decomposition,
    sustainability_score,
)

__all__ = [
    "SimulationResult",
    "simulate_decomposition",
    "cycle_efficiency",
    "sustainability_score",
]

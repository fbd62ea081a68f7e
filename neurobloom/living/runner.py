import logging
from time import monotonic
from typing import Callable, Dict, List, Optional, Union

from .algorithms import REGISTRY, AlgorithmType, NeuronSnapshot, apply_targets
from .types import Color, LiveNeuron
from ..errors import UnknownAlgorithmError

logger = logging.getLogger("NeuroBloom.algorithms")


class AlgorithmRunner:
    """Runs one decorative algorithm at a time over a caller-owned list of neurons."""
    def __init__(self, neurons: List[LiveNeuron], clock: Callable[[], float] = monotonic):
        self.neurons = neurons
        self.clock = clock
        self.current_algorithm: Optional[AlgorithmType] = None
        self.start_time = 0.0
        self.is_running = False
        self.original_colors: Dict[str, Color] = {}

    def update_neurons(self, neurons: List[LiveNeuron]) -> None:
        self.neurons = neurons

    def start(self, algorithm_type: Union[str, AlgorithmType]) -> None:
        try:
            algorithm_type = AlgorithmType(algorithm_type)
        except ValueError:
            raise UnknownAlgorithmError(f"Unknown algorithm {algorithm_type!r}") from None

        if self.is_running:
            self.stop()

        self.original_colors = {n.id: n.color.copy() for n in self.neurons}
        self.current_algorithm = algorithm_type
        self.start_time = self.clock()
        self.is_running = True
        logger.info(f"Started {algorithm_type.value} over {len(self.neurons)} neurons")

    def stop(self) -> None:
        for neuron in self.neurons:
            neuron.activation = 0.0
            original = self.original_colors.get(neuron.id)
            if original is not None:
                neuron.color = original.copy()

        if self.current_algorithm is not None:
            logger.info(f"Stopped {self.current_algorithm.value}")
        self.original_colors = {}
        self.is_running = False
        self.current_algorithm = None

    def elapsed(self) -> float:
        return max(0.0, self.clock() - self.start_time)

    def update(self) -> None:
        if not self.is_running or self.current_algorithm is None:
            return

        # Neurons added mid-run fade back toward the colour they arrived with
        for neuron in self.neurons:
            self.original_colors.setdefault(neuron.id, neuron.color.copy())

        algorithm = REGISTRY[self.current_algorithm]
        snapshot = [NeuronSnapshot.of(n) for n in self.neurons]
        targets = algorithm.targets(self.elapsed(), snapshot)
        apply_targets(self.neurons, targets, self.original_colors)

    def is_active(self) -> bool:
        return self.is_running

    def get_current_algorithm(self) -> Optional[AlgorithmType]:
        return self.current_algorithm

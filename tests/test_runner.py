import pytest

from neurobloom.errors import UnknownAlgorithmError
from neurobloom.living import AlgorithmRunner, AlgorithmType, Vec3, create_neuron


def colors(neurons):
    return [(n.color.r, n.color.g, n.color.b) for n in neurons]


def test_inactive_by_default(neuron_grid, clock):
    runner = AlgorithmRunner(neuron_grid, clock=clock)
    assert runner.is_active() is False
    assert runner.get_current_algorithm() is None
    before = colors(neuron_grid)
    runner.update()
    assert colors(neuron_grid) == before


@pytest.mark.parametrize("algorithm_type", [t.value for t in AlgorithmType])
def test_stop_restores_colors_exactly(algorithm_type, neuron_grid, clock):
    runner = AlgorithmRunner(neuron_grid, clock=clock)
    before = colors(neuron_grid)

    runner.start(algorithm_type)
    assert runner.is_active()
    assert runner.get_current_algorithm() == AlgorithmType(algorithm_type)

    for _ in range(240):
        clock.advance(1 / 60)
        runner.update()
    runner.stop()

    assert colors(neuron_grid) == before
    assert all(n.activation == 0.0 for n in neuron_grid)
    assert runner.is_active() is False
    assert runner.get_current_algorithm() is None
    assert runner.original_colors == {}


def test_update_uses_elapsed_time(neuron_grid, clock):
    runner = AlgorithmRunner(neuron_grid, clock=clock)
    runner.start(AlgorithmType.WAVE_PROPAGATION)
    clock.advance(2.5)
    assert runner.elapsed() == pytest.approx(2.5)
    runner.update()
    assert any(n.activation > 0 for n in neuron_grid)


def test_restart_switches_algorithm_and_keeps_first_snapshot(neuron_grid, clock):
    runner = AlgorithmRunner(neuron_grid, clock=clock)
    before = colors(neuron_grid)

    runner.start("pulse-network")
    for _ in range(30):
        clock.advance(0.1)
        runner.update()
    runner.start("random-walker")
    assert runner.get_current_algorithm() == AlgorithmType.RANDOM_WALKER
    assert colors(neuron_grid) == before

    clock.advance(1.0)
    runner.update()
    runner.stop()
    assert colors(neuron_grid) == before


def test_neurons_added_mid_run(neuron_grid, clock):
    runner = AlgorithmRunner(neuron_grid, clock=clock)
    runner.start("spiral-growth")
    clock.advance(0.5)
    runner.update()

    late = create_neuron(Vec3(0.5, 0.5, 0.5), "input")
    late_color = (late.color.r, late.color.g, late.color.b)
    neuron_grid.append(late)
    for _ in range(20):
        clock.advance(0.1)
        runner.update()
    runner.stop()
    assert (late.color.r, late.color.g, late.color.b) == late_color


def test_unknown_algorithm(neuron_grid, clock):
    runner = AlgorithmRunner(neuron_grid, clock=clock)
    with pytest.raises(UnknownAlgorithmError):
        runner.start("fireworks")
    assert runner.is_active() is False

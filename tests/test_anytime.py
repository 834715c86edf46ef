import pytest

from chainmc.anytime import AnytimeAlgorithm, check_integer
from chainmc.exceptions import ConfigurationError


class Counter(AnytimeAlgorithm):
    """Counts steps, and can be told to fail or finish early."""

    def __init__(self, max_iterations=10, initialized=True, done_at=None, fail_at=None):
        super().__init__(max_iterations=max_iterations)
        self.initialized = initialized
        self.done_at = done_at
        self.fail_at = fail_at
        self.calls = []
        self.count = None

    def initialize(self):
        self.calls.append("initialize")
        self.count = 0
        return self.initialized

    def step(self):
        self.calls.append("step")
        if self.count == self.fail_at:
            raise RuntimeError("step failed")
        self.count += 1
        return self.count != self.done_at

    def cleanup(self):
        self.calls.append("cleanup")

    @property
    def result(self):
        return self.count


@pytest.mark.parametrize("max_iterations", [1, 10, 25])
def test_run(max_iterations):
    algorithm = Counter(max_iterations=max_iterations)
    assert algorithm.run() == max_iterations
    assert algorithm.iteration == max_iterations
    assert algorithm.calls == ["initialize"] + max_iterations * ["step"] + ["cleanup"]
    assert not algorithm.is_running


def test_run_with_progress():
    algorithm = Counter(max_iterations=5)
    assert algorithm.run(progress=True) == 5


def test_not_initialized():
    algorithm = Counter(initialized=False)
    assert algorithm.run() == 0
    assert algorithm.calls == ["initialize", "cleanup"]


def test_step_done():
    algorithm = Counter(done_at=3)
    assert algorithm.run() == 3
    assert algorithm.iteration == 3


def test_stop():
    class Stopper(Counter):
        def step(self):
            if self.count == 4:
                assert self.is_running
                self.stop()
            return super().step()

    algorithm = Stopper(max_iterations=100)
    assert algorithm.run() == 5
    assert algorithm.should_stop
    assert algorithm.calls[-1] == "cleanup"

    # a new run resets the stop request
    algorithm.stop()
    algorithm.max_iterations = 3
    assert algorithm.run() == 3


def test_cleanup_on_failure():
    algorithm = Counter(fail_at=2)
    with pytest.raises(RuntimeError, match="step failed"):
        algorithm.run()
    assert algorithm.calls[-1] == "cleanup"
    assert algorithm.iteration == 2
    assert not algorithm.is_running


def test_max_iterations():
    algorithm = Counter()
    for value in (0, -1, 2.5, True, "5"):
        with pytest.raises(ConfigurationError):
            algorithm.max_iterations = value
    assert algorithm.max_iterations == 10
    with pytest.raises(ConfigurationError):
        Counter(max_iterations=0)


def test_check_integer():
    assert check_integer("x", 0, 0) == 0
    assert check_integer("x", 5, 1) == 5
    with pytest.raises(ConfigurationError, match="x must be >= 1"):
        check_integer("x", 0, 1)
    with pytest.raises(ConfigurationError, match="x must be an integer"):
        check_integer("x", 1.0, 0)

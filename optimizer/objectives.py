import numpy as np


def sphere(position):
    """Sum of squares, minimum 0 at the origin"""
    x = np.asarray(position, dtype=float)
    return float(np.sum(x * x))


def rastrigin(position):
    x = np.asarray(position, dtype=float)
    return float(10.0 * x.size + np.sum(x * x - 10.0 * np.cos(2 * np.pi * x)))


def rosenbrock(position):
    """Minimum 0 at (1, ..., 1). A single coordinate is scored as (1 - x)^2"""
    x = np.asarray(position, dtype=float)
    if x.size < 2:
        return float(np.sum((1.0 - x) ** 2))
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


def ackley(position):
    x = np.asarray(position, dtype=float)
    n = x.size
    term1 = -20.0 * np.exp(-0.2 * np.sqrt(np.sum(x * x) / n))
    term2 = -np.exp(np.sum(np.cos(2 * np.pi * x)) / n)
    return float(term1 + term2 + 20.0 + np.e)


def griewank(position):
    x = np.asarray(position, dtype=float)
    i = np.arange(1, x.size + 1)
    return float(1.0 + np.sum(x * x) / 4000.0 - np.prod(np.cos(x / np.sqrt(i))))


OBJECTIVES = {
    'sphere': sphere,
    'rastrigin': rastrigin,
    'rosenbrock': rosenbrock,
    'ackley': ackley,
    'griewank': griewank,
}


def get_objective(name):
    """
    Look up a benchmark function by name

    Args:
        name: One of the OBJECTIVES keys

    Returns:
        The objective function
    """
    try:
        return OBJECTIVES[name]
    except KeyError:
        raise ValueError(
            f"Unknown objective '{name}', expected one of: {', '.join(sorted(OBJECTIVES))}"
        ) from None

import math
from enum import Enum

import numpy as np

from optimizer.objectives import sphere


class ConfigurationError(ValueError):
    """Raised when the optimizer is constructed with invalid hyperparameters"""


class OptimizerState(Enum):
    UNINITIALIZED = 'uninitialized'
    RUNNING = 'running'
    TERMINATED = 'terminated'


class LeaderHierarchy:
    """
    Alpha, beta and delta leader records of the pack.

    Scores start at +inf ("no solution yet") with an all-zero position.
    All changes go through update().
    """
    def __init__(self, dim, cascade=False):
        """
        Args:
            dim: Dimension of the leader positions
            cascade: Shift displaced leaders down one rank instead of
                dropping them
        """
        self.cascade = cascade
        self.alpha_position = np.zeros(dim)
        self.alpha_score = math.inf
        self.beta_position = np.zeros(dim)
        self.beta_score = math.inf
        self.delta_position = np.zeros(dim)
        self.delta_score = math.inf

    def update(self, position, score):
        """
        Offer a scored candidate to the hierarchy.

        Exclusive priority check: alpha, then beta, then delta. At most one
        record changes per call and, unless cascading, a displaced leader is
        simply overwritten. NaN scores never compare lower, so they are
        never promoted.

        Args:
            position: Candidate position
            score: Objective value of the candidate

        Returns:
            Name of the rank that changed, or None
        """
        position = np.array(position, dtype=float)

        if score < self.alpha_score:
            if self.cascade:
                self.delta_position, self.delta_score = self.beta_position, self.beta_score
                self.beta_position, self.beta_score = self.alpha_position, self.alpha_score
            self.alpha_position, self.alpha_score = position, score
            return 'alpha'
        elif score < self.beta_score:
            if self.cascade:
                self.delta_position, self.delta_score = self.beta_position, self.beta_score
            self.beta_position, self.beta_score = position, score
            return 'beta'
        elif score < self.delta_score:
            self.delta_position, self.delta_score = position, score
            return 'delta'

        return None

    def positions(self):
        return self.alpha_position, self.beta_position, self.delta_position


class GreyWolfOptimizer:
    """
    Grey Wolf Optimizer (GWO) for minimizing a function over a box
    """
    def __init__(self,
                 num_wolves=30,
                 dim=1,
                 max_iter=1000,
                 lower_bound=-10.0,
                 upper_bound=10.0,
                 objective_function=sphere,
                 seed=None,
                 verbose=True,
                 callback=None,
                 clamp=False,
                 cascade_leaders=False):
        """
        Initialize GWO

        Args:
            num_wolves: Number of wolves in the pack
            dim: Dimension of the problem
            max_iter: Number of iterations to run
            lower_bound: Lower bound of the search space
            upper_bound: Upper bound of the search space
            objective_function: Function to minimize, takes a 1-D array
            seed: Seed for the random generator, None for OS entropy
            verbose: Print the best score after every iteration
            callback: Called as callback(iteration, best_score) after every
                iteration
            clamp: Clip updated wolves back into the bounds before scoring
            cascade_leaders: Shift displaced leaders down one rank
        """
        _validate(num_wolves, dim, max_iter, lower_bound, upper_bound, objective_function)

        self.num_wolves = int(num_wolves)
        self.dim = int(dim)
        self.max_iter = int(max_iter)
        self.lower_bound = float(lower_bound)
        self.upper_bound = float(upper_bound)
        self.objective_function = objective_function
        self.seed = seed
        self.verbose = verbose
        self.callback = callback
        self.clamp = clamp

        self.rng = np.random.default_rng(seed)
        self.wolves = np.zeros((self.num_wolves, self.dim))
        self.history = []
        self.state = OptimizerState.UNINITIALIZED
        self._leaders = LeaderHierarchy(self.dim, cascade=cascade_leaders)

    @property
    def alpha_wolf(self):
        return self._leaders.alpha_position.copy()

    @property
    def alpha_score(self):
        return self._leaders.alpha_score

    @property
    def beta_wolf(self):
        return self._leaders.beta_position.copy()

    @property
    def beta_score(self):
        return self._leaders.beta_score

    @property
    def delta_wolf(self):
        return self._leaders.delta_position.copy()

    @property
    def delta_score(self):
        return self._leaders.delta_score

    def _initialize_wolves(self):
        """Place wolves uniformly in the bounds, ranking each one as it is created"""
        for i in range(self.num_wolves):
            self.wolves[i] = self.rng.uniform(self.lower_bound, self.upper_bound, size=self.dim)
            score = self.objective_function(self.wolves[i])
            self._leaders.update(self.wolves[i], score)

    def _move_wolf(self, i, a):
        wolf = self.wolves[i]
        leaders = self._leaders.positions()

        for j in range(self.dim):
            current_val = wolf[j]
            total = 0.0

            for leader in leaders:
                r1 = self.rng.random()
                r2 = self.rng.random()

                A = 2 * a * r1 - a
                C = 2 * r2

                D = abs(C * leader[j] - current_val)
                total += leader[j] - A * D

            wolf[j] = total / 3.0

        if self.clamp:
            np.clip(wolf, self.lower_bound, self.upper_bound, out=wolf)

    def _report(self, iteration):
        best_score = self._leaders.alpha_score
        self.history.append(best_score)

        if self.verbose:
            print(f"Iteration: {iteration} Best score: {best_score}")

        if self.callback is not None:
            self.callback(iteration, best_score)

    def optimize(self):
        """
        Run the GWO optimization

        Returns:
            Best position found and its score
        """
        if self.state is not OptimizerState.UNINITIALIZED:
            raise RuntimeError(f"Optimizer cannot be run again (state: {self.state.value})")

        self.state = OptimizerState.RUNNING
        self._initialize_wolves()

        for iter_idx in range(self.max_iter):
            # Decrease a linearly from 2 towards 0
            a = 2.0 - iter_idx * (2.0 / self.max_iter)

            for i in range(self.num_wolves):
                self._move_wolf(i, a)

                # Leaders see this wolf before the next one moves
                score = self.objective_function(self.wolves[i])
                self._leaders.update(self.wolves[i], score)

            self._report(iter_idx)

        self.state = OptimizerState.TERMINATED

        return self.alpha_wolf, self.alpha_score


def _is_int(value):
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _validate(num_wolves, dim, max_iter, lower_bound, upper_bound, objective_function):
    if not _is_int(num_wolves) or num_wolves <= 0:
        raise ConfigurationError(f"num_wolves must be a positive integer, got {num_wolves!r}")
    if not _is_int(dim) or dim <= 0:
        raise ConfigurationError(f"dim must be a positive integer, got {dim!r}")
    if not _is_int(max_iter) or max_iter < 0:
        raise ConfigurationError(f"max_iter must be a non-negative integer, got {max_iter!r}")

    try:
        lower, upper = float(lower_bound), float(upper_bound)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Bounds must be numbers, got {lower_bound!r} and {upper_bound!r}") from None

    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise ConfigurationError(f"Bounds must be finite, got {lower_bound!r} and {upper_bound!r}")
    if lower >= upper:
        raise ConfigurationError(
            f"lower_bound must be less than upper_bound, got {lower_bound!r} >= {upper_bound!r}"
        )
    if not callable(objective_function):
        raise ConfigurationError("objective_function must be callable")


def minimize(objective_function, dim, lower_bound, upper_bound, **kwargs):
    """
    Minimize a function with a fresh GWO

    Args:
        objective_function: Function to minimize
        dim: Dimension of the problem
        lower_bound: Lower bound of the search space
        upper_bound: Upper bound of the search space
        **kwargs: Other GreyWolfOptimizer arguments

    Returns:
        Best position found and its score
    """
    gwo = GreyWolfOptimizer(
        dim=dim,
        lower_bound=lower_bound,
        upper_bound=upper_bound,
        objective_function=objective_function,
        **kwargs
    )
    return gwo.optimize()

"""
Search Engine Module

Backtracking construction of a generator matrix with the requested
parameters. Per-depth state (rows, enumerator cursors and the span of the
rows accepted so far) lives in explicit arrays of size k rather than on the
call stack, so the same state machine runs in one process or in several
independent workers.

Pruning rules, all of which only discard matrices that either fail the final
checks or generate a code equivalent to one that is still searched:

- rows are tried in non-decreasing order of their enumerated part (row
  permutations, together with the matching identity columns, give an
  equivalent code)
- each row must have weight >= d (>= d - 1 for the part after the identity)
- a row whose nonzero multiples fall in the current span is dependent
- a row creating a codeword of weight < d can never be completed
- with Hermitian LCD required, a partial Gram matrix whose rank cannot reach
  k (each further row adds at most 2 to the rank) can never be completed

Consequently an exhausted search means no such code exists over the field.
"""

from dataclasses import dataclass
import multiprocessing
import time
from typing import Optional, Tuple

import numpy as np

from .code import Code, CodeParameters, SearchStatistics
from .enumerator import RowEnumerator
from .errors import InvalidConfigurationError, SearchExhausted
from .lcd import can_reach_full_rank, is_hermitian_lcd
from .field import unit_vector
from .weights import coset_words, minimum_distance, weight_distribution, word_weights

# Steps between two polls of the cancellation flag
CANCEL_CHECK_INTERVAL = 1024


@dataclass(frozen=True)
class ValidatorConfig:
    """
    Search policy.

    Parameters
    ----------
    append_identity : bool, default=True
        Fix the first k columns to the identity matrix and search the
        remaining n - k columns only
    restrict_generation : bool, default=True
        Only try normalized rows (leftmost nonzero element equal to 1)
    require_hermitian_lcd : bool, default=True
        Only accept matrices generating a Hermitian LCD code
    multithreaded : bool, default=False
        Split the first row's candidates across worker processes
    num_workers : int, optional
        Number of worker processes. If None, uses all cores but one.
    """
    append_identity: bool = True
    restrict_generation: bool = True
    require_hermitian_lcd: bool = True
    multithreaded: bool = False
    num_workers: Optional[int] = None

    def __post_init__(self):
        if self.num_workers is not None and self.num_workers < 1:
            raise InvalidConfigurationError("num_workers", self.num_workers, "must be at least 1")


class CodeSearch:
    """
    One run of the backtracking state machine.

    Parameters
    ----------
    parameters : CodeParameters
        Target (n, k, d, base)
    config : ValidatorConfig, optional
        Search policy. If None, uses the defaults.
    stop_event : multiprocessing.Event, optional
        Shared cancellation flag, polled between steps
    worker : int, default=0
        Index of this worker among ``num_workers``
    num_workers : int, default=1
        Worker w only explores the first-row candidates whose ordinal is
        congruent to w modulo ``num_workers``
    """

    def __init__(self, parameters: CodeParameters,
                 config: ValidatorConfig = None,
                 stop_event=None,
                 worker: int = 0,
                 num_workers: int = 1):
        self.parameters = parameters
        self.config = config or ValidatorConfig()
        self.stop_event = stop_event
        self.worker = worker
        self.num_workers = num_workers

        p = parameters
        if self.config.append_identity:
            self.free_length = p.n - p.k
            min_weight = p.d - 1
        else:
            self.free_length = p.n
            min_weight = p.d
        self.enumerator = RowEnumerator(
            self.free_length,
            base=p.base,
            restrict=self.config.restrict_generation,
            min_weight=max(min_weight, 0),
        )
        self.statistics = SearchStatistics(worker=worker)

    def _full_row(self, candidate: int, depth: int) -> int:
        if self.config.append_identity:
            return unit_vector(depth, self.parameters.n) | candidate
        return candidate

    def _cancelled(self) -> bool:
        return self.stop_event is not None and self.stop_event.is_set()

    def run(self) -> Optional[Code]:
        """
        Search until a matrix is found, the space is exhausted or another
        worker reports success.

        Returns
        -------
        Code or None
            None when no matrix satisfies the parameters under the policy
            (or the run was cancelled)
        """
        p = self.parameters
        n, k, d, base = p.n, p.k, p.d, p.base
        require_lcd = self.config.require_hermitian_lcd
        inclusive_start = self.config.append_identity

        rows = [0] * k
        cursors = [None] * k
        inclusive = [False] * k
        spans = [None] * k
        spans[0] = np.zeros(1, dtype=np.uint64)

        depth = 0
        ordinal = -1
        steps = nodes = examined = evaluations = 0
        start_time = time.time()
        while True:
            steps += 1
            if steps % CANCEL_CHECK_INTERVAL == 0 and self._cancelled():
                break

            candidate = self.enumerator.next_candidate(cursors[depth], inclusive[depth])
            if candidate is None:
                if depth == 0:
                    break
                # Backtrack: the cursor one level up still holds its row
                depth -= 1
                continue
            cursors[depth] = candidate
            inclusive[depth] = False

            if depth == 0:
                ordinal += 1
                if ordinal % self.num_workers != self.worker:
                    continue

            examined += 1
            row = self._full_row(candidate, depth)
            words = spans[depth]
            coset = coset_words(words, row, base)

            # A zero in the coset means c * row is already in the span
            if not coset.all():
                continue

            if depth + 1 < k:
                if word_weights(coset).min() < d:
                    continue
                rows[depth] = row
                if require_lcd and not can_reach_full_rank(rows[:depth + 1], k):
                    continue
                spans[depth + 1] = np.concatenate([words, coset])
                cursors[depth + 1] = candidate
                inclusive[depth + 1] = inclusive_start
                depth += 1
                nodes += 1
                continue

            # Complete candidate: exhaustive weight enumerator and LCD test
            evaluations += 1
            rows[depth] = row
            enumerator = weight_distribution(np.concatenate([words, coset]), n)
            if minimum_distance(enumerator) >= d:
                lcd = is_hermitian_lcd(rows, n, base)
                if lcd or not require_lcd:
                    self.statistics = self._statistics(nodes, examined, evaluations, start_time)
                    return Code(
                        parameters=p,
                        generator_matrix=tuple(int(r) for r in rows),
                        weight_enumerator=tuple(int(c) for c in enumerator),
                        is_hermitian_lcd=lcd,
                        statistics=self.statistics,
                    )
            if self._cancelled():
                break

        self.statistics = self._statistics(nodes, examined, evaluations, start_time)
        return None

    def _statistics(self, nodes, examined, evaluations, start_time) -> SearchStatistics:
        return SearchStatistics(
            nodes_visited=nodes,
            candidates_examined=examined,
            full_evaluations=evaluations,
            seconds=float(time.time() - start_time),
            worker=self.worker,
        )


# ==========================
# Parallel search
#   - one shared Event installed per worker by the pool initializer
#   - each worker runs its own CodeSearch over a slice of the first row
# ==========================
_WORKER = {}


def _worker_init(stop_event):
    """Initializer for pool workers: store the shared cancellation flag."""
    _WORKER["stop_event"] = stop_event


def _worker_search(args: Tuple) -> Optional[Code]:
    """
    Runs the search over one partition of the first-row candidates.

    Parameters
    ----------
    args : tuple
        (parameters, config, worker, num_workers)
    """
    parameters, config, worker, num_workers = args
    stop_event = _WORKER.get("stop_event")
    search = CodeSearch(parameters, config, stop_event=stop_event,
                        worker=worker, num_workers=num_workers)
    code = search.run()
    if code is not None and stop_event is not None:
        stop_event.set()
    return code


def parallel_search(parameters: CodeParameters, config: ValidatorConfig,
                    num_workers: int = None) -> Optional[Code]:
    """
    Run independent searches in a process pool; the first success wins.

    Parameters
    ----------
    parameters : CodeParameters
        Target (n, k, d, base)
    config : ValidatorConfig
        Search policy
    num_workers : int, optional
        Overrides ``config.num_workers``. If both are None, uses all cores
        but one.
    """
    num_workers = num_workers or config.num_workers or max(1, multiprocessing.cpu_count() - 1)
    stop_event = multiprocessing.Event()
    args = [(parameters, config, w, num_workers) for w in range(num_workers)]

    found = None
    pool = multiprocessing.Pool(num_workers, initializer=_worker_init, initargs=(stop_event,))
    try:
        for code in pool.imap_unordered(_worker_search, args):
            if code is not None and found is None:
                found = code
                stop_event.set()
    except BaseException:
        # Stop the other workers before surfacing the error
        stop_event.set()
        pool.terminate()
        raise
    finally:
        pool.close()
        pool.join()
    return found


def find_code(parameters, config: ValidatorConfig = None, strict: bool = False) -> Optional[Code]:
    """
    Search for a generator matrix with the given parameters.

    Parameters
    ----------
    parameters : CodeParameters or tuple
        Target parameters; a tuple ``(n, k, d[, base])`` is converted
        (and validated) first
    config : ValidatorConfig, optional
        Search policy. If None, uses the defaults.
    strict : bool, default=False
        Raise ``SearchExhausted`` instead of returning None

    Returns
    -------
    Code or None
    """
    if not isinstance(parameters, CodeParameters):
        parameters = CodeParameters(*parameters)
    config = config or ValidatorConfig()

    if config.multithreaded:
        code = parallel_search(parameters, config)
    else:
        code = CodeSearch(parameters, config).run()

    if code is None and strict:
        raise SearchExhausted(parameters, config)
    return code

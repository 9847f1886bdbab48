# gpreg/core/optimizer.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Quasi-Newton minimization of a criterion with gradient.
"""
import time
import numpy as np
from scipy.optimize import minimize as scipy_minimize

import gpreg.num as gnp
from gpreg.config import get_logger, get_optimizer_options

_logger = get_logger()

# scipy L-BFGS-B status codes
_CONVERGED = 0
_BUDGET_EXHAUSTED = 1
_ABNORMAL = 2


def minimize(objective, initial_params, options=None, info=False):
    """Minimize `objective` with L-BFGS-B, starting at `initial_params`.

    Parameters
    ----------
    objective : callable
        ``objective(p) -> (value, gradient)``.
    initial_params : array_like
        Starting point. Not modified.
    options : dict, optional
        Overrides of the configured budgets:
        ``max_iterations``, ``max_line_search_steps``,
        ``max_direction_restarts``, ``max_lbfgs_rank``, ``ftol``, ``gtol``.
    info : bool, default=False
        If True, also return a diagnostics dict.

    Returns
    -------
    p_opt : gnp.array
        Best parameter vector visited.
    success : bool
        Whether the solution is usable: the best value is finite and the
        solver either converged or stopped on its iteration budget.
    info_ret : dict
        Only if ``info=True``.

    Notes
    -----
    When the line search terminates abnormally, the solver is restarted
    from the best point seen (the L-BFGS memory is dropped), at most
    ``max_direction_restarts`` times and within the remaining iteration
    budget.

    Objective evaluations raising linear-algebra errors are mapped to
    ``+inf`` so that the line search backs off.
    """
    opts = get_optimizer_options()
    if options is not None:
        unknown = set(options) - set(opts)
        if unknown:
            raise ValueError(f"Unknown optimizer options: {sorted(unknown)}")
        opts.update(options)
    for key in ("max_iterations", "max_line_search_steps", "max_lbfgs_rank"):
        if opts[key] < 1:
            raise ValueError(f"{key} must be >= 1")
    if opts["max_direction_restarts"] < 0:
        raise ValueError("max_direction_restarts must be >= 0")

    tic = time.time()
    p0 = np.array(initial_params, dtype=np.float64).reshape(-1)

    history_criterion = []
    best_params, best_criterion = p0.copy(), np.inf

    def objective_with_history(p):
        nonlocal best_params, best_criterion
        try:
            J, G = objective(p)
        except Exception as exc:
            if gnp._is_linalg_exception(exc):
                J, G = np.inf, np.zeros_like(p)
            else:
                raise
        J = float(J)
        G = np.asarray(G, dtype=np.float64).reshape(-1)
        if not np.all(np.isfinite(G)):
            G = np.where(np.isfinite(G), G, 0.0)
        history_criterion.append(J)
        if J < best_criterion:
            best_criterion, best_params = J, p.copy()
        return J, G

    remaining = int(opts["max_iterations"])
    restarts = 0
    total_iterations = 0
    status = _ABNORMAL
    message = ""
    start = p0
    while True:
        r = scipy_minimize(
            objective_with_history,
            start,
            method="L-BFGS-B",
            jac=True,
            options=dict(
                maxiter=remaining,
                maxls=int(opts["max_line_search_steps"]),
                maxcor=int(opts["max_lbfgs_rank"]),
                ftol=opts["ftol"],
                gtol=opts["gtol"],
            ),
        )
        status, message = int(r.status), str(r.message)
        total_iterations += int(r.nit)
        remaining -= int(r.nit)
        if status != _ABNORMAL or restarts >= opts["max_direction_restarts"] or remaining < 1:
            break
        restarts += 1
        _logger.debug(
            "Line search failed (%s); restart %d from best point (J=%.6g)",
            message,
            restarts,
            best_criterion,
        )
        start = best_params

    success = bool(np.isfinite(best_criterion)) and status in (_CONVERGED, _BUDGET_EXHAUSTED)

    if not info:
        return gnp.asarray(best_params), success
    info_ret = {
        "status": status,
        "message": message,
        "success": success,
        "iterations": total_iterations,
        "restarts": restarts,
        "history_criterion": history_criterion,
        "initial_params": p0,
        "final_params": best_params,
        "final_criterion": best_criterion,
        "total_time": time.time() - tic,
    }
    return gnp.asarray(best_params), success, info_ret

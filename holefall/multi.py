"""Batch and parallel headless sessions."""
from __future__ import annotations

import logging
import random
from multiprocessing import Pool, cpu_count
from typing import Dict, Iterable, Optional, Tuple

from .config import GameConfig
from .single import SessionResult, run_game
from .world import CameraMode

logger = logging.getLogger(__name__)


def _result_to_dict(result: SessionResult) -> Dict[str, object]:
    return {
        "trials": [t.to_dict() for t in result.trials],
        "frames": result.frames,
        "game_over": result.game_over,
    }


def _run_seed(seed: int, max_frames: int, config: Optional[GameConfig], camera_mode: CameraMode) -> SessionResult:
    return run_game(
        config,
        display=False,
        max_frames=max_frames,
        camera_mode=camera_mode,
        rng=random.Random(seed),
    )


def run_multi(seeds: Iterable[int], max_frames: int, config: Optional[GameConfig] = None,
              camera_mode: CameraMode = CameraMode.DRIFT):
    """Run one headless session per seed, sequentially."""
    results = {}
    for seed in seeds:
        logger.info("Session for seed %d", seed)
        results[seed] = _result_to_dict(_run_seed(seed, max_frames, config, camera_mode))
    return results


def _session_worker(args: Tuple[int, int, Optional[GameConfig], CameraMode]):
    seed, max_frames, config, camera_mode = args
    return seed, _result_to_dict(_run_seed(seed, max_frames, config, camera_mode))


def run_multi_parallel(seeds: Iterable[int], max_frames: int, config: Optional[GameConfig] = None,
                       camera_mode: CameraMode = CameraMode.DRIFT, processes: Optional[int] = None):
    """Run headless sessions in parallel, one per seed."""
    args = [(seed, max_frames, config, camera_mode) for seed in seeds]
    n_procs = processes or cpu_count()
    logger.info("Running %d sessions on %d processes (headless)", len(args), n_procs)

    results = {}
    with Pool(processes=n_procs) as pool:
        for seed, data in pool.map(_session_worker, args):
            results[seed] = data
    return results

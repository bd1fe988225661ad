# /experiments/sanity_rollout.py
"""
Sanity rollouts for UDEnv:
- Runs RANDOM and/or GREEDY-JUMP policies over fixed seeds
- Writes an episodes CSV for notebook analysis
- Saves per-episode action sequences for exact replay

Usage examples (from repo root):
  # Run both policies over 20 default seeds, frame_skip=4, save traces:
  python -m experiments.sanity_rollout --policies both --save-traces

  # Only the jump heuristic on custom seeds:
  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222,333

  # Quick random-only smoke with fewer steps:
  python -m experiments.sanity_rollout --policies random --steps 300 --out-dir /tmp/sanity
"""

from __future__ import annotations
import argparse
import csv
import logging
from pathlib import Path
from typing import List, Tuple

import numpy as np

from src.env.ud_env import UDEnv
from src.game.logging_config import configure_logging

logger = logging.getLogger(__name__)


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int):
    rng = np.random.RandomState(action_seed)
    def act(_obs: np.ndarray) -> int:
        return int(rng.randint(0, 2))
    return act

def jump_heuristic_policy_init():
    """
    Jump whenever grounded and the nearest collectible is close ahead and
    above the player. Obs layout: see src/env/observations.py.
    """
    def act(obs: np.ndarray) -> int:
        y, grounded = obs[0], obs[2]
        item_dx, item_y = obs[8], obs[9]
        if grounded < 0.5 or item_dx >= 1.0:
            return 0
        return 1 if (0.0 <= item_dx <= 0.35 and item_y < y) else 0
    return act


# ------------------------ Rollout core ------------------------

def ensure_dir(p: Path):
    p.mkdir(parents=True, exist_ok=True)

def write_episode_row(csv_path: Path, header: List[str], row: List):
    exists = csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(header)
        w.writerow(row)

def run_one_episode(policy_name: str,
                    seed: int,
                    frame_skip: int,
                    steps_limit: int,
                    save_traces: bool,
                    out_dir: Path) -> Tuple[int, float, bool, float, int]:
    """
    Returns: (ep_len, ret_sum, truncated, grounded_ratio, jumps)
    Also writes the action trace to disk if requested.
    """
    env = UDEnv(frame_skip=frame_skip)

    if policy_name == "random":
        action_seed = 10_000 + seed
        policy = random_policy_init(action_seed)
    elif policy_name == "heuristic":
        action_seed = -1
        policy = jump_heuristic_policy_init()
    else:
        raise ValueError(f"Unknown policy {policy_name!r}")

    actions: List[int] = []
    ret_sum = 0.0
    grounded_count = 0
    jumps = 0
    ep_len = 0
    trunc = False

    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps_limit):
            a = policy(obs)
            actions.append(int(a))

            obs, r, term, trunc, info = env.step(a)
            ret_sum += float(r)
            ep_len += 1
            grounded_count += int(bool(info["grounded"]))
            jumps += int(bool(info["jumped"]))

            if term or trunc:
                break
    finally:
        env.close()

    if save_traces:
        trace_dir = out_dir / "traces" / policy_name
        ensure_dir(trace_dir)
        np.save(trace_dir / f"{seed}_actions.npy", np.asarray(actions, dtype=np.int8))
        meta_lines = [
            f"seed={seed}",
            f"frame_skip={frame_skip}",
            f"policy={policy_name}",
            f"action_rng_seed={action_seed}",
            f"steps_limit={steps_limit}",
        ]
        (trace_dir / f"{seed}_meta.txt").write_text("\n".join(meta_lines), encoding="utf-8")

    return ep_len, ret_sum, bool(trunc), grounded_count / max(1, ep_len), jumps


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"],
                    help="Which policy to run")
    ap.add_argument("--seeds", type=str, default="",
                    help="Comma-separated seeds. If empty, uses 20 defaults: 101..120")
    ap.add_argument("--frame-skip", type=int, default=4,
                    help="Sim frames per decision step")
    ap.add_argument("--steps", type=int, default=10_000,
                    help="Hard cap on decision steps (env may truncate earlier)")
    ap.add_argument("--out-dir", type=str, default="experiments/runs",
                    help="Directory to store episodes.csv and traces/")
    ap.add_argument("--save-traces", action="store_true",
                    help="Save action sequences for replay")
    ap.add_argument("--log-level", default=None)
    args = ap.parse_args(argv)
    configure_logging(args.log_level)

    out_dir = Path(args.out_dir)
    ensure_dir(out_dir)

    if args.seeds.strip():
        seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    else:
        seeds = list(range(101, 121))

    episodes_csv = out_dir / "episodes.csv"
    header = [
        "env_name", "policy_name", "seed",
        "frame_skip", "decision_hz",
        "episode_len_decisions", "score", "truncated",
        "grounded_ratio", "jumps",
    ]
    sim_fps = 60
    decision_hz = sim_fps / max(1, args.frame_skip)

    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]

    logger.info("running policies=%s on %d seeds (frame_skip=%d, decision_hz~%.1f)",
                to_run, len(seeds), args.frame_skip, decision_hz)

    for policy_name in to_run:
        for seed in seeds:
            ep_len, score, truncated, g_ratio, jumps = run_one_episode(
                policy_name=policy_name,
                seed=seed,
                frame_skip=args.frame_skip,
                steps_limit=args.steps,
                save_traces=args.save_traces,
                out_dir=out_dir,
            )
            write_episode_row(episodes_csv, header, [
                "UDEnv", policy_name, seed,
                args.frame_skip, decision_hz,
                ep_len, f"{score:.0f}", int(truncated),
                f"{g_ratio:.3f}", jumps,
            ])
            logger.info("[%s] seed=%d len=%d score=%.0f jumps=%d trunc=%s",
                        policy_name, seed, ep_len, score, jumps, truncated)

    logger.info("sanity rollouts complete, summary in %s", episodes_csv)


if __name__ == "__main__":
    main()

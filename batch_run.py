# batch_run.py
import logging

from holefall.multi import run_multi_parallel

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    seeds = list(range(8))

    # Run all sessions in parallel, headless, with the hole-seeking autopilot
    results = run_multi_parallel(seeds, max_frames=60 * 60)

    for seed, data in sorted(results.items()):
        touched = sum(1 for t in data["trials"] if t["ballTouched"])
        outcome = "game over" if data["game_over"] else "survived"
        print(f"seed={seed} -> {len(data['trials'])} trials ({touched} touched), {data['frames']} frames, {outcome}")

import argparse
import logging

from holefall.config import GameConfig
from holefall.single import run_game
from holefall.world import CameraMode

# Interactive session: arrows steer, P pauses, N restarts, M toggles camera, S saves trials

parser = argparse.ArgumentParser(description="Play the falling-ball level runner")
parser.add_argument("--size", type=int, default=600, help="window side in pixels")
parser.add_argument("--seed", type=int, default=None, help="seed for level generation")
parser.add_argument("--drift", action="store_true", help="start in drift camera mode")
parser.add_argument("--out", default="data.json", help="trial export path")
args = parser.parse_args()

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

config = GameConfig.for_window(args.size, seed=args.seed)
mode = CameraMode.DRIFT if args.drift else CameraMode.FOLLOW
result = run_game(config, display=True, camera_mode=mode, export_path=args.out)

print(f"session {result.session}: {len(result.trials)} trials in {result.frames} frames")

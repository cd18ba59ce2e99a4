import argparse
from pathlib import Path

from frostfire import config
from frostfire.engine import Engine


def main() -> None:
    parser = argparse.ArgumentParser(description="Play a Frostfire level.")
    parser.add_argument("level", nargs="?", type=Path, help="level YAML (default: bundled cavern)")
    args = parser.parse_args()

    cfg = config.GameConfig(level_path=args.level)
    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()

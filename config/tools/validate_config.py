# config/tools/validate_config.py

import sys           # for exit codes
from pprint import pprint  # for structured printing

# make src discoverable if running as a script
from pathlib import Path
# __file__ is .../config/tools/validate_config.py
# parents[2] is the project root; append ROOT/src
PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.append(str(PROJECT_ROOT / "src"))

from pathfinding.config import DEFAULT_CONFIG_PATH, load_search_config  # import our loader


def main(argv: list[str]) -> int:
    """Load and print the resolved search config, failing fast on errors."""
    path = Path(argv[0]) if argv else DEFAULT_CONFIG_PATH
    try:
        cfg = load_search_config(path)
    except (FileNotFoundError, ValueError) as e:
        print("Pathfinding config validation FAILED:", file=sys.stderr)
        print(repr(e), file=sys.stderr)
        return 1                             # non-zero exit: CI will mark as failed

    print("Pathfinding config validation OK.")
    print("\nConfig file:", path)
    pprint(cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))  # run main() only when script is executed directly

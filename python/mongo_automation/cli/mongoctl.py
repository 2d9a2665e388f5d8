import sys
import subprocess
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: mongoctl <subcommand> [args...]")
        return 1

    subcommand = args[0].replace("-", "_")
    cmd = [sys.executable, "-m", f"mongo_automation.cli.{subcommand}"] + args[1:]
    return subprocess.call(cmd)


if __name__ == "__main__":
    sys.exit(main())

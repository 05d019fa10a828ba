import os
import sys

# Ensure the local packages are importable
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from sp_common import ConfigurationError, TerminalUnavailableError, configure_logging
from sp_prompt import Choice, Separator, select


def run_demo():
    # Logs go to a file so they do not fight with the prompt for the terminal
    configure_logging(debug=True, log_file=os.environ.get("SP_LOG_FILE", "demo_select.log"))

    choices = [
        Separator("JavaScript"),
        Choice("npm", name="npm", description="Ships with Node.js"),
        Choice("yarn", name="Yarn"),
        Choice("pnpm", name="pnpm", description="Content-addressable store"),
        Choice("bun", name="Bun", disabled="(not installed)"),
        Separator("Python"),
        Choice("pip", name="pip"),
        Choice("uv", name="uv", description="Fast resolver and installer"),
        Choice("poetry", name="Poetry"),
        Choice("conda", name="Conda", disabled=True),
    ]

    try:
        manager = select("Pick a package manager", choices, default="pnpm")
        # A short list fits in one page and shows the help tip
        level = select("Log level", ["debug", "info", "warning", "error"], loop=False)
    except ConfigurationError as exc:
        print(f"Invalid prompt: {exc}", file=sys.stderr)
        return 2
    except TerminalUnavailableError as exc:
        print(f"{exc} Try running the demo from an interactive shell.", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Cancelled.", file=sys.stderr)
        return 130

    print(f"\nSelected {manager} with log level {level}")
    return 0


if __name__ == "__main__":
    sys.exit(run_demo())

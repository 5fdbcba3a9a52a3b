"""Allow running the planner with `python -m course_planner`."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
import os
import sys

from workout_app.defaults import STORAGE_KEY
from workout_app.generate import build_demo_state
from workout_app.storage import load_state, save_state, reset_state

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.environ.get("WORKOUT_DATA_DIR", os.path.join(BASE_DIR, "workout_app", "data"))
KEY = os.environ.get("WORKOUT_STORAGE_KEY", STORAGE_KEY)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    if "--reset" in argv:
        reset_state(DATA_DIR, KEY)
        print("Workout data cleared.")
        return

    current = load_state(DATA_DIR, KEY)
    if (current["profile"] or current["history"]) and "--force" not in argv:
        answer = input("Existing workout data will be replaced. Continue? [y/N]: ").strip().lower()
        if answer not in ("y", "yes"):
            print("Nothing changed.")
            return

    state = build_demo_state()
    save_state(DATA_DIR, KEY, state)
    print(f"Demo profile '{state['profile']['name']}' saved with {len(state['history'])} sessions.")


if __name__ == "__main__":
    main()

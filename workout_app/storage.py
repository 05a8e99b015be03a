import os
import json


def empty_state():
    return {"profile": None, "history": []}


def ensure_data_dir(data_dir: str) -> str:
    os.makedirs(data_dir, exist_ok=True)
    return data_dir


def state_path(data_dir: str, key: str) -> str:
    return os.path.join(data_dir, f"{key}.json")


def load_json(path: str, fallback):
    try:
        with open(path, "r") as f:
            return json.load(f)
    except Exception:
        return fallback


def save_json(path: str, data):
    tmp_path = path + ".tmp"
    with open(tmp_path, "w") as f:
        json.dump(data, f, indent=2)
    os.replace(tmp_path, path)


def load_state(data_dir: str, key: str) -> dict:
    """
    Read the persisted profile + history record.

    Anything missing or malformed comes back as empty state.
    """
    data = load_json(state_path(data_dir, key), None)
    if not isinstance(data, dict):
        return empty_state()

    profile = data.get("profile")
    history = data.get("history")
    return {
        "profile": profile if isinstance(profile, dict) else None,
        "history": history if isinstance(history, list) else [],
    }


def save_state(data_dir: str, key: str, state: dict):
    ensure_data_dir(data_dir)
    save_json(state_path(data_dir, key), {
        "profile": state.get("profile"),
        "history": state.get("history") or [],
    })


def reset_state(data_dir: str, key: str):
    try:
        os.remove(state_path(data_dir, key))
    except FileNotFoundError:
        pass

from __future__ import annotations

from bistro_staff.container import build_backend
from bistro_staff.main import load_settings
from bistro_staff.storage.bootstrap import seed_demo_state
from bistro_staff.storage.store import StateStore


def main() -> None:
    settings = load_settings()
    store = StateStore(build_backend(settings))

    if seed_demo_state(store):
        print(f"OK: Seeded demo data ({settings['STORAGE_BACKEND']})")
    else:
        print("Skipped: store already has employees")


if __name__ == "__main__":
    main()

"""
Generate or wipe test data via the running FastAPI service.

Usage examples
──────────────
# wipe previous fake data, then submit a day of readings with two channels
python scripts/generate_fake_data.py --device-id fake-001 --channels 2 --wipe
"""

import argparse
import random
from datetime import datetime, timedelta, timezone

import requests

BASE_URL = "http://localhost:8000"
MAGIC_IDENTIFIER = "fake"


# ─────────────────────────── HTTP helper ────────────────────────────
def post(endpoint: str, payload: dict) -> None:
    r = requests.post(f"{BASE_URL}{endpoint}", json=payload, timeout=5)
    r.raise_for_status()


# ─────────────────────────── API helpers ────────────────────────────
def fake_values() -> dict:
    return {
        "rco2": random.uniform(400, 1200),
        "pm01": random.uniform(1, 10),
        "pm02": random.uniform(5, 30),
        "pm10": random.uniform(10, 50),
        "atmp": random.uniform(18, 26),
        "rhum": random.uniform(30, 60),
    }


def submit_reading(device_id: str, ts: float, channels: int) -> None:
    payload = {"ts": ts, **fake_values()}
    if channels > 1:
        payload["channels"] = [fake_values() for _ in range(channels)]
    post(f"/api/restricted/submit/{device_id}", payload)


def generate_data(
    device_id: str,
    start_time: datetime,
    count: int,
    interval_seconds: int,
    channels: int,
) -> None:
    current_ts = start_time.timestamp()
    for _ in range(count):
        submit_reading(device_id, current_ts, channels)
        current_ts += interval_seconds


def wipe_data(device_id: str) -> None:
    if MAGIC_IDENTIFIER not in device_id:
        raise ValueError(
            f"Refusing to wipe device_id={device_id!r} "
            f"(missing magic identifier '{MAGIC_IDENTIFIER}')"
        )
    r = requests.delete(f"{BASE_URL}/api/restricted/delete/{device_id}", timeout=5)
    r.raise_for_status()


# ───────────────────────────── CLI ─────────────────────────────
def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--device-id", default="fake")
    parser.add_argument("--wipe", action="store_true")
    parser.add_argument("--count", type=int, default=1440)
    parser.add_argument("--interval", type=int, default=60, help="seconds between readings")
    parser.add_argument("--channels", type=int, default=1)
    args = parser.parse_args()

    if args.wipe:
        wipe_data(args.device_id)

    start = datetime.now(tz=timezone.utc) - timedelta(seconds=args.count * args.interval)
    generate_data(
        device_id=args.device_id,
        start_time=start,
        count=args.count,
        interval_seconds=args.interval,
        channels=args.channels,
    )
    print("Done.")


if __name__ == "__main__":
    main()

import random
import struct
from datetime import datetime, timezone
from pathlib import Path

# Julian day of 1970-01-01
UNIX_EPOCH_JD = 2440588


def text(value: str) -> bytes:
    raw = value.encode("utf-16-le")
    return struct.pack("<i", len(raw)) + raw


def timestamp(dt: datetime) -> bytes:
    days = (dt.date() - datetime(1970, 1, 1).date()).days
    msecs = ((dt.hour * 60 + dt.minute) * 60 + dt.second) * 1000 + dt.microsecond // 1000
    return struct.pack("<QIB", UNIX_EPOCH_JD + days, msecs, 1)


def location(location_type: int, dc_id: int, media_id: int, filename: str, modified: datetime, size: int) -> bytes:
    return (
        struct.pack("<IIQ", location_type, dc_id, media_id)
        + text(filename)
        + timestamp(modified)
        + struct.pack("<I", size)
    )


def framed(payload: bytes) -> bytes:
    return struct.pack("<I", len(payload) + 4) + payload


def generate_locations(count: int) -> bytes:
    now = datetime.now(timezone.utc).replace(microsecond=0)
    body = b""
    for i in range(count):
        body += location(
            random.choice([0x1B, 0x2E]),
            random.randint(1, 5),
            random.getrandbits(63),
            f"photo_{i:03d}.jpg",
            now,
            random.randint(1, 4 * 1024 * 1024),
        )
    # All-zero end mark
    body += location(0, 0, 0, "", datetime(1970, 1, 1, tzinfo=timezone.utc), 0)
    return framed(body)


def generate_settings() -> bytes:
    body = b""
    body += struct.pack("<Ii", 0x06, 1)  # auto start
    body += struct.pack("<Ii", 0x1C, 0)  # notify view
    body += struct.pack("<I", 0x19) + text("+15550100")  # logged phone number
    body += struct.pack("<Iiiiiii", 0x0E, 100, 80, 1280, 800, 0, 1)  # window position
    body += struct.pack("<I", 0x3A) + struct.pack("<i", 2)  # recent emoji
    body += text("\U0001F600") + struct.pack("<H", 7)
    body += text("❤") + struct.pack("<H", 3)
    body += struct.pack("<Ii", 0x4F, 5) + struct.pack("<iiii", 0, 0, 0, 0)  # connection type
    # Trailing padding is outside the declared length.
    return framed(body) + b"\x00" * 8


def generate_images(count: int) -> bytes:
    body = struct.pack("<I", count)
    for _ in range(count):
        body += struct.pack(
            "<QQQi",
            random.getrandbits(64),
            random.getrandbits(64),
            random.getrandbits(64),
            random.randint(1, 1 << 20),
        )
    return struct.pack("<I", len(body) + 4) + body


def generate_cache(output_dir: str, count: int = 3) -> Path:
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    (out / "locations.bin").write_bytes(generate_locations(count))
    (out / "settings.bin").write_bytes(generate_settings())
    (out / "images.bin").write_bytes(generate_images(count))
    print(f"GENERATED: {out}")
    return out


if __name__ == "__main__":
    import sys

    # Usage:
    #   python tools/make_cache.py OUT_DIR [--count N]

    args = [a for a in sys.argv[1:] if a]

    count = 3
    if "--count" in args:
        i = args.index("--count")
        if i + 1 >= len(args):
            raise SystemExit("--count requires a value")
        count = int(args[i + 1])
        args = args[:i] + args[i + 2:]

    out = args[0] if len(args) > 0 else "sample_cache"
    generate_cache(out, count)

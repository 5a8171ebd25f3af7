"""Quickstart: build Data values from bytes, files and URLs."""

import tempfile
from pathlib import Path

from datauri import Data, DataFileNotFoundError, DataURIError, LengthMode, TooLongDataError

# ---- From bytes ----
# Without a media type the value defaults to text/plain; charset=US-ASCII.

data = Data(b"Lorem ipsum dolor sit amet")
print(f"[bytes] mime_type={data.mime_type}, parameters={dict(data.parameters)}, binary={data.is_binary_data}")

# Fluent mutators; an existing parameter keeps its first value.
data.add_parameters("charset", "utf-8").add_parameters("name", "lorem.txt").set_binary_data(False)
print(f"  parameters after add_parameters() = {dict(data.parameters)}")

# ---- Strict mode ----

try:
    Data(b"x" * 1025, strict=True, length_mode=LengthMode.LITLEN)
except TooLongDataError as exc:
    print(f"\n[strict] LITLEN rejected {exc.length} bytes")
print(f"  TAGLEN accepts 2100 bytes: {len(Data(b'x' * 2100, strict=True).data)}")

# ---- From a file, and back ----

with tempfile.TemporaryDirectory() as tmpdir:
    image = Path(tmpdir) / "smile"
    image.write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00")
    from_file = Data.build_from_file(image)
    print(f"\n[file] mime_type={from_file.mime_type}, size={len(from_file.data)}, binary={from_file.is_binary_data}")

    target = Path(tmpdir) / "copy"
    try:
        from_file.write(target)
    except DataFileNotFoundError:
        print("  write() requires an existing target file")
    target.touch()
    written = from_file.write(target, overwrite=True)
    print(f"  round trip equal: {Data.build_from_file(written) == from_file}")

# ---- Plain-dict serialization ----

payload = data.to_dict()
print(f"\n[to_dict] {payload}")
print(f"  from_dict() equal: {Data.from_dict(payload) == data}")

# ---- From a URL ----
# Requires the http extra: pip install "datauri[http]"

try:
    remote = Data.build_from_url("https://placehold.co/350x150.png")
    print(f"\n[url] mime_type={remote.mime_type}, size={len(remote.data)}")
except DataURIError as exc:
    print(f"\n[url] {type(exc).__name__}: {exc}")

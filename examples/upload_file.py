"""
Example: prepare a multipart/form-data upload of one file plus form fields.

Usage:
    python examples/upload_file.py path/to/photo.jpg [token]
"""

import logging
import sys

from formpost import RequestBuilder, Uploader


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    path = sys.argv[1] if len(sys.argv) > 1 else "pau.jpg"
    token = sys.argv[2] if len(sys.argv) > 2 else None

    # Body and Content-Type only, for use with any HTTP client
    body, content_type = RequestBuilder().build(
        "https://httpbin.org/post", path, {"name": "Pau", "lastname": "Sanchez"}, "file"
    )
    print(f"Content-Type: {content_type}")
    print(f"Body: {len(body)} bytes")

    # Fail instead of sending an empty attachment when the file is unreadable
    strict = RequestBuilder(lenient_read=False, default_mime_type="application/octet-stream")
    uploader = Uploader("https://httpbin.org/post", token=token, timeout=15.0, builder=strict)
    request = uploader.prepare(path, {"name": "Pau"}, "file")
    print(request)
    for name, value in request.headers:
        print(f"{name}: {value}")


if __name__ == "__main__":
    main()

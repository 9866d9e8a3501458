#!/usr/bin/env python3
"""
End-to-end demo script for the File Upload Gateway.

Prerequisites:
    1. MinIO reachable at S3_ENDPOINT
    2. Gateway running: uvicorn filegate.main:app

Usage:
    python scripts/e2e_demo.py

    # With a custom file:
    python scripts/e2e_demo.py --file path/to/report.pdf

    # Against another host, printing raw JSON:
    python scripts/e2e_demo.py --base-url http://gateway:8000 --json
"""

import argparse
import json
import mimetypes
import sys
from pathlib import Path
from urllib.parse import quote

import httpx

# Configuration
API_BASE = "http://localhost:8000"
DEFAULT_NAME = "e2e-demo.txt"
DEFAULT_PAYLOAD = b"Hello from the file upload gateway demo.\n"
UPLOAD_PREFIX = "Uploaded the file successfully: "


def check_health(client: httpx.Client) -> bool:
    """Check if API is healthy."""
    try:
        resp = client.get("/health")
        return resp.status_code == 200
    except httpx.RequestError:
        return False


def hello(client: httpx.Client) -> str:
    resp = client.get("/api/files/hello")
    resp.raise_for_status()
    return resp.text


def upload_file(client: httpx.Client, name: str, data: bytes, content_type: str) -> str:
    """Upload a file and return the key the gateway generated for it."""
    files = {"file": (name, data, content_type)}
    resp = client.post("/api/files/upload", files=files)
    resp.raise_for_status()
    message = resp.json()["message"]
    return message.removeprefix(UPLOAD_PREFIX)


def list_files(client: httpx.Client) -> list[str]:
    resp = client.get("/api/files")
    resp.raise_for_status()
    return resp.json()


def download_file(client: httpx.Client, key: str) -> tuple[bytes, str] | None:
    """Download a file by key; None when the gateway answers 404."""
    resp = client.get(f"/api/files/{quote(key, safe='')}")
    if resp.status_code == 404:
        return None
    resp.raise_for_status()
    return resp.content, resp.headers.get("content-type", "")


def run_demo(
    client: httpx.Client,
    name: str,
    data: bytes,
    content_type: str,
    as_json: bool = False,
) -> int:
    """Run every step against ``client``; return the process exit code."""
    report: dict = {"file": name}

    print("\n[1/5] Checking API health...")
    if not check_health(client):
        print("  Error: API is not responding")
        return 1
    print(f"  {hello(client)}")

    print(f"\n[2/5] Uploading {name} ({len(data)} bytes, {content_type})")
    try:
        key = upload_file(client, name, data, content_type)
    except httpx.HTTPStatusError as e:
        print(f"  Error uploading: {e.response.text}")
        return 1
    report["key"] = key
    print(f"  Key: {key}")

    print("\n[3/5] Listing files...")
    try:
        urls = list_files(client)
    except httpx.HTTPStatusError as e:
        print(f"  Error listing: {e.response.text}")
        return 1
    report["listed"] = len(urls)
    ours = [url for url in urls if url.endswith(f"/{key}")]
    print(f"  {len(urls)} file(s) listed, ours {'found' if ours else 'MISSING'}")
    if not ours:
        return 1
    report["url"] = ours[0]

    print(f"\n[4/5] Downloading {key}...")
    try:
        downloaded = download_file(client, key)
    except httpx.HTTPStatusError as e:
        print(f"  Error downloading: {e.response.text}")
        return 1
    if downloaded is None:
        print("  Error: uploaded file not found")
        return 1
    body, served_type = downloaded
    report["content_type"] = served_type
    print(f"  Served as {served_type}")

    print("\n[5/5] Verifying payload...")
    if body != data:
        print(f"  Error: downloaded {len(body)} bytes, expected {len(data)}")
        return 1
    print("  Payload matches")

    if as_json:
        print(json.dumps(report, indent=2))

    print("\n" + "=" * 60)
    print("ALL ENDPOINTS TESTED SUCCESSFULLY!")
    print("=" * 60)
    return 0


def main():
    parser = argparse.ArgumentParser(description="E2E demo for the File Upload Gateway")
    parser.add_argument("--base-url", default=API_BASE, help="Gateway base URL")
    parser.add_argument("--file", "-f", type=Path, help="File to upload")
    parser.add_argument("--json", action="store_true", help="Print a JSON report")
    args = parser.parse_args()

    if args.file:
        if not args.file.exists():
            print(f"Error: file not found: {args.file}")
            sys.exit(1)
        name = args.file.name
        data = args.file.read_bytes()
        content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"
    else:
        name, data, content_type = DEFAULT_NAME, DEFAULT_PAYLOAD, "text/plain"

    print("=" * 60)
    print("FILE UPLOAD GATEWAY - E2E DEMO")
    print("=" * 60)

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        sys.exit(run_demo(client, name, data, content_type, as_json=args.json))


if __name__ == "__main__":
    main()

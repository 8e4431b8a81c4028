#!/usr/bin/env python3
"""
Write the Dog API's OpenAPI document to a JSON file.

By default the document is built in‑process from the application's
routes, so no server needs to be running.  With ``--url`` it is
downloaded from a running instance instead.

Usage:
    python generate_openapi.py
    python generate_openapi.py --output docs/openapi.json
    python generate_openapi.py --url http://localhost:3000
"""

import argparse
import json
import sys
from pathlib import Path

import requests


def fetch_schema(base_url: str, timeout: float) -> dict:
    """Download ``<base_url>/openapi`` from a running server."""
    response = requests.get(f"{base_url.rstrip('/')}/openapi", timeout=timeout)
    response.raise_for_status()
    return response.json()


def build_schema() -> dict:
    """Build the document from the application without serving it."""
    from dog_api.app.main import create_app

    return create_app().openapi()


def main():
    ap = argparse.ArgumentParser(description="Generate the Dog API OpenAPI document.")
    ap.add_argument("--output", default="openapi.json", help="Path of the JSON file to write (default: openapi.json)")
    ap.add_argument("--url", help="Base URL of a running server to fetch the document from")
    ap.add_argument("--timeout", type=float, default=10.0, help="HTTP timeout in seconds when --url is used")
    args = ap.parse_args()

    try:
        schema = fetch_schema(args.url, args.timeout) if args.url else build_schema()
    except requests.RequestException as exc:
        print(f"[!] Could not fetch OpenAPI document from {args.url}: {exc}", file=sys.stderr)
        sys.exit(1)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(schema, indent=2, ensure_ascii=False), encoding="utf-8")

    print(f"[+] OpenAPI document saved to: {output}")
    print(f"[+] Total endpoints: {len(schema.get('paths', {}))}")
    print(f"[+] API version: {schema.get('info', {}).get('version', 'unknown')}")


if __name__ == "__main__":
    main()

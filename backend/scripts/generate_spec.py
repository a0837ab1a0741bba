#!/usr/bin/env python
"""Generate an OpenAPI document JSON and optionally update its snapshot hash.

Usage:
  python -m scripts.generate_spec myapp.api:build_document --out openapi.json
  python -m scripts.generate_spec myapp.api:generator --update-hash tests/openapi_spec_hash.txt
  python -m scripts.generate_spec myapp.api:build_document --check tests/openapi_spec_hash.txt

The target is `module:attr` where attr is an OpenApi document, an
OpenApiGenerator (consumed), or a zero-argument callable returning either.

Options:
  --out PATH            Write full document JSON to PATH (directories auto-created)
  --update-hash PATH    Recompute and overwrite the snapshot hash file
  --check PATH          Exit non-zero if current hash != snapshot (CI check)

Safe Defaults:
  Without flags, prints current hash to stdout.

Exit Codes:
  0 success / in-check mode hash matches
  2 mismatch in --check mode
  3 other error
"""
from __future__ import annotations
import argparse, hashlib, importlib, json, pathlib, sys

from routedoc import OpenApi, OpenApiGenerator, RouteDocError


def load_document(target: str) -> OpenApi:
    module_name, _, attr = target.partition(':')
    if not module_name or not attr:
        raise ValueError(f"target must look like module:attr, got {target!r}")
    obj = getattr(importlib.import_module(module_name), attr)
    if callable(obj) and not isinstance(obj, (OpenApi, OpenApiGenerator)):
        obj = obj()
    if isinstance(obj, OpenApiGenerator):
        obj = obj.into_openapi()
    if not isinstance(obj, OpenApi):
        raise TypeError(f"{target} did not produce an OpenApi document")
    return obj


def compute_spec_and_hash(document: OpenApi):
    spec = document.to_dict()
    blob = json.dumps(spec, sort_keys=True, separators=(',', ':')).encode()
    h = hashlib.sha256(blob).hexdigest()
    return spec, h


def main(argv: list[str]) -> int:
    p = argparse.ArgumentParser(description="Generate deterministic OpenAPI document")
    p.add_argument('target', help='module:attr producing the document')
    p.add_argument('--out', dest='out', help='Path to write JSON document')
    p.add_argument('--update-hash', dest='update_hash', help='Overwrite snapshot hash file')
    p.add_argument('--check', dest='check', help='Check current hash vs snapshot and exit 2 on mismatch')
    args = p.parse_args(argv)

    try:
        document = load_document(args.target)
    except (ImportError, AttributeError, ValueError, TypeError, RouteDocError) as e:
        print(f"Unable to build document from {args.target}: {e}", file=sys.stderr)
        return 3
    spec, h = compute_spec_and_hash(document)

    if args.out:
        out_path = pathlib.Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(spec, indent=2, sort_keys=True) + '\n')
        print(f"Wrote spec JSON to {out_path} ({len(json.dumps(spec))} bytes)")

    if args.check:
        snapshot = pathlib.Path(args.check)
        expected = snapshot.read_text().strip() if snapshot.exists() else ''
        if h != expected:
            print(f"Spec hash mismatch: expected={expected} current={h}", file=sys.stderr)
            return 2
        print(f"Spec hash OK: {h}")

    if args.update_hash:
        snapshot = pathlib.Path(args.update_hash)
        snapshot.parent.mkdir(parents=True, exist_ok=True)
        snapshot.write_text(h + '\n')
        print(f"Updated snapshot hash -> {h}")

    if not args.out and not args.update_hash and not args.check:
        print(h)

    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main(sys.argv[1:]))

"""CLI entrypoint for jmx4py."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional

from pydantic import ValidationError

from jmx4py.config import load_limits
from jmx4py.protocol import (
    INVALID_FIELD,
    OK,
    RequestError,
    RequestType,
    Response,
    from_mapping,
    from_positional,
)


def _response(ok: bool, code: str, message: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return Response(ok=ok, code=code, message=message, data=data or {}).model_dump()


def _build(args: argparse.Namespace) -> Dict[str, Any]:
    try:
        limits = load_limits(
            {
                "max_depth": args.max_depth,
                "max_objects": args.max_objects,
                "max_list_size": args.max_list_size,
            }
        )
    except ValidationError as exc:
        return _response(False, INVALID_FIELD, str(exc))

    options: Dict[str, Any] = limits.as_options()
    if args.path is not None:
        options["path"] = args.path
    if args.method:
        options["method"] = args.method

    try:
        if args.request is not None:
            request = from_mapping({**options, **args.request})
        else:
            request = from_positional(args.type, *args.values, options=options)
    except RequestError as exc:
        return _response(False, exc.code, str(exc))

    return _response(
        True,
        OK,
        f"Built {request.get('type').value} request",
        request.model_dump(mode="json", exclude_none=True),
    )


def _json_object(text: str) -> Dict[str, Any]:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise argparse.ArgumentTypeError("request must be a JSON object")
    return value


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="jmx4py")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("types")
    build_parser = subparsers.add_parser("build")
    build_parser.add_argument("type", nargs="?", help="request type, e.g. read")
    build_parser.add_argument("values", nargs="*", help="positional values in the type's order")
    build_parser.add_argument("--request", type=_json_object, help="JSON request object with a type key")
    build_parser.add_argument("--path", help="/-separated path into the result")
    build_parser.add_argument("--max-depth", type=int)
    build_parser.add_argument("--max-objects", type=int)
    build_parser.add_argument("--max-list-size", type=int)
    build_parser.add_argument("--method", choices=("get", "post"), help="transport method hint")

    argv = sys.argv[1:] if argv is None else argv
    args, unknown = parser.parse_known_args(argv)
    if args.command == "build":
        # Positional values may follow options, which subparsers cannot intermix.
        args = build_parser.parse_intermixed_args(
            argv[argv.index("build") + 1:],
            namespace=argparse.Namespace(command=args.command, verbose=args.verbose),
        )
    elif unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "types":
        print(json.dumps([member.value for member in RequestType], indent=2))
        return 0

    if (args.request is None) == (args.type is None):
        parser.error("build needs either a TYPE or --request, not both")

    response = _build(args)
    print(json.dumps(response, indent=2, sort_keys=True))
    return 0 if response["ok"] else 1


if __name__ == "__main__":
    raise SystemExit(main())

"""``autoroute routes`` — list the routes a controller compiles to.

Resolves the controller, compiles it under the base path, and prints
a table of METHOD, PATH, and HANDLER in priority order.
"""

import argparse
import sys

from autoroute.compiler import ControllerCompiler, qualified_name
from autoroute.config import CompilerConfig
from autoroute.errors import ClassResolutionError
from autoroute.listing import emit_listing


def run_routes(args: argparse.Namespace) -> None:
    """Print the compiled routes for ``args.controller``.

    Exits with code 1 if the controller cannot be resolved.
    """
    config = CompilerConfig(
        controller_namespaces=tuple(args.namespace),
        verb_boundary=not args.raw_prefix,
    )
    compiler = ControllerCompiler(config)

    try:
        cls = compiler.resolve(args.controller)
    except ClassResolutionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = compiler.compile_class(args.path, cls)

    if args.emit:
        written = emit_listing(args.emit, qualified_name(cls), routes)
        print(f"Wrote {written}", file=sys.stderr)

    if not routes:
        print("No routes compiled.")
        return

    rows = [(route.http_method.value.upper(), route.slug or "/", str(route.target)) for route in routes]

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, handler in rows:
        print(fmt.format(method, path, handler))

"""Route listings — registration statements for human inspection.

A listing is a debug artifact: one ``router.<verb>(...)`` line per
route, equivalent to what ``register_controller()`` registered. It is
only written when ``CompilerConfig.emit_listing`` is enabled.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from autoroute.routing.route import Route

logger = logging.getLogger("autoroute.listing")

LISTING_HEADER = "# Routes for {class_name}\n"
LISTING_LINE = "router.{verb}({slug!r}, {target!r})\n"


def render_listing(class_name: str, routes: Iterable[Route]) -> str:
    """Render the registration statements for *routes*."""
    lines = [LISTING_HEADER.format(class_name=class_name)]
    lines.extend(
        LISTING_LINE.format(verb=route.http_method.value, slug=route.slug, target=str(route.target))
        for route in routes
    )
    return "".join(lines)


def listing_path(directory: str | Path, class_name: str) -> Path:
    """Where the listing for *class_name* is written inside *directory*."""
    return Path(directory) / f"{class_name}.py"


def emit_listing(directory: str | Path, class_name: str, routes: Iterable[Route]) -> Path:
    """Write the listing for *class_name* and return its path.

    The text is rendered before the file is opened, so a rendering
    failure leaves no file behind. The file is closed on every exit path.
    """
    content = render_listing(class_name, routes)
    target = listing_path(directory, class_name)
    target.parent.mkdir(parents=True, exist_ok=True)

    with target.open("w", encoding="utf-8") as fh:
        fh.write(content)

    logger.info("Wrote route listing for %s to %s", class_name, target)
    return target

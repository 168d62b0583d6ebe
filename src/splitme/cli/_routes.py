"""``splitme routes`` — list the routing table."""

import argparse

from splitme.routing.route import RedirectRoute


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATH, KIND and TARGET for every route."""
    from splitme.routes import ROUTES

    rows: list[tuple[str, str, str]] = []
    for route in ROUTES.routes:
        if isinstance(route, RedirectRoute):
            rows.append((route.path, "redirect", route.to))
        else:
            target = getattr(route.view, "__name__", str(route.view))
            if route.name:
                target = f"{target} ({route.name})"
            rows.append((route.path, "view", target))

    if not rows:
        print("No routes registered.")
        return

    max_path = max(4, *(len(r[0]) for r in rows))
    max_kind = max(4, *(len(r[1]) for r in rows))
    fmt = f"{{:<{max_path}}}  {{:<{max_kind}}}  {{}}"
    print(fmt.format("PATH", "KIND", "TARGET"))
    sep_len = max_path + max_kind + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for path, kind, target in rows:
        print(fmt.format(path, kind, target))

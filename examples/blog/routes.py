"""Blog — a complete route table in one place.

Shows namespaces, nested namespaces with their own alias, resources with
``only``, plain verb routes, and two routes that fail to load (a missing
controller module and a missing handler) so the printer has something to
report.

Print it::

    flauta routes examples/blog/routes.py
"""

from pathlib import Path

from flauta import NamespaceDefinition, get, head, namespace, resources
from flauta import resolve as resolve_routes

CONTROLLERS = str(Path(__file__).parent / "controllers")

ROUTES = namespace(
    NamespaceDefinition(path="api/v1", require_path=CONTROLLERS),
    [
        get("/", "home", "root", alias="root"),
        head("health", "home", "health"),
        resources("posts"),
        namespace(
            NamespaceDefinition(path="posts/:post_id", require_path="", alias="post"),
            [resources("comments", only=["index", "create", "destroy"])],
        ),
        get("about", "home", "about", alias="about"),
        get("drafts", "drafts", "index", alias="drafts"),
    ],
)


def resolve():
    return resolve_routes(ROUTES)

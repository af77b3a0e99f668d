"""Group requests into namespace and resource folders."""

import logging
import re

from wp_bruno.bruno.models import Folder, RequestItem

logger = logging.getLogger(__name__)

URL_GROUP = re.compile(r"/([^/]+/v\d+)/([^/:?]+)")

OTHER_FOLDER = "other"


def organize_into_folders(items: list[RequestItem]) -> list[Folder]:
    """Nest requests as namespace (``wp/v2``) -> resource (``posts``) -> request.

    Folders keep the order in which their first request was seen. Requests
    whose URL has no ``<namespace>/v<n>/<resource>`` part are collected in a
    trailing ``other`` folder.
    """
    namespaces: dict[str, Folder] = {}
    resources: dict[tuple[str, str], Folder] = {}
    ungrouped: list[RequestItem] = []

    for item in items:
        match = URL_GROUP.search(item.request.url)
        if not match:
            logger.debug("No namespace/resource in %s, filing under '%s'", item.request.url, OTHER_FOLDER)
            ungrouped.append(item)
            continue

        namespace, resource = match.groups()
        if namespace not in namespaces:
            namespaces[namespace] = Folder(name=namespace)

        key = (namespace, resource)
        if key not in resources:
            resources[key] = Folder(name=resource)
            namespaces[namespace].items.append(resources[key])

        resources[key].items.append(item)

    folders = list(namespaces.values())
    if ungrouped:
        folders.append(Folder(name=OTHER_FOLDER, items=ungrouped))
    return folders

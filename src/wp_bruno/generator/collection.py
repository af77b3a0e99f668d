"""Collection assembler: wraps organized folders into a validated Bruno collection."""

from wp_bruno.bruno.models import Collection, Environment, Folder, Variable
from wp_bruno.bruno.normalize import (
    hydrate_seq_in_collection,
    transform_items_in_collection,
    validate_collection,
)

DEFAULT_ENVIRONMENT = "Default"


def default_environment(base_url: str) -> Environment:
    return Environment(
        name=DEFAULT_ENVIRONMENT,
        variables=[
            Variable(name="baseUrl", value=base_url),
            Variable(name="username", value=""),
            Variable(name="password", value="", secret=True),
        ],
    )


def assemble_collection(name: str, folders: list[Folder], base_url: str) -> Collection:
    """Build the final collection with a ``Default`` environment.

    Raises InvalidSchemaError if the result does not validate.
    """
    collection = Collection(
        name=name,
        items=folders,
        environments=[default_environment(base_url)],
    )

    data = collection.model_dump(by_alias=True)
    data = transform_items_in_collection(data)
    data = hydrate_seq_in_collection(data)
    return validate_collection(data)

# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Well-known marker types recognised by the hierarchy analysis.

Resource models written in Python derive from :class:`CustomResource`,
opt into namespace scoping through :class:`Namespaced`, and may flag a
non-conventionally named status member with ``Annotated[..., Status]``.
"""

from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

# ###############
# Public Interface
# ###############

S = TypeVar("S")
T = TypeVar("T")


class Namespaced(Protocol):
    """Marker for resources whose instances live inside a namespace."""


class CustomResource(Generic[S, T]):
    """Base type of a custom resource with a spec and a status facet.

    Only ``spec`` and ``status`` take part in schema generation; the other
    members are bookkeeping of the resource envelope.
    """

    api_version: str
    kind: str
    metadata: dict[str, Any]
    spec: S
    status: T


class Status:
    """Property marker designating the status facet of a resource."""


class IntOrString:
    """A value that is either an integer or a string."""


def qualified_name(cls: type) -> str:
    """Return the fully-qualified name of a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


NAMESPACED_TYPE = qualified_name(Namespaced)
CUSTOM_RESOURCE_TYPE = qualified_name(CustomResource)
STATUS_ANNOTATION_TYPE = qualified_name(Status)
INT_OR_STRING_TYPE = qualified_name(IntOrString)

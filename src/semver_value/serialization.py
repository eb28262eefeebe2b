# SPDX-License-Identifier: MIT
"""Pydantic integration for Version.

A ``Version`` is stored in structured data as a single string holding its
normalized text. Declaring a field as ``Version`` on a pydantic model is
enough::

    >>> from pydantic import BaseModel
    >>> class Release(BaseModel):
    ...     version: Version
    >>> Release(version="2.12.35").model_dump_json()
    '{"version":"2.12.35"}'

Strings are parsed leniently, so malformed text still validates (as
``0.0.0`` when nothing numeric can be recovered). Values that are not
strings at all are rejected by pydantic with a ``ValidationError``.
"""

from __future__ import annotations

from typing import Union

from pydantic import TypeAdapter
from pydantic_core import core_schema

from .semver import Version


def version_core_schema(cls: type[Version]) -> core_schema.CoreSchema:
    """Build the pydantic core schema for the Version type.

    JSON input must be a string. Python input may be a string or an
    existing Version instance. Output is always the rendered string.
    """
    from_str = core_schema.no_info_after_validator_function(
        cls.parse,
        core_schema.str_schema(),
    )
    return core_schema.json_or_python_schema(
        json_schema=from_str,
        python_schema=core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                from_str,
            ]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            lambda version: version.render(),
            return_schema=core_schema.str_schema(),
        ),
    )


VERSION_ADAPTER: TypeAdapter = TypeAdapter(Version)


def version_to_json(version: Version) -> str:
    """Encode a Version as a JSON string value.

    Examples:
        >>> version_to_json(Version(2, 12, 35))
        '"2.12.35"'
    """
    return VERSION_ADAPTER.dump_json(version).decode("utf-8")


def version_from_json(data: Union[str, bytes]) -> Version:
    """Decode a JSON string value into a Version.

    Raises:
        pydantic.ValidationError: If the JSON value is not a string
    """
    return VERSION_ADAPTER.validate_json(data)

"""Normalise attribute input to the ``[{key, value}]`` list the API expects."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping, Union

AttributesInput = Union[Mapping[str, Any], Iterable[Mapping[str, Any]]]


class AttributeFormatter:
    @staticmethod
    def format(attributes: AttributesInput) -> list[dict[str, Any]]:
        """
        ``{"gift": "yes"}`` becomes ``[{"key": "gift", "value": "yes"}]``.
        Entries already shaped as ``{key, value}`` pass through; any other
        nested entry raises ``ValueError``.
        """
        items = attributes.items() if isinstance(attributes, Mapping) else enumerate(attributes)

        formatted = []
        for key, value in items:
            if isinstance(value, Mapping):
                if "key" not in value or "value" not in value:
                    raise ValueError("Invalid attribute: " + json.dumps({str(key): value}, default=str))
                formatted.append({"key": value["key"], "value": value["value"]})
            else:
                formatted.append({"key": key, "value": value})
        return formatted

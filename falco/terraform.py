"""Extract Fastly services and their VCL files from a terraform plan in JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional, Union

FASTLY_TERRAFORM_PROVIDER_NAME = "registry.terraform.io/fastly/fastly"
FASTLY_VCL_SERVICE_TYPE = "fastly_service_vcl"
FASTLY_VCL_SERVICE_TYPE_V1 = "fastly_service_v1"
_FASTLY_VCL_SERVICE_TYPES = frozenset({FASTLY_VCL_SERVICE_TYPE, FASTLY_VCL_SERVICE_TYPE_V1})


class TerraformInputError(ValueError):
    """Raised when the input is not a usable terraform plan."""


@dataclass
class TerraformVcl:
    """One VCL file attached to a planned Fastly service."""

    name: str = ""
    content: str = ""
    main: bool = False


@dataclass
class FastlyService:
    """A planned Fastly VCL service with its VCL files."""

    name: str
    vcls: list[TerraformVcl] = field(default_factory=list)


def _field(obj: Any, key: str) -> Any:
    """Look up a JSON object key, exact match first, then case-insensitively."""
    if not isinstance(obj, Mapping):
        return None
    if key in obj:
        return obj[key]
    lowered = key.lower()
    for candidate, value in obj.items():
        if isinstance(candidate, str) and candidate.lower() == lowered:
            return value
    return None


def _to_vcl(obj: Any) -> TerraformVcl:
    if not isinstance(obj, Mapping):
        raise TerraformInputError(
            "Failed to unmarshal stdin input: vcl entry must be an object"
        )
    return TerraformVcl(
        name=_field(obj, "name") or "",
        content=_field(obj, "content") or "",
        main=bool(_field(obj, "main")),
    )


def _to_service(resource: Mapping[str, Any]) -> FastlyService:
    values = _field(resource, "values") or {}
    vcls = [_to_vcl(item) for item in (_field(values, "vcl") or []) if item is not None]
    return FastlyService(name=_field(values, "name") or "", vcls=vcls)


def is_fastly_vcl_service_resource(resource: Mapping[str, Any]) -> bool:
    """Tell whether a planned resource is a Fastly VCL service."""
    return (
        _field(resource, "provider_name") == FASTLY_TERRAFORM_PROVIDER_NAME
        and _field(resource, "type") in _FASTLY_VCL_SERVICE_TYPES
    )


def _planned_resources(root_module: Mapping[str, Any]) -> Iterator[Any]:
    yield from _field(root_module, "resources") or []
    for child in _field(root_module, "child_modules") or []:
        yield from _field(child, "resources") or []


def parse_terraform_planned_input(data: Union[str, bytes]) -> list[FastlyService]:
    """Parse `terraform show -json` output into the Fastly services it plans."""
    try:
        root = json.loads(data)
    except (TypeError, ValueError) as exc:
        raise TerraformInputError(f"Failed to unmarshal stdin input: {exc}") from exc
    if not isinstance(root, Mapping):
        raise TerraformInputError(
            "Failed to unmarshal stdin input: top-level value must be an object"
        )

    planned: Optional[Any] = _field(root, "planned_values")
    if planned is None:
        raise TerraformInputError(
            'Input does not seem to terraform planned JSON: "planned_values" field does not exist'
        )
    root_module = _field(planned, "root_module")
    if root_module is None:
        raise TerraformInputError(
            'Input does not seem to terraform planned JSON: "root_module" field does not exist'
        )

    services = [
        _to_service(resource)
        for resource in _planned_resources(root_module)
        if resource is not None and is_fastly_vcl_service_resource(resource)
    ]
    if not services:
        raise TerraformInputError(
            "Fastly service does not exist. Did you plan with fastly terraform provider?"
        )
    return services
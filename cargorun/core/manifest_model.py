from __future__ import annotations

from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ScriptMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    scripts: dict[str, str]


class MetadataSection(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    metadata: ScriptMetadata


class WorkspaceManifest(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    workspace: MetadataSection


class PackageManifest(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    package: MetadataSection


# The workspace shape is preferred when a manifest could satisfy both.
ManifestShape = Annotated[
    Union[WorkspaceManifest, PackageManifest],
    Field(union_mode="left_to_right"),
]

manifest_adapter: TypeAdapter[WorkspaceManifest | PackageManifest] = TypeAdapter(
    ManifestShape
)


def scripts_of(shape: WorkspaceManifest | PackageManifest) -> dict[str, str]:
    match shape:
        case WorkspaceManifest(workspace=section):
            return section.metadata.scripts
        case PackageManifest(package=section):
            return section.metadata.scripts
    raise TypeError(f"Unsupported manifest shape: {type(shape).__name__}")

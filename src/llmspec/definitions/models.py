"""
Pydantic models for provider/model definitions.

Optional fields are only set when the source TOML declares them and the
manifests are dumped with ``exclude_unset=True``, so absent values are
omitted from JSON. Nullable required fields (``release_date``,
``limit.context`` ...) are always set and appear as ``null`` when unknown.

Public classes are strictly narrower than their internal counterparts:
``PublicProvider`` has no ``env`` and ``PublicModelDefinition`` carries a
reduced ``cost``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

Number = Union[int, float]

ALLOWED_STATUSES = ("alpha", "beta", "deprecated")
ModelStatus = Literal["alpha", "beta", "deprecated"]


class ProviderMeta(BaseModel):
    """Normalized provider.toml."""
    id: str = Field(..., description="Provider folder name")
    name: str
    env: List[str] = Field(default_factory=list, description="Environment variables holding credentials")
    npm: str = ""
    doc: str = ""
    api: Optional[str] = None


class ModelLimit(BaseModel):
    context: Optional[Number] = Field(..., description="Context window in tokens")
    output: Optional[Number] = Field(..., description="Maximum output tokens")
    input: Optional[Number] = None


class ModelModalities(BaseModel):
    input: List[str] = Field(default_factory=list)
    output: List[str] = Field(default_factory=list)


class PublicCost(BaseModel):
    """Coarse price pair kept in the public manifest."""
    input: Optional[Number] = None
    output: Optional[Number] = None


class ModelDefinition(BaseModel):
    """Full-fidelity model record (internal catalog)."""
    id: str = Field(..., description="Path under models/ without the .toml extension")
    name: str
    family: Optional[str] = None
    provider: str = Field(..., description="Owning provider slug")

    release_date: Optional[str] = Field(...)
    last_updated: Optional[str] = Field(...)

    attachment: bool
    reasoning: bool
    tool_call: bool
    open_weights: bool

    temperature: Optional[bool] = None
    structured_output: Optional[bool] = None
    knowledge: Optional[str] = None
    status: Optional[ModelStatus] = None

    description: Optional[str] = None

    modalities: ModelModalities
    limit: ModelLimit
    cost: Optional[Dict[str, Any]] = Field(default=None, description="Cost table as declared")


class PublicModelDefinition(BaseModel):
    """Model record in the public manifest."""
    id: str
    name: str
    family: Optional[str] = None
    provider: str

    release_date: Optional[str] = Field(...)
    last_updated: Optional[str] = Field(...)

    attachment: bool
    reasoning: bool
    tool_call: bool
    open_weights: bool

    temperature: Optional[bool] = None
    structured_output: Optional[bool] = None
    knowledge: Optional[str] = None
    status: Optional[ModelStatus] = None

    description: Optional[str] = None

    modalities: ModelModalities
    limit: ModelLimit
    cost: Optional[PublicCost] = None


class Provider(BaseModel):
    """Provider entry in the internal catalog."""
    id: str
    name: str
    slug: str
    env: List[str] = Field(default_factory=list)
    npm: str
    doc: str
    api: Optional[str] = None
    has_logo: bool
    model_count: int = Field(..., ge=0)
    models: List[ModelDefinition] = Field(default_factory=list)


class PublicProvider(BaseModel):
    """Provider entry in the public manifest."""
    id: str
    name: str
    slug: str
    npm: str
    doc: str
    api: Optional[str] = None
    has_logo: bool
    model_count: int = Field(..., ge=0)
    models: List[PublicModelDefinition] = Field(default_factory=list)


class DefinitionsManifest(BaseModel):
    """Root of definitions-catalog.json."""
    version: str
    generated_at: str
    base_url: str
    total_providers: int = Field(..., ge=0)
    total_models: int = Field(..., ge=0)
    providers: List[Provider] = Field(default_factory=list)


class PublicDefinitionsManifest(BaseModel):
    """Root of definitions.json."""
    version: str
    generated_at: str
    base_url: str
    total_providers: int = Field(..., ge=0)
    total_models: int = Field(..., ge=0)
    providers: List[PublicProvider] = Field(default_factory=list)

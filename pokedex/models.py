from pydantic import BaseModel, ConfigDict, Field

# Models for the raw payloads returned by PokeAPI (Internal Contract)
# Unknown keys are ignored, only the fields the screens render are validated.
class NamedResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str | None = None

class CatalogPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0
    results: list[NamedResource] = Field(default_factory=list)

class Sprites(BaseModel):
    model_config = ConfigDict(frozen=True)

    front_default: str | None = None

class TypeSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    slot: int = 0
    type: NamedResource

class StatEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_stat: int
    stat: NamedResource

class AbilitySlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    ability: NamedResource
    is_hidden: bool = False

class CreatureRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    height: int  # decimetres
    weight: int  # hectograms
    sprites: Sprites = Field(default_factory=Sprites)
    types: list[TypeSlot] = Field(default_factory=list)
    stats: list[StatEntry] = Field(default_factory=list)
    abilities: list[AbilitySlot] = Field(default_factory=list)

# Minimal projection used by the grid: index reference + enrichment record
class CatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    image_url: str | None
    detail_url: str

# Display-ready models shared by the Textual screens and the view API (Public Contract)
class CatalogCell(BaseModel):
    id: int
    name: str
    display_name: str
    badge: str
    image_url: str | None
    detail_url: str

class StatBarView(BaseModel):
    key: str
    label: str
    value: int
    percent: int

class CreatureDetailView(BaseModel):
    id: int
    name: str
    title: str
    image_url: str | None
    height_label: str
    weight_label: str
    types_label: str
    stats: list[StatBarView]
    abilities: list[str]

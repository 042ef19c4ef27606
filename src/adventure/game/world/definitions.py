"""
World definition schema.

Pydantic models for the declarative world document. Field names follow the
document keys. Parsing is lenient: numeric fields take ints or numeric
strings and fall back to their default when missing or malformed, flags
take bools or "true"/"false" strings, and name lists take a comma-joined
string or an array.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


def parse_int_or_default(value: Any, default: int) -> int:
    """
    Parse an integer, returning a default when the value is unusable.

    Args:
        value: Raw document value (int, numeric string, None, ...)
        default: Value to use when parsing fails

    Returns:
        The parsed integer or the default
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def parse_flag(value: Any) -> bool:
    """Parse a boolean flag; only True or a "true" string count as set."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def parse_name_list(value: Any) -> list[str]:
    """Split a comma-joined string or an array into trimmed, non-empty names."""
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = [str(part) for part in value if part is not None]
    else:
        return []
    return [part.strip() for part in parts if part.strip()]


def canonical_room_id(value: Any) -> Any:
    """
    Normalize a room number to the form exit values refer to.

    Exits hold integers, so a numeric room number is reduced to its plain
    decimal text ("01" and 1 both become "1"). Other text is only trimmed;
    such rooms can be the start room but no exit can lead to them.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return str(int(text))
        except ValueError:
            return text
    return value


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class _Definition(BaseModel):
    """Base for definition models: unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_lenient(cls, value: Any, info: ValidationInfo) -> Any:
        field_info = cls.model_fields[info.field_name]
        annotation = field_info.annotation
        if annotation is int:
            return parse_int_or_default(value, field_info.default)
        if annotation is bool:
            return parse_flag(value)
        if annotation is str and value is None and not field_info.is_required():
            return field_info.default
        if annotation is str and isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ItemDefinition(_Definition):
    """An item entry in the world document."""

    name: str = Field(..., min_length=1, description="Unique item name")
    weight: int = Field(default=1, description="Carry weight")
    max_uses: int = Field(default=1, description="Uses a fresh item has")
    uses_remaining: int = Field(default=1, description="Uses left at load time")
    value: int = Field(default=0, description="Point value")
    when_used: str = Field(default="", description="Text shown when used")
    description: str = Field(default="", description="Text shown when examined")


class FixtureDefinition(_Definition):
    """A fixture entry in the world document."""

    name: str = Field(..., min_length=1, description="Unique fixture name")
    weight: int = Field(default=1000, description="Nominal weight")
    description: str = Field(default="", description="Text shown when examined")
    puzzle: str | None = Field(default=None, description="Associated puzzle name")
    states: str | None = Field(default=None, description="Free-form state text")
    picture: str | None = Field(default=None, description="Picture path or URL")


class PuzzleDefinition(_Definition):
    """A puzzle entry in the world document."""

    name: str = Field(..., min_length=1, description="Unique puzzle name")
    active: bool = Field(default=False, description="Whether the puzzle starts active")
    affects_target: bool = Field(default=False, description="Puzzle changes its room's text")
    affects_player: bool = Field(default=False, description="Puzzle affects the player")
    solution: str = Field(default="", description="Quoted answer or item name")
    value: int = Field(default=0, description="Points awarded when solved")
    description: str = Field(default="", description="Text shown when blocking")
    effects: str = Field(default="", description="Effects text")
    target: str = Field(default="", description="Target reference")


class MonsterDefinition(_Definition):
    """A monster entry in the world document."""

    name: str = Field(..., min_length=1, description="Unique monster name")
    description: str = Field(default="", description="Text shown when blocking")
    active: bool = Field(default=False, description="Whether the monster starts active")
    damage: int = Field(default=5, description="Damage per attack")
    can_attack: bool = Field(default=False, description="Whether the monster attacks")
    attack: str = Field(default="", description="Attack text")
    effects: str = Field(default="", description="Effects text")
    value: int = Field(default=0, description="Points awarded when defeated")
    solution: str = Field(default="", description="Name of the defeating item")
    target: str = Field(default="", description="Target reference")


class RoomDefinition(_Definition):
    """A room entry in the world document."""

    room_number: str = Field(..., min_length=1, description="Unique room id")
    room_name: str = Field(default="", description="Display name")
    description: str = Field(default="", description="Room description")
    N: int = Field(default=0, description="North exit value")
    S: int = Field(default=0, description="South exit value")
    E: int = Field(default=0, description="East exit value")
    W: int = Field(default=0, description="West exit value")
    items: list[str] = Field(default_factory=list, description="Item names in the room")
    fixtures: list[str] = Field(default_factory=list, description="Fixture names in the room")
    puzzle: str | None = Field(default=None, description="Puzzle name")
    monster: str | None = Field(default=None, description="Monster name")
    picture: str | None = Field(default=None, description="Picture path or URL")

    @field_validator("room_number", mode="before")
    @classmethod
    def _canonical_room_number(cls, value: Any) -> Any:
        return canonical_room_id(value)

    @field_validator("items", "fixtures", mode="before")
    @classmethod
    def _split_names(cls, value: Any) -> list[str]:
        return parse_name_list(value)

    @field_validator("puzzle", "monster", "picture", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> str | None:
        return _optional_text(value)

    @property
    def exit_values(self) -> dict[str, int]:
        """Get the raw exit values keyed by direction letter."""
        return {"N": self.N, "S": self.S, "E": self.E, "W": self.W}


class WorldDefinition(_Definition):
    """The top-level world document."""

    name: str | None = Field(default=None, description="Game name")
    version: str | None = Field(default=None, description="World version")
    items: list[ItemDefinition] = Field(default_factory=list)
    fixtures: list[FixtureDefinition] = Field(default_factory=list)
    puzzles: list[PuzzleDefinition] = Field(default_factory=list)
    monsters: list[MonsterDefinition] = Field(default_factory=list)
    rooms: list[RoomDefinition] = Field(default_factory=list)

    @field_validator("name", "version", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> str | None:
        return _optional_text(value)

    @field_validator("items", "fixtures", "puzzles", "monsters", "rooms", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

"""Display formatting shared by every screen.

Display strings are fixed in Spanish, the app has no localisation layer.
"""
from pokedex.models import AbilitySlot, TypeSlot

LIST_TITLE = "Pokémon"
LIST_LOADING_TEXT = "Cargando Pokémon..."
DETAIL_LOADING_TEXT = "Cargando detalles..."
DETAILS_UNAVAILABLE_TEXT = "No se pudieron cargar los detalles"
DETAIL_ERROR_PREFIX = "Error al cargar el Pokémon: "
DATA_UNAVAILABLE_TEXT = "Datos no disponibles"
BASIC_INFO_TITLE = "Información Básica"
STATS_TITLE = "Estadísticas"
ABILITIES_TITLE = "Habilidades"
HIDDEN_ABILITY_SUFFIX = " (Oculta)"
CLOSE_TEXT = "Cerrar"

STAT_LABELS = {
    "hp": "HP",
    "attack": "Ataque",
    "defense": "Defensa",
    "special-attack": "Atq. Especial",
    "special-defense": "Def. Especial",
    "speed": "Velocidad",
}

STAT_BAR_MAX = 100


def capitalize_name(name: str) -> str:
    """Upper-cases the first letter only ("mr-mime" -> "Mr-mime")."""
    return name[:1].upper() + name[1:]


def format_stat_name(stat_name: str) -> str:
    return STAT_LABELS.get(stat_name, stat_name)


def stat_bar_percent(base_stat: int) -> int:
    """Bar fill in percent, clipped to 0..STAT_BAR_MAX."""
    return max(0, min(base_stat, STAT_BAR_MAX))


def decimal_units(value: int) -> str:
    """Converts decimetres/hectograms to metres/kilograms (4 -> "0.4", 60 -> "6")."""
    converted = value / 10
    if converted.is_integer():
        return str(int(converted))
    return str(converted)


def height_label(height: int) -> str:
    return f"Altura: {decimal_units(height)} m"


def weight_label(weight: int) -> str:
    return f"Peso: {decimal_units(weight)} kg"


def format_types(types: list[TypeSlot]) -> str:
    return ", ".join(capitalize_name(slot.type.name) for slot in types)


def types_label(types: list[TypeSlot]) -> str:
    return f"Tipo(s): {format_types(types)}"


def format_ability(slot: AbilitySlot) -> str:
    label = capitalize_name(slot.ability.name)
    if slot.is_hidden:
        label += HIDDEN_ABILITY_SUFFIX
    return label


def detail_error_text(message: str | None) -> str:
    return f"{DETAIL_ERROR_PREFIX}{message or DATA_UNAVAILABLE_TEXT}"

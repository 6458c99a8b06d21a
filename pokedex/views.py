from pokedex import formatting
from pokedex.models import (
    CatalogCell,
    CatalogEntry,
    CreatureDetailView,
    CreatureRecord,
    StatBarView,
)


def build_cell(entry: CatalogEntry) -> CatalogCell:
    """Maps a catalog entry to the grid cell shown on the list screen."""
    return CatalogCell(
        id=entry.id,
        name=entry.name,
        display_name=formatting.capitalize_name(entry.name),
        badge=f"#{entry.id}",
        image_url=entry.image_url,
        detail_url=entry.detail_url,
    )


def build_detail_view(record: CreatureRecord) -> CreatureDetailView:
    """
    Maps a fully fetched record to the detail page.
    Height and weight are converted here, the record itself keeps API units.
    """
    stats = [
        StatBarView(
            key=entry.stat.name,
            label=formatting.format_stat_name(entry.stat.name),
            value=entry.base_stat,
            percent=formatting.stat_bar_percent(entry.base_stat),
        )
        for entry in record.stats
    ]

    return CreatureDetailView(
        id=record.id,
        name=record.name,
        title=formatting.capitalize_name(record.name),
        image_url=record.sprites.front_default,
        height_label=formatting.height_label(record.height),
        weight_label=formatting.weight_label(record.weight),
        types_label=formatting.types_label(record.types),
        stats=stats,
        abilities=[formatting.format_ability(slot) for slot in record.abilities],
    )

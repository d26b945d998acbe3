"""Domain layer: item entities and the Dublin Core field handlers."""

"""Per-locale training sentence resources (``<catalogue>_<locale>.json``)."""

"""Two-colour diffusion-limited aggregation with detonations, purple conversion and PPM export."""

__version__ = "0.1.0"
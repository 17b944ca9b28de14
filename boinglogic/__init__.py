"""Display-free block logic for a blockout style arcade game: grid, hit regions, explosions and special blocks."""

__version__ = "0.1.0"
"""Building blocks for a block-game server: components, blocks, chunks, dimensions, entities, items, inventories and events."""

__version__ = "0.1.0"
"""Game core: world model, player state, and gameplay systems."""

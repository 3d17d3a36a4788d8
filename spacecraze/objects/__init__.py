"""Game objects: the player, enemies, projectiles, power-ups, explosions and stars."""
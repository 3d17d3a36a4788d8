"""Screens of the game: menu, play and pause."""
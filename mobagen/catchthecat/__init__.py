"""Catch the cat: a turn-based hex-grid game between a cat and a catcher."""
"""Flocking simulation of boids driven by weighted steering rules."""